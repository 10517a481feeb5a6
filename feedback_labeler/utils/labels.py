"""Helpers for cleaning up classifier label strings."""

import string

# Hash runs may be interleaved with spaces, e.g. "# #bug"
_LEADING_NOISE = "#" + string.whitespace


def normalize_label(raw: str) -> str:
    """Canonicalize a label for aggregation.

    Trims whitespace, lower-cases and strips any run of leading ``#``
    characters. Returns an empty string when nothing is left; callers
    must skip empty results.

    Args:
        raw: Label text as returned by the classifier or typed by a user

    Returns:
        Normalized label, possibly empty

    """
    if not raw:
        return ""
    return raw.lower().lstrip(_LEADING_NOISE).strip()


def parse_custom_labels(value: str | None) -> list[str]:
    """Split a comma separated label list, dropping empty entries."""
    if not value:
        return []
    return [label.strip() for label in value.split(",") if label.strip()]
