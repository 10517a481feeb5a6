"""Mock classifier for testing without OpenAI API key.

This assigns labels from simple keyword matches, one item per input line.
"""

from ..state import BatchState

KEYWORD_LABELS = {
    "Bug Report": ("crash", "bug", "error", "broken", "freeze", "fails"),
    "Feature Request": ("please add", "would love", "wish", "needs", "should have", "feature"),
    "Positive Feedback": ("great", "love", "awesome", "excellent", "thanks"),
    "Performance": ("slow", "lag", "loading", "load time"),
    "UI/UX": ("design", "layout", "button", "dark mode", "font", "confusing"),
    "Pricing": ("price", "expensive", "subscription", "cost"),
}


def mock_classify_batch(state: BatchState) -> dict:
    """Mock classify a batch for testing."""
    if state.get("error"):
        return {}

    items = []
    for line in state.get("feedback_text", "").split("\n"):
        if not line.strip():
            continue
        lowered = line.lower()
        labels = [
            label
            for label, keywords in KEYWORD_LABELS.items()
            if any(keyword in lowered for keyword in keywords)
        ]
        items.append({"feedback": line, "labels": labels or ["General Feedback"]})

    return {"raw_response": {"items": items}}
