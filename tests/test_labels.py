"""Tests for label normalization and parsing helpers."""

import pytest

from feedback_labeler.utils.labels import normalize_label, parse_custom_labels


class TestNormalizeLabel:
    """Test suite for normalize_label."""

    def test_case_and_hash_insensitive(self):
        """Test that case, hash prefixes and whitespace collapse to one key."""
        assert normalize_label("#Bug") == "bug"
        assert normalize_label("bug") == "bug"
        assert normalize_label("  BUG ") == "bug"

    def test_strips_run_of_hashes(self):
        """Test that a whole run of leading hashes is removed."""
        assert normalize_label("###Feature Request") == "feature request"

    def test_inner_hash_is_kept(self):
        """Test that only leading hashes are stripped."""
        assert normalize_label("C# support") == "c# support"

    @pytest.mark.parametrize("raw", ["", "   ", "#", "###", " # # "])
    def test_empty_results(self, raw):
        """Test that labels with no content normalize to an empty string."""
        assert normalize_label(raw) == ""

    @pytest.mark.parametrize(
        "raw", ["#Bug", "  # #UI/UX  ", "Positive Feedback", "##", "\t#Pricing\n"]
    )
    def test_idempotent(self, raw):
        """Test that normalizing twice gives the same result."""
        once = normalize_label(raw)
        assert normalize_label(once) == once


class TestParseCustomLabels:
    """Test suite for parse_custom_labels."""

    def test_splits_and_trims(self):
        assert parse_custom_labels("Billing, Onboarding ,Mobile App") == [
            "Billing",
            "Onboarding",
            "Mobile App",
        ]

    def test_drops_empty_entries(self):
        assert parse_custom_labels("a,, ,b,") == ["a", "b"]

    def test_empty_input(self):
        assert parse_custom_labels("") == []
        assert parse_custom_labels(None) == []
