"""Tests for the sequential batch classifier."""

import math

import pytest

from feedback_labeler.exceptions import (
    ClassificationCancelledError,
    ClassificationError,
    EmptyResultWarning,
    FeedbackLabelerError,
)
from feedback_labeler.models.feedback import BatchProgress
from feedback_labeler.processing.batch_classifier import (
    classify,
    expected_batch_count,
    items_match_lines,
    iter_classify,
    split_batches,
)


class RecordingClassifier:
    """classify_fn stub that echoes each line back with one label."""

    def __init__(self, fail_on_call: int | None = None):
        self.calls: list[str] = []
        self.fail_on_call = fail_on_call

    def __call__(self, text: str) -> list[dict]:
        self.calls.append(text)
        if self.fail_on_call == len(self.calls):
            raise RuntimeError("service unavailable")
        return [{"feedback": line, "labels": ["General"]} for line in text.split("\n")]


@pytest.fixture
def lines():
    return [f"feedback {i}" for i in range(7)]


class TestSplitBatches:
    """Test suite for split_batches."""

    def test_consecutive_chunks(self):
        assert split_batches(["a", "b", "c", "d", "e"], 2) == [["a", "b"], ["c", "d"], ["e"]]

    def test_single_batch(self):
        assert split_batches(["a", "b"], 250) == [["a", "b"]]

    def test_no_lines(self):
        assert split_batches([], 3) == []

    @pytest.mark.parametrize("batch_size", [0, -1])
    def test_invalid_batch_size(self, batch_size):
        with pytest.raises(ValueError):
            split_batches(["a"], batch_size)


class TestClassify:
    """Test suite for classify and iter_classify."""

    @pytest.mark.parametrize("batch_size", [1, 2, 3, 7, 250])
    def test_call_count_and_joining(self, lines, batch_size):
        """Test ceil(N/B) sequential calls with newline joined input."""
        stub = RecordingClassifier()

        records = classify(lines, stub, batch_size=batch_size)

        assert len(stub.calls) == math.ceil(len(lines) / batch_size)
        assert stub.calls == ["\n".join(chunk) for chunk in split_batches(lines, batch_size)]
        assert [r.text for r in records] == lines
        assert expected_batch_count(len(lines), batch_size) == len(stub.calls)

    def test_permissive_item_counts(self):
        """Test that a classifier returning fewer items than lines is accepted."""
        responses = iter(
            [
                [{"feedback": "Great app!", "labels": ["Positive"]}],
                [
                    {"feedback": "Crashes on load", "labels": ["Bug Report"]},
                    {"feedback": "Needs dark mode", "labels": ["Feature Request"]},
                ],
            ]
        )
        lines = ["Great app!", "Crashes on load", "Needs dark mode"]

        records = classify(lines, lambda text: next(responses), batch_size=2)

        assert [r.text for r in records] == ["Great app!", "Crashes on load", "Needs dark mode"]
        assert [r.labels for r in records] == [["Positive"], ["Bug Report"], ["Feature Request"]]
        assert all(r.is_incorrect is False for r in records)

    def test_failure_discards_everything(self, lines):
        """Test that one failing batch fails the whole run."""
        stub = RecordingClassifier(fail_on_call=2)

        with pytest.raises(ClassificationError) as exc_info:
            classify(lines, stub, batch_size=3)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        # Nothing after the failing batch is sent
        assert len(stub.calls) == 2

    def test_classification_error_passes_through(self):
        def failing(text):
            raise ClassificationError("unparsable data")

        with pytest.raises(ClassificationError, match="unparsable data"):
            classify(["a"], failing)

    def test_empty_result_is_a_warning(self):
        """Test that an empty result is distinct from an error."""
        with pytest.raises(EmptyResultWarning) as exc_info:
            classify(["a", "b"], lambda text: [])

        assert not isinstance(exc_info.value, FeedbackLabelerError)

    def test_cancel_before_next_batch(self, lines):
        stub = RecordingClassifier()

        with pytest.raises(ClassificationCancelledError):
            classify(lines, stub, batch_size=2, should_cancel=lambda: len(stub.calls) >= 1)

        assert len(stub.calls) == 1

    def test_cancel_is_a_classification_error(self):
        assert issubclass(ClassificationCancelledError, ClassificationError)

    def test_progress_events(self, lines):
        events: list[BatchProgress] = []

        classify(lines, RecordingClassifier(), batch_size=3, on_progress=events.append)

        assert [e.batch_index for e in events] == [1, 2, 3]
        assert all(e.batch_count == 3 for e in events)
        assert [e.lines_sent for e in events] == [3, 3, 1]
        assert [e.records_so_far for e in events] == [3, 6, 7]
        assert all(e.aligned for e in events)
        assert events[-1].is_last

    def test_generator_returns_records(self):
        generator = iter_classify(["a", "b"], RecordingClassifier(), batch_size=1)

        assert isinstance(next(generator), BatchProgress)
        assert isinstance(next(generator), BatchProgress)
        with pytest.raises(StopIteration) as stop:
            next(generator)

        assert [r.text for r in stop.value.value] == ["a", "b"]

    def test_mismatch_reported(self):
        events: list[BatchProgress] = []

        classify(
            ["one", "two"],
            lambda text: [{"feedback": "one and two", "labels": []}],
            on_progress=events.append,
        )

        assert events[0].aligned is False
        assert events[0].items_received == 1
        assert "does not match" in events[0].to_display_string()

    def test_text_key_and_blank_items(self):
        """Test that "text" is accepted and blank feedback items are skipped."""
        records = classify(
            ["x", "y"],
            lambda text: [
                {"text": "x", "labels": ["A"]},
                {"feedback": "   ", "labels": ["B"]},
            ],
        )

        assert [r.text for r in records] == ["x"]

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError):
            classify(["a"], RecordingClassifier(), batch_size=0)


class TestItemsMatchLines:
    """Test suite for items_match_lines."""

    def test_match(self):
        assert items_match_lines(["a", "b"], [{"feedback": "a"}, {"feedback": " b "}])

    def test_count_mismatch(self):
        assert not items_match_lines(["a", "b"], [{"feedback": "a"}])

    def test_text_mismatch(self):
        assert not items_match_lines(["a"], [{"feedback": "A!"}])
