"""Sequential batch classification of feedback lines."""

import logging
import math
from collections.abc import Callable, Generator, Mapping, Sequence
from typing import Any

from ..config import DEFAULT_BATCH_SIZE
from ..exceptions import (
    ClassificationCancelledError,
    ClassificationError,
    EmptyResultWarning,
)
from ..models.feedback import BatchProgress, FeedbackRecord

logger = logging.getLogger(__name__)

ClassifyFn = Callable[[str], Sequence[Mapping[str, Any]]]


def split_batches(lines: Sequence[str], batch_size: int = DEFAULT_BATCH_SIZE) -> list[list[str]]:
    """Split lines into consecutive chunks of at most batch_size lines.

    Args:
        lines: Feedback lines in input order
        batch_size: Maximum lines per chunk, must be positive

    Returns:
        List of chunks; the last one may be shorter

    """
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return [list(lines[i : i + batch_size]) for i in range(0, len(lines), batch_size)]


def _item_text(item: Mapping[str, Any]) -> str:
    # The service contract names the field "feedback"; "text" is accepted too
    value = item.get("feedback")
    if value is None:
        value = item.get("text")
    return str(value or "")


def items_match_lines(lines: Sequence[str], items: Sequence[Mapping[str, Any]]) -> bool:
    """Check that the classifier returned one verbatim item per line."""
    if len(lines) != len(items):
        return False
    return all(
        _item_text(item).strip() == line.strip()
        for line, item in zip(lines, items)
    )


def _to_records(items: Sequence[Mapping[str, Any]]) -> list[FeedbackRecord]:
    records = []
    for item in items:
        text = _item_text(item)
        if not text.strip():
            logger.warning("Skipping classifier item with empty feedback text")
            continue
        labels = [str(label) for label in (item.get("labels") or [])]
        records.append(FeedbackRecord(text=text, labels=labels))
    return records


def iter_classify(
    lines: Sequence[str],
    classify_fn: ClassifyFn,
    batch_size: int = DEFAULT_BATCH_SIZE,
    should_cancel: Callable[[], bool] | None = None,
) -> Generator[BatchProgress, None, list[FeedbackRecord]]:
    """Classify lines batch by batch, yielding progress after each batch.

    Batches run strictly in order; batch n+1 is sent only after batch n
    returned. The combined records are the generator's return value.

    Args:
        lines: Non-blank feedback lines in input order
        classify_fn: Called once per batch with the newline joined lines
        batch_size: Maximum lines per call
        should_cancel: Checked before each batch; a true result aborts the run

    Returns:
        All records in input order, each with is_incorrect False

    Raises:
        ClassificationError: If any batch call fails; nothing is returned
        ClassificationCancelledError: If should_cancel asked to stop
        EmptyResultWarning: If every call succeeded but no records came back

    """
    batches = split_batches(lines, batch_size)
    batch_count = len(batches)
    records: list[FeedbackRecord] = []

    logger.info(f"Classifying {len(lines)} lines in {batch_count} batches of up to {batch_size}")

    for index, batch in enumerate(batches, 1):
        if should_cancel is not None and should_cancel():
            logger.info(f"Classification cancelled before batch {index}/{batch_count}")
            raise ClassificationCancelledError("Classification cancelled")

        try:
            items = list(classify_fn("\n".join(batch)))
        except ClassificationError:
            logger.error(f"Batch {index}/{batch_count} failed")
            raise
        except Exception as e:
            logger.error(f"Batch {index}/{batch_count} failed: {e}")
            raise ClassificationError(f"Batch {index} of {batch_count} failed: {e}") from e

        aligned = items_match_lines(batch, items)
        if not aligned:
            logger.warning(
                f"Batch {index}/{batch_count}: sent {len(batch)} lines but "
                f"received {len(items)} items that do not match them one to one"
            )

        records.extend(_to_records(items))

        yield BatchProgress(
            batch_index=index,
            batch_count=batch_count,
            lines_sent=len(batch),
            items_received=len(items),
            records_so_far=len(records),
            aligned=aligned,
        )

    if not records:
        raise EmptyResultWarning("No feedback could be analyzed")

    logger.info(f"Classification complete: {len(records)} records")
    return records


def classify(
    lines: Sequence[str],
    classify_fn: ClassifyFn,
    batch_size: int = DEFAULT_BATCH_SIZE,
    should_cancel: Callable[[], bool] | None = None,
    on_progress: Callable[[BatchProgress], None] | None = None,
) -> list[FeedbackRecord]:
    """Run iter_classify to completion and return the records."""
    generator = iter_classify(lines, classify_fn, batch_size, should_cancel)
    while True:
        try:
            progress = next(generator)
        except StopIteration as stop:
            return stop.value
        if on_progress is not None:
            on_progress(progress)


def expected_batch_count(line_count: int, batch_size: int = DEFAULT_BATCH_SIZE) -> int:
    """Number of classify calls needed for line_count lines."""
    if batch_size <= 0:
        raise ValueError(f"batch_size must be positive, got {batch_size}")
    return math.ceil(line_count / batch_size)
