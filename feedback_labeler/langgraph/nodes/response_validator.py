import logging

from pydantic import ValidationError

from ...models.classification import LabeledFeedbackBatch
from ...utils.error_handling import create_error_response
from ..state import BatchState

logger = logging.getLogger(__name__)


def validate_response(state: BatchState) -> dict:
    """Validate the raw model output against the batch schema."""
    if state.get("error"):
        return {}

    raw = state.get("raw_response")
    if raw is None:
        return create_error_response("Classifier returned no data")

    # Accept a bare array as well as the {"items": [...]} wrapper
    if isinstance(raw, list):
        raw = {"items": raw}

    try:
        batch = LabeledFeedbackBatch.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Unparsable classifier response: {e.error_count()} validation errors")
        return create_error_response(f"Classifier returned unparsable data: {e}")

    return {"items": batch.to_items()}
