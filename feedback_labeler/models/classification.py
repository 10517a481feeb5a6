"""Response schemas for the classification service."""

from pydantic import BaseModel, Field


class LabeledFeedback(BaseModel):
    """One classified feedback line as returned by the model."""

    feedback: str = Field(description="The original piece of customer feedback.")
    labels: list[str] = Field(description="A list of concise labels for the feedback.")


class LabeledFeedbackBatch(BaseModel):
    """Schema for a whole batch classification result.

    ``items`` is required: a reply under any other key, or a single bare
    item, is rejected rather than read as an empty batch.
    """

    items: list[LabeledFeedback] = Field(
        description="One entry per input line, in input order.",
    )

    def to_items(self) -> list[dict]:
        """Plain dictionaries in the shape the batch classifier consumes."""
        return [item.model_dump() for item in self.items]
