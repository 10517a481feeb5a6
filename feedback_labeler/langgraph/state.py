from typing import TypedDict


class BatchState(TypedDict):
    """State that flows through the LangGraph workflow for one batch."""

    # Input fields
    feedback_text: str
    system_instruction: str | None
    custom_labels: list[str] | None

    # Prompt construction
    prompt: str | None
    line_count: int

    # Classification results
    raw_response: dict | list | None
    items: list[dict] | None

    # Workflow control
    error: str | None
