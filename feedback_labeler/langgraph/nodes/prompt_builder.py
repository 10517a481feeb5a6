from ...config import EXAMPLE_LABELS
from ...utils.error_handling import create_error_response
from ..state import BatchState

BASE_PROMPT = (
    "Please analyze the following customer feedback. For each distinct piece of "
    "feedback, provide the original feedback text and assign a few relevant labels "
    "(e.g., {examples})."
)

LINE_RULES = """Rules:
- Each line below is one piece of feedback. Return exactly one item per line, in the same order.
- Do not merge, split, skip or reorder lines.
- Copy the feedback text verbatim into the "feedback" field.
- Respond with a JSON object of the form {"items": [{"feedback": "...", "labels": ["..."]}]}."""


def build_prompt(state: BatchState) -> dict:
    """Build the user prompt for one batch of feedback lines."""
    if state.get("error"):
        return {}

    feedback_text = state.get("feedback_text", "")
    if not feedback_text.strip():
        return create_error_response("Batch contains no feedback text")

    examples = ", ".join(f"'{label}'" for label in EXAMPLE_LABELS)
    prompt = BASE_PROMPT.format(examples=examples)

    custom_labels = state.get("custom_labels") or []
    if custom_labels:
        prompt += (
            " In addition to any other relevant labels, please consider using the "
            f"following custom labels if they are applicable: {', '.join(custom_labels)}."
        )

    prompt += f"\n\n{LINE_RULES}\n\n---FEEDBACK---\n{feedback_text}"

    return {
        "prompt": prompt,
        "line_count": len(feedback_text.split("\n")),
    }
