import logging
from collections.abc import Callable, Sequence
from functools import lru_cache
from typing import Any, cast

from langgraph.graph import StateGraph
from langgraph.graph.state import CompiledStateGraph

from ..config import use_mock_classifier
from ..exceptions import ClassificationError
from ..utils.error_handling import check_state_for_errors
from .nodes.classifier import classify_batch
from .nodes.mock_classifier import mock_classify_batch
from .nodes.prompt_builder import build_prompt
from .nodes.response_validator import validate_response
from .state import BatchState

logger = logging.getLogger(__name__)


def _route_on_error(next_node: str) -> Callable[[BatchState], str]:
    """Build a router that ends the run as soon as a node reports an error."""

    def route(state: BatchState) -> str:
        if check_state_for_errors(cast(dict[str, Any], state)):
            logger.debug(f"Stopping batch workflow before {next_node}: {state.get('error')}")
            return "end"
        return next_node

    return route


@lru_cache(maxsize=2)
def get_compiled_workflow(use_mock: bool = False) -> CompiledStateGraph:
    """Get or create the compiled workflow.

    Args:
        use_mock: Use the keyword mock classifier instead of OpenAI

    Returns:
        Compiled LangGraph workflow

    """
    workflow = StateGraph(BatchState)

    workflow.add_node("build_prompt", build_prompt)
    workflow.add_node("classify", mock_classify_batch if use_mock else classify_batch)
    workflow.add_node("validate_response", validate_response)

    workflow.add_conditional_edges(
        "build_prompt",
        _route_on_error("classify"),
        {"classify": "classify", "end": "__end__"},
    )
    workflow.add_conditional_edges(
        "classify",
        _route_on_error("validate_response"),
        {"validate_response": "validate_response", "end": "__end__"},
    )

    workflow.set_entry_point("build_prompt")
    workflow.set_finish_point("validate_response")

    return workflow.compile()


def create_initial_state(
    feedback_text: str,
    system_instruction: str | None = None,
    custom_labels: Sequence[str] | None = None,
) -> BatchState:
    """Create initial state for one batch.

    Args:
        feedback_text: Newline separated feedback lines
        system_instruction: Optional system prompt override
        custom_labels: Optional labels the model should prefer

    Returns:
        Initial batch state

    """
    return {
        "feedback_text": feedback_text,
        "system_instruction": system_instruction,
        "custom_labels": list(custom_labels) if custom_labels else None,
        "prompt": None,
        "line_count": 0,
        "raw_response": None,
        "items": None,
        "error": None,
    }


def classify_feedback_text(
    feedback_text: str,
    system_instruction: str | None = None,
    custom_labels: Sequence[str] | None = None,
    use_mock: bool | None = None,
) -> list[dict]:
    """Classify one newline separated batch through the workflow.

    Args:
        feedback_text: Newline separated feedback lines
        system_instruction: Optional system prompt override
        custom_labels: Optional labels the model should prefer
        use_mock: Force the mock classifier on or off; defaults to the
            FEEDBACK_LABELER_MOCK environment switch

    Returns:
        List of {"feedback": str, "labels": list[str]} dictionaries

    Raises:
        ClassificationError: If any workflow node reported an error

    """
    if use_mock is None:
        use_mock = use_mock_classifier()

    app = get_compiled_workflow(use_mock)
    initial_state = create_initial_state(feedback_text, system_instruction, custom_labels)

    result = cast(BatchState, app.invoke(initial_state))

    if check_state_for_errors(cast(dict[str, Any], result)):
        raise ClassificationError(result["error"])

    return result.get("items") or []


def make_classify_fn(
    system_instruction: str | None = None,
    custom_labels: Sequence[str] | None = None,
    use_mock: bool | None = None,
) -> Callable[[str], list[dict]]:
    """Bind classification settings into a single-argument classify function."""
    labels = list(custom_labels) if custom_labels else None

    def classify_fn(feedback_text: str) -> list[dict]:
        return classify_feedback_text(
            feedback_text,
            system_instruction=system_instruction,
            custom_labels=labels,
            use_mock=use_mock,
        )

    return classify_fn
