"""Standardized error handling utilities for Feedback Labeler."""

from typing import Any


def create_error_response(error: Exception | str) -> dict[str, Any]:
    """Create a standardized error response for LangGraph nodes.

    Args:
        error: The error that occurred

    Returns:
        Dictionary with error information and safe defaults

    """
    error_message = str(error) if isinstance(error, Exception) else error

    return {
        "error": error_message,
        "items": [],
    }


def check_state_for_errors(state: dict[str, Any]) -> bool:
    """Check if a state contains errors.

    Args:
        state: The batch state to check

    Returns:
        True if state contains errors, False otherwise

    """
    return bool(state.get("error"))
