#!/usr/bin/env python3
"""
Headless runner for batch feedback classification.
Usage: feedback-labeler-batch feedback.csv --batch-size 100 --detailed --output ./exports
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from .config import DEFAULT_BATCH_SIZE, LOG_FORMAT, use_mock_classifier
from .exceptions import (
    ClassificationError,
    EmptyResultWarning,
    ExportError,
    InputEmptyError,
    UnsupportedInputFormat,
)
from .langgraph.workflow import make_classify_fn
from .models.feedback import BatchProgress
from .processing.session import AnalysisSession
from .services.input_loader import load_feedback_file
from .utils.labels import parse_custom_labels

logger = logging.getLogger(__name__)


def print_separator():
    print("=" * 80)


def print_progress(progress: BatchProgress) -> None:
    print(progress.to_display_string())


def print_summary(session: AnalysisSession, top: int = 15) -> None:
    """Pretty print the label summary for a finished run."""
    print("\nSUMMARY")
    print("-------")
    print(session.review_statistics().to_display_string())

    counts = session.label_summary()
    if counts:
        print("\nTop labels:")
        for item in counts[:top]:
            print(f"  {item.count:>5}  {item.label}")
        if len(counts) > top:
            print(f"  ... and {len(counts) - top} more")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Label customer feedback in batches")
    parser.add_argument("input", type=str, help="CSV or Excel file with one feedback per row")
    parser.add_argument(
        "--batch-size",
        type=int,
        default=DEFAULT_BATCH_SIZE,
        help="Maximum lines per classification call",
    )
    parser.add_argument("--system-prompt", type=str, default=None, help="Optional system instruction")
    parser.add_argument("--labels", type=str, default="", help="Comma separated suggested labels")
    parser.add_argument(
        "--output",
        type=str,
        default=".",
        help="Folder the workbook is written to",
    )
    parser.add_argument(
        "--detailed",
        action="store_true",
        help="Write exploded, compiled and count sheets",
    )
    parser.add_argument("--mock", action="store_true", help="Use the keyword mock classifier")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT, stream=sys.stderr)

    args = build_parser().parse_args(argv)
    if args.batch_size <= 0:
        print("Error: --batch-size must be positive")
        return 2

    session = AnalysisSession(
        system_instruction=args.system_prompt,
        custom_labels=parse_custom_labels(args.labels),
        batch_size=args.batch_size,
    )
    classify_fn = make_classify_fn(
        session.system_instruction,
        session.custom_labels,
        use_mock=args.mock or use_mock_classifier(),
    )

    try:
        text = load_feedback_file(Path(args.input))
        print(f"Processing {args.input} in batches of {args.batch_size}")
        print_separator()
        for progress in session.run(text, classify_fn):
            print_progress(progress)
        print_separator()
    except (InputEmptyError, UnsupportedInputFormat) as e:
        print(f"Error: {e}")
        return 2
    except EmptyResultWarning as e:
        print(f"{e}. Please check your input.")
        return 0
    except ClassificationError as e:
        print(f"An error occurred while analyzing the feedback: {e}")
        return 1

    print_summary(session)

    try:
        filepath = session.export(Path(args.output), detailed=args.detailed)
    except ExportError as e:
        print(f"Export failed: {e}")
        return 1

    print(f"\nWorkbook written to {filepath}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
