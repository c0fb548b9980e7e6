"""studygen - command line entry point."""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from studygen.config import LlmConfig
from studygen.llm import (
    FlashcardSet,
    ItemKind,
    LLMError,
    QuizSet,
    generate_quiz_or_flashcards,
    generate_synthesis,
)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL (default INFO)."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="studygen")
    sub = parser.add_subparsers(dest="command", required=True)

    synthesis = sub.add_parser("synthesis", help="Write an HTML study summary")
    synthesis.add_argument("file", help="Course content text file")
    synthesis.add_argument(
        "--style", default="Standard", help="Summary style (default: Standard)"
    )
    synthesis.add_argument(
        "--words", type=int, default=500, help="Approximate word count (default: 500)"
    )

    quiz = sub.add_parser("quiz", help="Generate a quiz or flashcards as JSON")
    quiz.add_argument("file", help="Course content text file")
    quiz.add_argument(
        "--count", type=int, default=10, help="Number of items (default: 10)"
    )
    quiz.add_argument(
        "--difficulty", default="Moyen", help="Difficulty level (default: Moyen)"
    )
    quiz.add_argument(
        "--type",
        dest="item_type",
        default="QCM",
        help="QCM, Vrai/Faux, Mixte or Flashcards (default: QCM)",
    )
    quiz.add_argument(
        "--validate",
        action="store_true",
        help="Fail if the items do not match the expected shape",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for studygen."""
    args = build_parser().parse_args(argv)
    configure_logging()

    source = Path(args.file)
    if not source.is_file():
        print(f"studygen: file not found: {source}", file=sys.stderr)
        return 1

    try:
        text = source.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        print(f"studygen: {source} is not valid UTF-8: {e}", file=sys.stderr)
        return 1

    try:
        config = LlmConfig()
    except ValidationError as e:
        print(f"studygen: invalid LLM_* settings:\n{e}", file=sys.stderr)
        return 1

    try:
        if args.command == "synthesis":
            print(generate_synthesis(text, args.style, args.words, config))
            return 0

        result = generate_quiz_or_flashcards(
            text, args.count, args.difficulty, args.item_type, config
        )
    except LLMError as e:
        print(f"studygen: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        # Provider errors are already logged by the client.
        print(f"studygen: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    if args.validate:
        model = (
            FlashcardSet
            if ItemKind.from_label(args.item_type) is ItemKind.FLASHCARDS
            else QuizSet
        )
        try:
            model.model_validate(result)
        except ValidationError as e:
            print(f"studygen: unexpected item shape:\n{e}", file=sys.stderr)
            return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
