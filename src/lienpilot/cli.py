"""
LienPilot CLI

Command-line interface for evaluating a saved set of answers.

Usage:
    lienpilot evaluate answers.json
    lienpilot evaluate answers.json --today 2024-02-01 --schedule
    lienpilot rules
"""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from typing import Any, Optional, Sequence

from .engine import LienEngine, format_deadline
from .exceptions import LienPilotError, ValidationError
from .packs import load_rules


def _parse_today(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid date {value!r} (expected YYYY-MM-DD)")


def _read_answers(path: str) -> Any:
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def cmd_evaluate(args: argparse.Namespace) -> int:
    """Evaluate answers and print the result JSON."""
    try:
        answers = _read_answers(args.answers)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read answers from {args.answers}: {e}", file=sys.stderr)
        return 1

    today = args.today or date.today()
    engine = LienEngine(rules=load_rules(args.rules))

    try:
        result = engine.evaluate(answers, today, partial=args.partial)
    except ValidationError as e:
        print(f"Invalid answers: {e.message}", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error.field}: {error.message}", file=sys.stderr)
        return 2

    output: dict[str, Any] = result.to_dict()
    output["evaluated_on"] = today.isoformat()

    if args.schedule:
        output["schedule"] = [
            {**item.to_dict(), "label": format_deadline(item, today)}
            for item in engine.schedule_builder.build(result.assessment, today, result.role)
        ]

    print(json.dumps(output, indent=2))
    return 0


def cmd_rules(args: argparse.Namespace) -> int:
    """Print the active rule pack summary."""
    print(json.dumps(load_rules(args.rules).to_dict(), indent=2))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="LienPilot Texas mechanics lien deadline CLI",
        prog="lienpilot",
    )
    parser.add_argument(
        "--rules",
        default=None,
        help="Path to a statute rule pack (defaults to the bundled Texas pack)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Evaluate command
    eval_parser = subparsers.add_parser("evaluate", help="Evaluate a JSON answers file")
    eval_parser.add_argument("answers", help="Path to answers JSON ('-' for stdin)")
    eval_parser.add_argument(
        "--today",
        type=_parse_today,
        default=None,
        help="Evaluation date YYYY-MM-DD (defaults to the current date)",
    )
    eval_parser.add_argument(
        "--partial",
        action="store_true",
        help="Allow required answers to be missing",
    )
    eval_parser.add_argument(
        "--schedule",
        action="store_true",
        help="Include the full statutory deadline schedule",
    )
    eval_parser.set_defaults(func=cmd_evaluate)

    # Rules command
    rules_parser = subparsers.add_parser("rules", help="Show the active rule pack")
    rules_parser.set_defaults(func=cmd_rules)

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except LienPilotError as e:
        print(str(e), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
