"""
Personnummer - command-line entry point.

Usage:
    python -m personnummer validate 850709-9813 19121212+1212
    python -m personnummer parse 198507699802 --json
    python -m personnummer format 8507099805 --length 12
    python -m personnummer generate --birth-date 1990-05-15 --gender F
    python -m personnummer --now 2010-10-10 parse 121212-2442
"""

import argparse
import logging
import sys
from datetime import date, datetime
from typing import Optional, Sequence

from personnummer.config import settings
from personnummer.errors import ParseError
from personnummer.generator import generate_personnummer
from personnummer.parser import evaluate
from personnummer.schemas import IdentitySummary

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=getattr(logging, settings.effective_log_level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _iso_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a YYYY-MM-DD date: {text}")


def cmd_validate(args: argparse.Namespace, now: datetime) -> int:
    failures = 0
    for value in args.values:
        result = evaluate(value, now)
        if isinstance(result, ParseError):
            failures += 1
            print(f"{value}: invalid ({result.kind.value}: {result.message})")
        else:
            print(f"{value}: valid")
    return 1 if failures else 0


def cmd_parse(args: argparse.Namespace, now: datetime) -> int:
    failures = 0
    for value in args.values:
        result = evaluate(value, now)
        if isinstance(result, ParseError):
            failures += 1
            print(f"{value}: {result.message}", file=sys.stderr)
            continue

        summary = IdentitySummary.from_identity(result, now)
        if args.json:
            print(summary.model_dump_json())
            continue

        print(summary.normalized)
        print(f"  Birth date:   {summary.birth_date.isoformat()}")
        print(f"  Age:          {summary.age}")
        print(f"  Sex:          {summary.sex.value}")
        if summary.is_coordination_number:
            print("  Samordningsnummer (coordination number)")
    return 1 if failures else 0


def cmd_format(args: argparse.Namespace, now: datetime) -> int:
    length = args.length or settings.output_length
    failures = 0
    for value in args.values:
        result = evaluate(value, now)
        if isinstance(result, ParseError):
            failures += 1
            print(f"{value}: {result.message}", file=sys.stderr)
            continue
        print(result.to_string(length, now))
    return 1 if failures else 0


def cmd_generate(args: argparse.Namespace, now: datetime) -> int:
    for offset in range(args.count):
        print(
            generate_personnummer(
                args.birth_date,
                gender=args.gender,
                birth_number=(args.birth_number + 2 * offset) % 1000,
                coordination=args.coordination,
            )
        )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="personnummer",
        description="Validate, parse and format Swedish personnummer",
    )
    parser.add_argument(
        "--now",
        type=_iso_date,
        default=None,
        help="Reference date (YYYY-MM-DD) for century guessing and age",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    validate_parser = subparsers.add_parser("validate", help="Check numbers")
    validate_parser.add_argument("values", nargs="+", help="Numbers to check")
    validate_parser.set_defaults(func=cmd_validate)

    parse_parser = subparsers.add_parser("parse", help="Show parsed details")
    parse_parser.add_argument("values", nargs="+", help="Numbers to parse")
    parse_parser.add_argument(
        "--json", action="store_true", help="Print one JSON object per number"
    )
    parse_parser.set_defaults(func=cmd_parse)

    format_parser = subparsers.add_parser("format", help="Print canonical form")
    format_parser.add_argument("values", nargs="+", help="Numbers to format")
    format_parser.add_argument(
        "--length",
        type=int,
        choices=(10, 12),
        default=None,
        help="Output length (default: PERSONNUMMER_OUTPUT_LENGTH or 10)",
    )
    format_parser.set_defaults(func=cmd_format)

    generate_parser = subparsers.add_parser("generate", help="Generate test numbers")
    generate_parser.add_argument(
        "--birth-date", type=_iso_date, required=True, help="YYYY-MM-DD"
    )
    generate_parser.add_argument("--gender", choices=("M", "F"), default="M")
    generate_parser.add_argument("--birth-number", type=int, default=1)
    generate_parser.add_argument("--count", type=int, default=1)
    generate_parser.add_argument(
        "--coordination", action="store_true", help="Generate samordningsnummer"
    )
    generate_parser.set_defaults(func=cmd_generate)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    configure_logging()
    args = build_parser().parse_args(argv)

    if args.now is not None:
        now = datetime.combine(args.now, datetime.min.time())
    else:
        now = datetime.now()
    logger.debug("Running %s with reference time %s", args.command, now.isoformat())

    return args.func(args, now)


if __name__ == "__main__":
    sys.exit(main())
