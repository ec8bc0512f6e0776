# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from whenly.app import render_relative, resolve
from whenly.config import ConfigurationError, configure_logging, get_parser_config
from whenly.domain.errors import WhenlyError
from whenly.domain.model import ClearResult, DateResult, PeriodResult
from whenly.domain.parsing import parse_iso_date
from whenly.ui.schema import resolution_payload

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from whenly.app import Resolution
    from whenly.domain.calendar import Date

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve natural-language date expressions")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log which grammar matched the input",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse_cmd = subparsers.add_parser("parse", help="Parse a date expression")
    parse_cmd.add_argument("text", help='Expression such as "next friday" or "+2w"')
    parse_cmd.add_argument(
        "--reference",
        type=str,
        help="YYYY-MM-DD day to resolve against (default: today, UTC)",
    )
    parse_cmd.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )

    format_cmd = subparsers.add_parser("format", help="Describe a date relative to a reference")
    format_cmd.add_argument("date", help="YYYY-MM-DD day to describe")
    format_cmd.add_argument(
        "--reference",
        type=str,
        help="YYYY-MM-DD day to describe it from (default: today, UTC)",
    )

    return parser.parse_args(list(argv))


def _parse_reference(value: str | None) -> Date | None:
    if value is None:
        return None
    return parse_iso_date(value.strip())


def _render(resolution: Resolution) -> str:
    match resolution.parsed:
        case DateResult(date=value):
            return f"{value} ({resolution.description})"
        case PeriodResult(period=period):
            return f"{period.start}..{period.end()} ({resolution.description})"
        case ClearResult():
            return "clear"


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.WARNING)

    try:
        if parsed_args.command == "parse":
            resolution = resolve(
                parsed_args.text,
                reference=_parse_reference(parsed_args.reference),
                config=get_parser_config(),
            )
            if parsed_args.json:
                print(resolution_payload(resolution).model_dump_json())
            else:
                print(_render(resolution))
        elif parsed_args.command == "format":
            print(
                render_relative(
                    parse_iso_date(parsed_args.date.strip()),
                    reference=_parse_reference(parsed_args.reference),
                )
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except (WhenlyError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    except Exception:
        log.exception("Unexpected error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
