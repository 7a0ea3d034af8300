"""Command-line interface for datekit.

CLI for format, parse, diff and add commands. Results go to stdout,
logs go to stderr.
"""

import argparse
import logging
import sys

import structlog

from datekit import __version__
from datekit.arithmetic import add_time, diff
from datekit.config import configure, get_settings
from datekit.exceptions import DatekitError
from datekit.formatting import format_date, format_to_short_date, format_to_short_time
from datekit.models import Instant, TimeUnit
from datekit.parsing import parse_calendar_view, parse_date, parse_instant


def configure_logging(level: str) -> None:
    """Configure structlog for simple console output on stderr."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelNamesMapping().get(level, logging.WARNING)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str):
    """Get a structured logger."""
    return structlog.get_logger(name)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="datekit",
        description="datekit: format, parse and shift dates",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--timezone",
        default=None,
        help="Timezone for this run (IANA name or UTC; default: DATEKIT_DEFAULT_TIMEZONE)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")
    units = [unit.value for unit in TimeUnit]

    # Format command
    format_parser = subparsers.add_parser("format", help="Format epoch milliseconds")
    format_parser.add_argument("millis", type=int, help="Milliseconds since the epoch")
    style = format_parser.add_mutually_exclusive_group()
    style.add_argument("--pattern", default=None, help="strftime pattern")
    style.add_argument("--short-date", action="store_true", help="Format as MM/DD/YYYY")
    style.add_argument("--short-time", action="store_true", help="Format as HH:MM AM/PM")

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Parse text to epoch milliseconds")
    parse_parser.add_argument("text", help="Text to parse")
    source = parse_parser.add_mutually_exclusive_group()
    source.add_argument("--pattern", default=None, help="strptime pattern (default: settings)")
    source.add_argument(
        "--self-pattern",
        action="store_true",
        help="Use the text itself as the pattern",
    )

    # Diff command
    diff_parser = subparsers.add_parser("diff", help="Difference between two instants")
    diff_parser.add_argument("start", type=int, help="Start, in epoch milliseconds")
    diff_parser.add_argument("end", type=int, help="End, in epoch milliseconds")
    diff_parser.add_argument("--unit", default="millis", choices=units, help="Result unit")

    # Add command
    add_parser = subparsers.add_parser("add", help="Shift an instant")
    add_parser.add_argument("millis", type=int, help="Milliseconds since the epoch")
    add_parser.add_argument("amount", type=int, help="Amount to add (negative subtracts)")
    add_parser.add_argument("--unit", default="millis", choices=units, help="Unit of amount")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(get_settings().log_level)
    except DatekitError as e:
        configure_logging("WARNING")
        get_logger("datekit").error("Invalid configuration", error=str(e))
        return 1
    log = get_logger("datekit")

    if args.command is None:
        parser.print_help()
        return 0

    try:
        if args.timezone is not None:
            configure(default_timezone=args.timezone)

        if args.command == "format":
            print(run_format(args))
        elif args.command == "parse":
            print(run_parse(args))
        elif args.command == "diff":
            print(diff(Instant(millis=args.start), Instant(millis=args.end), args.unit))
        elif args.command == "add":
            print(add_time(Instant(millis=args.millis), args.amount, args.unit).millis)
        return 0
    except DatekitError as e:
        log.error(f"{args.command} failed", error=str(e))
        return 1


def run_format(args: argparse.Namespace) -> str:
    """Handle the format command."""
    instant = Instant(millis=args.millis)
    if args.short_date:
        return format_to_short_date(instant)
    if args.short_time:
        return format_to_short_time(instant)
    if args.pattern is not None:
        return format_date(instant, args.pattern)
    return instant.to_datetime().isoformat(timespec="milliseconds")


def run_parse(args: argparse.Namespace) -> int:
    """Handle the parse command."""
    if args.self_pattern:
        return parse_calendar_view(args.text).millis
    if args.pattern is not None:
        return parse_date(args.text, args.pattern).millis
    return parse_instant(args.text).millis


if __name__ == "__main__":
    sys.exit(main())
