"""
Command-line front end.

Parses flags, calls the ShiftTracker command surface, prints rows and
maps each error kind to its own exit status. No ledger logic lives here.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from shift_tracker.audit import configure_logging
from shift_tracker.config import DEFAULT_DATA_PATH, Settings, get_settings
from shift_tracker.exceptions import InvalidArgument, ShiftTrackerError
from shift_tracker.models import CommandResult, ErrorKind
from shift_tracker.services.storage import format_record
from shift_tracker.services.storage.line_format import format_number
from shift_tracker.tracker import ShiftTracker, create_tracker


EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CODES = {
    ErrorKind.INVALID_ARGUMENT: 2,
    ErrorKind.MALFORMED_RECORD: 3,
    ErrorKind.INVALID_NUMBER: 4,
    ErrorKind.STORE_UNWRITABLE: 5,
    ErrorKind.STORE_UNREADABLE: 6,
}

USAGE_EXAMPLES = f"""\
Usage:
  shift-tracker --help
  shift-tracker --list
  shift-tracker --recent 7
  shift-tracker --add 2025-10-01 5.5 12.5 "Lunch shift"
  shift-tracker --monthly
  shift-tracker --summary
  shift-tracker --high-pay 80
Files:
  {DEFAULT_DATA_PATH.as_posix()}
"""


class UsageError(Exception):
    """Unknown command or wrong number of arguments."""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="shift-tracker",
        description="Shift & Expense Tracker",
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    commands = parser.add_mutually_exclusive_group()
    commands.add_argument("--list", action="store_true", help="List all shifts by date")
    commands.add_argument("--recent", metavar="DAYS", help="Shifts in the last DAYS days")
    commands.add_argument(
        "--add",
        nargs=argparse.REMAINDER,
        metavar="FIELD",
        help="Add a shift: DATE HOURS RATE [NOTE] (must come last)",
    )
    commands.add_argument("--monthly", action="store_true", help="Total pay per month")
    commands.add_argument("--summary", action="store_true", help="Headline figures")
    commands.add_argument(
        "--high-pay",
        nargs="?",
        const="",
        metavar="THRESHOLD",
        help="Count shifts paying at least THRESHOLD",
    )
    parser.add_argument("--data-file", type=Path, help="Backing file to use")
    parser.add_argument("--log-level", help="Diagnostic log level (stderr)")
    return parser


def _parse_int(field: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise InvalidArgument(field, f"not an integer: {raw!r}")


def _parse_float(field: str, raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        raise InvalidArgument(field, f"not a number: {raw!r}")


def _money(value: float) -> str:
    return format_number(round(value, 2))


def _report_failure(result: CommandResult) -> int:
    print(f"Error: {result.error_message}", file=sys.stderr)
    return EXIT_CODES.get(result.error_kind, EXIT_USAGE)


def _load_settings(args: argparse.Namespace) -> Settings:
    settings = get_settings()
    if args.data_file is not None:
        storage = settings.storage.model_copy(update={"data_path": args.data_file})
        settings = settings.model_copy(update={"storage": storage})
    return settings


def _run_command(tracker: ShiftTracker, args: argparse.Namespace) -> int:
    if args.add is not None:
        if len(args.add) not in (3, 4):
            raise UsageError("--add takes DATE HOURS RATE [NOTE]")
        date, hours, rate, *rest = args.add
        result = tracker.add(date, hours, rate, rest[0] if rest else None)
        if not result.success:
            return _report_failure(result)
        print(f"Added: {format_record(result.value)}")
        return EXIT_OK

    if args.list:
        result = tracker.list_shifts()
        if not result.success:
            return _report_failure(result)
        for record in result.value:
            print(format_record(record))
        return EXIT_OK

    if args.recent is not None:
        days = _parse_int("days", args.recent)
        result = tracker.recent(days)
        if not result.success:
            return _report_failure(result)
        for record in result.value.records:
            print(format_record(record))
        print(f"Total pay in last {days} days: {_money(result.value.total_pay)}")
        return EXIT_OK

    if args.monthly:
        result = tracker.monthly()
        if not result.success:
            return _report_failure(result)
        for row in result.value:
            print(f"{row.month},{_money(row.total_pay)}")
        return EXIT_OK

    if args.summary:
        result = tracker.summary()
        if not result.success:
            return _report_failure(result)
        summary = result.value
        print(f"Shifts: {summary.shift_count}")
        print(f"Gross (pretax): {_money(summary.gross_total)}")
        print(
            "Very rough PAYE estimate (yearly scaled): "
            f"{_money(summary.tax_estimate)} (for demo)"
        )
        print(
            f">=£{format_number(summary.high_pay_threshold)} shifts: "
            f"{summary.high_pay_count}"
        )
        return EXIT_OK

    if args.high_pay is not None:
        threshold = _parse_float("threshold", args.high_pay) if args.high_pay else None
        result = tracker.high_pay_count(threshold)
        if not result.success:
            return _report_failure(result)
        print(result.value)
        return EXIT_OK

    raise UsageError("no command given")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point. Returns the process exit status."""
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = _build_parser()

    if not argv:
        parser.print_help()
        return EXIT_OK

    try:
        args = parser.parse_args(argv)
        settings = _load_settings(args)
        configure_logging(
            args.log_level or settings.app.log_level,
            json_output=settings.app.log_json,
        )
        tracker = create_tracker(settings)
        return _run_command(tracker, args)
    except UsageError as e:
        print(f"{e}\nUnknown command. Use --help.", file=sys.stderr)
        return EXIT_USAGE
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_CODES[ErrorKind.INVALID_ARGUMENT]
    except ShiftTrackerError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CODES[e.kind]


if __name__ == "__main__":
    raise SystemExit(main())
