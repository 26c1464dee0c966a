"""Command-line argument parsing for the date picker demo host."""

import argparse
from datetime import date
from pathlib import Path
from typing import Optional

from ..core.focus import Focus


def parse_iso_date(value: str) -> date:
    """Argparse type for ``YYYY-MM-DD`` dates.

    Raises:
        argparse.ArgumentTypeError: If ``value`` is not an ISO date
    """
    try:
        return date.fromisoformat(value.strip())
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {value!r}, expected YYYY-MM-DD") from e


def parse_focus(value: str) -> Focus:
    try:
        return Focus.parse(value)
    except ValueError as e:
        choices = ", ".join(f.value for f in Focus)
        raise argparse.ArgumentTypeError(f"invalid focus {value!r}, choose from {choices}") from e


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="termdatepicker",
        description="Pick a date from a month calendar in the terminal.",
        epilog=(
            "Arrow keys or h/j/k/l navigate, Tab and Shift+Tab move between the "
            "month, year and day grid, q quits and prints the chosen date."
        ),
    )

    picker_group = parser.add_argument_group("picker")
    picker_group.add_argument("--date", type=parse_iso_date, help="Initial date (default: today)")
    picker_group.add_argument("--start", type=parse_iso_date, help="Earliest selectable date (inclusive)")
    picker_group.add_argument("--end", type=parse_iso_date, help="Latest selectable date (inclusive)")
    picker_group.add_argument(
        "--focus",
        type=parse_focus,
        help="Initial focus: none, month, year or calendar (default: calendar)",
    )
    picker_group.add_argument(
        "--selected", action="store_true", help="Start with the initial date selected"
    )
    picker_group.add_argument(
        "--print",
        dest="print_only",
        action="store_true",
        help="Render the calendar once and exit",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", type=Path, help="Path to a YAML configuration file")
    config_group.add_argument("--no-color", action="store_true", help="Disable ANSI colors")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "VERBOSE", "INFO", "WARNING", "ERROR", "CRITICAL"],
        type=str.upper,
        help="Console log level",
    )
    logging_group.add_argument("--log-dir", type=str, help="Write a log file to this directory")
    verbosity = logging_group.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")

    return parser


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    return create_parser().parse_args(argv)
