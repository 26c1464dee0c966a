"""Tests for CLI argument parser functionality.

Tests cover argument parser creation, the date and focus argument
types, and mutually exclusive logging flags.
"""

import argparse
from datetime import date
from pathlib import Path

import pytest

from termdatepicker.cli.parser import create_parser, parse_args, parse_focus, parse_iso_date
from termdatepicker.core.focus import Focus


class TestCreateParser:
    """Test suite for create_parser function."""

    def test_create_parser_returns_argument_parser(self) -> None:
        """Test that create_parser returns a configured ArgumentParser."""
        parser = create_parser()

        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "termdatepicker"
        assert parser.epilog is not None

    def test_defaults(self) -> None:
        """Test that no arguments leave every option unset."""
        args = parse_args([])

        assert args.date is None
        assert args.start is None
        assert args.end is None
        assert args.focus is None
        assert args.selected is False
        assert args.print_only is False
        assert args.config is None
        assert args.log_level is None

    def test_picker_arguments(self) -> None:
        """Test picker options are parsed into typed values."""
        args = parse_args(
            [
                "--date",
                "2023-10-31",
                "--start",
                "2023-10-01",
                "--end",
                "2023-12-31",
                "--focus",
                "year",
                "--selected",
                "--print",
            ]
        )

        assert args.date == date(2023, 10, 31)
        assert args.start == date(2023, 10, 1)
        assert args.end == date(2023, 12, 31)
        assert args.focus == Focus.HEADER_YEAR
        assert args.selected is True
        assert args.print_only is True

    def test_configuration_arguments(self) -> None:
        """Test config path and color flags."""
        args = parse_args(["--config", "picker.yaml", "--no-color"])
        assert args.config == Path("picker.yaml")
        assert args.no_color is True

    def test_log_level_is_case_insensitive(self) -> None:
        """Test --log-level accepts lower case names."""
        assert parse_args(["--log-level", "debug"]).log_level == "DEBUG"
        assert parse_args(["--log-level", "verbose"]).log_level == "VERBOSE"

    def test_verbose_and_quiet_are_exclusive(self) -> None:
        """Test -v and -q cannot be combined."""
        with pytest.raises(SystemExit):
            parse_args(["-v", "-q"])

    def test_invalid_date_exits(self) -> None:
        """Test a malformed --date exits with a usage error."""
        with pytest.raises(SystemExit):
            parse_args(["--date", "31/10/2023"])


class TestArgumentTypes:
    """Test the custom argparse types."""

    def test_parse_iso_date(self) -> None:
        assert parse_iso_date(" 2024-02-29 ") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", ["2023-02-30", "tomorrow", ""])
    def test_parse_iso_date_invalid(self, value: str) -> None:
        with pytest.raises(argparse.ArgumentTypeError, match="expected YYYY-MM-DD"):
            parse_iso_date(value)

    def test_parse_focus(self) -> None:
        assert parse_focus("calendar") == Focus.CALENDAR
        with pytest.raises(argparse.ArgumentTypeError, match="choose from"):
            parse_focus("weekday")
