"""Tests for the command-line entry points."""

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, Mock, patch

import pytest

from termdatepicker.__main__ import main
from termdatepicker.cli import EXIT_CONFIG_ERROR, EXIT_OK, build_picker, build_settings, main_entry
from termdatepicker.cli.parser import parse_args
from termdatepicker.core.focus import Focus


class TestBuildSettings:
    """Test how command-line values reach the settings."""

    def test_arguments_become_settings(self) -> None:
        args = parse_args(["--date", "2023-10-31", "--start", "2023-10-01", "--focus", "month", "-v"])
        settings = build_settings(args)

        assert settings.initial_date == date(2023, 10, 31)
        assert settings.start_date == date(2023, 10, 1)
        assert settings.focus == Focus.HEADER_MONTH
        assert settings.logging.console_level == "VERBOSE"

    def test_no_color_disables_styles(self) -> None:
        settings = build_settings(parse_args(["--no-color"]))
        assert settings.display.colors is False
        assert settings.logging.console_colors is False

    def test_command_line_wins_over_config(self, tmp_path: Path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("picker:\n  date: 2023-01-01\n  end: 2023-03-01\n", encoding="utf-8")

        settings = build_settings(parse_args(["--config", str(config), "--date", "2023-02-01"]))

        assert settings.initial_date == date(2023, 2, 1)
        assert settings.end_date == date(2023, 3, 1)

    def test_build_picker(self) -> None:
        settings = build_settings(parse_args(["--date", "2023-02-02", "--start", "2023-02-02", "--end", "2023-02-10"]))
        picker = build_picker(settings)

        assert picker.time == date(2023, 2, 2)
        assert picker.bounds.describe() == "2023-02-02 .. 2023-02-10"


class TestMainEntry:
    """Test the async main entry."""

    @pytest.mark.asyncio
    async def test_print_renders_once(self, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = await main_entry(["--date", "2023-10-31", "--print", "--no-color"])

        out = capsys.readouterr().out
        assert exit_code == EXIT_OK
        assert out.splitlines()[0] == "        October 2023"
        assert " 29  30  31 " in out

    @pytest.mark.asyncio
    async def test_configuration_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        exit_code = await main_entry(["--config", str(tmp_path / "absent.yaml"), "--print"])

        assert exit_code == EXIT_CONFIG_ERROR
        assert "Configuration error: Config file not found" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_interactive_prints_chosen_date(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("termdatepicker.cli.InteractiveController") as controller_cls:
            controller_cls.return_value.start = AsyncMock(return_value=date(2023, 11, 1))
            exit_code = await main_entry(["--date", "2023-10-31"])

        assert exit_code == EXIT_OK
        assert capsys.readouterr().out.strip() == "2023-11-01"
        picker = controller_cls.call_args.args[0]
        assert picker.time == date(2023, 10, 31)


class TestMain:
    """Test the console script wrapper."""

    def test_exit_code_is_propagated(self) -> None:
        with patch("termdatepicker.__main__.main_entry", new=AsyncMock(return_value=EXIT_CONFIG_ERROR)):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == EXIT_CONFIG_ERROR

    def test_keyboard_interrupt(self, capsys: pytest.CaptureFixture[str]) -> None:
        with (
            patch("termdatepicker.__main__.main_entry", new=Mock()),
            patch("termdatepicker.__main__.asyncio.run", side_effect=KeyboardInterrupt),
        ):
            with pytest.raises(SystemExit) as exc_info:
                main()
        assert exc_info.value.code == 130
        assert "cancelled" in capsys.readouterr().out
