"""Unit tests for the interactive terminal host."""

import asyncio
import io
from datetime import date
from unittest.mock import AsyncMock, Mock, patch

import pytest

from termdatepicker.config.settings import KeyMap
from termdatepicker.core.focus import Intent
from termdatepicker.display.console_renderer import ConsoleRenderer
from termdatepicker.display.styles import Styles
from termdatepicker.ui.interactive import CLEAR_SCREEN, InteractiveController
from termdatepicker.ui.keyboard import KeyboardHandler
from termdatepicker.ui.navigation import DatePicker


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def controller(output: io.StringIO) -> InteractiveController:
    picker = DatePicker(date(2023, 2, 2), start=date(2023, 2, 2), end=date(2023, 2, 10))
    return InteractiveController(
        picker,
        keyboard=KeyboardHandler(),
        renderer=ConsoleRenderer(Styles.plain()),
        output=output,
        clear_screen=False,
    )


class TestInteractiveController:
    """Test intent handling and redraws."""

    def test_registers_itself_with_keyboard(self) -> None:
        keyboard = Mock(spec=KeyboardHandler)
        controller = InteractiveController(DatePicker(date(2023, 10, 31)), keyboard=keyboard)
        keyboard.register_intent_handler.assert_called_once_with(controller.handle_intent)

    def test_navigation_redraws_with_selected_line(self, controller: InteractiveController, output: io.StringIO) -> None:
        controller.handle_intent(Intent.RIGHT)

        text = output.getvalue()
        assert controller.picker.time == date(2023, 2, 3)
        assert "February 2023" in text
        assert "Selected: 2023-02-03" in text
        assert "ctrl+c/q: quit" in text

    def test_rejection_is_shown_once(self, controller: InteractiveController, output: io.StringIO) -> None:
        controller.handle_intent(Intent.LEFT)
        assert "Date must be on or after 2023-02-02" in output.getvalue()
        assert controller.picker.time == date(2023, 2, 2)

        output.seek(0)
        output.truncate()
        controller.handle_intent(Intent.RIGHT)
        assert "Date must be" not in output.getvalue()

    def test_quit_stops_keyboard_without_redraw(self, output: io.StringIO) -> None:
        keyboard = Mock(spec=KeyboardHandler)
        controller = InteractiveController(DatePicker(date(2023, 10, 31)), keyboard=keyboard, output=output)

        controller.handle_intent(Intent.QUIT)

        keyboard.stop_listening.assert_called_once()
        assert output.getvalue() == ""
        assert not controller.is_running

    def test_clear_screen_prefix(self, output: io.StringIO) -> None:
        controller = InteractiveController(
            DatePicker(date(2023, 10, 31)),
            renderer=ConsoleRenderer(Styles.plain()),
            output=output,
        )
        controller.redraw()
        assert output.getvalue().startswith(CLEAR_SCREEN)

    @pytest.mark.asyncio
    async def test_start_selects_and_returns_date(self, output: io.StringIO) -> None:
        keyboard = Mock(spec=KeyboardHandler)
        keyboard.start_listening = AsyncMock()
        keyboard.get_help_text.return_value = "help"
        picker = DatePicker(date(2023, 10, 31))
        controller = InteractiveController(picker, keyboard=keyboard, output=output, clear_screen=False)

        chosen = await controller.start()

        assert chosen == date(2023, 10, 31)
        assert picker.selected
        keyboard.start_listening.assert_awaited_once()
        assert "Selected: 2023-10-31" in output.getvalue()
        assert not controller.is_running

    @pytest.mark.asyncio
    async def test_start_returns_at_end_of_input(self, output: io.StringIO) -> None:
        keyboard = KeyboardHandler(KeyMap(quit=["ctrl+c", "x"]))
        picker = DatePicker(date(2023, 10, 31))
        controller = InteractiveController(picker, keyboard=keyboard, output=output, clear_screen=False)

        with patch("termdatepicker.ui.keyboard.sys.stdin") as stdin:
            stdin.isatty.return_value = False
            stdin.readline.side_effect = ["right\n", ""]
            chosen = await asyncio.wait_for(controller.start(), timeout=2)

        assert chosen == date(2023, 11, 1)
        assert not controller.is_running
