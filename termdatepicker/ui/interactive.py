"""Interactive terminal host for the date picker."""

import logging
import sys
from datetime import date
from typing import Optional, TextIO

from ..core.focus import Intent
from ..core.range_policy import RangeRejection
from ..display.console_renderer import ConsoleRenderer
from .keyboard import KeyboardHandler
from .navigation import DatePicker

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\033[H\033[J"


class InteractiveController:
    """Runs a date picker against the terminal until the user quits."""

    def __init__(
        self,
        picker: DatePicker,
        keyboard: Optional[KeyboardHandler] = None,
        renderer: Optional[ConsoleRenderer] = None,
        output: Optional[TextIO] = None,
        clear_screen: bool = True,
    ) -> None:
        """Initialize interactive controller.

        Args:
            picker: Date picker to drive
            keyboard: Keyboard handler, defaults to one with the default key map
            renderer: Renderer used to draw the picker and status line
            output: Stream to draw on, defaults to stdout
            clear_screen: Clear the terminal before each redraw
        """
        self.picker = picker
        self.keyboard = keyboard or KeyboardHandler()
        self.renderer = renderer or ConsoleRenderer()
        self.output = output or sys.stdout
        self.clear_screen = clear_screen

        self._running = False
        self._last_rejection: Optional[RangeRejection] = None

        self.keyboard.register_intent_handler(self.handle_intent)
        logger.debug("Interactive controller initialized")

    @property
    def is_running(self) -> bool:
        return self._running

    def handle_intent(self, intent: Intent) -> None:
        """Apply ``intent`` to the picker and redraw."""
        result = self.picker.update(intent)
        self._last_rejection = result.rejection

        if result.quit:
            logger.info("User requested exit from interactive mode")
            self.stop()
            return

        self.redraw()

    def redraw(self) -> None:
        """Draw the picker followed by the status and help lines."""
        lines = [self.renderer.render(self.picker.state), ""]
        if self._last_rejection is not None:
            lines.append(self.renderer.render_rejection(self._last_rejection))
        else:
            lines.append(f"Selected: {self.picker.state.day.isoformat()}")
        lines.append(self.keyboard.get_help_text())

        prefix = CLEAR_SCREEN if self.clear_screen else ""
        self.output.write(prefix + "\n".join(lines) + "\n")
        self.output.flush()

    async def start(self) -> date:
        """Run until the user quits.

        Entering the picker marks the reference date as selected so the
        cursor is highlighted from the first frame.

        Returns:
            The reference date at the time the user quit
        """
        if self._running:
            logger.warning("Interactive controller already running")
            return self.picker.time

        self._running = True
        self.picker.select_date()
        logger.info("Starting interactive date picker")

        try:
            self.redraw()
            await self.keyboard.start_listening()
        finally:
            self._running = False

        return self.picker.time

    def stop(self) -> None:
        self._running = False
        self.keyboard.stop_listening()
