"""Keyboard input decoding for the interactive date picker.

Raw terminal input is decoded into key names (``up``, ``tab``,
``shift+tab``, ``ctrl+c``, ``k``...) which a ``KeyMap`` turns into
``Intent`` values.
"""

import asyncio
import logging
import sys
from collections.abc import Awaitable
from typing import Any, Callable, Optional, Union

from ..config.settings import KeyMap
from ..core.focus import Intent

logger = logging.getLogger(__name__)

IntentCallback = Union[Callable[[Intent], None], Callable[[Intent], Awaitable[None]]]

# Sequences following the "\x1b[" CSI prefix
_ESCAPE_SEQUENCES = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "Z": "shift+tab",
    "H": "home",
    "1~": "home",
    "F": "end",
    "4~": "end",
}

_CONTROL_CHARS = {
    "\t": "tab",
    "\r": "enter",
    "\n": "enter",
    "\x1b": "esc",
    "\x03": "ctrl+c",
    "\x04": "ctrl+d",
    " ": "space",
}

_FALLBACK_WORDS = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "tab": "tab",
    "next": "tab",
    "shift+tab": "shift+tab",
    "prev": "shift+tab",
    "quit": "q",
    "exit": "q",
}


def decode_key(key_data: str) -> str:
    """Decode raw terminal input into a key name.

    Args:
        key_data: Raw characters read from the terminal

    Returns:
        Key name, or an empty string for unrecognised sequences
    """
    if not key_data:
        return ""
    if key_data.startswith("\x1b[") or key_data.startswith("\x1bO"):
        return _ESCAPE_SEQUENCES.get(key_data[2:], "")
    if len(key_data) == 1:
        if key_data in _CONTROL_CHARS:
            return _CONTROL_CHARS[key_data]
        if key_data.isprintable():
            return key_data
    return ""


def decode_fallback(line: str) -> str:
    """Decode a line typed in fallback mode, e.g. ``left`` or ``k``."""
    word = line.strip().lower()
    if not word:
        return "enter"
    return _FALLBACK_WORDS.get(word, word if len(word) == 1 else "")


class KeyboardHandler:
    """Reads terminal keys and dispatches the intents they are bound to."""

    def __init__(self, keymap: Optional[KeyMap] = None) -> None:
        """Initialize keyboard handler.

        Args:
            keymap: Key bindings, defaults to ``KeyMap()``
        """
        self.keymap = keymap or KeyMap()
        self._bindings = self.keymap.bindings()
        self._running = False
        self._intent_callback: Optional[IntentCallback] = None
        self._old_settings: Optional[list[Any]] = None
        self._fallback_mode = False

        logger.debug("Keyboard handler initialized")

    def intent_for(self, key_name: str) -> Optional[Intent]:
        """Return the intent bound to ``key_name``, if any."""
        return self._bindings.get(key_name)

    def parse(self, key_data: str) -> Optional[Intent]:
        """Decode raw input and map it to an intent."""
        key_name = decode_fallback(key_data) if self._fallback_mode else decode_key(key_data)
        return self.intent_for(key_name)

    def register_intent_handler(self, callback: IntentCallback) -> None:
        """Register the callback invoked with every decoded intent."""
        self._intent_callback = callback
        logger.debug("Registered intent handler")

    def _setup_terminal(self) -> None:
        """Put the terminal into non-canonical, no-echo mode."""
        if not sys.stdin.isatty():
            logger.info("stdin is not a terminal - press Enter after each key")
            self._fallback_mode = True
            return

        try:
            import termios  # noqa: PLC0415

            fd = sys.stdin.fileno()
            self._old_settings = termios.tcgetattr(fd)

            new_settings = termios.tcgetattr(fd)
            new_settings[3] &= ~(termios.ICANON | termios.ECHO | termios.ISIG)
            new_settings[6][termios.VMIN] = 0
            new_settings[6][termios.VTIME] = 1

            termios.tcsetattr(fd, termios.TCSAFLUSH, new_settings)
            logger.debug("Terminal set to raw input mode with timeout")
        except (ImportError, OSError) as e:
            logger.warning(f"Could not set terminal to raw mode: {e}")
            self._fallback_mode = True

    def _restore_terminal(self) -> None:
        if not self._old_settings:
            return
        try:
            import termios  # noqa: PLC0415

            termios.tcsetattr(sys.stdin.fileno(), termios.TCSADRAIN, self._old_settings)
            logger.debug("Terminal settings restored")
        except (ImportError, OSError) as e:
            logger.warning(f"Could not restore terminal settings: {e}")
        finally:
            self._old_settings = None

    def _read_key_sequence(self) -> Optional[str]:
        """Read one key, including the rest of an escape sequence.

        Returns:
            The raw key data, or None once input is exhausted
        """
        if self._fallback_mode:
            line = sys.stdin.readline()
            return line if line else None

        key_data = sys.stdin.read(1)
        if key_data != "\x1b":
            return key_data

        sequence = key_data
        while len(sequence) < 8:
            next_char = sys.stdin.read(1)
            if not next_char:
                break
            sequence += next_char
            if len(sequence) > 2 and (next_char.isalpha() or next_char == "~"):
                break
        return sequence

    async def handle_key_input(self, key_data: str) -> Optional[Intent]:
        """Decode ``key_data`` and dispatch the resulting intent.

        Returns:
            The dispatched intent, or None if the key is unbound
        """
        intent = self.parse(key_data)
        logger.debug(f"Received key_data={key_data!r}, parsed as={intent}")
        if intent is None or self._intent_callback is None:
            return intent

        result = self._intent_callback(intent)
        if asyncio.iscoroutine(result):
            await result
        return intent

    async def start_listening(self) -> None:
        """Read keys until ``stop_listening`` is called or input ends."""
        if self._running:
            logger.warning("Keyboard handler already running")
            return

        self._running = True
        self._setup_terminal()
        logger.info("Started keyboard input listening")

        loop = asyncio.get_running_loop()
        try:
            while self._running:
                key_data = await loop.run_in_executor(None, self._read_key_sequence)
                if key_data is None:
                    logger.info("End of input reached")
                    break
                if key_data:
                    await self.handle_key_input(key_data)
        finally:
            self._restore_terminal()
            self._running = False
            logger.info("Stopped keyboard input listening")

    def stop_listening(self) -> None:
        self._running = False
        logger.debug("Keyboard handler stop requested")

    @property
    def is_running(self) -> bool:
        return self._running

    def get_help_text(self) -> str:
        """Get a one-line summary of the key bindings."""
        descriptions = {
            Intent.UP: "up",
            Intent.DOWN: "down",
            Intent.LEFT: "left",
            Intent.RIGHT: "right",
            Intent.FOCUS_NEXT: "next field",
            Intent.FOCUS_PREV: "prev field",
            Intent.QUIT: "quit",
        }
        parts = []
        for intent, label in descriptions.items():
            keys = getattr(self.keymap, intent.value)
            if keys:
                parts.append(f"{'/'.join(keys)}: {label}")
        return " | ".join(parts) if parts else "No key bindings configured"
