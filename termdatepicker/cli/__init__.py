"""Command-line interface for the date picker demo host."""

import argparse
import logging
from typing import Any, Optional

from ..config.settings import DatePickerSettings, get_settings, reset_settings
from ..display.console_renderer import ConsoleRenderer
from ..ui.interactive import InteractiveController
from ..ui.keyboard import KeyboardHandler
from ..ui.navigation import DatePicker
from ..utils.exceptions import ConfigurationError
from ..utils.logging import apply_command_line_overrides, setup_logging_from_settings
from .parser import create_parser

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2


def build_settings(args: argparse.Namespace) -> DatePickerSettings:
    """Create settings with command-line values taking precedence.

    Raises:
        ConfigurationError: If the settings cannot be loaded
    """
    overrides: dict[str, Any] = {}
    if args.config is not None:
        overrides["config_file"] = args.config
    if args.date is not None:
        overrides["initial_date"] = args.date
    if args.start is not None:
        overrides["start_date"] = args.start
    if args.end is not None:
        overrides["end_date"] = args.end
    if args.focus is not None:
        overrides["focus"] = args.focus
    if args.selected:
        overrides["selected"] = True

    reset_settings()
    settings = get_settings(**overrides)
    if args.no_color:
        settings.display.colors = False
    return apply_command_line_overrides(settings, args)


def build_picker(settings: DatePickerSettings) -> DatePicker:
    return DatePicker.from_options(settings.picker_options(), styles=settings.display.styles())


async def main_entry(argv: Optional[list[str]] = None) -> int:
    """Parse arguments, run the picker and print the chosen date.

    Returns:
        Process exit code
    """
    args = create_parser().parse_args(argv)

    try:
        settings = build_settings(args)
    except ConfigurationError as e:
        print(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    setup_logging_from_settings(settings)
    picker = build_picker(settings)
    logger.debug(f"Starting picker at {picker.time} within {picker.bounds.describe()}")

    if args.print_only:
        print(picker.view())
        return EXIT_OK

    controller = InteractiveController(
        picker,
        keyboard=KeyboardHandler(settings.keymap),
        renderer=ConsoleRenderer(settings.display.styles()),
    )
    chosen = await controller.start()
    print(chosen.isoformat())
    return EXIT_OK


__all__ = ["build_picker", "build_settings", "main_entry"]
