"""Logging configuration and setup utilities."""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from ..config.settings import DatePickerSettings

# Custom log level between INFO(20) and DEBUG(10)
VERBOSE = 15
logging.addLevelName(VERBOSE, "VERBOSE")

ROOT_LOGGER = "termdatepicker"


def verbose(self: logging.Logger, message: Any, *args: Any, **kwargs: Any) -> None:
    """Log ``message`` at the VERBOSE level (15).

    Example:
        >>> logger = logging.getLogger(__name__)
        >>> logger.verbose("Rendered %d rows", row_count)
    """
    if self.isEnabledFor(VERBOSE):
        self._log(VERBOSE, message, args, **kwargs)


logging.Logger.verbose = verbose  # type: ignore[attr-defined]


def get_log_level(level_name: str) -> int:
    """Get numeric log level from string name, including the VERBOSE level.

    Args:
        level_name: DEBUG, VERBOSE, INFO, WARNING, ERROR or CRITICAL (any case)

    Returns:
        Numeric log level

    Raises:
        AttributeError: If the level name is not recognized
    """
    level_name = level_name.upper()
    if level_name == "VERBOSE":
        return VERBOSE
    level: int = getattr(logging, level_name)
    return level


class AutoColoredFormatter(logging.Formatter):
    """Formatter that auto-detects terminal color support."""

    COLORS = {
        "ERROR": {"truecolor": "\033[91m", "basic": "\033[31m", "none": ""},
        "INFO": {"truecolor": "\033[94m", "basic": "\033[34m", "none": ""},
        "VERBOSE": {"truecolor": "\033[92m", "basic": "\033[32m", "none": ""},
        "WARNING": {"truecolor": "\033[93m", "basic": "\033[33m", "none": ""},
        "DEBUG": {"truecolor": "\033[95m", "basic": "\033[35m", "none": ""},
        "CRITICAL": {"truecolor": "\033[91m\033[1m", "basic": "\033[31m\033[1m", "none": ""},
        "RESET": {"truecolor": "\033[0m", "basic": "\033[0m", "none": ""},
    }

    def __init__(self, *args: Any, enable_colors: bool = True, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.enable_colors = enable_colors
        self.color_mode = self._detect_color_support() if enable_colors else "none"

    def _detect_color_support(self) -> str:
        """Auto-detect terminal color capabilities of stderr."""
        if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
            return "none"

        term = os.environ.get("TERM", "").lower()
        colorterm = os.environ.get("COLORTERM", "").lower()

        if term == "dumb" or "NO_COLOR" in os.environ:
            return "none"
        if colorterm in ("truecolor", "24bit") or "256color" in term:
            return "truecolor"
        if term and "color" in term:
            return "basic"
        return "none"

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if self.color_mode == "none":
            return formatted

        level_name = record.levelname
        if level_name in self.COLORS:
            color = self.COLORS[level_name][self.color_mode]
            reset = self.COLORS["RESET"][self.color_mode]
            formatted = formatted.replace(level_name, f"{color}{level_name}{reset}", 1)
        return formatted


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[str] = None,
    log_dir: Optional[Path] = None,
    colors: bool = True,
) -> logging.Logger:
    """Set up package logging with stderr and optional file output.

    Console output goes to stderr so it never interleaves with the picker
    drawn on stdout.

    Args:
        log_level: Logging level (DEBUG, VERBOSE, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file name
        log_dir: Optional log directory path
        colors: Whether to color level names on capable terminals

    Returns:
        Configured package logger
    """
    try:
        numeric_level = get_log_level(log_level)
    except AttributeError:
        numeric_level = logging.WARNING

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if log_file else numeric_level)
    logger.handlers.clear()
    logger.propagate = False

    console_formatter = AutoColoredFormatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
        enable_colors=colors,
    )
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    if log_file:
        if log_dir:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_path = log_dir / log_file
        else:
            log_path = Path(log_file)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        logger.info(f"Logging to file: {log_path}")

    logger.debug(f"Logging initialized at {log_level} level")
    return logger


def setup_logging_from_settings(settings: "DatePickerSettings") -> logging.Logger:
    """Configure logging from the ``logging`` section of the settings."""
    config = settings.logging
    log_file = f"{config.file_prefix}.log" if config.file_enabled else None
    log_dir = Path(config.file_directory) if config.file_directory else None
    return setup_logging(
        log_level=config.console_level,
        log_file=log_file,
        log_dir=log_dir,
        colors=config.console_colors,
    )


def apply_command_line_overrides(settings: "DatePickerSettings", args: Any) -> "DatePickerSettings":
    """Apply command-line argument overrides to logging settings.

    Priority: Command-line > Environment > YAML > Defaults. Modifies
    ``settings`` in place and returns it.
    """
    if getattr(args, "log_level", None):
        settings.logging.console_level = args.log_level

    if getattr(args, "verbose", False):
        settings.logging.console_level = "VERBOSE"

    if getattr(args, "quiet", False):
        settings.logging.console_level = "ERROR"

    if getattr(args, "log_dir", None):
        settings.logging.file_enabled = True
        settings.logging.file_directory = args.log_dir

    if getattr(args, "no_color", False):
        settings.logging.console_colors = False

    return settings
