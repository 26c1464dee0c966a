"""Configuration management."""

from .settings import (
    DatePickerSettings,
    DisplaySettings,
    KeyMap,
    LoggingSettings,
    PickerOptions,
    get_settings,
    reset_settings,
)

__all__ = [
    "DatePickerSettings",
    "DisplaySettings",
    "KeyMap",
    "LoggingSettings",
    "PickerOptions",
    "get_settings",
    "reset_settings",
]
