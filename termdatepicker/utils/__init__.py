"""Utility functions and helpers."""

from .exceptions import ConfigurationError, DatePickerError
from .logging import VERBOSE, setup_logging

__all__ = ["VERBOSE", "ConfigurationError", "DatePickerError", "setup_logging"]
