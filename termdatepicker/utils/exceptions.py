"""Package-level exceptions.

Range rejections are not exceptions; they are returned as values by the
navigation controller. These classes cover the layers around the core.
"""

from typing import Any, Optional


class DatePickerError(Exception):
    """Base exception for all date picker errors.

    Args:
        message: Human-readable error description
        details: Optional dictionary containing additional error context
    """

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(DatePickerError):
    """Raised when a configuration file or option cannot be used.

    Example:
        >>> raise ConfigurationError("Invalid YAML", {"path": "config.yaml"})
    """
