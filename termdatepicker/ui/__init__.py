"""User interface components for interactive date picking."""

from .interactive import InteractiveController
from .keyboard import KeyboardHandler
from .navigation import DatePicker, Effect, PickerState, Update, apply

__all__ = [
    "DatePicker",
    "Effect",
    "InteractiveController",
    "KeyboardHandler",
    "PickerState",
    "Update",
    "apply",
]
