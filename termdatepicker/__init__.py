"""Embeddable terminal date picker.

The core is pure: ``apply(state, intent)`` returns the next ``PickerState``
plus any range rejection, and ``render(state)`` produces the month view as
text. ``DatePicker`` wraps both for hosts that prefer a stateful object.
"""

__version__ = "1.0.0"

from .config.settings import PickerOptions
from .core.focus import Focus, Intent
from .core.grid import GridCell, WeekGrid, build_grid
from .core.range_policy import RangeBound, RangeRejection, in_bounds
from .display.console_renderer import render
from .display.styles import Styles
from .ui.navigation import DatePicker, Effect, PickerState, Update, apply

__all__ = [
    "DatePicker",
    "Effect",
    "Focus",
    "GridCell",
    "Intent",
    "PickerOptions",
    "PickerState",
    "RangeBound",
    "RangeRejection",
    "Styles",
    "Update",
    "WeekGrid",
    "apply",
    "build_grid",
    "in_bounds",
    "render",
]
