"""Calendar math, grid building, range policy and focus rules."""

from .calendar_math import (
    add_days,
    add_months,
    add_weeks,
    add_years,
    first_of_month,
    last_of_month,
    leading_sunday,
    normalize,
    trailing_sunday,
)
from .focus import Action, Focus, Intent, advance, resolve, retreat
from .grid import WEEKDAY_LABELS, GridCell, WeekGrid, build_grid
from .range_policy import RangeBound, RangeRejection, check, in_bounds

__all__ = [
    "WEEKDAY_LABELS",
    "Action",
    "Focus",
    "GridCell",
    "Intent",
    "RangeBound",
    "RangeRejection",
    "WeekGrid",
    "add_days",
    "add_months",
    "add_weeks",
    "add_years",
    "advance",
    "build_grid",
    "check",
    "first_of_month",
    "in_bounds",
    "last_of_month",
    "leading_sunday",
    "normalize",
    "resolve",
    "retreat",
    "trailing_sunday",
]
