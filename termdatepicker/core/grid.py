"""Month grid generation.

The grid covers every Sunday-start week touching the displayed month,
from the Sunday on or before the 1st up to (not including) the first Sunday
after the month's last day.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, Optional, Tuple

from .calendar_math import SATURDAY, leading_sunday, normalize, trailing_sunday
from .focus import Focus
from .range_policy import RangeBound, in_bounds

WEEKDAY_LABELS: Tuple[str, ...] = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")
BLANK_LABEL = "  "


@dataclass(frozen=True)
class GridCell:
    """A single day slot in the month grid."""

    day: date
    in_month: bool
    is_selected: bool = False
    is_focused: bool = False
    is_disabled: bool = False

    @property
    def label(self) -> str:
        """Two-character day label; blank for days outside the month."""
        if not self.in_month:
            return BLANK_LABEL
        return f"{self.day.day:02d}"


@dataclass(frozen=True)
class WeekGrid:
    """Weekday header plus week rows of exactly seven cells each."""

    year: int
    month: int
    rows: Tuple[Tuple[GridCell, ...], ...]
    header: Tuple[str, ...] = WEEKDAY_LABELS

    def __iter__(self) -> Iterator[Tuple[GridCell, ...]]:
        return iter(self.rows)

    def __len__(self) -> int:
        return len(self.rows)

    def cells(self) -> Iterator[GridCell]:
        for row in self.rows:
            yield from row

    def find(self, day: date) -> Optional[GridCell]:
        """Return the cell for ``day`` if it is on the grid."""
        target = normalize(day)
        for cell in self.cells():
            if cell.day == target:
                return cell
        return None

    def row_index(self, day: date) -> Optional[int]:
        target = normalize(day)
        for index, row in enumerate(self.rows):
            if any(cell.day == target for cell in row):
                return index
        return None


def build_grid(
    time: date,
    selected: bool = False,
    focus: Focus = Focus.CALENDAR,
    bounds: Optional[RangeBound] = None,
) -> WeekGrid:
    """Build the week grid for the month containing ``time``.

    Args:
        time: Reference date; its month and year are displayed
        selected: Whether ``time`` is a committed selection
        focus: Current picker focus, decides selected vs focused highlighting
        bounds: Optional range; days outside it are marked disabled

    Returns:
        WeekGrid with 4 to 6 rows of 7 cells
    """
    reference = normalize(time)
    end = trailing_sunday(reference)
    highlight = selected and focus == Focus.CALENDAR
    mark = selected and focus != Focus.CALENDAR

    rows = []
    row = []
    day = leading_sunday(reference)
    while day < end:
        is_reference = day == reference
        row.append(
            GridCell(
                day=day,
                in_month=day.month == reference.month,
                is_selected=mark and is_reference,
                is_focused=highlight and is_reference,
                is_disabled=not in_bounds(day, bounds),
            )
        )
        if day.weekday() == SATURDAY:
            rows.append(tuple(row))
            row = []
        day += timedelta(days=1)

    return WeekGrid(year=reference.year, month=reference.month, rows=tuple(rows))
