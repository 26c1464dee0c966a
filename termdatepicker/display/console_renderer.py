"""Console renderer turning picker state into a text block."""

import calendar
import logging
from typing import TYPE_CHECKING, List, Optional

from ..core.focus import Focus
from ..core.grid import GridCell, WeekGrid, build_grid
from ..core.range_policy import RangeRejection
from .styles import Styles

if TYPE_CHECKING:
    from ..ui.navigation import PickerState

logger = logging.getLogger(__name__)

CELL_WIDTH = 2


class ConsoleRenderer:
    """Renders the month view of a date picker for a terminal."""

    def __init__(self, styles: Optional[Styles] = None) -> None:
        """Initialize console renderer.

        Args:
            styles: Styles to paint with, defaults to ``Styles()``
        """
        self.styles = styles or Styles()
        pad = self.styles.cell_padding
        self.width = 7 * (CELL_WIDTH + 2 * pad)

    def render(self, state: "PickerState") -> str:
        """Render title, weekday header and week rows for ``state``."""
        grid = build_grid(state.time, state.selected, state.focus, state.bounds)
        lines = [self.render_title(grid, state.focus)]
        lines.extend(self.render_grid(grid))
        return "\n".join(lines)

    def render_title(self, grid: WeekGrid, focus: Focus) -> str:
        """Render the centred "Month Year" title with the focused field highlighted."""
        month_name = calendar.month_name[grid.month]
        year = str(grid.year)
        visible = len(month_name) + 1 + len(year)
        indent = " " * max((self.width - visible) // 2, 0)

        month_style = self.styles.focused_text if focus == Focus.HEADER_MONTH else self.styles.header_text
        year_style = self.styles.focused_text if focus == Focus.HEADER_YEAR else self.styles.header_text
        return f"{indent}{Styles.paint(month_name, month_style)} {Styles.paint(year, year_style)}"

    def render_grid(self, grid: WeekGrid) -> List[str]:
        """Render the weekday header followed by one line per week."""
        header = "".join(self._pad(Styles.paint(label, self.styles.header_text)) for label in grid.header)
        lines = [header]
        spacer = [""] * self.styles.row_spacing
        for row in grid.rows:
            lines.extend(spacer)
            lines.append("".join(self.render_cell(cell) for cell in row))
        return lines

    def render_cell(self, cell: GridCell) -> str:
        if cell.is_focused:
            style = self.styles.focused_text
        elif cell.is_selected:
            style = self.styles.selected_text
        elif cell.is_disabled and cell.in_month:
            style = self.styles.disabled_text
        else:
            style = self.styles.text
        return self._pad(Styles.paint(cell.label, style))

    def render_rejection(self, rejection: RangeRejection) -> str:
        """Render a one-line feedback message for a rejected navigation."""
        return Styles.paint(rejection.message, self.styles.error_text)

    def _pad(self, text: str) -> str:
        pad = " " * self.styles.cell_padding
        return f"{pad}{text}{pad}"


def render(state: "PickerState", styles: Optional[Styles] = None) -> str:
    """Render ``state`` to a text block with the given styles."""
    return ConsoleRenderer(styles).render(state)
