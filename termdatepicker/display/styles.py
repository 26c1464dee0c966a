"""ANSI styles for the console renderer."""

from pydantic import BaseModel, Field

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"


def fg256(color: int) -> str:
    """Return the SGR sequence for a 256-colour foreground."""
    return f"\033[38;5;{color}m"


class Styles(BaseModel):
    """SGR sequences applied to each part of the picker.

    Defaults: bold headers, grey day numbers, bold selected day, pink bold
    focused day and month/year header, dim out-of-range days and red
    rejection messages. ``Styles.plain()`` disables every escape sequence.
    """

    header_text: str = Field(default=BOLD, description="Weekday labels and unfocused title")
    text: str = Field(default=fg256(247), description="Regular day numbers")
    selected_text: str = Field(default=BOLD, description="Selected day while the grid is unfocused")
    focused_text: str = Field(default=fg256(212) + BOLD, description="Focused day or title field")
    disabled_text: str = Field(default=DIM, description="Days outside the allowed range")
    error_text: str = Field(default=fg256(203), description="Rejection messages")
    cell_padding: int = Field(default=1, ge=0, le=4, description="Spaces on each side of a cell")
    row_spacing: int = Field(default=0, ge=0, le=2, description="Blank lines between week rows")

    model_config = {"frozen": True}

    @classmethod
    def plain(cls, cell_padding: int = 1, row_spacing: int = 0) -> "Styles":
        """Styles without any escape sequences."""
        return cls(
            header_text="",
            text="",
            selected_text="",
            focused_text="",
            disabled_text="",
            error_text="",
            cell_padding=cell_padding,
            row_spacing=row_spacing,
        )

    @staticmethod
    def paint(text: str, sequence: str) -> str:
        """Wrap ``text`` in ``sequence`` and a reset, or return it unchanged."""
        if not sequence:
            return text
        return f"{sequence}{text}{RESET}"
