"""Display components for rendering the date picker."""

from .console_renderer import ConsoleRenderer, render
from .styles import Styles

__all__ = ["ConsoleRenderer", "Styles", "render"]
