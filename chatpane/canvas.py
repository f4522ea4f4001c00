"""A cell grid that widgets draw onto, and the basic drawing helpers."""

from __future__ import annotations

from dataclasses import dataclass

from chatpane.layout import Rect


@dataclass(frozen=True)
class Style:
    """How a cell is drawn: a named role plus text attributes."""

    name: str = "default"
    bold: bool = False
    italic: bool = False
    reverse: bool = False


DEFAULT_STYLE = Style()
DIM_TEXT = Style("dim")
MENU_NORMAL = Style("menu-normal")
MENU_SELECTED = Style("menu-selected")
HIGHLIGHT = Style("highlight")
BORDER = Style("border")
BORDER_ERROR = Style("border-error")
HEADER_TEXT = Style("header")
USER_TEXT = Style("user")
ASSISTANT_TEXT = Style("assistant")
SYSTEM_TEXT = Style("system")
THINKING_TEXT = Style("thinking", italic=True)
TOKEN_COUNT = Style("token-count")
MODEL_CURRENT = Style("model-current")

_BLANK = (" ", DEFAULT_STYLE)


class Canvas:
    """A fixed-size grid of cells; writes outside the grid are ignored."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"canvas size must not be negative: {width}x{height}")
        self.width = width
        self.height = height
        self._cells = [[_BLANK] * width for _ in range(height)]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def set_content(self, x: int, y: int, char: str, style: Style = DEFAULT_STYLE) -> None:
        """Put ``char`` with ``style`` at (x, y)."""
        if self._inside(x, y):
            self._cells[y][x] = (char, style)

    def get_content(self, x: int, y: int) -> tuple[str, Style]:
        """Return the character and style at (x, y); blank outside the grid."""
        if self._inside(x, y):
            return self._cells[y][x]
        return _BLANK

    def row_text(self, y: int) -> str:
        """Return the characters of row ``y`` as a string."""
        if not 0 <= y < self.height:
            raise IndexError(f"row {y} is outside the canvas")
        return "".join(char for char, _ in self._cells[y])


def clear_area(canvas: Canvas, area: Rect) -> None:
    """Fill ``area`` with blanks in the default style."""
    for y in range(area.y, area.bottom()):
        for x in range(area.x, area.right()):
            canvas.set_content(x, y, " ", DEFAULT_STYLE)


def render_text(canvas: Canvas, x: int, y: int, text: str, style: Style) -> None:
    """Write ``text`` starting at (x, y)."""
    for offset, char in enumerate(text):
        canvas.set_content(x + offset, y, char, style)


def render_text_with_limit(
    canvas: Canvas, x: int, y: int, max_width: int, text: str, style: Style
) -> None:
    """Write at most ``max_width`` characters of ``text`` starting at (x, y)."""
    render_text(canvas, x, y, text[: max(0, max_width)], style)


def draw_border(canvas: Canvas, area: Rect, style: Style) -> None:
    """Draw a single-line box around the edge of ``area``."""
    left, top = area.x, area.y
    right, bottom = area.right() - 1, area.bottom() - 1

    for x in range(left, area.right()):
        canvas.set_content(x, top, "─", style)
        canvas.set_content(x, bottom, "─", style)
    for y in range(top, area.bottom()):
        canvas.set_content(left, y, "│", style)
        canvas.set_content(right, y, "│", style)

    canvas.set_content(left, top, "┌", style)
    canvas.set_content(right, top, "┐", style)
    canvas.set_content(left, bottom, "└", style)
    canvas.set_content(right, bottom, "┘", style)