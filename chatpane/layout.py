"""Screen geometry: rectangles, the chat layout and text wrapping."""

from __future__ import annotations

from dataclasses import dataclass

_BREAK_CHARS = (" ", "\n")


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle of terminal cells."""

    x: int
    y: int
    width: int
    height: int

    def right(self) -> int:
        """Return the first column to the right of the rectangle."""
        return self.x + self.width

    def bottom(self) -> int:
        """Return the first row below the rectangle."""
        return self.y + self.height

    def contains(self, x: int, y: int) -> bool:
        """Return whether the cell at (x, y) lies inside the rectangle."""
        return self.x <= x < self.right() and self.y <= y < self.bottom()

    def intersects(self, other: Rect) -> bool:
        """Return whether this rectangle overlaps ``other``."""
        return (
            self.x < other.right()
            and self.right() > other.x
            and self.y < other.bottom()
            and self.bottom() > other.y
        )


@dataclass(frozen=True)
class Layout:
    """Splits the screen into message, alert, input and status areas."""

    screen_width: int
    screen_height: int

    def calculate_areas(self) -> tuple[Rect, Rect, Rect, Rect]:
        """Return the (message, alert, input, status) areas."""
        status_height = 1
        input_height = 3
        alert_height = 1
        alert_bottom_padding = 1
        message_height = max(
            1,
            self.screen_height
            - status_height
            - input_height
            - alert_height
            - alert_bottom_padding,
        )

        padding = 2
        available_width = self.screen_width - 2 * padding
        if available_width < 1:
            available_width = self.screen_width
            padding = 0

        input_y = message_height + alert_height + alert_bottom_padding
        message_area = Rect(padding, 0, available_width, message_height)
        alert_area = Rect(0, message_height, self.screen_width, alert_height)
        input_area = Rect(0, input_y, self.screen_width, input_height)
        status_area = Rect(0, input_y + input_height, self.screen_width, status_height)
        return message_area, alert_area, input_area, status_area


def wrap_text(text: str, width: int) -> list[str]:
    """Wrap ``text`` into lines of at most ``width`` characters.

    Lines break at the last space or newline within the width; a word that
    does not fit is split hard.
    """
    if width <= 0 or not text:
        return []
    if len(text) <= width:
        return [text]

    lines: list[str] = []
    rest = text
    while rest:
        if len(rest) <= width:
            lines.append(rest)
            break

        window = rest[:width]
        break_pos = max(window.rfind(" "), window.rfind("\n"))
        if break_pos <= 0:
            break_pos = width

        lines.append(rest[:break_pos])
        rest = rest[break_pos:].lstrip(" \n")
    return lines


def calculate_visible_lines(
    lines: list[str], height: int, scroll: int
) -> tuple[list[str], int]:
    """Return the lines visible at ``scroll`` within ``height`` rows, and the first index."""
    if height <= 0 or not lines:
        return [], 0

    start = max(0, min(scroll, len(lines) - 1))
    return lines[start : start + height], start