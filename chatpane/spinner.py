"""An animated activity indicator."""

from __future__ import annotations

import time
from dataclasses import dataclass, field, replace

from chatpane.canvas import DIM_TEXT, Style

_FRAMES = ("░", "▒", "▓", "█")


@dataclass(frozen=True)
class SpinnerComponent:
    """Immutable spinner state; each change returns a new spinner."""

    is_visible: bool = False
    frame: int = 0
    start_time: float = field(default_factory=time.time, compare=False)
    text: str = ""
    style: Style = DIM_TEXT

    def with_visibility(self, visible: bool) -> SpinnerComponent:
        """Show or hide; becoming visible restarts the animation."""
        if visible and not self.is_visible:
            return replace(self, is_visible=True, frame=0, start_time=time.time())
        return replace(self, is_visible=visible)

    def with_text(self, text: str) -> SpinnerComponent:
        """Return a spinner with the given label text."""
        return replace(self, text=text)

    def next_frame(self) -> SpinnerComponent:
        """Advance one animation frame; a hidden spinner is unchanged."""
        if not self.is_visible:
            return self
        return replace(self, frame=(self.frame + 1) % len(_FRAMES))

    def current_frame(self) -> str:
        """Return the frame character, or an empty string when hidden."""
        if not self.is_visible:
            return ""
        return _FRAMES[self.frame]

    def display_text(self) -> str:
        """Return what the spinner shows: just its frame character."""
        return self.current_frame()


def spinner_frame_count() -> int:
    """Return the number of animation frames."""
    return len(_FRAMES)


def spinner_frame(frame: int) -> str:
    """Return the frame character at ``frame``, or an empty string if out of range."""
    if 0 <= frame < len(_FRAMES):
        return _FRAMES[frame]
    return ""