"""The model list and model statistics panels, with list navigation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace
from datetime import datetime

from chatpane.canvas import (
    BORDER,
    HEADER_TEXT,
    HIGHLIGHT,
    MENU_NORMAL,
    Canvas,
    Style,
    clear_area,
    draw_border,
    render_text,
)
from chatpane.layout import Rect

_GIB = 1024 * 1024 * 1024

MODEL_SELECTED = Style("model-selected")
MODEL_RUNNING = Style("model-running")

_TOOL_ICONS = {"excellent": "+", "good": "~", "basic": "-"}

ToolSupport = Callable[[str], "str | None"]


@dataclass(frozen=True)
class ModelInfo:
    """An installed model as shown in the list."""

    name: str
    size: int = 0
    parameter_size: str = ""
    quantization_level: str = ""
    modified_at: datetime = field(default_factory=datetime.now)
    is_running: bool = False


@dataclass(frozen=True)
class RunningModelInfo:
    """A model currently loaded by the server."""

    name: str
    size: int = 0
    size_vram: int = 0
    until_time: datetime | None = None


@dataclass(frozen=True)
class ModelStats:
    """Totals over the installed models."""

    total_models: int = 0
    running_models: tuple[RunningModelInfo, ...] = ()
    total_size: int = 0


@dataclass(frozen=True)
class ModelListDisplay:
    """Immutable state of the model list: entries, selection and scroll."""

    width: int
    height: int
    models: tuple[ModelInfo, ...] = ()
    selected: int = 0
    scroll: int = 0

    def with_models(self, models: Sequence[ModelInfo]) -> ModelListDisplay:
        """Return a display holding ``models``."""
        return replace(self, models=tuple(models))

    def with_selection(self, selected: int) -> ModelListDisplay:
        """Return a display with the selection clamped to the list."""
        selected = max(selected, 0)
        if self.models and selected >= len(self.models):
            selected = len(self.models) - 1
        return replace(self, selected=selected)

    def with_scroll(self, scroll: int) -> ModelListDisplay:
        """Return a display scrolled to ``scroll`` (never negative)."""
        return replace(self, scroll=max(scroll, 0))

    def with_size(self, width: int, height: int) -> ModelListDisplay:
        """Return a display with the given size."""
        return replace(self, width=width, height=height)

    def select_next(self) -> ModelListDisplay:
        """Move the selection down, wrapping to the top."""
        if not self.models:
            return self
        selected = self.selected + 1
        if selected >= len(self.models):
            selected = 0
        return self.with_selection(selected).ensure_selection_visible()

    def select_previous(self) -> ModelListDisplay:
        """Move the selection up, wrapping to the bottom."""
        if not self.models:
            return self
        selected = self.selected - 1
        if selected < 0:
            selected = len(self.models) - 1
        return self.with_selection(selected).ensure_selection_visible()

    def select_first(self) -> ModelListDisplay:
        """Select the first model and scroll to the top."""
        if not self.models:
            return self
        return self.with_selection(0).with_scroll(0)

    def select_last(self) -> ModelListDisplay:
        """Select the last model and scroll it into view."""
        if not self.models:
            return self
        return self.with_selection(len(self.models) - 1).ensure_selection_visible()

    def page_up(self) -> ModelListDisplay:
        """Scroll and move the selection up by one page."""
        display = self.with_scroll(max(0, self.scroll - self.height))
        selected = self.selected - self.height
        if selected < display.scroll:
            selected = display.scroll
        return display.with_selection(max(selected, 0))

    def page_down(self) -> ModelListDisplay:
        """Scroll and move the selection down by one page."""
        max_scroll = max(0, len(self.models) - self.height)
        display = self.with_scroll(min(self.scroll + self.height, max_scroll))
        selected = min(self.selected + self.height, len(self.models) - 1)
        return display.with_selection(selected)

    def ensure_selection_visible(self) -> ModelListDisplay:
        """Scroll so that the selected row lies within the visible height."""
        if self.selected < self.scroll:
            return self.with_scroll(self.selected)
        if self.selected >= self.scroll + self.height:
            return self.with_scroll(max(0, self.selected - self.height + 1))
        return self

    def selected_model(self) -> ModelInfo | None:
        """Return the selected model, or None if the selection is out of range."""
        if 0 <= self.selected < len(self.models):
            return self.models[self.selected]
        return None


@dataclass(frozen=True)
class ModelStatsDisplay:
    """Immutable state of the statistics panel."""

    width: int
    height: int
    stats: ModelStats = field(default_factory=ModelStats)

    def with_stats(self, stats: ModelStats) -> ModelStatsDisplay:
        """Return a display showing ``stats``."""
        return replace(self, stats=stats)

    def with_size(self, width: int, height: int) -> ModelStatsDisplay:
        """Return a display with the given size."""
        return replace(self, width=width, height=height)


def truncate_string(s: str, max_len: int) -> str:
    """Cut ``s`` to ``max_len`` characters, ending in ``...`` when there is room."""
    if max_len < 0:
        raise ValueError(f"max_len must not be negative, got {max_len}")
    if len(s) <= max_len:
        return s
    if max_len <= 3:
        return s[:max_len]
    return s[: max_len - 3] + "..."


def _tool_icon(name: str, tool_support: ToolSupport | None) -> str:
    if tool_support is None:
        return " "
    level = tool_support(name)
    if level is None:
        return " "
    return _TOOL_ICONS.get(level, " ")


def render_model_list(
    canvas: Canvas,
    display: ModelListDisplay,
    area: Rect,
    current_model: str = "",
    tool_support: ToolSupport | None = None,
) -> None:
    """Draw the boxed model table into ``area``.

    ``tool_support`` maps a model name to ``"excellent"``, ``"good"``, ``"basic"``
    or None; the level is shown as a marker next to the running-state marker.
    """
    if area.width <= 0 or area.height <= 0:
        return

    clear_area(canvas, area)
    draw_border(canvas, area, BORDER)

    content = Rect(area.x + 2, area.y + 1, area.width - 4, area.height - 2)
    limit = max(0, content.width)

    header = f"{'NAME':<35} {'SIZE':>10} {'PARAMETERS':>12} {'QUANTIZATION':>15}"
    render_text(canvas, content.x, content.y, header[:limit], HEADER_TEXT)

    start_y = content.y + 2
    visible_height = content.height - 2
    for row, model in enumerate(display.models[display.scroll :]):
        if row >= visible_height:
            break
        index = display.scroll + row

        if index == display.selected:
            style = MODEL_SELECTED
        elif model.name == current_model:
            style = HIGHLIGHT
        else:
            style = MENU_NORMAL

        status_icon = "*" if model.is_running else "o"
        name = status_icon + _tool_icon(model.name, tool_support) + " " + truncate_string(model.name, 31)
        line = (
            f"{name:<35} {model.size / _GIB:8.1f}GB "
            f"{model.parameter_size:>12} {model.quantization_level:>15}"
        )[:limit]

        y = start_y + row
        for x in range(content.width):
            char = line[x] if x < len(line) else " "
            canvas.set_content(content.x + x, y, char, style)


def render_model_stats(canvas: Canvas, display: ModelStatsDisplay, area: Rect) -> None:
    """Draw model totals and the running models into ``area``."""
    if area.width <= 0 or area.height <= 0:
        return

    clear_area(canvas, area)
    stats = display.stats

    render_text(canvas, area.x, area.y, "System Statistics", HIGHLIGHT)
    summary = (
        f"Total Models: {stats.total_models}  |  "
        f"Total Size: {stats.total_size / _GIB:.1f} GB"
    )
    render_text(canvas, area.x, area.y + 2, summary, MENU_NORMAL)

    if not stats.running_models:
        render_text(canvas, area.x, area.y + 4, "No models currently running", MENU_NORMAL)
        return

    render_text(canvas, area.x, area.y + 4, "Currently Running:", HIGHLIGHT)
    for i, running in enumerate(stats.running_models):
        y = area.y + 5 + i
        if y >= area.bottom():
            break
        text = (
            f"  {running.name} ({running.size / _GIB:.1f}GB, "
            f"VRAM: {running.size_vram / _GIB:.1f}GB)"
        )
        render_text(canvas, area.x, y, text, MODEL_RUNNING)