"""The model view's info row, its help line and the full-screen model details panel."""

from __future__ import annotations

from datetime import datetime

from chatpane.canvas import (
    BORDER,
    DIM_TEXT,
    HEADER_TEXT,
    HIGHLIGHT,
    MENU_NORMAL,
    MODEL_CURRENT,
    Canvas,
    Style,
    clear_area,
    draw_border,
    render_text,
)
from chatpane.layout import Rect
from chatpane.model_components import ModelInfo, ModelStats

HELP_TEXT = (
    "[n] new model | [ctrl-d] delete | [d] details | [enter] select | "
    "[r] refresh | [j/k] navigate"
)
BACK_INSTRUCTION = "[ESC] Back to list"

_GIB = 1024 * 1024 * 1024
_VALUE_OFFSET = 15
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _is_empty(area: Rect) -> bool:
    return area.width <= 0 or area.height <= 0


def render_model_info(
    canvas: Canvas, area: Rect, stats: ModelStats, current_model: str = ""
) -> None:
    """Draw the model count and total size on the left and the current model on the right.

    The current model name is only drawn when it leaves at least four columns
    between it and the left text.
    """
    if _is_empty(area):
        return

    clear_area(canvas, area)

    left = f"models: {stats.total_models} | size: {stats.total_size / _GIB:.1f} GB"
    render_text(canvas, area.x, area.y, left[: area.width], DIM_TEXT)

    if not current_model:
        return
    if len(current_model) <= area.width and len(left) + len(current_model) + 4 <= area.width:
        start_x = area.x + area.width - len(current_model)
        render_text(canvas, start_x, area.y, current_model, MODEL_CURRENT)


def render_help_text(canvas: Canvas, area: Rect) -> None:
    """Draw the key help line centred in ``area``; nothing if it does not fit."""
    if _is_empty(area):
        return

    clear_area(canvas, area)
    if len(HELP_TEXT) <= area.width:
        start_x = area.x + (area.width - len(HELP_TEXT)) // 2
        render_text(canvas, start_x, area.y, HELP_TEXT, DIM_TEXT)


def _format_modified(moment: datetime) -> str:
    return moment.strftime(_TIME_FORMAT)


def render_model_details(
    canvas: Canvas, area: Rect, model: ModelInfo, current_model: str = ""
) -> None:
    """Draw a boxed page of details about ``model`` with a back instruction at the bottom."""
    if _is_empty(area):
        return

    clear_area(canvas, area)
    draw_border(canvas, area, BORDER)

    content = Rect(area.x + 2, area.y + 1, area.width - 4, area.height - 2)
    render_text(canvas, content.x, content.y, f"Model Details: {model.name}", HEADER_TEXT)

    is_current = model.name == current_model
    details: list[tuple[str, str, Style]] = [
        ("Name:", model.name, MODEL_CURRENT),
        ("Size:", f"{model.size / _GIB:.2f} GB ({model.size} bytes)", MODEL_CURRENT),
        ("Parameters:", model.parameter_size, MODEL_CURRENT),
        ("Quantization:", model.quantization_level, MODEL_CURRENT),
        ("Status:", "Running" if model.is_running else "Stopped", MODEL_CURRENT),
        (
            "Current Model:",
            "Yes" if is_current else "No",
            HIGHLIGHT if is_current else MODEL_CURRENT,
        ),
        ("Modified:", _format_modified(model.modified_at), MODEL_CURRENT),
    ]

    y = content.y + 2
    limit = content.y + content.height - 2
    value_x = content.x + _VALUE_OFFSET
    for label, value, style in details:
        if y >= limit:
            break
        render_text(canvas, content.x, y, label, MENU_NORMAL)
        if value_x < content.right():
            render_text(canvas, value_x, y, value, style)
        y += 2

    if len(BACK_INSTRUCTION) <= content.width:
        start_x = content.x + (content.width - len(BACK_INSTRUCTION)) // 2
        render_text(canvas, start_x, content.bottom() - 1, BACK_INSTRUCTION, DIM_TEXT)