"""The input box, the status line and the token counters."""

from __future__ import annotations

from dataclasses import replace

from chatpane.canvas import (
    BORDER,
    DIM_TEXT,
    TOKEN_COUNT,
    USER_TEXT,
    Canvas,
    Style,
    clear_area,
    render_text,
)
from chatpane.layout import Rect
from chatpane.spinner import SpinnerComponent

READY_INDICATOR = Style("ready")
CURSOR = replace(USER_TEXT, reverse=True)

_READY = "Ready"
_READY_MARK = "●"
_BUSY_MARK = "○"


def _draw_rounded_box(canvas: Canvas, area: Rect) -> None:
    top, middle, bottom = area.y, area.y + 1, area.y + 2
    left, right = area.x, area.right() - 1
    for x in range(area.x, area.right()):
        canvas.set_content(x, top, "─", BORDER)
        canvas.set_content(x, bottom, "─", BORDER)
    canvas.set_content(left, top, "╭", BORDER)
    canvas.set_content(right, top, "╮", BORDER)
    canvas.set_content(left, bottom, "╰", BORDER)
    canvas.set_content(right, bottom, "╯", BORDER)
    canvas.set_content(left, middle, "│", BORDER)
    canvas.set_content(right, middle, "│", BORDER)


def render_input(
    canvas: Canvas,
    content: str,
    cursor: int,
    area: Rect,
    spinner: SpinnerComponent | None = None,
) -> None:
    """Draw the boxed input line with a ``>`` prompt (or the spinner) and a cursor.

    Text longer than the box scrolls so that the cursor stays visible.
    """
    if area.width <= 0 or area.height <= 0:
        return
    if spinner is None:
        spinner = SpinnerComponent()

    clear_area(canvas, area)
    if area.height >= 3:
        _draw_rounded_box(canvas, area)

    if area.height < 2 or area.width < 5:
        return

    input_y = area.y + 1
    prefix_x = area.x + 1
    input_x = area.x + 3
    input_width = area.width - 4

    if spinner.is_visible:
        render_text(canvas, prefix_x, input_y, spinner.current_frame(), DIM_TEXT)
    else:
        render_text(canvas, prefix_x, input_y, ">", USER_TEXT)

    cursor = min(max(cursor, 0), len(content))

    visible_start = 0
    visible = content
    if len(content) > input_width:
        if cursor >= input_width:
            visible_start = max(0, cursor - input_width + 1)
        visible = content[visible_start : visible_start + input_width]

    render_text(canvas, input_x, input_y, visible, USER_TEXT)

    offset = cursor - visible_start
    if 0 <= offset <= len(visible) and offset < input_width:
        char = visible[offset] if offset < len(visible) else " "
        canvas.set_content(input_x + offset, input_y, char, CURSOR)


def render_status(
    canvas: Canvas,
    area: Rect,
    status: str,
    model: str,
    prompt_tokens: int = 0,
    response_tokens: int = 0,
) -> None:
    """Draw a right-aligned state marker, the model name and the total token count.

    The marker is filled when ``status`` is ``"Ready"``. Text too long for the
    area keeps its end and starts with ``...``.
    """
    if area.width <= 0 or area.height <= 0:
        return

    clear_area(canvas, area)

    if status == _READY:
        mark, mark_style = _READY_MARK, READY_INDICATOR
    else:
        mark, mark_style = _BUSY_MARK, DIM_TEXT

    text = model
    if prompt_tokens > 0 or response_tokens > 0:
        text += f" {prompt_tokens + response_tokens}"

    text_len = len(text) + 2
    start_x = area.x + area.width - text_len
    if start_x < area.x:
        start_x = area.x
        if text_len > area.width:
            keep = max(0, area.width - 5)
            text = "..." + (text[len(text) - keep :] if keep else "")

    canvas.set_content(start_x, area.y, mark, mark_style)
    if text:
        render_text(canvas, start_x + 2, area.y, text, DIM_TEXT)


def _render_right_aligned(canvas: Canvas, area: Rect, text: str, style: Style) -> None:
    clear_area(canvas, area)
    start_x = area.x + area.width - len(text)
    if start_x < area.x:
        start_x = area.x
        text = text[: area.width]
    render_text(canvas, start_x, area.y, text, style)


def render_tokens_only(
    canvas: Canvas, area: Rect, prompt_tokens: int, response_tokens: int
) -> None:
    """Draw ``Tokens: prompt/response`` right-aligned in ``area``."""
    if area.width <= 0 or area.height <= 0:
        return
    _render_right_aligned(
        canvas, area, f"Tokens: {prompt_tokens}/{response_tokens}", TOKEN_COUNT
    )


def render_tokens_with_spinner(
    canvas: Canvas, area: Rect, prompt_tokens: int, response_tokens: int
) -> None:
    """Draw the total token count right-aligned in ``area``."""
    if area.width <= 0 or area.height <= 0:
        return
    _render_right_aligned(canvas, area, str(prompt_tokens + response_tokens), DIM_TEXT)