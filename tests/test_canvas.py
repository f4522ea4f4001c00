import pytest

from chatpane.canvas import (
    DEFAULT_STYLE,
    DIM_TEXT,
    Canvas,
    Style,
    clear_area,
    draw_border,
    render_text,
    render_text_with_limit,
)
from chatpane.layout import Rect


def test_new_canvas_is_blank():
    canvas = Canvas(6, 2)
    assert canvas.row_text(0) == " " * 6
    assert canvas.get_content(3, 1) == (" ", DEFAULT_STYLE)


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Canvas(-1, 3)


def test_set_get_round_trip():
    canvas = Canvas(5, 5)
    style = Style("custom", bold=True)
    canvas.set_content(2, 3, "x", style)
    assert canvas.get_content(2, 3) == ("x", style)


def test_writes_outside_are_ignored():
    canvas = Canvas(3, 3)
    canvas.set_content(-1, 0, "x")
    canvas.set_content(3, 0, "x")
    canvas.set_content(0, 5, "x")
    assert all(canvas.row_text(y) == "   " for y in range(3))


def test_row_text_out_of_range():
    with pytest.raises(IndexError):
        Canvas(3, 3).row_text(3)


def test_render_text():
    canvas = Canvas(20, 2)
    render_text(canvas, 4, 1, "hello", DIM_TEXT)
    assert canvas.row_text(1)[4:9] == "hello"
    assert canvas.get_content(4, 1)[1] == DIM_TEXT


def test_render_text_with_limit_truncates():
    canvas = Canvas(20, 1)
    render_text_with_limit(canvas, 0, 0, 3, "abcdef", DIM_TEXT)
    assert canvas.row_text(0).rstrip() == "abc"


def test_render_text_with_limit_negative_width():
    canvas = Canvas(5, 1)
    render_text_with_limit(canvas, 0, 0, -2, "abc", DIM_TEXT)
    assert canvas.row_text(0) == "     "


def test_clear_area_only_clears_area():
    canvas = Canvas(4, 2)
    render_text(canvas, 0, 0, "abcd", DIM_TEXT)
    render_text(canvas, 0, 1, "efgh", DIM_TEXT)
    clear_area(canvas, Rect(1, 0, 2, 1))
    assert canvas.row_text(0) == "a  d"
    assert canvas.row_text(1) == "efgh"


def test_draw_border_corners_and_edges():
    canvas = Canvas(6, 4)
    draw_border(canvas, Rect(0, 0, 6, 4), DIM_TEXT)
    assert canvas.get_content(0, 0)[0] == "┌"
    assert canvas.get_content(5, 0)[0] == "┐"
    assert canvas.get_content(0, 3)[0] == "└"
    assert canvas.get_content(5, 3)[0] == "┘"
    assert canvas.row_text(0)[1:5] == "─" * 4
    assert canvas.get_content(0, 1)[0] == "│"
    assert canvas.get_content(2, 1)[0] == " "