import pytest

from chatpane.canvas import DIM_TEXT, TOKEN_COUNT, USER_TEXT, Canvas
from chatpane.layout import Rect
from chatpane.spinner import SpinnerComponent
from chatpane.widgets import (
    CURSOR,
    READY_INDICATOR,
    render_input,
    render_status,
    render_tokens_only,
    render_tokens_with_spinner,
)


def test_input_draws_rounded_box():
    canvas = Canvas(20, 3)
    render_input(canvas, "hello", 5, Rect(0, 0, 20, 3))
    assert canvas.row_text(0)[0] == "╭"
    assert canvas.row_text(0)[-1] == "╮"
    assert canvas.row_text(2)[0] == "╰"
    assert canvas.row_text(2)[-1] == "╯"
    assert canvas.row_text(1)[0] == "│"
    assert canvas.row_text(1)[-1] == "│"


def test_input_shows_prompt_text_and_cursor_at_end():
    canvas = Canvas(20, 3)
    render_input(canvas, "hello", 5, Rect(0, 0, 20, 3))
    assert canvas.get_content(1, 1) == (">", USER_TEXT)
    assert canvas.row_text(1)[3:8] == "hello"
    assert canvas.get_content(8, 1) == (" ", CURSOR)
    assert CURSOR.reverse


def test_input_cursor_at_start_inverts_first_character():
    canvas = Canvas(20, 3)
    render_input(canvas, "hello", 0, Rect(0, 0, 20, 3))
    assert canvas.get_content(3, 1) == ("h", CURSOR)
    assert canvas.get_content(4, 1) == ("e", USER_TEXT)


def test_input_cursor_is_clamped_to_content():
    canvas = Canvas(20, 3)
    render_input(canvas, "abc", 99, Rect(0, 0, 20, 3))
    assert canvas.get_content(3 + len("abc"), 1) == (" ", CURSOR)


def test_input_spinner_replaces_prompt():
    spinner = SpinnerComponent().with_visibility(True)
    canvas = Canvas(20, 3)
    render_input(canvas, "hi", 2, Rect(0, 0, 20, 3), spinner)
    assert canvas.get_content(1, 1) == (spinner.current_frame(), DIM_TEXT)


def test_input_long_text_scrolls_to_keep_cursor_visible():
    content = "abcdefghijklmnopqrstuvwxyz"
    width = 10
    canvas = Canvas(width, 3)
    render_input(canvas, content, len(content), Rect(0, 0, width, 3))
    shown = canvas.row_text(1)[3 : width - 1].rstrip()
    assert content.endswith(shown)
    assert len(shown) < width - 4
    cursor_cells = [x for x in range(width) if canvas.get_content(x, 1)[1] == CURSOR]
    assert len(cursor_cells) == 1
    assert cursor_cells[0] < width - 1


def test_input_too_short_area_draws_nothing():
    canvas = Canvas(20, 1)
    render_input(canvas, "hello", 0, Rect(0, 0, 20, 1))
    assert canvas.row_text(0) == " " * 20


def test_input_empty_area_leaves_canvas_alone():
    canvas = Canvas(5, 3)
    canvas.set_content(0, 0, "x")
    render_input(canvas, "hello", 0, Rect(0, 0, 0, 3))
    assert canvas.get_content(0, 0)[0] == "x"


def test_status_ready_shows_filled_marker_and_model():
    canvas = Canvas(20, 1)
    render_status(canvas, Rect(0, 0, 20, 1), "Ready", "llama3")
    row = canvas.row_text(0)
    assert row.endswith("● llama3")
    marker_x = row.index("●")
    assert canvas.get_content(marker_x, 0) == ("●", READY_INDICATOR)


def test_status_busy_shows_hollow_marker():
    canvas = Canvas(20, 1)
    render_status(canvas, Rect(0, 0, 20, 1), "Sending...", "llama3")
    row = canvas.row_text(0)
    assert row.endswith("○ llama3")
    assert canvas.get_content(row.index("○"), 0) == ("○", DIM_TEXT)


def test_status_appends_total_tokens():
    canvas = Canvas(30, 1)
    render_status(canvas, Rect(0, 0, 30, 1), "Ready", "llama3", 10, 5)
    assert canvas.row_text(0).endswith("● llama3 15")


def test_status_truncates_from_the_left():
    model = "abcdefghijklmnop"
    canvas = Canvas(10, 1)
    render_status(canvas, Rect(0, 0, 10, 1), "Busy", model)
    row = canvas.row_text(0)
    assert row.startswith("○ ...")
    assert row.endswith(model[-3:])
    assert len(row) == 10


@pytest.mark.parametrize("width", [1, 3, 5])
def test_status_tiny_area_never_fails(width):
    canvas = Canvas(width, 1)
    render_status(canvas, Rect(0, 0, width, 1), "Ready", "a-rather-long-model-name")
    assert canvas.row_text(0)[0] == "●"


def test_tokens_only_right_aligned():
    canvas = Canvas(30, 1)
    render_tokens_only(canvas, Rect(0, 0, 30, 1), 12, 34)
    assert canvas.row_text(0).endswith("Tokens: 12/34")
    assert canvas.get_content(29, 0) == ("4", TOKEN_COUNT)


def test_tokens_only_truncated_in_narrow_area():
    canvas = Canvas(5, 1)
    render_tokens_only(canvas, Rect(0, 0, 5, 1), 12, 34)
    assert canvas.row_text(0) == "Tokens: 12/34"[:5]


def test_tokens_with_spinner_shows_total():
    canvas = Canvas(10, 1)
    render_tokens_with_spinner(canvas, Rect(0, 0, 10, 1), 12, 34)
    assert canvas.row_text(0).endswith("46")
    assert canvas.get_content(9, 0) == ("6", DIM_TEXT)


def test_tokens_with_spinner_truncated():
    canvas = Canvas(2, 1)
    render_tokens_with_spinner(canvas, Rect(0, 0, 2, 1), 100, 0)
    assert canvas.row_text(0) == "100"[:2]


def test_tokens_zero_height_is_noop():
    canvas = Canvas(5, 1)
    canvas.set_content(4, 0, "x")
    render_tokens_only(canvas, Rect(0, 0, 5, 0), 1, 2)
    render_tokens_with_spinner(canvas, Rect(0, 0, 5, 0), 1, 2)
    assert canvas.get_content(4, 0)[0] == "x"