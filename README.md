# chatpane

Building blocks for a terminal chat client with a model-management screen.
Everything draws onto an in-memory `Canvas`, a grid of styled cells, so the
drawing logic can be tested without a terminal.

## Install

```
pip install .
pip install ".[test]"   # with the test dependencies
```

## What is inside

- `chatpane.layout`: `Rect` (with `right()`, `bottom()`, `contains()` and
  `intersects()`), `Layout.calculate_areas()`, which splits the screen into
  message, alert, input and status areas, `wrap_text()`, which breaks at
  spaces and newlines and splits words that do not fit, and
  `calculate_visible_lines()`.
- `chatpane.canvas`: `Canvas` with `set_content()`, `get_content()` and
  `row_text()`; writes outside the grid are ignored. Also `Style`, a set of
  named style constants, and the helpers `clear_area()`, `render_text()`,
  `render_text_with_limit()` and `draw_border()`.
- `chatpane.spinner`: `SpinnerComponent`, an immutable spinner cycling
  through `░ ▒ ▓ █`, plus `spinner_frame_count()` and `spinner_frame()`.
- `chatpane.text_utils`: `parse_thinking_block()` splits `<think>` /
  `<thinking>` blocks from a reply into a `ParsedContent`, and
  `truncate_thinking_block()` wraps and shortens a thinking block, ending it
  with `...` when lines were dropped.
- `chatpane.model_components`: `ModelInfo`, `RunningModelInfo`,
  `ModelStats`, `ModelListDisplay` (immutable list state with selection,
  scrolling, paging and wrap-around navigation) and `ModelStatsDisplay`,
  drawn by `render_model_list()` and `render_model_stats()`;
  `truncate_string()` shortens names. `render_model_list()` takes an
  optional `tool_support` callable mapping a model name to `"excellent"`,
  `"good"`, `"basic"` or `None`.
- `chatpane.widgets`: `render_input()` (boxed input line with a `>` prompt
  or the spinner, and a scrolling cursor), `render_status()`,
  `render_tokens_only()` and `render_tokens_with_spinner()`.
- `chatpane.model_details`: `render_model_info()`, `render_help_text()` and
  `render_model_details()` for the model screen.

## Example

```python
from chatpane.canvas import Canvas
from chatpane.layout import Layout, Rect, wrap_text
from chatpane.widgets import render_status

print(wrap_text("Hello world this is a test", 10))
# ['Hello', 'world', 'this is a', 'test']

message_area, alert_area, input_area, status_area = Layout(80, 24).calculate_areas()

canvas = Canvas(20, 1)
render_status(canvas, Rect(0, 0, 20, 1), "Ready", "llama3.2:3b", 10, 5)
print(repr(canvas.row_text(0)))
# '    ● llama3.2:3b 15'
```

## What it does not do

- It does not draw to a real terminal or read keys; copying a `Canvas` to
  the screen is left to you.
- It has no conversation pane renderer, no command-palette menu, no view
  switching and no event types: it offers the pieces those are built from.
- It does not talk to a model server: listing, pulling, deleting and
  running models is up to the caller, which hands the results to the model
  displays.

## Running the tests

```
pytest
```