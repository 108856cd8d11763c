# ntrade

A small toolkit for drawing full-screen text interfaces on a fixed
53 × 30 character grid, together with a thin console layer for writing
screens to a terminal and reading arrow, Enter and Escape keys.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Widgets

Widgets render into a canvas, a list of rows of single characters. Every
widget has `min_size()`, returning `(width, height)`, and
`render(width, height)`, returning a canvas. Builder-style setters return
the widget itself, so calls can be chained.

```python
from ntrade.content import text
from ntrade.layout import border
from ntrade.rendering import canvas_to_string

widget = border(text("Hi"))
print(canvas_to_string(widget.render(6, 3)))
```

prints

```
+----+
|Hi  |
+----+
```

### `ntrade.content`

- `text(s)`: a string; `.max_width(n)` word-wraps it at spaces.
- `image(data)`: multi-line ASCII art drawn from the top-left corner.
- `divider(ch)`: a horizontal line of `ch`; `.vertical()` makes it run
  top to bottom in the middle column.
- `progress_bar(fraction, foreground, tip, background)`: a bar filled in
  proportion to `fraction` (clamped to 0..1), ending in `tip` while not
  complete.
- `flexible(flex, child)`: gives `child` a share of spare space inside a
  row or column.
- `builder(factory)`: calls `factory()` for a fresh widget each time it is
  measured or drawn.

### `ntrade.layout`

- `align(child)`: centred by default; `.horizontal(AlignHorizontal...)`
  and `.vertical(AlignVertical...)` choose `START`, `CENTER`, `END` or
  `STRETCH`.
- `border(child)`: `|` and `-` sides with `+` corners; `.borders(Borders(...))`
  and `.corners(Corners(...))` change them, and a side set to `None` is
  left out.
- `padding(child)`: `.top`, `.left`, `.right`, `.bottom`, `.all`,
  `.horizontal` and `.vertical` set the space around the child.
- `sizedbox(child)`: `.width(w)` and `.height(h)` force its size.
- `column(children)`, `row(children)`: lay children out vertically or
  horizontally; flexible children share the spare space.
- `stack(children)`: draws children on top of each other.

### `ntrade.button`

`button(label)` is a centred label in a frame; `.selected(True)` draws
its top and bottom with `=` instead of `-`.

### `ntrade.theme`

`CORNERS_ROUND` (`.`, `.`, `` ` ``, `'`), `CORNERS_NONE`, and the colour
codes `COLOR_WHITE`, `COLOR_MAGENTA`, `COLOR_LIGHTMAGENTA`,
`COLOR_YELLOW` and `COLOR_LIGHTYELLOW`.

### `ntrade.rendering`

`create_canvas`, `overlay` (copies the non-space cells of one canvas onto
another, clipped), `canvas_to_string`, and `render_ui(widget)`, which
renders a widget at 53 × 30 and returns it as one string. Cells holding
`WIPE_CHAR` overwrite what lies beneath them but print as spaces.

## Console and keys

`ntrade.console.Console(stream=None, key_source=None)` writes to
`stream` (standard output by default) and has `init()` (asks the terminal
to resize to 53 × 30), `print`, `clear_screen` (clears the screen and the
scrollback), `set_color` (a 256-colour palette index), `flush`,
`dispose`, `read_key` and `sleep(ms)`.

`ntrade.keys` defines `InputKey` (`UP`, `DOWN`, `LEFT`, `RIGHT`, `ENTER`,
`ESCAPE`), `parse_key`, which maps a keystroke or string to an `InputKey`
or `None`, and `wait_input()`, which discards pending input and blocks
until a recognised key is pressed. `Console` uses `wait_input` unless
given another `key_source`.

## What this package does not do

The package has no command to run, no screens or navigation between
them, and does not read, write or modify game save files. It provides
only the widgets, rendering helpers, console and key input described
above.