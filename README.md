# asciipaint

asciipaint is a small interactive paint program for the terminal. It shows a grid of `*` characters. You draw straight lines on it with `-`, `|`, `/` and `\`. A cell where two lines cross becomes `+`.

## Installation

```
pip install .
```

## Running

```
asciipaint            # 10 x 10 canvas
asciipaint 5 8        # 5 rows, 8 columns
```

You can give no size at all, or both a row count and a column count. Any other number of arguments prints `Too many arguments. Closing program.`, and the command exits with status 1.

Row numbers appear down the left edge, with row 0 at the bottom. Column numbers run along the bottom, starting at 0. The canvas is shown again before every prompt.

## Commands

Type these at the `Enter your command:` prompt:

| Command                                 | Effect                                        |
|-----------------------------------------|-----------------------------------------------|
| `h`                                     | show the command list                         |
| `q`                                     | quit (end of input also quits)                |
| `w row_start col_start row_end col_end` | draw a horizontal, vertical or diagonal line  |
| `e row col`                             | set a cell back to `*`                        |
| `r num_rows num_cols`                   | resize the canvas                             |

The numbers are read from fixed places in the command line, at character positions 2, 4, 6 and 8. Because of this, each number should be a single digit written with one space between fields.

For example, `w 0 0 4 4` draws a diagonal `/` from the bottom-left corner up and to the right.

### Drawing errors

- If the two points do not form a horizontal, vertical or 45-degree line, the program prints `This is not a straight line.`
- If a point falls outside the canvas, the program prints a message of the form `point (r, c) is outside the canvas`. In that message, `r` and `c` are the internal grid indices, with `r` counted from the top.

### Erasing

`e row col` erases the cell one column to the right of the column number given.

### Resizing

- Row labels stay in place.
- Growing the canvas adds blank rows on top.
- Shrinking it drops rows from the top.
- Columns are cut, or padded with `*`, on the right.
- A negative size is refused with `The canvas size cannot be negative.`

### Other commands

The letters `a`, `d`, `s` and `l` appear in the help text but do nothing. Any other input prints `Unrecognized command. Type h for help.`

## What it does not do

Adding or deleting single rows and columns (`a`, `d`) is not implemented. Neither is saving or loading a drawing (`s`, `l`). A drawing exists only while the program runs.

## Using it from Python

```python
from asciipaint.canvas import new_canvas
from asciipaint.commands import write_line

canvas = new_canvas(5, 5)
write_line(canvas, "w 0 0 4 4")
print(canvas.render())
```

The package has these modules:

- `asciipaint.canvas` provides:
  - `Canvas`, with `render()`, `shift_rows_down()` and `shift_rows_up()`;
  - `new_canvas(num_rows, num_columns)`;
  - `canvas_size(argv)`.
- `asciipaint.lines` provides:
  - `Line` and `Direction`;
  - `find_direction(text)`, which parses a `w` command and classifies the line;
  - the drawing functions `draw_horizontal`, `draw_vertical` and `draw_diagonal`.
- `asciipaint.commands` provides `help_text()`, `write_line()`, `erase()` and `resize()`.
  - `write_line` and `resize` raise `ValueError` on bad input.
  - Points outside the grid raise `IndexError`.
- `asciipaint.app` provides:
  - `run_paint(canvas, stream, out)`, which runs the command loop against any text streams, so scripted sessions are easy;
  - `read_command(stream, out)`;
  - `main(argv=None)`, the command-line entry point.

## Tests

```
pip install .[test]
pytest
```