"""The editing commands: help, drawing lines, erasing cells and resizing."""

from __future__ import annotations

from .canvas import BLANK, Canvas, _atoi
from .lines import (
    Direction,
    Line,
    draw_diagonal,
    draw_horizontal,
    draw_vertical,
    find_direction,
)

HELP_TEXT = (
    "Commands:\n"
    "Help: h\n"
    "Quit: q\n"
    "Draw line: w row_start col_start row_end col_end\n"
    "Resize: r num_rows num_cols\n"
    "Add row or column: a [r | c] pos\n"
    "Delete row or column: d [r | c] pos\n"
    "Erase: e row col\n"
    "Save: s file_name\n"
    "Load: l file_name\n"
)

_DRAWERS = {
    Direction.HORIZONTAL: draw_horizontal,
    Direction.VERTICAL: draw_vertical,
    Direction.DIAGONAL: draw_diagonal,
}


def help_text() -> str:
    """Return the list of commands shown by ``h``."""
    return HELP_TEXT


def write_line(canvas: Canvas, text: str) -> Line:
    """Draw the line given by ``w r1 c1 r2 c2`` and return it.

    Raises ValueError when the two points do not make a straight line.
    """
    line = find_direction(text)
    drawer = _DRAWERS.get(line.direction)
    if drawer is None:
        raise ValueError("This is not a straight line.")
    drawer(canvas, line)
    return line


def erase(canvas: Canvas, text: str) -> None:
    """Blank the cell named by ``e row col``.

    The column is taken one to the right of the number given, as the
    command has always done.
    """
    row = canvas.num_rows - _atoi(text, 2) - 1
    column = _atoi(text, 4) + 1
    if not (0 <= row < len(canvas.cells) and 0 <= column < len(canvas.cells[row])):
        raise IndexError(f"point ({row}, {column}) is outside the canvas")
    canvas.cells[row][column] = BLANK


def resize(canvas: Canvas, text: str) -> None:
    """Resize the canvas to ``r rows cols``.

    Rows keep their labels: growing adds blank rows on top, shrinking drops
    rows from the top. Columns are cut or padded with blanks on the right.
    """
    new_rows = _atoi(text, 2)
    new_columns = _atoi(text, 4)
    if new_rows < 0 or new_columns < 0:
        raise ValueError("The canvas size cannot be negative.")

    old_rows = canvas.num_rows
    kept = min(old_rows, new_rows)
    width = min(canvas.num_columns, new_columns)
    visible = canvas.cells[old_rows - kept : old_rows]
    canvas.cells = [row[:width] + [BLANK] * (new_columns - width) for row in visible]
    canvas.num_rows = kept
    canvas.num_columns = new_columns
    if new_rows > old_rows:
        canvas.shift_rows_down(new_rows - old_rows, new_columns)
    canvas.num_rows = new_rows