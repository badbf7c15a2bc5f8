"""Straight lines on the canvas: parsing, classifying and drawing them."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .canvas import Canvas, _atoi


class Direction(enum.Enum):
    """The kind of straight line between two points."""

    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    DIAGONAL = "diagonal"


@dataclass
class Line:
    """Two end points, in row and column coordinates counted from the bottom left."""

    start_row: int
    start_column: int
    end_row: int
    end_column: int
    direction: Direction = Direction.NONE

    def _swap_ends(self) -> None:
        self.start_row, self.end_row = self.end_row, self.start_row
        self.start_column, self.end_column = self.end_column, self.start_column


def is_going_down(line: Line) -> bool:
    """True when the line runs from a higher row to a lower one."""
    return line.start_row > line.end_row


def _is_going_down_swapped(line: Line) -> bool:
    line._swap_ends()
    return is_going_down(line)


def check_if_diagonal(line: Line) -> bool:
    """True for a 45-degree line; the ends are reordered so columns increase."""
    if not (is_going_down(line) or _is_going_down_swapped(line)):
        return False
    distance = line.start_row - line.end_row
    if line.start_column + distance == line.end_column:
        return True
    line._swap_ends()
    return (
        line.start_row + distance == line.end_row
        and line.start_column + distance == line.end_column
    )


def find_direction(text: str) -> Line:
    """Parse ``w r1 c1 r2 c2`` and classify the line, normalising its ends."""
    line = Line(_atoi(text, 2), _atoi(text, 4), _atoi(text, 6), _atoi(text, 8))
    if line.start_row == line.end_row:
        if line.end_column < line.start_column:
            line.start_column, line.end_column = line.end_column, line.start_column
        line.direction = Direction.HORIZONTAL
    elif line.start_column == line.end_column:
        if line.end_row > line.start_row:
            line.start_row, line.end_row = line.end_row, line.start_row
        line.direction = Direction.VERTICAL
    elif check_if_diagonal(line):
        line.direction = Direction.DIAGONAL
    return line


def _mark(canvas: Canvas, row: int, column: int, crossings: str, stroke: str) -> None:
    if not (0 <= row < len(canvas.cells) and 0 <= column < len(canvas.cells[row])):
        raise IndexError(f"point ({row}, {column}) is outside the canvas")
    current = canvas.cells[row][column]
    canvas.cells[row][column] = "+" if current in crossings else stroke


def draw_horizontal(canvas: Canvas, line: Line) -> None:
    """Draw ``-`` from the start column to the end column; crossings become ``+``."""
    row = canvas.num_rows - (line.start_row + 1)
    for column in range(line.start_column, line.end_column + 1):
        _mark(canvas, row, column, "|\\/+", "-")


def draw_vertical(canvas: Canvas, line: Line) -> None:
    """Draw ``|`` from the start row down to the end row; crossings become ``+``."""
    top = canvas.num_rows - line.start_row - 1
    for offset in range(line.start_row - line.end_row + 1):
        _mark(canvas, top + offset, line.start_column, "-\\/+", "|")


def draw_diagonal(canvas: Canvas, line: Line) -> None:
    """Draw ``\\`` or ``/`` along a diagonal; crossings become ``+``."""
    first = canvas.num_rows - line.start_row - 1
    if is_going_down(line):
        for offset in range(line.start_row - line.end_row + 1):
            _mark(canvas, first + offset, line.start_column + offset, "-|/+", "\\")
    else:
        for offset in range(line.end_row - line.start_row + 1):
            _mark(canvas, first - offset, line.start_column + offset, "-|\\+", "/")