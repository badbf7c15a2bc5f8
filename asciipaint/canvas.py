"""The drawing surface: a grid of characters with row and column labels."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

BLANK = "*"
DEFAULT_SIZE = 10

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str, pos: int = 0) -> int:
    """Read the integer that starts at ``pos``, like C ``atoi``; 0 when there is none."""
    match = _LEADING_INT.match(text, pos)
    return int(match.group(1)) if match else 0


@dataclass
class Canvas:
    """A grid of cells; row 0 of ``cells`` is the top row on screen.

    ``cells`` may hold one more row and one more column than are shown,
    which absorb marks placed just past the visible edge.
    """

    num_rows: int
    num_columns: int
    cells: list[list[str]] = field(default_factory=list)

    def render(self) -> str:
        """Return the canvas as printed: labelled rows, then a line of column numbers."""
        lines = []
        for index, row in enumerate(self.cells[: self.num_rows]):
            label = self.num_rows - index - 1
            marks = "".join(f"{cell:>3}" for cell in row[: self.num_columns])
            lines.append(f"{label:3d}{marks}")
        footer = "".join(f"{column:3d}" for column in range(self.num_columns))
        lines.append(f"   {footer}")
        return "\n".join(lines) + "\n"

    def shift_rows_down(self, count: int, new_columns: int) -> None:
        """Put ``count`` blank rows on top, pushing the visible rows down."""
        added = [[BLANK] * new_columns for _ in range(count)]
        self.cells = added + self.cells[: self.num_rows]
        self.num_rows += count

    def shift_rows_up(self, count: int, new_columns: int) -> None:
        """Add ``count`` blank rows at the bottom and set the width to ``new_columns``."""
        kept = []
        for row in self.cells[: self.num_rows]:
            fitted = row[:new_columns]
            fitted.extend(BLANK * (new_columns - len(fitted)))
            kept.append(fitted)
        added = [[BLANK] * new_columns for _ in range(count)]
        self.cells = kept + added
        self.num_rows += count
        self.num_columns = new_columns


def new_canvas(num_rows: int, num_columns: int) -> Canvas:
    """Make a blank canvas of the given size, with a hidden spare row and column."""
    cells = [[BLANK] * (num_columns + 1) for _ in range(num_rows + 1)]
    return Canvas(num_rows, num_columns, cells)


def canvas_size(argv: list[str]) -> tuple[int, int]:
    """Return ``(rows, columns)`` from the command-line arguments.

    No arguments give the default size; two give rows and columns.
    Any other count raises ValueError.
    """
    if not argv:
        return DEFAULT_SIZE, DEFAULT_SIZE
    if len(argv) == 2:
        return _atoi(argv[0]), _atoi(argv[1])
    raise ValueError("Too many arguments. Closing program.")