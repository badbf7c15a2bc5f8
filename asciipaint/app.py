"""The interactive loop and the command-line entry point."""

from __future__ import annotations

import sys
from typing import Callable, TextIO

from .canvas import Canvas, canvas_size, new_canvas
from .commands import erase, help_text, resize, write_line

PROMPT = "Enter your command: "
UNRECOGNIZED = "Unrecognized command. Type h for help.\n"
_IGNORED = frozenset("adsl")


def read_command(stream: TextIO, out: TextIO) -> str:
    """Prompt on ``out`` and return the next line of ``stream`` without its newline.

    Raises EOFError when the stream is exhausted.
    """
    out.write(PROMPT)
    out.flush()
    line = stream.readline()
    if not line:
        raise EOFError("no more commands")
    return line.removesuffix("\n")


def run_paint(canvas: Canvas, stream: TextIO, out: TextIO) -> None:
    """Show the canvas and carry out commands until ``q`` or end of input."""
    handlers: dict[str, Callable[[Canvas, str], object]] = {
        "w": write_line,
        "e": erase,
        "r": resize,
    }
    while True:
        out.write(canvas.render())
        try:
            command = read_command(stream, out)
        except EOFError:
            return
        key = command[:1]
        if key == "q":
            return
        if key == "h":
            out.write(help_text())
        elif key in handlers:
            try:
                handlers[key](canvas, command)
            except (ValueError, IndexError) as error:
                out.write(f"{error}\n")
        elif key and key in _IGNORED:
            continue
        else:
            out.write(UNRECOGNIZED)


def main(argv: list[str] | None = None) -> int:
    """Start the editor with an optional ``rows columns`` size."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        rows, columns = canvas_size(args)
    except ValueError as error:
        sys.stdout.write(str(error))
        sys.stdout.flush()
        return 1
    run_paint(new_canvas(rows, columns), sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())