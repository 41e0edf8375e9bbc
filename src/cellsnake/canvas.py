from __future__ import annotations

from collections import namedtuple

from . import config


class Cell(namedtuple("Cell", ["text", "fg", "bg"])):
    """Styled cell token. Its string form is the bare character."""

    # text: the literal drawn in the cell (one character)
    # fg, bg: xterm-256 colour index as a string, or None for the default
    __slots__ = ()

    def __str__(self):
        return self.text


def styled(text: str, fg: str | None = None, bg: str | None = None) -> Cell:
    return Cell(text, fg, bg)


class Canvas:
    """A fixed-size grid of character cells making up one frame.

    Cells are plain one-character strings or styled ``Cell`` tokens. Writes
    are not bounds checked; callers address the canvas with coordinates
    derived from the terminal size.
    """

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.rows = [[config.BLANK] * width for _ in range(height)]

    def set(self, cell, x: int, y: int) -> None:
        self.rows[y][x] = cell

    def get(self, x: int, y: int):
        return self.rows[y][x]

    def place_text(self, s: str, x: int, y: int) -> None:
        for i, ch in enumerate(s):
            self.set(ch, x + i, y)

    def render(self) -> str:
        return "\n".join("".join(str(cell) for cell in row) for row in self.rows)
