"""Console cells and fixed-size icons built from them."""

from __future__ import annotations

from dataclasses import dataclass

from gamelib.utils.ansi import AnsiColor
from gamelib.utils.units import Pos2


@dataclass
class UICell:
    """One character position: its text and its colours."""

    text: str = ""
    fg: AnsiColor | None = None
    bg: AnsiColor | None = None

    def empty(self) -> bool:
        """True when the cell shows nothing (no text or a single space)."""
        return self.text == "" or self.text == " "


class UIIcon:
    """A grid of optional cells, ``size.width`` columns by ``size.height`` rows."""

    def __init__(self, size: Pos2) -> None:
        if size.width < 0 or size.height < 0:
            raise ValueError(f"icon size must not be negative, got {size}")
        self._size = Pos2(size.x, size.y)
        self._data: list[list[UICell | None]] = [
            [None] * size.col for _ in range(size.row)
        ]

    @property
    def size(self) -> Pos2:
        return Pos2(self._size.x, self._size.y)

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self._size.width and 0 <= y < self._size.height):
            raise IndexError(f"cell ({x}, {y}) is outside an icon of size {self._size}")

    def get(self, x: int, y: int) -> UICell | None:
        """Return the cell at column ``x``, row ``y``."""
        self._check(x, y)
        return self._data[y][x]

    def set(self, x: int, y: int, cell: UICell | None) -> None:
        """Place ``cell`` at column ``x``, row ``y``."""
        self._check(x, y)
        self._data[y][x] = cell