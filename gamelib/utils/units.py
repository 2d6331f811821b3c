"""Integer two-dimensional position/size."""

from __future__ import annotations

from dataclasses import dataclass


def _check(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


@dataclass
class Pos2:
    """A pair of integers read as x/y, col/row, hor/ver or width/height."""

    x: int
    y: int

    def __post_init__(self) -> None:
        _check("x", self.x)
        _check("y", self.y)

    @property
    def col(self) -> int:
        return self.x

    @col.setter
    def col(self, value: int) -> None:
        self.x = _check("col", value)

    @property
    def row(self) -> int:
        return self.y

    @row.setter
    def row(self, value: int) -> None:
        self.y = _check("row", value)

    @property
    def hor(self) -> int:
        return self.x

    @hor.setter
    def hor(self, value: int) -> None:
        self.x = _check("hor", value)

    @property
    def ver(self) -> int:
        return self.y

    @ver.setter
    def ver(self, value: int) -> None:
        self.y = _check("ver", value)

    @property
    def width(self) -> int:
        return self.x

    @width.setter
    def width(self, value: int) -> None:
        self.x = _check("width", value)

    @property
    def height(self) -> int:
        return self.y

    @height.setter
    def height(self, value: int) -> None:
        self.y = _check("height", value)