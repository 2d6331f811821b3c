"""Box-drawing border cells chosen from the directions they connect."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from gamelib.ui.cell import UICell


class BorderPattern(enum.Enum):
    """Line style of a border."""

    SINGLETHIN = "single_thin"
    SINGLETHICK = "single_thick"
    DOUBLE = "double"


class Direction(enum.IntEnum):
    """Directions a border cell can connect to; each is one bit."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


_COUNT = len(Direction)

_GLYPHS = {
    BorderPattern.SINGLETHIN: " ───│┌└├│┐┘┤│┬┴┼",
    BorderPattern.SINGLETHICK: " ━━━┃┏┗┣┃┓┛┫┃┳┻╋",
    BorderPattern.DOUBLE: " ═══║╔╚╠║╗╝╣║╦╩╬",
}


@dataclass
class UIBorder(UICell):
    """A cell whose glyph depends on its pattern and connected directions.

    ``|``, ``&`` and ``^`` combine the directions of two borders into a new
    border with the default pattern; the in-place forms keep the pattern.
    """

    pattern: BorderPattern = BorderPattern.SINGLETHIN
    _dirs: int = 0

    def get_direction(self, direction: int) -> bool:
        """Whether ``direction`` is connected; unknown directions are not."""
        if not 0 <= direction < _COUNT:
            return False
        return bool(self._dirs >> direction & 1)

    def set_direction(self, direction: int, enable: bool) -> None:
        """Connect or disconnect ``direction``; unknown directions are ignored."""
        if not 0 <= direction < _COUNT:
            return
        if enable:
            self._dirs |= 1 << direction
        else:
            self._dirs &= ~(1 << direction)

    @property
    def directions(self) -> frozenset[Direction]:
        return frozenset(d for d in Direction if self.get_direction(d))

    def build_text(self) -> None:
        """Set ``text`` to the glyph for the current pattern and directions."""
        self.text = _GLYPHS[self.pattern][self._dirs]

    def _combined(self, dirs: int) -> UIBorder:
        result = UIBorder()
        result._dirs = dirs
        return result

    def __or__(self, other: UIBorder) -> UIBorder:
        return self._combined(self._dirs | other._dirs)

    def __and__(self, other: UIBorder) -> UIBorder:
        return self._combined(self._dirs & other._dirs)

    def __xor__(self, other: UIBorder) -> UIBorder:
        return self._combined(self._dirs ^ other._dirs)

    def __ior__(self, other: UIBorder) -> UIBorder:
        self._dirs |= other._dirs
        return self

    def __iand__(self, other: UIBorder) -> UIBorder:
        self._dirs &= other._dirs
        return self

    def __ixor__(self, other: UIBorder) -> UIBorder:
        self._dirs ^= other._dirs
        return self