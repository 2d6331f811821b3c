"""ANSI escape sequences for coloured terminal text."""

from __future__ import annotations

import enum
from dataclasses import dataclass

RESET = "\033[0m"
_CSI = "\033["


class AnsiMode(enum.Enum):
    """How an :class:`AnsiColor` is encoded."""

    BASIC = "basic"
    BRIGHT = "bright"
    COLOR256 = "color256"
    RGB = "rgb"


class Color(enum.IntEnum):
    """The basic terminal palette, by SGR offset."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    GRAY = 8
    NOCHANGE = 9


@dataclass(frozen=True)
class AnsiColor:
    """A terminal colour in one of the ANSI encodings."""

    mode: AnsiMode
    value: int = 0
    r: int = 0
    g: int = 0
    b: int = 0

    @classmethod
    def basic(cls, value: int) -> AnsiColor:
        return cls(AnsiMode.BASIC, int(value))

    @classmethod
    def bright(cls, value: int) -> AnsiColor:
        return cls(AnsiMode.BRIGHT, int(value))

    @classmethod
    def color256(cls, value: int) -> AnsiColor:
        return cls(AnsiMode.COLOR256, int(value))

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> AnsiColor:
        return cls(AnsiMode.RGB, 0, r, g, b)


def to_ansi_code(color: AnsiColor, foreground: bool) -> str:
    """Return the escape sequence selecting ``color`` as fore- or background."""
    if color.mode is AnsiMode.BASIC:
        return f"{_CSI}{(30 if foreground else 40) + color.value}m"
    if color.mode is AnsiMode.BRIGHT:
        return f"{_CSI}{(90 if foreground else 100) + color.value}m"
    base = 38 if foreground else 48
    if color.mode is AnsiMode.COLOR256:
        return f"{_CSI}{base};5;{color.value}m"
    return f"{_CSI}{base};2;{color.r};{color.g};{color.b}m"


def ansi_print(
    text: str,
    fg: AnsiColor | None = None,
    bg: AnsiColor | None = None,
    bold: bool = False,
    blink: bool = False,
) -> str:
    """Wrap ``text`` in style and colour sequences, followed by a reset."""
    attributes = []
    if bold:
        attributes.append("1")
    if blink:
        attributes.append("5")
    prefix = _CSI + ";".join(attributes)
    if attributes:
        prefix += "m"

    colors = ""
    if fg is not None:
        colors += to_ansi_code(fg, True)
    if bg is not None:
        colors += to_ansi_code(bg, False)

    return prefix + colors + text + RESET