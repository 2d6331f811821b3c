"""Base of drawable console UI elements."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field

from gamelib.utils.ansi import AnsiColor
from gamelib.utils.units import Pos2


@dataclass
class UIElement(abc.ABC):
    """A rectangular element drawn on the layer given by its priority.

    ``content`` holds one string per row; ``children`` are drawn after it.
    """

    pos: Pos2 = field(default_factory=lambda: Pos2(0, 0))
    size: Pos2 = field(default_factory=lambda: Pos2(0, 0))
    priority: int = 0
    display: bool = True
    content: list[str] = field(default_factory=list)
    fg: AnsiColor | None = None
    bg: AnsiColor | None = None
    children: list[UIElement] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.priority < 0:
            raise ValueError(f"priority must not be negative, got {self.priority}")

    @abc.abstractmethod
    def render(self) -> None:
        """Draw the element."""