"""Per-priority layers of cells, and merging them into one screen."""

from __future__ import annotations

from gamelib.ui.cell import UICell
from gamelib.ui.element import UIElement

Layer = list[list[UICell]]
LayerBuffer = list[Layer]


def init_layer_buffer(width: int, height: int, max_priority: int) -> LayerBuffer:
    """Return layers for priorities 0 to ``max_priority`` inclusive, each ``width`` by ``height``."""
    return [
        [[UICell() for _ in range(width)] for _ in range(height)]
        for _ in range(max_priority + 1)
    ]


def render_to_layer(element: UIElement | None, layers: LayerBuffer) -> None:
    """Draw ``element`` and its children onto the layer of their priority.

    Parts outside the layer are clipped; positions past a row's content are
    filled with spaces.
    """
    if element is None:
        return
    if not 0 <= element.priority < len(layers):
        raise IndexError(
            f"priority {element.priority} has no layer (have {len(layers)})"
        )
    layer = layers[element.priority]
    width = len(layer[0]) if layer else 0

    for dy in range(element.size.height):
        row = element.pos.y + dy
        if not 0 <= row < len(layer):
            continue
        line = element.content[dy] if dy < len(element.content) else ""
        for dx in range(element.size.width):
            col = element.pos.x + dx
            if not 0 <= col < width:
                continue
            text = line[dx] if dx < len(line) else " "
            layer[row][col] = UICell(text, element.fg, element.bg)

    for child in element.children:
        render_to_layer(child, layers)


def merge_layers(layers: LayerBuffer) -> Layer:
    """Combine layers from lowest to highest priority; non-empty cells win."""
    if not layers:
        raise ValueError("no layers to merge")
    height = len(layers[0])
    width = len(layers[0][0]) if height else 0
    screen: Layer = [[UICell() for _ in range(width)] for _ in range(height)]
    for layer in layers:
        for screen_row, layer_row in zip(screen, layer):
            for c, cell in enumerate(layer_row[:width]):
                if not cell.empty():
                    screen_row[c] = cell
    return screen