import pytest

from gamelib.ui.element import UIElement
from gamelib.ui.layer import init_layer_buffer, merge_layers, render_to_layer
from gamelib.utils.ansi import AnsiColor, Color
from gamelib.utils.units import Pos2


class Block(UIElement):
    def render(self):
        pass


def texts(layer):
    return ["".join(cell.text or "." for cell in row) for row in layer]


def test_init_layer_buffer_shape():
    layers = init_layer_buffer(4, 3, 2)
    assert len(layers) == 3
    assert all(len(layer) == 3 and all(len(r) == 4 for r in layer) for layer in layers)
    assert all(cell.empty() for layer in layers for row in layer for cell in row)


def test_render_places_content_with_colours():
    layers = init_layer_buffer(4, 3, 0)
    fg = AnsiColor.basic(Color.GREEN)
    block = Block(pos=Pos2(1, 1), size=Pos2(2, 1), content=["ab"], fg=fg)
    render_to_layer(block, layers)
    assert texts(layers[0]) == ["....", ".ab.", "...."]
    assert layers[0][1][1].fg == fg


def test_render_clips_and_pads():
    layers = init_layer_buffer(3, 2, 0)
    block = Block(pos=Pos2(1, 1), size=Pos2(3, 2), content=["x"])
    render_to_layer(block, layers)
    assert texts(layers[0]) == ["...", ".x "]


def test_render_children_on_their_own_layer():
    layers = init_layer_buffer(2, 1, 1)
    child = Block(pos=Pos2(1, 0), size=Pos2(1, 1), content=["c"], priority=1)
    parent = Block(size=Pos2(1, 1), content=["p"], children=[child])
    render_to_layer(parent, layers)
    assert texts(layers[0]) == ["p."]
    assert texts(layers[1]) == [".c"]


def test_render_none_does_nothing():
    layers = init_layer_buffer(2, 1, 0)
    render_to_layer(None, layers)
    assert texts(layers[0]) == [".."]


def test_render_priority_without_layer():
    layers = init_layer_buffer(2, 1, 0)
    with pytest.raises(IndexError):
        render_to_layer(Block(size=Pos2(1, 1), priority=1), layers)


def test_merge_higher_priority_wins_and_blanks_fall_through():
    layers = init_layer_buffer(3, 1, 1)
    render_to_layer(Block(size=Pos2(3, 1), content=["abc"]), layers)
    render_to_layer(Block(size=Pos2(2, 1), content=["Z "], priority=1), layers)
    screen = merge_layers(layers)
    assert texts(screen) == ["Zbc"]


def test_merge_requires_layers():
    with pytest.raises(ValueError):
        merge_layers([])