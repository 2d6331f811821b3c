import pytest

from gamelib.ui.cell import UICell, UIIcon
from gamelib.utils.ansi import AnsiColor, Color
from gamelib.utils.units import Pos2


@pytest.mark.parametrize("text", ["", " "])
def test_blank_cells_are_empty(text):
    assert UICell(text).empty() is True


def test_cell_with_text_is_not_empty():
    assert UICell("a").empty() is False
    assert UICell("  ").empty() is False


def test_icon_starts_without_cells():
    icon = UIIcon(Pos2(3, 2))
    assert [icon.get(x, y) for y in range(2) for x in range(3)] == [None] * 6


def test_icon_set_and_get_round_trip():
    icon = UIIcon(Pos2(3, 2))
    cell = UICell("#", AnsiColor.basic(Color.RED), None)
    icon.set(2, 1, cell)
    assert icon.get(2, 1) is cell
    assert icon.get(1, 2 - 1) is None


def test_icon_size_is_kept():
    icon = UIIcon(Pos2(4, 5))
    assert (icon.size.width, icon.size.height) == (4, 5)


@pytest.mark.parametrize("x, y", [(3, 0), (0, 2), (-1, 0), (0, -1)])
def test_icon_rejects_positions_outside(x, y):
    icon = UIIcon(Pos2(3, 2))
    with pytest.raises(IndexError):
        icon.get(x, y)
    with pytest.raises(IndexError):
        icon.set(x, y, UICell("x"))


def test_icon_rejects_negative_size():
    with pytest.raises(ValueError):
        UIIcon(Pos2(-1, 2))