import pytest

from gamelib.utils.ansi import AnsiColor, AnsiMode, Color, ansi_print, to_ansi_code


def test_basic_foreground_red():
    assert to_ansi_code(AnsiColor.basic(Color.RED), True) == "\033[31m"


def test_basic_foreground_green():
    assert to_ansi_code(AnsiColor.basic(Color.GREEN), True) == "\033[32m"


def test_bright_foreground():
    assert to_ansi_code(AnsiColor.bright(Color.RED), True) == "\033[91m"


def test_rgb_background():
    assert to_ansi_code(AnsiColor.rgb(1, 2, 3), False) == "\033[48;2;1;2;3m"


def test_factories_set_mode_and_value():
    c = AnsiColor.color256(Color.CYAN)
    assert c.mode is AnsiMode.COLOR256
    assert c.value == Color.CYAN
    assert AnsiColor.rgb(10, 20, 30).value == 0
    assert (AnsiColor.rgb(10, 20, 30).r, AnsiColor.rgb(10, 20, 30).b) == (10, 30)


@pytest.mark.parametrize("value", list(Color))
def test_background_basic_differs_from_foreground(value):
    color = AnsiColor.basic(value)
    fg = to_ansi_code(color, True)
    bg = to_ansi_code(color, False)
    assert fg != bg
    assert fg.startswith("\033[") and fg.endswith("m")
    assert int(bg[2:-1]) - int(fg[2:-1]) == 10


def test_color256_contains_index():
    code = to_ansi_code(AnsiColor.color256(200), True)
    assert code.endswith(";5;200m")


def test_ansi_print_bold_blink():
    out = ansi_print("x", bold=True, blink=True)
    assert out == "\033[1;5mx\033[0m"


def test_ansi_print_colours_in_order():
    fg = AnsiColor.basic(Color.RED)
    bg = AnsiColor.basic(Color.BLUE)
    out = ansi_print("hello", fg, bg, bold=True)
    body = out[len("\033[1m"):]
    assert out.startswith("\033[1m")
    assert body.startswith(to_ansi_code(fg, True) + to_ansi_code(bg, False))
    assert out.endswith("hello\033[0m")


def test_ansi_print_without_style_keeps_bare_prefix():
    fg = AnsiColor.basic(Color.YELLOW)
    out = ansi_print("t", fg)
    assert out == "\033[" + to_ansi_code(fg, True) + "t" + "\033[0m"


def test_color_is_frozen():
    c = AnsiColor.basic(Color.RED)
    with pytest.raises(AttributeError):
        c.value = 3
    assert c.value == Color.RED
    assert to_ansi_code(c, True) == "\033[31m"