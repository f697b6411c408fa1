import pytest

from fishgl import escape_codes as ec


def test_prefix_is_csi():
    assert ec.prefix() == "\033["


def test_cls_home_and_clearing():
    assert ec.cls() == ec.prefix() + "1J"
    assert ec.home() == ec.prefix() + "H"
    assert ec.clear_line() == ec.prefix() + "2K"
    assert ec.clear_eo_line() == ec.prefix() + "K"


def test_reset():
    assert ec.reset() == ec.prefix() + "m"


def test_cursor_xy_puts_row_before_column():
    assert ec.cursor_xy(3, 5) == "\033[5;3H"


@pytest.mark.parametrize(
    "func, final",
    [
        (ec.cursor_up, "A"),
        (ec.cursor_down, "B"),
        (ec.cursor_right, "C"),
        (ec.cursor_left, "D"),
    ],
)
def test_cursor_moves(func, final):
    assert func(7) == ec.prefix() + "7" + final


def test_set_attribute():
    assert ec.set_attribute(4) == ec.prefix() + "4m"


@pytest.mark.parametrize("color", range(8))
def test_colours_offset_attributes(color):
    assert ec.set_fg(color) == ec.set_attribute(color + 30)
    assert ec.set_bg(color) == ec.set_attribute(color + 40)


@pytest.mark.parametrize(
    "func, on, off",
    [
        (ec.bold, 1, 22),
        (ec.blink, 5, 25),
        (ec.italic, 3, 23),
        (ec.underline, 4, 24),
        (ec.inverse, 7, 27),
    ],
)
def test_styles_wrap_text(func, on, off):
    result = func("hello")
    assert result.startswith(ec.set_attribute(on))
    assert result.endswith(ec.set_attribute(off))
    assert result[len(ec.set_attribute(on)) : -len(ec.set_attribute(off))] == "hello"


def test_show_cursor():
    assert ec.show_cursor(True) == ec.prefix() + "?25h"
    assert ec.show_cursor(False) == ec.prefix() + "?25l"