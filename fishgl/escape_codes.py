"""ANSI terminal escape sequences for cursor movement, colours and text styles."""

from __future__ import annotations

_CSI = "\033["


def prefix() -> str:
    """The control sequence introducer that starts every escape code."""
    return _CSI


def _sequence(number: int, final: str) -> str:
    return f"{prefix()}{number}{final}"


def set_attribute(a: int) -> str:
    """Select graphic rendition attribute a."""
    return _sequence(a, "m")


def cls() -> str:
    """Clear the screen from the top down to the cursor."""
    return prefix() + "1J"


def home() -> str:
    """Move the cursor to the top-left corner."""
    return prefix() + "H"


def cursor_xy(x: int, y: int) -> str:
    """Move the cursor to column x, row y."""
    return f"{prefix()}{y};{x}H"


def cursor_up(x: int) -> str:
    """Move the cursor up x rows."""
    return _sequence(x, "A")


def cursor_down(x: int) -> str:
    """Move the cursor down x rows."""
    return _sequence(x, "B")


def cursor_right(x: int) -> str:
    """Move the cursor right x columns."""
    return _sequence(x, "C")


def cursor_left(x: int) -> str:
    """Move the cursor left x columns."""
    return _sequence(x, "D")


def set_bg(color: int) -> str:
    """Set the background to one of the eight basic colours (0-7)."""
    return set_attribute(color + 40)


def set_fg(color: int) -> str:
    """Set the foreground to one of the eight basic colours (0-7)."""
    return set_attribute(color + 30)


def clear_line() -> str:
    """Clear the whole current line."""
    return prefix() + "2K"


def clear_eo_line() -> str:
    """Clear from the cursor to the end of the line."""
    return prefix() + "K"


def bold(text: str) -> str:
    """Text wrapped in bold on/off codes."""
    return set_attribute(1) + text + set_attribute(22)


def blink(text: str) -> str:
    """Text wrapped in blink on/off codes."""
    return set_attribute(5) + text + set_attribute(25)


def italic(text: str) -> str:
    """Text wrapped in italic on/off codes."""
    return set_attribute(3) + text + set_attribute(23)


def underline(text: str) -> str:
    """Text wrapped in underline on/off codes."""
    return set_attribute(4) + text + set_attribute(24)


def inverse(text: str) -> str:
    """Text wrapped in inverse-video on/off codes."""
    return set_attribute(7) + text + set_attribute(27)


def show_cursor(blink: bool) -> str:
    """Show the cursor when blink is true, hide it otherwise."""
    return prefix() + "?25" + ("h" if blink else "l")


def reset() -> str:
    """Reset all graphic rendition attributes."""
    return prefix() + "m"