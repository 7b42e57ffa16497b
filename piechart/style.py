"""Terminal color styling — ANSI SGR escapes for single glyphs.

A styler is any callable ``(color, text) -> str``. The renderer never looks
inside the returned string; ``paint`` is the default and ``plain`` drops
colors entirely (for sinks that are not terminals).
"""

from __future__ import annotations

import enum
import re
from typing import Callable, NamedTuple, Optional, Union

_ESC = "\x1b["
_RESET = "\x1b[0m"

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})$")


class Color(enum.Enum):
    """The eight basic ANSI foreground colors."""

    BLACK = 30
    RED = 31
    GREEN = 32
    YELLOW = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37

    @property
    def code(self) -> str:
        return str(self.value)


class Fixed(NamedTuple):
    """Index into the 256-color palette."""

    index: int

    @property
    def code(self) -> str:
        return f"38;5;{self.index}"


class Rgb(NamedTuple):
    """24-bit true color."""

    r: int
    g: int
    b: int

    @property
    def code(self) -> str:
        return f"38;2;{self.r};{self.g};{self.b}"


AnyColor = Union[Color, Fixed, Rgb]
Styler = Callable[[Optional[AnyColor], str], str]


def paint(color: AnyColor | None, text: str) -> str:
    """Wrap text in the color's escape sequence. No color → text unchanged."""
    if color is None:
        return text
    return f"{_ESC}{color.code}m{text}{_RESET}"


def plain(color: AnyColor | None, text: str) -> str:
    return text


def parse_color(name: str) -> AnyColor:
    """Parse a color name ("red"), palette index ("208") or hex ("#ff8800").

    Raises:
        ValueError: if the name matches none of the accepted forms.
    """
    s = name.strip()
    try:
        return Color[s.upper()]
    except KeyError:
        pass
    if s.isdigit():
        index = int(s)
        if 0 <= index <= 255:
            return Fixed(index)
        raise ValueError(f"Palette index out of range: {s}")
    m = _HEX_RE.match(s)
    if m:
        hx = m.group(1)
        return Rgb(int(hx[0:2], 16), int(hx[2:4], 16), int(hx[4:6], 16))
    raise ValueError(f"Unknown color: {name!r}")
