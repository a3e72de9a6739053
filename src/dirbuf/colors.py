"""Color management for the terminal host."""

from __future__ import annotations

import curses
from enum import IntEnum
from typing import Dict, Mapping, Tuple

from dirbuf.config import COLOR_MAP, DEFAULT_CONFIG
from dirbuf.highlight import Style


class ColorPair(IntEnum):
    """Color pair constants for curses."""
    DEFAULT = 0
    CWD = 1
    SIGN = 2
    DIRECTORY = 3
    FILE = 4
    LINK = 5
    SIZE = 6
    TIME = 7


STYLE_PAIRS = {
    Style.CWD: ColorPair.CWD,
    Style.SIGN: ColorPair.SIGN,
    Style.DIRECTORY: ColorPair.DIRECTORY,
    Style.FILE: ColorPair.FILE,
    Style.LINK: ColorPair.LINK,
    Style.SIZE: ColorPair.SIZE,
    Style.TIME: ColorPair.TIME,
}

COLOR_NAME_TO_CURSES = {
    "black": curses.COLOR_BLACK,
    "red": curses.COLOR_RED,
    "green": curses.COLOR_GREEN,
    "yellow": curses.COLOR_YELLOW,
    "blue": curses.COLOR_BLUE,
    "magenta": curses.COLOR_MAGENTA,
    "cyan": curses.COLOR_CYAN,
    "white": curses.COLOR_WHITE,
    "default": -1,
}

ATTRIBUTE_NAME_TO_CURSES = {
    "normal": curses.A_NORMAL,
    "bold": curses.A_BOLD,
    "dim": curses.A_DIM,
}

# Extra attributes per style, filled by init_colors().
_style_attributes: Dict[Style, int] = {}


def parse_color_name(name: str) -> Tuple[int, int]:
    """Turn a configured color name such as ``blue_bold`` into (color, attribute)."""
    color_name, attribute_name = COLOR_MAP.get(name.lower(), ("default", "normal"))
    return (
        COLOR_NAME_TO_CURSES.get(color_name, -1),
        ATTRIBUTE_NAME_TO_CURSES.get(attribute_name, curses.A_NORMAL),
    )


def init_colors(style_colors: Mapping[str, str] | None = None) -> None:
    """Initialize curses color pairs.

    Call this after curses initialization and before rendering.
    """
    if not curses.has_colors():
        return

    curses.start_color()
    curses.use_default_colors()

    colors = dict(DEFAULT_CONFIG["colors"])
    if style_colors:
        colors.update(style_colors)

    for style, pair in STYLE_PAIRS.items():
        color, attribute = parse_color_name(colors.get(style.value, "default"))
        curses.init_pair(pair, color, -1)
        _style_attributes[style] = attribute


def style_attr(style: Style) -> int:
    """Get the curses attributes used to draw `style`."""
    if not curses.has_colors():
        if style in (Style.CWD, Style.DIRECTORY):
            return curses.A_BOLD
        return curses.A_NORMAL
    return curses.color_pair(STYLE_PAIRS[style]) | _style_attributes.get(style, curses.A_NORMAL)


__all__ = ["ColorPair", "init_colors", "parse_color_name", "style_attr"]
