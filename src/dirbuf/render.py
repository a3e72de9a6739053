"""Convert the browser state into characters on the screen.

The directory listing fills the screen from the top; the bottom rows show
either the status line or the help summary.
"""

from __future__ import annotations

import curses
from typing import List, TYPE_CHECKING

from dirbuf.help_text import build_help_lines

if TYPE_CHECKING:
    from dirbuf.browser import DirectoryBrowser

# Terminal size limits
MIN_TERMINAL_HEIGHT = 4
MIN_TERMINAL_WIDTH = 20


def truncate_end(text: str, max_width: int) -> str:
    """Truncate text from the end to fit within max_width."""
    if max_width <= 0:
        return ""
    if len(text) <= max_width:
        return text
    return text[-max_width:]


def status_lines(browser: "DirectoryBrowser") -> List[str]:
    if browser.show_help:
        return build_help_lines(browser.navigator.show_hidden)
    return [browser.status_message or "? help"]


def render_browser(browser: "DirectoryBrowser", stdscr: "curses._CursesWindow") -> None:  # type: ignore[name-defined]
    """Render the listing and the status area."""
    height, width = stdscr.getmaxyx()
    stdscr.erase()

    if height < MIN_TERMINAL_HEIGHT or width < MIN_TERMINAL_WIDTH:
        stdscr.addstr(0, 0, "Terminal too small."[: max(width - 1, 0)])
        stdscr.refresh()
        return

    footer = status_lines(browser)
    list_height = max(height - len(footer), 1)
    browser.surface.draw(stdscr, 0, list_height, width)

    for index, line in enumerate(footer):
        y = list_height + index
        if y >= height:
            break
        try:
            # The last column is left empty so curses does not scroll.
            stdscr.addnstr(y, 0, truncate_end(line, width - 1), width - 1, curses.A_DIM)
        except curses.error:
            pass

    stdscr.refresh()


__all__ = ["render_browser", "status_lines", "truncate_end"]
