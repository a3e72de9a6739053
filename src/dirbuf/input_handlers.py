"""Input handling methods for the directory browser."""

from __future__ import annotations

import curses
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dirbuf.navigator import Navigator
    from dirbuf.screen import CursesSurface

# Constants
PAGE_SCROLL_LINES = 10

KEYS_DOWN = (curses.KEY_DOWN, ord("j"))
KEYS_UP = (curses.KEY_UP, ord("k"))
KEYS_ENTER = (curses.KEY_ENTER, curses.KEY_RIGHT, ord("\n"), ord("\r"), ord("l"))
KEYS_PARENT = (curses.KEY_BACKSPACE, curses.KEY_LEFT, 127, 8, ord("h"), ord("-"))
KEYS_QUIT = (ord("q"), ord("Q"))


class InputHandlersMixin:
    """Mixin providing the keyboard handlers of :class:`DirectoryBrowser`."""

    navigator: "Navigator"
    surface: "CursesSurface"
    status_message: str | None
    show_help: bool

    def _handle_navigation_key(self, key_code: int) -> bool:
        """Dispatch one key press; returns ``False`` when the key is unbound."""
        if key_code in KEYS_DOWN:
            self.surface.move_cursor(1)
            return True
        if key_code in KEYS_UP:
            self.surface.move_cursor(-1)
            return True
        if key_code == curses.KEY_NPAGE:
            self.surface.move_cursor(PAGE_SCROLL_LINES)
            return True
        if key_code == curses.KEY_PPAGE:
            self.surface.move_cursor(-PAGE_SCROLL_LINES)
            return True
        if key_code in (curses.KEY_HOME, ord("g")):
            self.surface.set_cursor_row(1)
            return True
        if key_code in (curses.KEY_END, ord("G")):
            self.surface.set_cursor_row(len(self.surface.lines))
            return True
        if key_code in KEYS_ENTER:
            self._navigate_with(self.navigator.enter)
            return True
        if key_code in KEYS_PARENT:
            self._navigate_with(self.navigator.up)
            return True
        if key_code == ord("~"):
            self._navigate_with(self.navigator.go_home)
            return True
        if key_code == ord("c"):
            self._navigate_with(self.navigator.go_to_cwd)
            return True
        if key_code == ord("."):
            self.status_message = None
            if self.navigator.toggle_hidden():
                state = "shown" if self.navigator.show_hidden else "hidden"
                self.status_message = f"Hidden files {state}."
            return True
        if key_code == ord("r"):
            self._navigate_with(self.navigator.refresh)
            return True
        if key_code == ord("?"):
            self.show_help = not self.show_help
            return True
        if key_code in KEYS_QUIT:
            self.navigator.quit()
            return True
        if key_code == curses.KEY_RESIZE:
            self.navigator.redraw()
            return True
        return False

    def _navigate_with(self, action) -> None:
        """Run a navigator action; failures leave their warning in the status line."""
        self.status_message = None
        self.show_help = False
        action()


__all__ = ["InputHandlersMixin", "PAGE_SCROLL_LINES"]
