"""Curses host that embeds the navigator in a full-screen terminal view."""

from __future__ import annotations

import curses
import logging
from pathlib import Path
from typing import Mapping, Optional

from .colors import init_colors
from .filesystem import FilesystemAccess
from .input_handlers import InputHandlersMixin
from .navigator import Navigator, NavigatorSettings
from .opener import ExternalEditorOpener
from .render import render_browser
from .screen import CursesSurface

LOGGER = logging.getLogger(__name__)


class DirbufError(Exception):
    """Raised when the directory browser cannot start."""


class DirectoryBrowser(InputHandlersMixin):
    """Display one directory at a time in a curses interface.

    The browser is the host side of :class:`Navigator`: it owns the text
    surface, opens files in the external editor and shows warnings in the
    status line.
    """

    def __init__(
        self,
        start_dir: Path,
        settings: Optional[NavigatorSettings] = None,
        style_colors: Optional[Mapping[str, str]] = None,
        fs: Optional[FilesystemAccess] = None,
    ) -> None:
        self.start_dir = start_dir
        self.style_colors = style_colors
        self.status_message: str | None = None
        self.show_help: bool = False
        self._stdscr: Optional["curses._CursesWindow"] = None  # type: ignore[name-defined]
        self.surface = CursesSurface()
        self.opener = ExternalEditorOpener(self._suspend, self._resume, self.warn)
        self.navigator = Navigator(
            self.surface,
            self.surface,
            self.opener,
            self,
            fs=fs,
            settings=settings,
        )

    def warn(self, message: str) -> None:
        """Show `message` in the status line."""
        self.status_message = message

    def start(self) -> None:
        """Show the start directory, or raise when it cannot be listed."""
        if not self.navigator.open(str(self.start_dir)):
            raise DirbufError(self.status_message or f"Cannot open {self.start_dir}")

    def browse(self) -> Path:
        """Launch the UI and return the directory the user ended in."""
        try:
            return curses.wrapper(self._loop)
        except curses.error as err:
            raise DirbufError("Failed to initialise curses UI.") from err

    def _loop(self, stdscr: "curses._CursesWindow") -> Path:  # type: ignore[name-defined]
        """Main curses event loop."""
        self._stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        stdscr.keypad(True)
        init_colors(self.style_colors)

        _, width = stdscr.getmaxyx()
        self.surface.viewport_width = width
        self.start()

        try:
            while self.navigator.running:
                render_browser(self, stdscr)
                key = stdscr.getch()
                if key == curses.KEY_RESIZE:
                    _, width = stdscr.getmaxyx()
                    self.surface.viewport_width = width
                if not self._handle_navigation_key(key):
                    self.status_message = "Unhandled keypress."
        finally:
            self._stdscr = None

        return Path(self.navigator.current_path or self.start_dir)

    def _suspend(self) -> None:
        """Hand the terminal to an external program."""
        if self._stdscr is not None:
            curses.def_prog_mode()
            curses.endwin()

    def _resume(self) -> None:
        """Take the terminal back after an external program exits."""
        if self._stdscr is None:
            return
        curses.reset_prog_mode()
        self._stdscr.refresh()
        # The file may have changed on disk while the editor ran.
        self.navigator.redraw()


__all__ = ["DirectoryBrowser", "DirbufError"]
