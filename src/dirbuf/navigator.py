"""Navigation state machine for a directory buffer.

The navigator owns the current path and its entries. Each action lists the
target directory first and only then commits: when the listing fails the
user is warned and the buffer, the cursor and the history stay exactly as
they were.

Rows follow the host's 1-based cursor numbering::

    row 1   /current/path            <- header, never a selection target
    row 2    first entry             <- FIRST_ENTRY_ROW
    row 3    second entry
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import List, Optional

from dirbuf.entry import SEP, Entry
from dirbuf.filesystem import FilesystemAccess, LocalFilesystem
from dirbuf.highlight import compute_spans
from dirbuf.history import CursorHistory
from dirbuf.host import FileOpener, Notifier, StyleApplier, TextSurface
from dirbuf.layout import DEFAULT_SIGNS, Signs, render_layout
from dirbuf.lister import DirectoryListingError, child_path, list_directory

LOGGER = logging.getLogger(__name__)

HEADER_ROW = 1
FIRST_ENTRY_ROW = 2


@dataclass(frozen=True)
class NavigatorSettings:
    show_hidden_files: bool = False
    show_size: bool = False
    signs: Signs = DEFAULT_SIGNS


class Navigator:
    """Browse a directory tree inside a host text surface."""

    def __init__(
        self,
        surface: TextSurface,
        styles: StyleApplier,
        opener: FileOpener,
        notifier: Notifier,
        fs: Optional[FilesystemAccess] = None,
        settings: Optional[NavigatorSettings] = None,
    ) -> None:
        settings = settings or NavigatorSettings()
        self.surface = surface
        self.styles = styles
        self.opener = opener
        self.notifier = notifier
        self.fs: FilesystemAccess = fs or LocalFilesystem()
        self.show_hidden = settings.show_hidden_files
        self.show_size = settings.show_size
        self.signs = settings.signs
        self.current_path: Optional[str] = None
        self.entries: List[Entry] = []
        self.history = CursorHistory()
        self.running = True

    # Queries

    def entry_at(self, row: int) -> Optional[Entry]:
        """Return the entry displayed on cursor `row`, or ``None`` for the header."""
        index = row - FIRST_ENTRY_ROW
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def selected_entry(self) -> Optional[Entry]:
        return self.entry_at(self.surface.get_cursor_row())

    def row_of(self, name: str) -> Optional[int]:
        for index, entry in enumerate(self.entries):
            if entry.name == name:
                return index + FIRST_ENTRY_ROW
        return None

    # Transitions

    def open(self, path: str) -> bool:
        """Show `path` at session start without recording history."""
        target = self.fs.normalize(path)
        if not self._redraw(target):
            return False
        self._place_cursor(FIRST_ENTRY_ROW)
        return True

    def enter(self, name: Optional[str] = None) -> bool:
        """Descend into the directory `name`, or open it when it is a file.

        Without a name the entry under the cursor is used; on the header row
        nothing happens. A name that is not listed is followed only when it
        is a directory, and is never opened. Returns ``True`` when the
        current path changed.
        """
        if self.current_path is None:
            return False
        if name is None:
            entry = self.selected_entry()
            if entry is None:
                return False
            name = entry.name

        entry = self._entry_named(name)
        if entry is None:
            target = self._child_target(self.current_path, name)
            if not self.fs.is_directory(target):
                LOGGER.warning("No entry %r in %s", name, self.current_path)
                self.notifier.warn(f"No such entry: {name}")
                return False
        elif not entry.is_directory:
            LOGGER.debug("Opening file %s", entry.absolute_path)
            self.opener.open_file(entry.absolute_path)
            return False
        else:
            target = entry.absolute_path

        saved_row = self.history.lookup(target)
        if not self._navigate(target):
            return False
        self._place_cursor(saved_row if saved_row is not None else FIRST_ENTRY_ROW)
        return True

    def up(self) -> bool:
        """Move to the parent directory and select the directory just left."""
        if self.current_path is None:
            return False
        parent = os.path.dirname(self.current_path)
        if parent == self.current_path:
            return False

        left_name = os.path.basename(self.current_path) + SEP
        if not self._navigate(parent):
            return False
        row = self.row_of(left_name)
        self._place_cursor(row if row is not None else FIRST_ENTRY_ROW)
        return True

    def go_home(self) -> bool:
        return self._jump(self.fs.home_dir())

    def go_to_cwd(self) -> bool:
        return self._jump(self.fs.process_cwd())

    def toggle_hidden(self) -> bool:
        """Flip dotfile visibility and keep the cursor on the same entry."""
        if self.current_path is None:
            return False
        row = self.surface.get_cursor_row()
        selected = self.entry_at(row)
        if not self._redraw(self.current_path, show_hidden=not self.show_hidden):
            return False

        if row == HEADER_ROW:
            self._place_cursor(HEADER_ROW)
            return True
        match = self.row_of(selected.name) if selected is not None else None
        self._place_cursor(match if match is not None else FIRST_ENTRY_ROW)
        return True

    def refresh(self) -> bool:
        """Re-read the current directory, keeping the cursor on its entry."""
        if self.current_path is None:
            return False
        selected = self.selected_entry()
        if selected is None:
            return False
        if not self._redraw(self.current_path):
            return False
        match = self.row_of(selected.name)
        self._place_cursor(match if match is not None else FIRST_ENTRY_ROW)
        return True

    def redraw(self) -> bool:
        """Re-render the current directory in place, e.g. after a resize."""
        if self.current_path is None:
            return False
        row = self.surface.get_cursor_row()
        if not self._redraw(self.current_path):
            return False
        self._place_cursor(row)
        return True

    def quit(self) -> Optional[str]:
        """Stop browsing and return the directory the user ended in."""
        self.running = False
        LOGGER.debug("Leaving navigator at %s", self.current_path)
        return self.current_path

    # Internals

    def _entry_named(self, name: str) -> Optional[Entry]:
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def _child_target(self, directory: str, name: str) -> str:
        bare = name[: -len(SEP)] if name.endswith(SEP) else name
        return self.fs.normalize(child_path(directory, bare))

    def _jump(self, destination: str) -> bool:
        if self.current_path is None:
            return self.open(destination)
        if not self._navigate(self.fs.normalize(destination)):
            return False
        self._place_cursor(FIRST_ENTRY_ROW)
        return True

    def _navigate(self, target: str) -> bool:
        """Redraw `target` and record where the cursor was before leaving."""
        previous_path = self.current_path
        previous_row = self.surface.get_cursor_row()
        if not self._redraw(target):
            return False
        if previous_path is not None:
            self.history.push(previous_path, previous_row)
        LOGGER.debug("Moved from %s to %s", previous_path, target)
        return True

    def _redraw(self, path: str, show_hidden: Optional[bool] = None) -> bool:
        if show_hidden is None:
            show_hidden = self.show_hidden
        try:
            entries = list_directory(self.fs, path, show_hidden, self.show_size)
        except DirectoryListingError as err:
            LOGGER.warning("%s", err)
            self.notifier.warn(str(err))
            return False

        layout = render_layout(path, entries, self.surface.get_viewport_width(), self.signs)
        spans = compute_spans(entries, layout.timestamp_start, self.signs)

        self.surface.set_modifiable(True)
        try:
            self.surface.set_lines(0, -1, layout.all_lines)
            self.styles.clear_all_spans()
            for line, line_spans in enumerate(spans):
                for span in line_spans:
                    self.styles.apply_span(line, span.style, span.start, span.end)
        finally:
            self.surface.set_modifiable(False)

        self.current_path = path
        self.entries = entries
        self.show_hidden = show_hidden
        return True

    def _place_cursor(self, row: int) -> None:
        last_row = len(self.entries) + HEADER_ROW
        self.surface.set_cursor_row(min(max(row, HEADER_ROW), last_row))


__all__ = ["FIRST_ENTRY_ROW", "HEADER_ROW", "Navigator", "NavigatorSettings"]
