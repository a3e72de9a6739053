"""In-memory text surface that the curses host paints on the screen.

``CursesSurface`` plays both host roles the navigator needs: it stores the
buffer lines (text surface) and the style spans per line (style applier).
Drawing is a separate step so the navigator never touches curses directly.
"""

from __future__ import annotations

import curses
from typing import Dict, List, Optional, Tuple

from dirbuf.colors import style_attr
from dirbuf.formatting import display_width
from dirbuf.highlight import LINE_END, Style


class ReadOnlySurfaceError(Exception):
    """Raised when lines are written while the surface is not modifiable."""


class CursesSurface:
    """Line buffer with a 1-based cursor, per-line spans and a scroll offset."""

    def __init__(self, viewport_width: int = 80) -> None:
        self.viewport_width = viewport_width
        self.lines: List[str] = [""]
        self.spans: Dict[int, List[Tuple[Style, int, int]]] = {}
        self.cursor_row = 1
        self.scroll_offset = 0
        self.modifiable = True

    # Text surface

    def set_lines(self, start: int, end: int, lines: List[str]) -> None:
        if not self.modifiable:
            raise ReadOnlySurfaceError("Surface is not modifiable.")
        if end < 0:
            end = len(self.lines)
        self.lines[start:end] = list(lines)
        if not self.lines:
            self.lines = [""]
        self.cursor_row = min(self.cursor_row, len(self.lines))

    def set_modifiable(self, modifiable: bool) -> None:
        self.modifiable = modifiable

    def get_current_line(self) -> str:
        return self.lines[self.cursor_row - 1]

    def get_cursor_row(self) -> int:
        return self.cursor_row

    def set_cursor_row(self, row: int) -> None:
        self.cursor_row = max(1, min(row, len(self.lines)))

    def get_viewport_width(self) -> int:
        return self.viewport_width

    # Style applier

    def apply_span(self, row: int, style: Style, start: int, end: int) -> None:
        self.spans.setdefault(row, []).append((style, start, end))

    def clear_all_spans(self) -> None:
        self.spans.clear()

    # Cursor movement

    def move_cursor(self, delta: int) -> None:
        self.set_cursor_row(self.cursor_row + delta)

    def ensure_cursor_visible(self, viewport_height: int) -> None:
        """Adjust scroll offset so cursor is visible."""
        if viewport_height <= 0:
            self.scroll_offset = 0
            return
        index = self.cursor_row - 1
        if index < self.scroll_offset:
            self.scroll_offset = index
        elif index >= self.scroll_offset + viewport_height:
            self.scroll_offset = index - viewport_height + 1
        max_offset = max(len(self.lines) - viewport_height, 0)
        self.scroll_offset = max(0, min(self.scroll_offset, max_offset))

    # Drawing

    def cell_styles(self, row: int, width: int) -> List[Optional[Style]]:
        """Resolve the style of each cell on `row`; later spans win."""
        cells: List[Optional[Style]] = [None] * width
        for style, start, end in self.spans.get(row, []):
            stop = width if end == LINE_END else min(end, width)
            for column in range(max(start, 0), stop):
                cells[column] = style
        return cells

    def draw(
        self,
        stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
        origin_y: int,
        height: int,
        width: int,
    ) -> None:
        """Paint the visible lines into the given rows of `stdscr`."""
        self.viewport_width = width
        self.ensure_cursor_visible(height)
        visible = self.lines[self.scroll_offset : self.scroll_offset + height]
        for offset, line in enumerate(visible):
            row = self.scroll_offset + offset
            is_cursor = row == self.cursor_row - 1
            self._draw_line(stdscr, origin_y + offset, row, line, width, is_cursor)

    def _draw_line(
        self,
        stdscr: "curses._CursesWindow",  # type: ignore[name-defined]
        y: int,
        row: int,
        line: str,
        width: int,
        is_cursor: bool,
    ) -> None:
        base_attr = curses.A_REVERSE if is_cursor else curses.A_NORMAL
        cells = self.cell_styles(row, width)
        column = 0
        for text, text_width in _clusters(line):
            if column + text_width > width:
                break
            style = cells[column] if column < width else None
            attr = base_attr | (style_attr(style) if style is not None else curses.A_NORMAL)
            try:
                stdscr.addstr(y, column, text, attr)
            except curses.error:
                # Writing the bottom-right cell moves the cursor off screen.
                pass
            column += text_width
        if is_cursor and column < width:
            try:
                stdscr.addstr(y, column, " " * (width - column), base_attr)
            except curses.error:
                pass


def _clusters(line: str) -> List[Tuple[str, int]]:
    """Split `line` into cells, keeping zero-width marks with the character before them."""
    clusters: List[Tuple[str, int]] = []
    for char in line:
        char_width = display_width(char)
        if char_width == 0 and clusters:
            text, text_width = clusters[-1]
            clusters[-1] = (text + char, text_width)
        elif clusters and clusters[-1][1] == 0:
            text, _ = clusters[-1]
            clusters[-1] = (text + char, char_width)
        else:
            clusters.append((char, char_width))
    return clusters


__all__ = ["CursesSurface", "ReadOnlySurfaceError"]
