"""Interfaces the navigator expects from its host environment.

Cursor rows are 1-based (row 1 is the header). Span rows passed to
:class:`StyleApplier` are 0-based line indexes, with line 0 the header.
"""

from __future__ import annotations

from typing import List, Protocol

from dirbuf.highlight import Style


class TextSurface(Protocol):
    def set_lines(self, start: int, end: int, lines: List[str]) -> None:
        """Replace lines ``[start, end)``; an `end` of -1 means to the last line."""

    def set_modifiable(self, modifiable: bool) -> None:
        ...

    def get_current_line(self) -> str:
        ...

    def get_cursor_row(self) -> int:
        ...

    def set_cursor_row(self, row: int) -> None:
        ...

    def get_viewport_width(self) -> int:
        ...


class StyleApplier(Protocol):
    def apply_span(self, row: int, style: Style, start: int, end: int) -> None:
        ...

    def clear_all_spans(self) -> None:
        ...


class FileOpener(Protocol):
    def open_file(self, absolute_path: str) -> None:
        ...


class Notifier(Protocol):
    def warn(self, message: str) -> None:
        ...


__all__ = ["FileOpener", "Notifier", "StyleApplier", "TextSurface"]
