"""Remember where the cursor was in each visited directory."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class HistoryRecord:
    path: str
    cursor_row: int


class CursorHistory:
    """Stack of ``(path, cursor_row)`` records.

    Records are pushed before every navigation and never popped; lookups scan
    from the most recent record backwards.
    """

    def __init__(self) -> None:
        self._records: List[HistoryRecord] = []

    def push(self, path: str, cursor_row: int) -> None:
        self._records.append(HistoryRecord(path, cursor_row))

    def lookup(self, path: str) -> Optional[int]:
        """Return the most recent cursor row saved for `path`, if any."""
        for record in reversed(self._records):
            if record.path == path:
                return record.cursor_row
        return None

    @property
    def latest(self) -> Optional[HistoryRecord]:
        return self._records[-1] if self._records else None

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[HistoryRecord]:
        return iter(self._records)


__all__ = ["CursorHistory", "HistoryRecord"]
