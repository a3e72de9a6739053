"""Ordering rules for directory listings."""

from __future__ import annotations

from typing import Iterable, List, Tuple

from dirbuf.entry import Entry


def sort_key(entry: Entry) -> Tuple[int, str]:
    """Directories come first, then names compared case-insensitively."""
    return (0 if entry.is_directory else 1, entry.name.lower())


def sort_entries(entries: Iterable[Entry]) -> List[Entry]:
    """Return a new list in display order.

    ``sorted`` is stable, so entries whose keys tie keep their scan order.
    """
    return sorted(entries, key=sort_key)


__all__ = ["sort_entries", "sort_key"]
