"""Directory entry model shared by the lister, layout and highlighter."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

SEP = os.sep


class EntryType(Enum):
    FILE = "file"
    DIRECTORY = "directory"

    @property
    def label(self) -> str:
        if self is EntryType.DIRECTORY:
            return "Directory"
        return "File"


@dataclass(frozen=True)
class Entry:
    """One child of the directory being browsed.

    ``name`` carries a trailing separator when the child is (or links to) a
    directory. ``link`` is only set for symbolic links and holds the type the
    link resolved to; it is a rendering flag, ``type`` already reflects the
    resolution.
    """

    name: str
    type: EntryType
    mtime: float
    absolute_path: str
    link: Optional[EntryType] = None
    size: Optional[str] = None

    @property
    def is_directory(self) -> bool:
        return self.type is EntryType.DIRECTORY

    @property
    def is_link(self) -> bool:
        return self.link is not None

    @property
    def bare_name(self) -> str:
        """Return the name without the directory suffix."""
        if self.is_directory and self.name.endswith(SEP):
            return self.name[: -len(SEP)]
        return self.name


__all__ = ["Entry", "EntryType", "SEP"]
