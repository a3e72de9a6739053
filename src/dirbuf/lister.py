"""Turn a directory scan into the sorted entries shown in the buffer."""

from __future__ import annotations

import logging
from typing import List, Optional

from dirbuf.entry import SEP, Entry, EntryType
from dirbuf.filesystem import RAW_DIRECTORY, RAW_LINK, FilesystemAccess, ScanItem
from dirbuf.formatting import format_size
from dirbuf.sorting import sort_entries

LOGGER = logging.getLogger(__name__)

HIDDEN_PREFIX = "."


class DirectoryListingError(IOError):
    """Raised when a directory cannot be scanned."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path
        self.reason = reason


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_PREFIX)


def child_path(directory: str, name: str) -> str:
    """Join a bare child name onto a normalized directory path."""
    if directory.endswith(SEP):
        return directory + name
    return directory + SEP + name


def list_directory(
    fs: FilesystemAccess,
    path: str,
    show_hidden: bool,
    show_size: bool = False,
) -> List[Entry]:
    """Scan `path` and return its children in display order.

    Dotfiles are dropped unless `show_hidden` is set. Raises
    :class:`DirectoryListingError` when `path` cannot be scanned.
    """
    try:
        items = list(fs.scan_directory(path))
    except OSError as err:
        reason = err.strerror or str(err)
        raise DirectoryListingError(path, reason) from err

    entries: List[Entry] = []
    for item in items:
        if not show_hidden and is_hidden(item.name):
            continue
        entry = build_entry(fs, path, item, show_size)
        if entry is not None:
            entries.append(entry)
    return sort_entries(entries)


def build_entry(
    fs: FilesystemAccess,
    directory: str,
    item: ScanItem,
    show_size: bool = False,
) -> Optional[Entry]:
    """Resolve one scanned child into an :class:`Entry`.

    Symbolic links take the type of their target. A link whose target cannot
    be reached is shown as a file. Returns ``None`` when the child disappeared
    after the scan.
    """
    absolute_path = child_path(directory, item.name)
    try:
        own_stat = fs.stat(absolute_path)
    except OSError:
        LOGGER.debug("Skipping %s: vanished during listing", absolute_path)
        return None

    link: Optional[EntryType] = None
    if item.raw_type == RAW_LINK:
        entry_type = EntryType.DIRECTORY if fs.is_directory(absolute_path) else EntryType.FILE
        link = entry_type
    elif item.raw_type == RAW_DIRECTORY:
        entry_type = EntryType.DIRECTORY
    else:
        entry_type = EntryType.FILE

    name = item.name + SEP if entry_type is EntryType.DIRECTORY else item.name

    size: Optional[str] = None
    if show_size and entry_type is EntryType.FILE:
        size = _file_size(fs, absolute_path, own_stat.size, link is not None)

    return Entry(
        name=name,
        type=entry_type,
        mtime=own_stat.mtime,
        absolute_path=absolute_path,
        link=link,
        size=size,
    )


def _file_size(
    fs: FilesystemAccess, path: str, own_size: Optional[int], is_link: bool
) -> Optional[str]:
    size = own_size
    if is_link:
        try:
            size = fs.stat(path, follow_symlinks=True).size
        except OSError:
            pass
    if size is None:
        return None
    return format_size(size)


__all__ = [
    "DirectoryListingError",
    "build_entry",
    "child_path",
    "is_hidden",
    "list_directory",
]
