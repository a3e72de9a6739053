"""Filesystem access used by the directory lister and the navigator."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol

RAW_FILE = "file"
RAW_DIRECTORY = "directory"
RAW_LINK = "link"


@dataclass(frozen=True)
class ScanItem:
    """A raw child reported by a directory scan, before link resolution."""

    name: str
    raw_type: str


@dataclass(frozen=True)
class FileStat:
    mtime: float
    size: Optional[int] = None


class FilesystemAccess(Protocol):
    """Operations the core needs from the filesystem."""

    def scan_directory(self, path: str) -> Iterator[ScanItem]:
        ...

    def stat(self, path: str, follow_symlinks: bool = False) -> FileStat:
        ...

    def is_directory(self, path: str) -> bool:
        ...

    def normalize(self, path: str) -> str:
        ...

    def home_dir(self) -> str:
        ...

    def process_cwd(self) -> str:
        ...


class LocalFilesystem:
    """`FilesystemAccess` backed by the local operating system."""

    def scan_directory(self, path: str) -> Iterator[ScanItem]:
        """List the immediate children of `path`.

        The listing is read eagerly so that scan errors surface here rather
        than halfway through the caller's loop.
        """
        items = []
        with os.scandir(path) as iterator:
            for dir_entry in iterator:
                items.append(ScanItem(dir_entry.name, self._raw_type(dir_entry)))
        return iter(items)

    @staticmethod
    def _raw_type(dir_entry: os.DirEntry) -> str:
        try:
            if dir_entry.is_symlink():
                return RAW_LINK
            if dir_entry.is_dir(follow_symlinks=False):
                return RAW_DIRECTORY
        except OSError:
            pass
        return RAW_FILE

    def stat(self, path: str, follow_symlinks: bool = False) -> FileStat:
        stat_info = os.stat(path, follow_symlinks=follow_symlinks)
        return FileStat(mtime=stat_info.st_mtime, size=stat_info.st_size)

    def is_directory(self, path: str) -> bool:
        return os.path.isdir(path)

    def normalize(self, path: str) -> str:
        """Return an absolute path without ``.``/``..`` parts or trailing separators."""
        normalized = os.path.normpath(os.path.abspath(os.path.expanduser(path)))
        if normalized.startswith("//"):
            # POSIX keeps a leading double slash; treat it as the root.
            normalized = "/" + normalized.lstrip("/")
        return normalized

    def home_dir(self) -> str:
        return os.path.expanduser("~")

    def process_cwd(self) -> str:
        return os.getcwd()


__all__ = [
    "FileStat",
    "FilesystemAccess",
    "LocalFilesystem",
    "RAW_DIRECTORY",
    "RAW_FILE",
    "RAW_LINK",
    "ScanItem",
]
