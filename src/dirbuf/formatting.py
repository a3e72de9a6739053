"""Small helpers that turn raw file metadata into readable text."""

from __future__ import annotations

from datetime import datetime

from wcwidth import wcswidth, wcwidth

# The date is narrower than its right-aligned column.
TIMESTAMP_FORMAT = "%y-%m-%d %H:%M"
TIMESTAMP_WIDTH = 16


def format_size(size: int) -> str:
    """Convert a byte count into a friendly string such as ``12.4K``."""
    units = ["B", "K", "M", "G", "T", "P", "E", "Z", "Y"]
    value = float(size)
    index = 0
    while value >= 1024 and index < len(units) - 1:
        value /= 1024
        index += 1
    unit = units[index]
    if unit == "B":
        return f"{int(value)}{unit}"
    formatted = f"{value:.1f}".rstrip("0").rstrip(".")
    return f"{formatted}{unit}"


def format_mtime(seconds: float) -> str:
    """Render a modification time as a local ``yy-mm-dd HH:MM`` timestamp."""
    return datetime.fromtimestamp(seconds).strftime(TIMESTAMP_FORMAT)


def format_timestamp_field(seconds: float) -> str:
    """Right-align the timestamp in its ``TIMESTAMP_WIDTH`` column."""
    return format_mtime(seconds).rjust(TIMESTAMP_WIDTH)


def display_width(text: str) -> int:
    """Return the number of terminal cells needed to show `text`.

    Wide characters take two cells. Control characters make ``wcswidth``
    give up, so those are counted one by one as zero-width instead.
    """
    width = wcswidth(text)
    if width >= 0:
        return width
    return sum(max(wcwidth(char), 0) for char in text)


__all__ = [
    "TIMESTAMP_FORMAT",
    "TIMESTAMP_WIDTH",
    "display_width",
    "format_mtime",
    "format_timestamp_field",
    "format_size",
]
