"""Lay out directory entries as fixed-width text lines.

Every content line has the same shape::

    <marker><name><padding>[<size>]<timestamp>

The timestamp ends at the bucketed viewport width, so all timestamps line up
in one column that starts at ``bucket - TIMESTAMP_WIDTH``. Widths are measured
in terminal cells, so names with wide characters stay aligned too.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from dirbuf.entry import Entry
from dirbuf.formatting import TIMESTAMP_WIDTH, display_width, format_timestamp_field

# Viewport bucketing
WIDE_VIEWPORT = 99
MAX_BUCKET_WIDTH = 80
MIN_BUCKET_WIDTH = 40
VIEWPORT_MARGIN = 10


@dataclass(frozen=True)
class Signs:
    """Prefix glyphs drawn in front of each entry name."""

    directory: str = " "
    file: str = " "

    def marker_for(self, entry: Entry) -> str:
        # Directories always show the collapsed marker.
        return self.directory if entry.is_directory else self.file


DEFAULT_SIGNS = Signs()


@dataclass(frozen=True)
class Layout:
    header: str
    lines: List[str]
    timestamp_start: int

    @property
    def all_lines(self) -> List[str]:
        """Header followed by the content lines, ready for the surface."""
        return [self.header, *self.lines]


def width_bucket(viewport_width: int) -> int:
    """Map a viewport width onto a coarse width so small resizes keep alignment."""
    if viewport_width >= WIDE_VIEWPORT:
        return MAX_BUCKET_WIDTH
    if viewport_width <= MIN_BUCKET_WIDTH:
        return MIN_BUCKET_WIDTH
    return viewport_width - VIEWPORT_MARGIN


def timestamp_column(bucket: int) -> int:
    return bucket - TIMESTAMP_WIDTH


def format_entry_line(entry: Entry, bucket: int, signs: Signs = DEFAULT_SIGNS) -> str:
    """Render one entry; padding never goes negative, timestamps are never cut.

    The timestamp field opens with at least one blank, so a long name or a
    size never touches the date.
    """
    marker = signs.marker_for(entry)
    size = entry.size or ""
    used = display_width(marker) + display_width(entry.name) + display_width(size)
    padding = max(bucket - used - TIMESTAMP_WIDTH, 0)
    return f"{marker}{entry.name}{' ' * padding}{size}{format_timestamp_field(entry.mtime)}"


def render_layout(
    path: str,
    entries: Sequence[Entry],
    viewport_width: int,
    signs: Signs = DEFAULT_SIGNS,
) -> Layout:
    """Build the header and one content line per entry."""
    bucket = width_bucket(viewport_width)
    lines = [format_entry_line(entry, bucket, signs) for entry in entries]
    return Layout(header=path, lines=lines, timestamp_start=timestamp_column(bucket))


__all__ = [
    "DEFAULT_SIGNS",
    "Layout",
    "Signs",
    "format_entry_line",
    "render_layout",
    "timestamp_column",
    "width_bucket",
]
