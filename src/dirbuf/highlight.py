"""Compute the style spans the host applies on top of the rendered lines."""

from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple, Sequence

from dirbuf.entry import Entry
from dirbuf.formatting import display_width
from dirbuf.layout import DEFAULT_SIGNS, Signs

LINE_END = -1

# Flat listing: nothing is ever indented.
ENTRY_DEPTH = 0


class Style(Enum):
    CWD = "cwd"
    SIGN = "sign"
    DIRECTORY = "directory"
    FILE = "file"
    LINK = "link"
    SIZE = "size"
    TIME = "time"


class Span(NamedTuple):
    style: Style
    start: int
    end: int


def header_spans() -> List[Span]:
    return [Span(Style.CWD, 0, LINE_END)]


def entry_spans(
    entry: Entry, timestamp_start: int, signs: Signs = DEFAULT_SIGNS
) -> List[Span]:
    """Spans for one entry row.

    The link style covers the same cells as the name style; hosts layer it on
    top. The timestamp span always starts at the shared column.
    """
    name_start = ENTRY_DEPTH + display_width(signs.marker_for(entry))
    name_end = name_start + display_width(entry.name)
    name_style = Style.DIRECTORY if entry.is_directory else Style.FILE

    spans = [
        Span(Style.SIGN, ENTRY_DEPTH, name_start),
        Span(name_style, name_start, name_end),
    ]
    if entry.is_link:
        spans.append(Span(Style.LINK, name_start, name_end))
    if entry.size:
        spans.append(Span(Style.SIZE, timestamp_start - display_width(entry.size), timestamp_start))
    spans.append(Span(Style.TIME, timestamp_start, LINE_END))
    return spans


def compute_spans(
    entries: Sequence[Entry], timestamp_start: int, signs: Signs = DEFAULT_SIGNS
) -> List[List[Span]]:
    """Return spans per line; index 0 is the header line."""
    spans = [header_spans()]
    for entry in entries:
        spans.append(entry_spans(entry, timestamp_start, signs))
    return spans


__all__ = [
    "LINE_END",
    "Span",
    "Style",
    "compute_spans",
    "entry_spans",
    "header_spans",
]
