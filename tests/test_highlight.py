"""Tests for highlight span computation."""

from __future__ import annotations

from dirbuf.entry import Entry, EntryType
from dirbuf.highlight import LINE_END, Span, Style, compute_spans, entry_spans, header_spans
from dirbuf.layout import Signs


def _entry(name, entry_type=EntryType.FILE, link=None, size=None):
    return Entry(name=name, type=entry_type, mtime=0.0, absolute_path="/w/" + name, link=link, size=size)


def test_header_covers_whole_line() -> None:
    assert header_spans() == [Span(Style.CWD, 0, LINE_END)]


def test_directory_spans() -> None:
    spans = entry_spans(_entry("src/", EntryType.DIRECTORY), 64)
    assert spans == [
        Span(Style.SIGN, 0, 1),
        Span(Style.DIRECTORY, 1, 5),
        Span(Style.TIME, 64, LINE_END),
    ]


def test_file_spans() -> None:
    spans = entry_spans(_entry("notes.txt"), 24)
    assert spans[1] == Span(Style.FILE, 1, 10)
    assert spans[-1] == Span(Style.TIME, 24, LINE_END)


def test_link_layered_over_name() -> None:
    spans = entry_spans(_entry("docs/", EntryType.DIRECTORY, link=EntryType.DIRECTORY), 64)
    assert Span(Style.DIRECTORY, 1, 6) in spans
    assert Span(Style.LINK, 1, 6) in spans


def test_size_span_ends_at_timestamp_column() -> None:
    spans = entry_spans(_entry("big.iso", size="4.2G"), 64)
    assert Span(Style.SIZE, 60, 64) in spans


def test_no_size_span_without_size() -> None:
    styles = [span.style for span in entry_spans(_entry("small"), 64)]
    assert Style.SIZE not in styles
    assert Style.LINK not in styles


def test_name_span_uses_display_width() -> None:
    spans = entry_spans(_entry("日本.md"), 64)
    assert spans[1] == Span(Style.FILE, 1, 8)


def test_marker_width_shifts_name_span() -> None:
    signs = Signs(directory="▸ ", file="  ")
    spans = entry_spans(_entry("lib/", EntryType.DIRECTORY), 64, signs)
    assert spans[0] == Span(Style.SIGN, 0, 2)
    assert spans[1] == Span(Style.DIRECTORY, 2, 6)


def test_compute_spans_one_list_per_line() -> None:
    entries = [_entry("a/", EntryType.DIRECTORY), _entry("b")]
    spans = compute_spans(entries, 64)
    assert len(spans) == 3
    assert spans[0] == header_spans()
    assert spans[1][1].style is Style.DIRECTORY
    assert spans[2][1].style is Style.FILE
