"""Tests for listing order."""

from dirbuf.entry import Entry, EntryType
from dirbuf.sorting import sort_entries, sort_key


def _entry(name, is_dir=False):
    entry_type = EntryType.DIRECTORY if is_dir else EntryType.FILE
    return Entry(name=name, type=entry_type, mtime=0.0, absolute_path="/x/" + name.rstrip("/"))


def test_directories_before_files():
    entries = [_entry("a.txt"), _entry("zeta/", True), _entry("B.txt"), _entry("alpha/", True)]
    names = [entry.name for entry in sort_entries(entries)]
    assert names == ["alpha/", "zeta/", "a.txt", "B.txt"]


def test_names_compare_case_insensitively():
    entries = [_entry("b.txt"), _entry("C.txt"), _entry("a.txt")]
    names = [entry.name for entry in sort_entries(entries)]
    assert names == ["a.txt", "b.txt", "C.txt"]


def test_ties_keep_scan_order():
    first = _entry("readme")
    second = _entry("README")
    assert sort_entries([first, second]) == [first, second]
    assert sort_entries([second, first]) == [second, first]


def test_sorting_does_not_modify_input():
    entries = [_entry("b"), _entry("a")]
    sort_entries(entries)
    assert [entry.name for entry in entries] == ["b", "a"]


def test_sort_order_invariant():
    entries = [
        _entry(name, is_dir)
        for name, is_dir in [
            ("src/", True), ("Makefile", False), ("docs/", True), ("setup.cfg", False),
            ("Build/", True), ("a.py", False), ("_private", False), ("Zed/", True),
        ]
    ]
    ordered = sort_entries(entries)
    kinds = [entry.is_directory for entry in ordered]
    assert kinds == sorted(kinds, reverse=True)
    for left, right in zip(ordered, ordered[1:]):
        if left.is_directory == right.is_directory:
            assert left.name.lower() <= right.name.lower()
    assert [sort_key(entry) for entry in ordered] == sorted(sort_key(entry) for entry in entries)
