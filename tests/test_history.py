"""Tests for the cursor history."""

from dirbuf.history import CursorHistory, HistoryRecord


def test_empty_history() -> None:
    history = CursorHistory()
    assert len(history) == 0
    assert history.latest is None
    assert history.lookup("/tmp") is None


def test_lookup_returns_most_recent_row() -> None:
    history = CursorHistory()
    history.push("/tmp", 3)
    history.push("/home", 2)
    history.push("/tmp", 7)

    assert history.lookup("/tmp") == 7
    assert history.lookup("/home") == 2
    assert history.latest == HistoryRecord("/tmp", 7)


def test_lookup_does_not_pop() -> None:
    history = CursorHistory()
    history.push("/tmp", 4)
    history.lookup("/tmp")
    history.lookup("/tmp")
    assert len(history) == 1
    assert list(history) == [HistoryRecord("/tmp", 4)]


def test_lookup_matches_exact_path() -> None:
    history = CursorHistory()
    history.push("/tmp/a", 5)
    assert history.lookup("/tmp") is None
    assert history.lookup("/tmp/a/") is None
