"""Tests for the in-memory curses surface."""

from __future__ import annotations

import curses
from unittest.mock import Mock, patch

import pytest

from dirbuf.highlight import LINE_END, Style
from dirbuf.screen import CursesSurface, ReadOnlySurfaceError


def _surface(lines):
    surface = CursesSurface()
    surface.set_lines(0, -1, lines)
    return surface


def test_set_lines_replaces_whole_buffer():
    surface = _surface(["a", "b", "c"])
    surface.set_lines(0, -1, ["x"])
    assert surface.lines == ["x"]


def test_set_lines_replaces_range():
    surface = _surface(["a", "b", "c"])
    surface.set_lines(1, 2, ["B1", "B2"])
    assert surface.lines == ["a", "B1", "B2", "c"]


def test_set_lines_requires_modifiable():
    surface = _surface(["a"])
    surface.set_modifiable(False)
    with pytest.raises(ReadOnlySurfaceError):
        surface.set_lines(0, -1, ["b"])
    assert surface.lines == ["a"]


def test_empty_buffer_keeps_one_line():
    surface = _surface(["a", "b"])
    surface.set_lines(0, -1, [])
    assert surface.lines == [""]
    assert surface.get_cursor_row() == 1


def test_cursor_is_clamped():
    surface = _surface(["header", "one", "two"])
    surface.set_cursor_row(10)
    assert surface.get_cursor_row() == 3
    surface.set_cursor_row(0)
    assert surface.get_cursor_row() == 1
    surface.move_cursor(1)
    assert surface.get_current_line() == "one"


def test_shrinking_buffer_pulls_cursor_back():
    surface = _surface(["h", "1", "2", "3"])
    surface.set_cursor_row(4)
    surface.set_lines(0, -1, ["h", "1"])
    assert surface.get_cursor_row() == 2


def test_later_spans_win():
    surface = _surface(["  name  "])
    surface.apply_span(0, Style.FILE, 1, 5)
    surface.apply_span(0, Style.LINK, 1, 5)
    surface.apply_span(0, Style.TIME, 6, LINE_END)
    cells = surface.cell_styles(0, 8)
    assert cells == [None, Style.LINK, Style.LINK, Style.LINK, Style.LINK, None, Style.TIME, Style.TIME]


def test_clear_all_spans():
    surface = _surface(["x"])
    surface.apply_span(0, Style.CWD, 0, LINE_END)
    surface.clear_all_spans()
    assert surface.spans == {}


def test_ensure_cursor_visible_scrolls():
    surface = _surface([str(i) for i in range(20)])
    surface.set_cursor_row(15)
    surface.ensure_cursor_visible(5)
    assert surface.scroll_offset == 10
    surface.set_cursor_row(2)
    surface.ensure_cursor_visible(5)
    assert surface.scroll_offset == 1


@patch("curses.has_colors", return_value=False)
def test_draw_paints_visible_lines(mock_has_colors):
    surface = _surface(["/path", " a.txt"])
    surface.apply_span(0, Style.CWD, 0, LINE_END)
    surface.set_cursor_row(2)
    stdscr = Mock()

    surface.draw(stdscr, 0, 5, 20)

    painted = "".join(call.args[2] for call in stdscr.addstr.call_args_list if call.args[0] == 0)
    assert painted == "/path"
    header_attrs = {call.args[3] for call in stdscr.addstr.call_args_list if call.args[0] == 0}
    assert header_attrs == {curses.A_BOLD}
    cursor_calls = [call for call in stdscr.addstr.call_args_list if call.args[0] == 1]
    assert all(call.args[3] & curses.A_REVERSE for call in cursor_calls)
    assert surface.viewport_width == 20


@patch("curses.has_colors", return_value=False)
def test_draw_clips_long_lines(mock_has_colors):
    surface = _surface(["x" * 30])
    stdscr = Mock()
    surface.draw(stdscr, 0, 3, 10)
    columns = [call.args[1] for call in stdscr.addstr.call_args_list if call.args[2] == "x"]
    assert max(columns) == 9


@patch("curses.has_colors", return_value=False)
def test_draw_keeps_combining_marks_with_their_base(mock_has_colors):
    surface = _surface(["cafe\u0301 x"])
    stdscr = Mock()
    surface.draw(stdscr, 0, 3, 20)
    painted = [(call.args[1], call.args[2]) for call in stdscr.addstr.call_args_list if call.args[0] == 0]
    assert painted[:6] == [(0, "c"), (1, "a"), (2, "f"), (3, "e\u0301"), (4, " "), (5, "x")]
