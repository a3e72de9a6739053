from dirbuf.help_text import build_help_lines


def test_help_lines_cover_shortcuts():
    text = "\n".join(build_help_lines()).lower()
    for token in ("move", "open", "up", "home", "cwd", "hidden", "refresh", "help", "quit"):
        assert token in text


def test_help_lines_report_hidden_state():
    assert "hidden (off)" in "\n".join(build_help_lines(False))
    assert "hidden (on)" in "\n".join(build_help_lines(True))
