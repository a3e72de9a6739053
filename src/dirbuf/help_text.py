"""Build help content for the status area."""

from __future__ import annotations

from typing import List


def build_help_lines(show_hidden: bool = False) -> List[str]:
    """Return the shortcut summary shown when help is toggled."""
    hidden_state = "on" if show_hidden else "off"
    return [
        "↑↓/jk move | PgUp/PgDn page | Enter/l open | Bksp/h/- up | q quit",
        f"~ home | c cwd | . hidden ({hidden_state}) | r refresh | ? help",
    ]


__all__ = ["build_help_lines"]
