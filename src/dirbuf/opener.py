"""Open selected files in an external editor."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Callable, List, Optional

LOGGER = logging.getLogger(__name__)

DEFAULT_EDITOR = "vi"


def editor_command() -> List[str]:
    """Return the editor command from ``$VISUAL``/``$EDITOR``."""
    for variable in ("VISUAL", "EDITOR"):
        value = os.environ.get(variable, "").strip()
        if value:
            command = shlex.split(value)
            if command:
                return command
    return [DEFAULT_EDITOR]


class ExternalEditorOpener:
    """Suspend the terminal UI, run the editor on a file, then resume.

    `suspend` and `resume` hand the terminal over to the editor and back.
    `report` receives a message when the editor could not be launched.
    """

    def __init__(
        self,
        suspend: Callable[[], None],
        resume: Callable[[], None],
        report: Callable[[str], None],
    ) -> None:
        self._suspend = suspend
        self._resume = resume
        self._report = report
        self.last_opened: Optional[str] = None

    def open_file(self, absolute_path: str) -> None:
        command = [*editor_command(), absolute_path]
        LOGGER.info("Running %s", " ".join(command))
        self._suspend()
        try:
            subprocess.run(command, check=False)
            self.last_opened = absolute_path
        except (OSError, subprocess.SubprocessError) as err:
            LOGGER.warning("Editor failed for %s: %s", absolute_path, err)
            self._report(f"Command failed: {err}")
        finally:
            self._resume()


__all__ = ["DEFAULT_EDITOR", "ExternalEditorOpener", "editor_command"]
