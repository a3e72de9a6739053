"""Command-line entry point for dirbuf.

The start-up sequence is:

1. Read command line arguments and the configuration file.
2. Check that the requested directory really exists.
3. Launch the interactive browser.
4. Print where the user ended up, or log any crash information.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
import os
import sys
import traceback
from datetime import datetime
from pathlib import Path
from typing import List, Optional

from dirbuf import DirbufError, DirectoryBrowser, __version__
from dirbuf import config

LOGGER = logging.getLogger(__name__)

# Crash dump file location
CRASH_LOG_FILE = Path.home() / "dirbuf.crash.txt"

# Log file used when DIRBUF_DEBUG is set without --log-file
DEBUG_LOG_FILE = Path.home() / "dirbuf.log"
DEBUG_ENV_VAR = "DIRBUF_DEBUG"


def configure_logging(log_file: Optional[Path]) -> None:
    """Send log records to a file when asked to.

    The terminal belongs to curses while the browser runs, so nothing is
    logged unless ``--log-file`` is given or ``DIRBUF_DEBUG`` is set.
    """
    if log_file is None and os.environ.get(DEBUG_ENV_VAR):
        log_file = DEBUG_LOG_FILE
    if log_file is None:
        logging.getLogger("dirbuf").addHandler(logging.NullHandler())
        return
    logging.basicConfig(
        filename=str(log_file.expanduser()),
        level=logging.DEBUG,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def validate_directory(path: Path) -> Path:
    """Return `path` resolved, or the current directory when it is unusable.

    A typo or a file path should not stop the browser from starting, so bad
    values fall back to ``Path.cwd()`` with a warning on stderr.
    """
    try:
        resolved = path.expanduser().resolve()
        if not resolved.exists():
            print(f"Warning: directory does not exist: {path}", file=sys.stderr)
            print("   Using current directory instead", file=sys.stderr)
            return Path.cwd()
        if not resolved.is_dir():
            print(f"Warning: path is not a directory: {path}", file=sys.stderr)
            print("   Using current directory instead", file=sys.stderr)
            return Path.cwd()
        return resolved
    except (OSError, RuntimeError) as e:
        print(f"Warning: Cannot access directory: {path}", file=sys.stderr)
        print(f"   Error: {e}", file=sys.stderr)
        print("   Using current directory instead", file=sys.stderr)
        return Path.cwd()


def write_crash_log(exception: BaseException) -> None:
    """Append a detailed crash report to :data:`CRASH_LOG_FILE`."""
    try:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        crash_info = f"""
================================================================================
dirbuf Crash Report
================================================================================
Timestamp: {timestamp}
Version: {__version__}
Python: {sys.version}
Platform: {sys.platform}

Exception Type: {type(exception).__name__}
Exception Message: {str(exception)}

Traceback:
{traceback.format_exc()}
================================================================================
"""
        with open(CRASH_LOG_FILE, "a") as f:
            f.write(crash_info)

        print("\ndirbuf crashed unexpectedly!", file=sys.stderr)
        print(f"   Crash details saved to: {CRASH_LOG_FILE}", file=sys.stderr)
    except OSError:
        print("\ndirbuf crashed and could not write crash log!", file=sys.stderr)
        traceback.print_exc()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Turn the command-line text into structured options."""
    parser = argparse.ArgumentParser(
        prog="dirbuf",
        description="Browse a directory tree one directory at a time in the terminal.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Show version number and exit.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to start in (default: current directory).",
    )
    parser.add_argument(
        "--show-hidden",
        action="store_true",
        default=None,
        help="Start with dotfiles visible.",
    )
    parser.add_argument(
        "--show-size",
        action="store_true",
        default=None,
        help="Show file sizes next to the timestamps.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help=f"Write debug logs to this file (also enabled by ${DEBUG_ENV_VAR}).",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help=f"Write the default configuration to {config.CONFIG_FILE} and exit.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Launch the browser and report the final directory."""
    try:
        args = parse_args(argv)
        configure_logging(args.log_file)

        if args.init_config:
            if config.create_default_config():
                print(f"Wrote default configuration to {config.CONFIG_FILE}")
            else:
                print(f"Configuration already exists: {config.CONFIG_FILE}")
            return 0

        # The user interface uses the terminal directly; curses would fail
        # when stdout is redirected.
        if not sys.stdout.isatty():
            print("The directory browser requires an interactive terminal.")
            return 1

        settings_table = config.load_config()
        settings = config.get_navigator_settings(settings_table)
        overrides = {}
        if args.show_hidden is not None:
            overrides["show_hidden_files"] = args.show_hidden
        if args.show_size is not None:
            overrides["show_size"] = args.show_size
        if overrides:
            settings = dataclasses.replace(settings, **overrides)

        start_dir = validate_directory(Path(args.directory))
        LOGGER.info("Starting in %s", start_dir)

        browser = DirectoryBrowser(
            start_dir,
            settings=settings,
            style_colors=config.get_style_colors(settings_table),
        )
        final_dir = browser.browse()

        print(f"Final directory: {final_dir}")
        return 0

    except DirbufError as err:
        print(f"Could not start browser: {err}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        write_crash_log(e)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
