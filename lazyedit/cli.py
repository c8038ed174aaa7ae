"""Command-line front door for lazyedit.

Parses CLI options, sets up logging, and merges flags over the config file.
Then dispatches into the interactive editor runtime.
"""

from __future__ import annotations

import argparse
import dataclasses
import logging
from pathlib import Path

from . import __version__
from .runtime import run_editor
from .runtime.config import load_editor_config
from .runtime.terminal import TerminalError

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values >= 0."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lazyedit", description="Edit a text file in the terminal.")
    parser.add_argument("path", nargs="?", default=None, help="File to edit. Created on first save if missing.")
    parser.add_argument("--tab-stop", type=_positive_int, default=None, help="Columns per tab stop.")
    parser.add_argument(
        "--quit-times",
        type=_nonnegative_int,
        default=None,
        help="Extra Ctrl-Q presses required to discard unsaved changes.",
    )
    parser.add_argument("--log-file", type=Path, default=None, help="Append debug logs to this file.")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="Minimum level written to --log-file.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(log_file: Path | None, level: str) -> None:
    """Attach a file handler to the package logger when ``log_file`` is set."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("lazyedit")
    package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, level))


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and launch the editor."""
    args = build_parser().parse_args(argv)
    try:
        configure_logging(args.log_file, args.log_level)
    except OSError as exc:
        raise SystemExit(f"lazyedit: cannot open log file: {exc}") from exc

    config = load_editor_config()
    overrides = {}
    if args.tab_stop is not None:
        overrides["tab_stop"] = args.tab_stop
    if args.quit_times is not None:
        overrides["quit_times"] = args.quit_times
    if overrides:
        config = dataclasses.replace(config, **overrides)

    path = Path(args.path) if args.path is not None else None
    if path is not None and path.is_dir():
        raise SystemExit(f"Is a directory: {path}")
    try:
        run_editor(path, config)
    except (TerminalError, OSError) as exc:
        raise SystemExit(f"lazyedit: {exc}") from exc


if __name__ == "__main__":
    main()
