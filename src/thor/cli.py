"""Entry point for the thor CLI."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from thor.editor import Editor
from thor.settings import SettingsManager
from thor.terminal import ProcessTerminal, TerminalError

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="thor", description="THOR - The Text EdiTHOR")
    parser.add_argument("file", nargs="?", help="File to open")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"])
    parser.add_argument(
        "--log-file",
        default=os.environ.get("THOR_LOG"),
        help="Write logs to this file (default: $THOR_LOG; no logging when unset)",
    )
    return parser.parse_args(argv)


def setup_logging(level: str, log_file: str | None) -> None:
    """Log to *log_file* only; stderr belongs to the editor's screen."""
    if log_file:
        logging.basicConfig(
            filename=log_file,
            level=getattr(logging, level.upper()),
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
    else:
        logging.getLogger("thor").addHandler(logging.NullHandler())


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    settings = SettingsManager.create(os.getcwd()).resolve()
    terminal = ProcessTerminal()
    editor = Editor(terminal, settings)

    if args.file:
        try:
            editor.open(args.file)
        except OSError as exc:
            logger.error("cannot open %s: %s", args.file, exc)
            print(f"thor: {args.file}: {exc.strerror or exc}", file=sys.stderr)
            sys.exit(1)

    try:
        terminal.enable_raw_mode()
        try:
            code = editor.run()
        finally:
            terminal.clear_screen()
            terminal.disable_raw_mode()
    except TerminalError as exc:
        logger.error("terminal failure: %s", exc)
        print(f"thor: {exc}", file=sys.stderr)
        sys.exit(1)

    logger.info("exiting with status %d", code)
    sys.exit(code)


if __name__ == "__main__":
    main()
