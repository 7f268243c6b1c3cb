"""Colon-command language and the count prompts used by yank/delete."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from thor.editor import Editor

logger = logging.getLogger(__name__)

HELP_TEXTS: dict[str, str] = {
    "help": ":help quit | :help editor | :help other",
    "help quit": ":q = quit | :q! = override quit | :w = save | :wq = save and quit",
    "help editor": ":num = goto line num | / = search | d, y, p = delete, yank, paste",
    "help other": ":help = shows help | :creds = shows credits",
    "creds": "Made by OrangeXarot, Named by i._.tram",
}


def _is_number(text: str) -> bool:
    return text.isascii() and text.isdigit()


def execute_command(editor: Editor, command: str) -> None:
    """Run one colon command typed at the ``Command: :`` prompt."""
    logger.debug("colon command %r", command)

    if _is_number(command):
        editor.goto_line(int(command))
    elif command == "w":
        editor.save()
    elif command == "wq":
        if editor.save():
            editor.quit(0)
    elif command == "q":
        if editor.buffer.dirty:
            editor.status.set("Unsaved changes detected (use :q! to override)")
        else:
            editor.quit(0)
    elif command == "q!":
        editor.quit(0)
    elif command in HELP_TEXTS:
        editor.status.set(HELP_TEXTS[command])
    else:
        editor.status.set('Invalid syntax ":%s"', command)


def parse_count(text: str | None, letter: str) -> int | None:
    """Interpret the answer to a yank/delete prompt.

    The doubled command letter means one line, a decimal number means that
    many lines; anything else (including a cancelled prompt) gives ``None``.
    """
    if text is None:
        return None
    if text == letter:
        return 1
    if _is_number(text):
        return int(text)
    return None
