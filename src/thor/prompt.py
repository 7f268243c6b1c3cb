"""Single-line prompts shown on the message line.

A prompt takes over the read/refresh loop until Enter (with non-empty
input) or Escape. Observers are told about every keystroke so that features
like incremental search can react while the user types.
"""

from __future__ import annotations

from typing import Protocol

from thor.keys import KeyId, is_printable_key
from thor.status import StatusMessage

_ERASE_KEYS = frozenset({"backspace", "delete", "ctrl+h"})


class PromptObserver(Protocol):
    """Receives the current input after each keystroke of a prompt."""

    def on_keystroke(self, query: str, key: KeyId) -> None: ...


class NullObserver:
    """Observer for prompts nobody needs to watch."""

    def on_keystroke(self, query: str, key: KeyId) -> None:
        pass


class PromptHost(Protocol):
    """What a prompt needs from the editor session."""

    status: StatusMessage

    def refresh_screen(self) -> None: ...

    def read_key(self) -> KeyId | None: ...


def run_prompt(
    host: PromptHost,
    template: str,
    observer: PromptObserver | None = None,
) -> str | None:
    """Collect a line of input, showing it through *template* (``%s``).

    Returns the entered text, or ``None`` if the prompt was cancelled with
    Escape. Enter on empty input is ignored.
    """
    observer = observer or NullObserver()
    buf = ""

    while True:
        host.status.set(template, buf)
        host.refresh_screen()

        key = host.read_key()
        if key is None:
            continue

        if key in _ERASE_KEYS:
            buf = buf[:-1]
        elif key == "escape":
            host.status.clear()
            observer.on_keystroke(buf, key)
            return None
        elif key == "enter":
            if buf:
                host.status.clear()
                observer.on_keystroke(buf, key)
                return buf
        elif is_printable_key(key):
            buf += key

        observer.on_keystroke(buf, key)
