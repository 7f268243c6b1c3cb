from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable

import pytest

from thor.editor import Editor
from thor.keys import KeyId
from thor.settings import EditorSettings

from .scripted_terminal import ScriptedTerminal

EditorFactory = Callable[..., Editor]


@pytest.fixture
def make_editor(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> EditorFactory:
    """Build an editor on a scripted terminal.

    The working directory is ``tmp_path``. With *text*, the text is written
    to *name* there and opened; without it the editor starts on an unnamed
    empty buffer.
    """
    monkeypatch.chdir(tmp_path)

    def factory(
        text: str | None = None,
        name: str = "test.txt",
        keys: Iterable[KeyId | None] = (),
        rows: int = 24,
        columns: int = 80,
        settings: EditorSettings | None = None,
    ) -> Editor:
        terminal = ScriptedTerminal(keys, rows=rows, columns=columns)
        editor = Editor(terminal, settings or EditorSettings())
        if text is not None:
            (tmp_path / name).write_text(text, encoding="utf-8")
            editor.open(name)
        editor.update_window_size()
        return editor

    return factory
