"""Incremental search driven by the search prompt."""

from __future__ import annotations

from typing import TYPE_CHECKING

from thor.highlight import Highlight
from thor.keys import KeyId

if TYPE_CHECKING:
    from thor.editor import Editor

_FORWARD_KEYS = frozenset({"right", "down"})
_BACKWARD_KEYS = frozenset({"left", "up"})


class SearchObserver:
    """Prompt observer that jumps to matches as the query is typed.

    Arrow keys step to the next (Right/Down) or previous (Left/Up) match;
    any other key restarts the search from the top. The matched span is
    painted with :attr:`Highlight.MATCH` and the row's previous classes are
    put back on the next keystroke.
    """

    def __init__(self, editor: Editor) -> None:
        self.editor = editor
        self.last_match = -1
        self.direction = 1
        self._saved_row: int | None = None
        self._saved_hl: list[Highlight] | None = None

    def on_keystroke(self, query: str, key: KeyId) -> None:
        self.restore_highlight()

        if key in ("enter", "escape"):
            self.last_match = -1
            self.direction = 1
            return
        if key in _FORWARD_KEYS:
            self.direction = 1
        elif key in _BACKWARD_KEYS:
            self.direction = -1
        else:
            self.last_match = -1
            self.direction = 1

        if self.last_match == -1:
            self.direction = 1
        if query:
            self._search(query)

    def _search(self, query: str) -> None:
        editor = self.editor
        rows = editor.buffer.rows
        current = self.last_match
        for _ in range(len(rows)):
            current += self.direction
            if current == -1:
                current = len(rows) - 1
            elif current == len(rows):
                current = 0

            row = rows[current]
            pos = row.render.find(query)
            if pos == -1:
                continue

            self.last_match = current
            editor.cy = current
            editor.cx = row.rx_to_cx(pos, editor.buffer.tab_stop)
            # Push the offset past the end so the next scroll puts the match
            # on the top line.
            editor.viewport.rowoff = len(rows)

            self._saved_row = current
            self._saved_hl = list(row.hl)
            end = min(pos + len(query), row.rsize)
            row.hl[pos:end] = [Highlight.MATCH] * (end - pos)
            break

    def restore_highlight(self) -> None:
        """Undo the match overlay, if one is applied."""
        if self._saved_hl is None or self._saved_row is None:
            return
        row = self.editor.buffer.row(self._saved_row)
        if row is not None and len(row.hl) == len(self._saved_hl):
            row.hl = self._saved_hl
        self._saved_row = None
        self._saved_hl = None
