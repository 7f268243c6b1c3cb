"""Row store: the ordered rows of the open file and every edit on them.

All mutations go through :class:`Buffer` so that row indices stay
contiguous, render/highlight caches are regenerated together with the raw
content, and the dirty counter is bumped.
"""

from __future__ import annotations

from typing import Iterable

from thor.coords import TAB_STOP, expand_tabs
from thor.highlight import highlight_line
from thor.register import Register
from thor.row import Row
from thor.syntax import SyntaxProfile


class Buffer:
    """Ordered sequence of :class:`Row` objects."""

    def __init__(self, tab_stop: int = TAB_STOP) -> None:
        self.rows: list[Row] = []
        self.syntax: SyntaxProfile | None = None
        self.dirty: int = 0
        self.tab_stop = tab_stop

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def num_rows(self) -> int:
        return len(self.rows)

    def row(self, at: int) -> Row | None:
        if 0 <= at < len(self.rows):
            return self.rows[at]
        return None

    # -- derived state ------------------------------------------------------

    def update_row(self, at: int) -> None:
        """Regenerate the render string and highlight classes of row *at*."""
        row = self.rows[at]
        row.render = expand_tabs(row.chars, self.tab_stop)
        self.update_syntax(at)

    def update_syntax(self, at: int) -> None:
        """Re-highlight row *at* and every following row whose incoming
        continuation flag changed as a result.

        Stops at the first row whose outgoing flag is unchanged.
        """
        while 0 <= at < len(self.rows):
            row = self.rows[at]
            incoming = at > 0 and self.rows[at - 1].open_comment
            row.hl, open_comment = highlight_line(row.render, self.syntax, incoming)
            changed = row.open_comment != open_comment
            row.open_comment = open_comment
            if not changed:
                break
            at += 1

    def set_syntax(self, profile: SyntaxProfile | None) -> None:
        """Switch profile and re-highlight the whole buffer."""
        self.syntax = profile
        open_comment = False
        for row in self.rows:
            row.hl, row.open_comment = highlight_line(row.render, profile, open_comment)
            open_comment = row.open_comment

    def _renumber(self, start: int) -> None:
        for j in range(start, len(self.rows)):
            self.rows[j].idx = j

    # -- row operations -----------------------------------------------------

    def insert_row(self, at: int, text: str = "") -> None:
        if at < 0 or at > len(self.rows):
            return
        row = Row(idx=at, chars=list(text))
        # The following row was highlighted against this flag.
        if at > 0:
            row.open_comment = self.rows[at - 1].open_comment
        self.rows.insert(at, row)
        self._renumber(at + 1)
        self.update_row(at)
        self.dirty += 1

    def delete_row(self, at: int) -> None:
        if at < 0 or at >= len(self.rows):
            return
        removed = self.rows.pop(at)
        self._renumber(at)
        if at < len(self.rows):
            incoming = at > 0 and self.rows[at - 1].open_comment
            if incoming != removed.open_comment:
                self.update_syntax(at)
        self.dirty += 1

    def insert_char(self, at: int, col: int, ch: str) -> None:
        row = self.row(at)
        if row is None:
            return
        if col < 0 or col > row.size:
            col = row.size
        row.chars.insert(col, ch)
        self.update_row(at)
        self.dirty += 1

    def delete_char(self, at: int, col: int) -> None:
        row = self.row(at)
        if row is None or col < 0 or col >= row.size:
            return
        del row.chars[col]
        self.update_row(at)
        self.dirty += 1

    def append_text(self, at: int, text: str) -> None:
        row = self.row(at)
        if row is None:
            return
        row.chars.extend(text)
        self.update_row(at)
        self.dirty += 1

    def truncate_row(self, at: int, length: int) -> None:
        row = self.row(at)
        if row is None or length < 0 or length >= row.size:
            return
        del row.chars[length:]
        self.update_row(at)
        self.dirty += 1

    # -- persistence --------------------------------------------------------

    def load_lines(self, lines: Iterable[str]) -> None:
        """Replace the contents with *lines* and mark the buffer clean."""
        self.rows = []
        for line in lines:
            self.insert_row(len(self.rows), line.rstrip("\r\n"))
        self.dirty = 0

    def rows_to_text(self) -> str:
        return "".join(row.text + "\n" for row in self.rows)

    # -- register -----------------------------------------------------------

    def yank(self, at: int, count: int, register: Register) -> int:
        """Copy up to *count* rows from *at* into *register*.

        Returns the number of rows captured; the register is left untouched
        when nothing could be captured.
        """
        if at < 0 or at >= len(self.rows) or count <= 0:
            return 0
        count = min(count, len(self.rows) - at)
        register.store([row.text for row in self.rows[at:at + count]])
        return count

    def cut(self, at: int, count: int, register: Register) -> int:
        count = self.yank(at, count, register)
        for _ in range(count):
            self.delete_row(at)
        return count

    def paste(self, after: int, register: Register) -> int:
        """Insert the register's rows right after row *after*."""
        if register.is_empty:
            return 0
        at = min(max(after + 1, 0), len(self.rows))
        lines = register.peek()
        for i, line in enumerate(lines):
            self.insert_row(at + i, line)
        return len(lines)
