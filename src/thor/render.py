"""Viewport scrolling and frame assembly.

Every refresh repaints the whole screen: text rows, status line, message
line, then the cursor. There is no diffing against the previous frame: the
whole frame goes out in one ``write`` call.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from thor import __version__
from thor.highlight import MATCH_COLOR, Highlight, syntax_to_color
from thor.keybindings import Mode
from thor.utils import truncate_to_width, visible_width

if TYPE_CHECKING:
    from thor.editor import Editor
    from thor.row import Row

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CURSOR_HOME = "\x1b[H"
_CURSOR_MOVE_FMT = "\x1b[{};{}H"
_CLEAR_TO_EOL = "\x1b[K"
_INVERSE = "\x1b[7m"
_RESET = "\x1b[m"
_DEFAULT_COLORS = "\x1b[39m\x1b[49m"
_TILDE = "\x1b[94m~\x1b[m"

_CURSOR_SHAPES: dict[Mode, str] = {
    Mode.COMMAND: "\x1b[1 q",  # blinking block
    Mode.INSERT: "\x1b[5 q",  # blinking bar
}

# Lines shown on an empty buffer, keyed by offset from a third of the way down.
WELCOME_LINES: dict[int, str] = {
    0: "THOR - The Text EdiTHOR",
    2: f"version {__version__}",
    3: "made by OrangeXarot",
    5: ":help     prints help commands",
    6: ":q                  exits thor",
    7: ":w              saves the file",
    8: ":creds  prints all the credits",
}

STATUS_FILENAME_WIDTH = 20


def _color_escape(color: int) -> str:
    if color == MATCH_COLOR:
        return f"\x1b[30;{color}m"
    return f"\x1b[{color}m"


def _is_control(ch: str) -> bool:
    return ord(ch) < 32 or ord(ch) == 127


class Viewport:
    """Scroll offsets and screen geometry for the text area.

    ``screen_rows`` excludes the status and message lines.
    """

    def __init__(self, screen_rows: int = 0, screen_cols: int = 0) -> None:
        self.rowoff = 0
        self.coloff = 0
        self.screen_rows = screen_rows
        self.screen_cols = screen_cols

    def resize(self, rows: int, cols: int) -> None:
        self.screen_rows = max(rows, 0)
        self.screen_cols = max(cols, 0)

    # -- scrolling ----------------------------------------------------------

    def scroll(self, editor: Editor) -> None:
        """Bring the cursor into view and refresh ``editor.rx``."""
        row = editor.buffer.row(editor.cy)
        editor.rx = row.cx_to_rx(editor.cx, editor.buffer.tab_stop) if row else 0

        if editor.cy < self.rowoff:
            self.rowoff = editor.cy
        if editor.cy >= self.rowoff + self.screen_rows:
            self.rowoff = editor.cy - self.screen_rows + 1

        if editor.rx < self.coloff:
            self.coloff = editor.rx
        if editor.rx >= self.coloff + self.screen_cols:
            self.coloff = editor.rx - self.screen_cols + 1

    # -- frame --------------------------------------------------------------

    def draw(self, editor: Editor) -> str:
        """Scroll, then build the complete frame for one refresh."""
        self.scroll(editor)

        out: list[str] = [_HIDE_CURSOR, _CURSOR_HOME]
        self.draw_rows(editor, out)
        self.draw_status_bar(editor, out)
        self.draw_message_bar(editor, out)
        out.append(
            _CURSOR_MOVE_FMT.format(
                editor.cy - self.rowoff + 1,
                editor.rx - self.coloff + 1,
            )
        )
        out.append(_SHOW_CURSOR)
        return "".join(out)

    def draw_rows(self, editor: Editor, out: list[str]) -> None:
        out.append(_CURSOR_SHAPES[editor.mode])

        num_rows = editor.buffer.num_rows
        for y in range(self.screen_rows):
            filerow = y + self.rowoff
            if filerow < num_rows:
                self._draw_text_row(editor.buffer.rows[filerow], out)
            else:
                welcome = None
                if num_rows == 0:
                    welcome = WELCOME_LINES.get(y - self.screen_rows // 3)
                if welcome is not None:
                    self._draw_welcome(welcome, out)
                else:
                    out.append(_TILDE)
            out.append(_CLEAR_TO_EOL)
            out.append("\r\n")

    def _draw_welcome(self, text: str, out: list[str]) -> None:
        text = text[: self.screen_cols]
        padding = (self.screen_cols - len(text)) // 2
        if padding:
            out.append(_TILDE)
            padding -= 1
        out.append(" " * padding)
        out.append(text)

    def _draw_text_row(self, row: Row, out: list[str]) -> None:
        start = self.coloff
        end = start + self.screen_cols
        current_color: int | None = None

        for ch, hl in zip(row.render[start:end], row.hl[start:end]):
            if _is_control(ch):
                sym = "@" if ord(ch) <= 26 else "?"
                out.append(_INVERSE + sym + _RESET)
                if current_color is not None:
                    out.append(_color_escape(current_color))
            elif hl == Highlight.NORMAL:
                if current_color is not None:
                    out.append(_DEFAULT_COLORS)
                    current_color = None
                out.append(ch)
            else:
                color = syntax_to_color(hl)
                if color != current_color:
                    current_color = color
                    out.append(_color_escape(color))
                out.append(ch)

        out.append(_DEFAULT_COLORS)

    def scroll_percent(self, num_rows: int) -> int:
        if num_rows <= self.screen_rows:
            return 100
        perc = 100 * self.rowoff // (num_rows - self.screen_rows)
        return min(max(perc, 0), 100)

    def draw_status_bar(self, editor: Editor, out: list[str]) -> None:
        buffer = editor.buffer
        name = truncate_to_width(
            editor.filename or "[New File]", STATUS_FILENAME_WIDTH, ellipsis=""
        )
        left = " %s%s - %d lines" % (name, "*" if buffer.dirty else "", buffer.num_rows)
        right = "%s | %d%% %d,%d " % (
            buffer.syntax.filetype if buffer.syntax else "filetype not detected",
            self.scroll_percent(buffer.num_rows),
            editor.cy + 1,
            editor.cx + 1,
        )

        cols = self.screen_cols
        left = truncate_to_width(left, cols, ellipsis="")
        remaining = cols - visible_width(left)
        right_width = visible_width(right)

        out.append(_INVERSE)
        out.append(left)
        if remaining >= right_width:
            out.append(" " * (remaining - right_width))
            out.append(right)
        else:
            out.append(" " * remaining)
        out.append(_RESET)
        out.append("\r\n")

    def draw_message_bar(self, editor: Editor, out: list[str]) -> None:
        out.append(_CLEAR_TO_EOL)
        msg = truncate_to_width(editor.status.current(), self.screen_cols, ellipsis="")
        if msg:
            out.append(" " * ((self.screen_cols - visible_width(msg)) // 2))
            out.append(msg)
