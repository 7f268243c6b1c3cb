"""The editor session: cursor, mode and the read/process/refresh loop.

:class:`Editor` is the one object that owns the buffer, the clipboard
register, the viewport and the status line. Everything else receives it
explicitly.
"""

from __future__ import annotations

import logging

from thor.buffer import Buffer
from thor.commands import execute_command, parse_count
from thor.keybindings import KeybindingsManager, Mode
from thor.keys import KeyId, is_printable_key
from thor.prompt import run_prompt
from thor.register import Register
from thor.render import Viewport
from thor.search import SearchObserver
from thor.settings import EditorSettings
from thor.status import StatusMessage
from thor.syntax import select_syntax
from thor.terminal import Terminal

logger = logging.getLogger(__name__)

INSERT_MODE_NOTICE = "-- INSERT MODE --"

AUTO_PAIRS: dict[str, str] = {
    "(": ")",
    "[": "]",
    "{": "}",
    '"': '"',
    "'": "'",
}

# Repeat counts for the coarse movement keys.
JUMP_REPEAT = 5
FAST_REPEAT = 4

_DIRECTIONS = ("left", "right", "up", "down")


class Editor:
    """A single editing session on one (possibly unnamed) file."""

    def __init__(
        self,
        terminal: Terminal,
        settings: EditorSettings | None = None,
        status: StatusMessage | None = None,
    ) -> None:
        self.terminal = terminal
        self.settings = settings or EditorSettings()
        self.status = status or StatusMessage(timeout=self.settings.message_timeout)
        self.keybindings = KeybindingsManager(self.settings.keybindings)

        self.buffer = Buffer(tab_stop=self.settings.tab_stop)
        self.register = Register()
        self.viewport = Viewport()
        self.filename: str | None = None
        self.mode = Mode.COMMAND

        self.cx = 0
        self.cy = 0
        self.rx = 0

        self.should_quit = False
        self.exit_code = 0

    # ------------------------------------------------------------------
    # Terminal plumbing
    # ------------------------------------------------------------------

    def read_key(self) -> KeyId | None:
        return self.terminal.read_key(self.settings.key_timeout)

    def update_window_size(self) -> None:
        rows, cols = self.terminal.get_window_size()
        self.viewport.resize(rows - 2, cols)

    def refresh_screen(self) -> None:
        self.update_window_size()
        self.terminal.write(self.viewport.draw(self))

    # ------------------------------------------------------------------
    # File I/O
    # ------------------------------------------------------------------

    def open(self, filename: str) -> None:
        """Load *filename* into the buffer. ``OSError`` propagates."""
        with open(filename, encoding="utf-8", errors="surrogateescape", newline="\n") as f:
            lines = f.readlines()

        self.filename = filename
        self.buffer.set_syntax(select_syntax(filename))
        self.buffer.load_lines(lines)
        self.cx = self.cy = 0
        logger.info("opened %s (%d lines)", filename, self.buffer.num_rows)

    def save(self) -> bool:
        """Write the buffer to its file, asking for a name if it has none.

        Returns ``True`` on success. Failures are reported on the status
        line and leave the buffer and dirty counter untouched.
        """
        if self.filename is None:
            name = run_prompt(self, "Save as: %s")
            if name is None:
                self.status.set("Save aborted")
                return False
            self.filename = name
            self.buffer.set_syntax(select_syntax(name))

        data = self.buffer.rows_to_text().encode("utf-8", errors="surrogateescape")
        try:
            with open(self.filename, "wb") as f:
                f.write(data)
        except OSError as exc:
            logger.warning("saving %s failed: %s", self.filename, exc)
            self.status.set("Can't save! I/O error: %s", exc.strerror or exc)
            return False

        self.buffer.dirty = 0
        self.status.set("%d bytes written to disk", len(data))
        logger.info("saved %s (%d bytes)", self.filename, len(data))
        return True

    # ------------------------------------------------------------------
    # Mode and lifecycle
    # ------------------------------------------------------------------

    def change_mode(self, mode: Mode) -> None:
        if mode == Mode.INSERT:
            self.status.set(INSERT_MODE_NOTICE)
        else:
            self.status.clear()
        logger.debug("mode %s -> %s", self.mode.value, mode.value)
        self.mode = mode

    def quit(self, code: int = 0) -> None:
        self.should_quit = True
        self.exit_code = code

    def run(self) -> int:
        """Read keys and refresh until a quit command is given."""
        while not self.should_quit:
            self.refresh_screen()
            key = self.read_key()
            if key is not None:
                self.process_keypress(key)
        return self.exit_code

    # ------------------------------------------------------------------
    # Cursor movement
    # ------------------------------------------------------------------

    def _clamp_cx(self) -> None:
        row = self.buffer.row(self.cy)
        rowlen = row.size if row else 0
        if self.cx > rowlen:
            self.cx = rowlen

    def move_cursor(self, direction: str) -> None:
        """Move one cell. Left/right wrap across row ends."""
        row = self.buffer.row(self.cy)

        if direction == "left":
            if self.cx != 0:
                self.cx -= 1
            elif self.cy > 0:
                self.cy -= 1
                self.cx = self.buffer.rows[self.cy].size
        elif direction == "right":
            if row is not None and self.cx < row.size:
                self.cx += 1
            elif row is not None and self.cx == row.size:
                self.cy += 1
                self.cx = 0
        elif direction == "up":
            if self.cy != 0:
                self.cy -= 1
        elif direction == "down":
            if self.cy < self.buffer.num_rows:
                self.cy += 1

        self._clamp_cx()

    def goto_line(self, line: int) -> None:
        """Step to 1-based *line*, clamped to the last row."""
        target = max(min(line, self.buffer.num_rows) - 1, 0)
        while self.cy < target:
            self.move_cursor("down")
        while self.cy > target:
            self.move_cursor("up")

    def page(self, direction: str) -> None:
        screen_rows = self.viewport.screen_rows
        if direction == "up":
            self.cy = self.viewport.rowoff
        else:
            self.cy = min(self.viewport.rowoff + screen_rows - 1, self.buffer.num_rows)
        for _ in range(screen_rows):
            self.move_cursor(direction)

    def scroll_view(self, direction: str) -> None:
        """Scroll one line, dragging the cursor along when it would leave the view."""
        viewport = self.viewport
        if direction == "down":
            if viewport.rowoff >= self.buffer.num_rows:
                return
            if self.cy == viewport.rowoff:
                self.cy += 1
            viewport.rowoff += 1
        else:
            if viewport.rowoff == 0:
                return
            if self.cy == viewport.rowoff + viewport.screen_rows - 1:
                self.cy -= 1
            viewport.rowoff -= 1
        self._clamp_cx()

    # ------------------------------------------------------------------
    # Editing
    # ------------------------------------------------------------------

    def insert_char(self, ch: str) -> None:
        if self.cy == self.buffer.num_rows:
            self.buffer.insert_row(self.buffer.num_rows, "")
        self.buffer.insert_char(self.cy, self.cx, ch)
        self.cx += 1

    def insert_newline(self) -> None:
        if self.cx == 0:
            self.buffer.insert_row(self.cy, "")
        else:
            row = self.buffer.rows[self.cy]
            self.buffer.insert_row(self.cy + 1, "".join(row.chars[self.cx:]))
            self.buffer.truncate_row(self.cy, self.cx)
        self.cy += 1
        self.cx = 0

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining rows at column 0."""
        if self.cy == self.buffer.num_rows:
            return
        if self.cx == 0 and self.cy == 0:
            return

        if self.cx > 0:
            self.buffer.delete_char(self.cy, self.cx - 1)
            self.cx -= 1
        else:
            row = self.buffer.rows[self.cy]
            self.cx = self.buffer.rows[self.cy - 1].size
            self.buffer.append_text(self.cy - 1, row.text)
            self.buffer.delete_row(self.cy)
            self.cy -= 1

    def delete_forward(self) -> None:
        self.move_cursor("right")
        self.delete_char()

    def open_row(self, below: bool) -> None:
        if below:
            # On the virtual row past the end the new row goes at the end.
            at = min(self.cy + 1, self.buffer.num_rows)
            self.buffer.insert_row(at, "")
            self.cy = at
        else:
            self.buffer.insert_row(self.cy, "")
        self.cx = 0
        self.change_mode(Mode.INSERT)

    # ------------------------------------------------------------------
    # Register
    # ------------------------------------------------------------------

    def yank_prompt(self) -> None:
        count = parse_count(run_prompt(self, "Yanking: %s"), "y")
        if count is None:
            return
        yanked = self.buffer.yank(self.cy, count, self.register)
        self.status.set("Yanked %d lines", yanked)

    def delete_prompt(self) -> None:
        count = parse_count(run_prompt(self, "Deleting: %s"), "d")
        if count is None:
            return
        deleted = self.buffer.cut(self.cy, count, self.register)
        if self.cy > self.buffer.num_rows:
            self.cy = self.buffer.num_rows
        self._clamp_cx()
        self.status.set("Deleted %d lines", deleted)

    def paste(self) -> None:
        if self.register.is_empty:
            self.status.set("Nothing in Yank Buffer")
            return
        pasted = self.buffer.paste(self.cy, self.register)
        for _ in range(pasted):
            self.move_cursor("down")
        self.status.set("Pasted %d lines", pasted)

    # ------------------------------------------------------------------
    # Prompts
    # ------------------------------------------------------------------

    def find(self) -> None:
        saved = (self.cx, self.cy, self.viewport.coloff, self.viewport.rowoff)

        observer = SearchObserver(self)
        query = run_prompt(self, "Search: %s", observer)
        observer.restore_highlight()

        if query is None:
            self.cx, self.cy, self.viewport.coloff, self.viewport.rowoff = saved

    def colon_command(self) -> None:
        command = run_prompt(self, "Command: :%s")
        if command is not None:
            execute_command(self, command)

    # ------------------------------------------------------------------
    # Key dispatch
    # ------------------------------------------------------------------

    def process_keypress(self, key: KeyId) -> None:
        if self.mode == Mode.INSERT:
            self._process_insert_key(key)
        else:
            self._process_command_key(key)

    def _move_action(self, action: str) -> bool:
        """Handle movement shared by both modes; return whether it matched."""
        if action == "cursorUp":
            self.move_cursor("up")
        elif action == "cursorDown":
            self.move_cursor("down")
        elif action == "cursorLeft":
            self.move_cursor("left")
        elif action == "cursorRight":
            self.move_cursor("right")
        elif action == "cursorLineStart":
            self.cx = 0
        elif action == "cursorLineEnd":
            row = self.buffer.row(self.cy)
            if row is not None:
                self.cx = row.size
        elif action == "pageUp":
            self.page("up")
        elif action == "pageDown":
            self.page("down")
        elif action == "scrollUp":
            self.scroll_view("up")
        elif action == "scrollDown":
            self.scroll_view("down")
        else:
            return False
        return True

    def _process_insert_key(self, key: KeyId) -> None:
        self.status.set(INSERT_MODE_NOTICE)
        action = self.keybindings.action_for(Mode.INSERT, key)

        if action is not None and self._move_action(action):
            return
        if action == "newLine":
            self.insert_newline()
        elif action == "deleteCharBackward":
            self.delete_char()
        elif action == "deleteCharForward":
            self.delete_forward()
        elif action == "tab":
            for _ in range(self.settings.soft_tab_width):
                self.insert_char(" ")
        elif action == "commandMode":
            self.change_mode(Mode.COMMAND)
        elif is_printable_key(key):
            self.insert_char(key)
            closer = AUTO_PAIRS.get(key) if self.settings.auto_pairs else None
            if closer is not None:
                self.insert_char(closer)
                self.move_cursor("left")

    def _process_command_key(self, key: KeyId) -> None:  # noqa: C901
        action = self.keybindings.action_for(Mode.COMMAND, key)
        if action is None or self._move_action(action):
            return

        if action in ("fastUp", "fastDown", "fastLeft", "fastRight"):
            direction = action[len("fast"):].lower()
            for _ in range(FAST_REPEAT):
                self.move_cursor(direction)
        elif action == "jumpLeft":
            for _ in range(JUMP_REPEAT):
                self.move_cursor("left")
        elif action == "jumpRight":
            for _ in range(JUMP_REPEAT):
                self.move_cursor("right")
        elif action == "firstRow":
            self.cy = 0
            self._clamp_cx()
            self.status.set("The Beginning Of Time")
        elif action == "lastRow":
            self.cy = max(self.buffer.num_rows - 1, 0)
            self._clamp_cx()
            self.status.set("The End Of Time")
        elif action == "deleteCharForward":
            self.delete_forward()
            self.status.set("Too lazy to enter insert mode huh?")
        elif action == "deleteCharBackward":
            self.delete_char()
        elif action == "deletePrompt":
            self.delete_prompt()
        elif action == "yankPrompt":
            self.yank_prompt()
        elif action == "paste":
            self.paste()
        elif action == "search":
            self.find()
        elif action == "colonCommand":
            self.colon_command()
        elif action == "insertMode":
            self.change_mode(Mode.INSERT)
        elif action == "openBelow":
            self.open_row(below=True)
        elif action == "openAbove":
            self.open_row(below=False)
