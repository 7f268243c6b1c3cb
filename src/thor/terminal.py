"""Terminal abstraction for raw-mode stdin/stdout interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation that manages raw mode via :mod:`termios`, reads decoded keys
with a short timeout, queries the window size and writes frames.
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import tty
from typing import BinaryIO, Protocol

from thor.keys import KeyId, parse_key
from thor.stdin_buffer import StdinBuffer

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

CLEAR_SCREEN = "\x1b[2J\x1b[H"

# Seconds a read waits before reporting "no key".
KEY_TIMEOUT = 0.1


class TerminalError(RuntimeError):
    """The terminal cannot be put into (or restored from) a usable state."""


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal operations the editor needs."""

    def enable_raw_mode(self) -> None: ...

    def disable_raw_mode(self) -> None: ...

    def read_key(self, timeout: float = KEY_TIMEOUT) -> KeyId | None: ...

    def get_window_size(self) -> tuple[int, int]: ...

    def write(self, data: str) -> None: ...


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by the process's stdin/stdout descriptors."""

    def __init__(
        self,
        stdin_fd: int | None = None,
        stdout: BinaryIO | None = None,
    ) -> None:
        self._stdin_fd = stdin_fd
        self._stdout = stdout
        self._original_termios: list | None = None
        self._stdin_buffer = StdinBuffer()
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    @property
    def _fd(self) -> int:
        return sys.stdin.fileno() if self._stdin_fd is None else self._stdin_fd

    @property
    def _out(self) -> BinaryIO:
        return sys.stdout.buffer if self._stdout is None else self._stdout

    # -- raw mode -----------------------------------------------------------

    def enable_raw_mode(self) -> None:
        """Switch stdin to raw mode, remembering the previous attributes."""
        try:
            self._original_termios = termios.tcgetattr(self._fd)
            tty.setraw(self._fd)
            attrs = termios.tcgetattr(self._fd)
            attrs[6][termios.VMIN] = 0
            attrs[6][termios.VTIME] = 1
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, attrs)
        except termios.error as exc:
            raise TerminalError(f"tcsetattr: {exc}") from exc
        logger.debug("raw mode enabled on fd %d", self._fd)

    def disable_raw_mode(self) -> None:
        """Restore the attributes saved by :meth:`enable_raw_mode`."""
        if self._original_termios is None:
            return
        try:
            termios.tcsetattr(self._fd, termios.TCSAFLUSH, self._original_termios)
        except termios.error as exc:
            raise TerminalError(f"tcsetattr: {exc}") from exc
        finally:
            self._original_termios = None
        logger.debug("raw mode disabled on fd %d", self._fd)

    # -- input --------------------------------------------------------------

    def read_key(self, timeout: float = KEY_TIMEOUT) -> KeyId | None:
        """Return the next decoded key, or ``None`` when *timeout* expires."""
        data = self._stdin_buffer.pop()
        if data is None:
            if self._read_available(timeout):
                data = self._stdin_buffer.pop()
            # A lone ESC (or a truncated sequence) with nothing following it
            # within the timeout is taken as typed.
            if data is None and self._stdin_buffer.pending:
                if not self._read_available(timeout):
                    self._stdin_buffer.flush()
                data = self._stdin_buffer.pop()
        if data is None:
            return None
        return parse_key(data)

    def _read_available(self, timeout: float) -> bool:
        try:
            ready, _, _ = select.select([self._fd], [], [], timeout)
        except InterruptedError:
            return False
        if not ready:
            return False
        try:
            raw = os.read(self._fd, 1024)
        except BlockingIOError:
            return False
        except OSError as exc:
            raise TerminalError(f"read: {exc}") from exc
        if not raw:
            return False
        self._stdin_buffer.process(self._decoder.decode(raw))
        return True

    # -- geometry / output --------------------------------------------------

    def get_window_size(self) -> tuple[int, int]:
        """Return ``(rows, columns)``."""
        try:
            size = os.get_terminal_size(self._out.fileno())
        except (ValueError, OSError) as exc:
            raise TerminalError(f"getWindowSize: {exc}") from exc
        if size.columns == 0:
            raise TerminalError("getWindowSize: terminal reports zero columns")
        return size.lines, size.columns

    def write(self, data: str) -> None:
        """Write *data* to stdout in one go."""
        self._out.write(data.encode("utf-8", errors="surrogateescape"))
        self._out.flush()

    def clear_screen(self) -> None:
        self.write(CLEAR_SCREEN)
