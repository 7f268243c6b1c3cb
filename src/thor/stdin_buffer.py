"""StdinBuffer buffers raw input and yields complete key sequences.

Reads from a raw terminal can end in the middle of an escape sequence (or
deliver several keys at once). Without buffering, a partial sequence would
be misread as a bare Escape followed by ordinary characters.
"""

from __future__ import annotations

from collections import deque

ESC = "\x1b"


def _is_complete_sequence(data: str) -> str:
    """Check if a string is a complete escape sequence or needs more data.

    Returns 'complete', 'incomplete', or 'not-escape'.
    """
    if not data.startswith(ESC):
        return "not-escape"

    if len(data) == 1:
        return "incomplete"

    after_esc = data[1:]

    # CSI sequences: ESC [
    if after_esc.startswith("["):
        return _is_complete_csi_sequence(data)

    # SS3 sequences: ESC O
    if after_esc.startswith("O"):
        return "complete" if len(after_esc) >= 2 else "incomplete"

    # Meta key sequences: ESC followed by a single character
    return "complete"


def _is_complete_csi_sequence(data: str) -> str:
    if len(data) < 3:
        return "incomplete"
    # The final byte of a CSI sequence is in 0x40-0x7E.
    return "complete" if 0x40 <= ord(data[-1]) <= 0x7E else "incomplete"


def _extract_complete_sequences(buffer: str) -> tuple[list[str], str]:
    """Split accumulated buffer into complete sequences.

    Returns (sequences, remainder).
    """
    sequences: list[str] = []
    pos = 0

    while pos < len(buffer):
        remaining = buffer[pos:]

        if not remaining.startswith(ESC):
            sequences.append(remaining[0])
            pos += 1
            continue

        seq_end = 1
        while seq_end <= len(remaining):
            if _is_complete_sequence(remaining[:seq_end]) == "complete":
                break
            seq_end += 1
        else:
            return sequences, remaining

        sequences.append(remaining[:seq_end])
        pos += seq_end

    return sequences, ""


class StdinBuffer:
    """Accumulates raw input and hands out one complete sequence at a time.

    A dangling ESC prefix stays buffered until :meth:`flush` is called,
    which the terminal does once a read times out with no further bytes.
    """

    def __init__(self) -> None:
        self._buffer: str = ""
        self._ready: deque[str] = deque()

    def process(self, data: str) -> None:
        """Feed input data into the buffer."""
        self._buffer += data
        sequences, self._buffer = _extract_complete_sequences(self._buffer)
        self._ready.extend(sequences)

    def flush(self) -> None:
        """Release whatever is buffered as a single sequence."""
        if self._buffer:
            self._ready.append(self._buffer)
            self._buffer = ""

    def pop(self) -> str | None:
        """Return the next complete sequence, or ``None``."""
        return self._ready.popleft() if self._ready else None

    @property
    def pending(self) -> bool:
        return bool(self._buffer)
