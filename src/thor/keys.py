"""Keyboard input decoding.

Turns complete raw terminal sequences (as split by
:class:`thor.stdin_buffer.StdinBuffer`) into key identifiers such as
``"a"``, ``"enter"``, ``"shift+up"`` or ``"ctrl+l"``.
"""

from __future__ import annotations

KeyId = str


# ---------------------------------------------------------------------------
# Legacy escape sequences
# ---------------------------------------------------------------------------

LEGACY_KEY_SEQUENCES: dict[str, str] = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1b[P": "delete",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[2~": "insert",
    "\x1b[3~": "delete",
    "\x1b[4~": "end",
    "\x1b[5~": "pageUp",
    "\x1b[6~": "pageDown",
    "\x1b[7~": "home",
    "\x1b[8~": "end",
}

LEGACY_SHIFT_SEQUENCES: dict[str, str] = {
    "\x1b[1;2A": "up",
    "\x1b[1;2B": "down",
    "\x1b[1;2C": "right",
    "\x1b[1;2D": "left",
    "\x1b[1;2H": "home",
    "\x1b[1;2F": "end",
    "\x1b[3;2~": "delete",
    "\x1b[5;2~": "pageUp",
    "\x1b[6;2~": "pageDown",
    # rxvt
    "\x1b[a": "up",
    "\x1b[b": "down",
    "\x1b[c": "right",
    "\x1b[d": "left",
    "\x1b[Z": "tab",
}

LEGACY_CTRL_SEQUENCES: dict[str, str] = {
    "\x1b[1;5A": "up",
    "\x1b[1;5B": "down",
    "\x1b[1;5C": "right",
    "\x1b[1;5D": "left",
    "\x1b[1;5H": "home",
    "\x1b[1;5F": "end",
    "\x1b[3;5~": "delete",
    "\x1b[5;5~": "pageUp",
    "\x1b[6;5~": "pageDown",
}


def parse_key(data: str) -> KeyId | None:  # noqa: C901
    """Parse one complete input sequence and return its key identifier.

    Returns ``None`` for empty input and for sequences that are not
    recognised.
    """
    if not data:
        return None

    for seq_dict, mod_prefix in (
        (LEGACY_CTRL_SEQUENCES, "ctrl+"),
        (LEGACY_SHIFT_SEQUENCES, "shift+"),
        (LEGACY_KEY_SEQUENCES, ""),
    ):
        if data in seq_dict:
            return mod_prefix + seq_dict[data]

    # --- Simple single-byte keys ---
    if data == "\x1b":
        return "escape"
    if data == "\r" or data == "\n":
        return "enter"
    if data == "\t":
        return "tab"
    if data == "\x7f":
        return "backspace"
    if data == "\x00":
        return "ctrl+space"

    # --- Ctrl + letter (0x01 - 0x1a) ---
    if len(data) == 1 and 1 <= ord(data) <= 26:
        return "ctrl+" + chr(ord(data) + ord("a") - 1)

    # --- Unrecognised escape sequences collapse to a bare escape ---
    if data.startswith("\x1b"):
        return "escape"

    # --- Plain printable character (space included) ---
    if len(data) == 1 and data.isprintable():
        return data

    return None


def is_printable_key(key: KeyId | None) -> bool:
    """True for key ids that stand for a literal character to insert."""
    return key is not None and len(key) == 1 and key.isprintable()
