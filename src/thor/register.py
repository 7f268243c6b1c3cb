"""Single-slot, line-oriented clipboard for yank/cut/paste."""

from __future__ import annotations


class Register:
    """Holds the raw content of the most recently yanked rows.

    Unlike a kill ring there is exactly one slot: every capture replaces
    what was there before. Entries are copies, so deleting the source rows
    never changes the register.
    """

    def __init__(self) -> None:
        self._lines: list[str] = []

    def store(self, lines: list[str]) -> None:
        """Replace the register contents with *lines*."""
        self._lines = list(lines)

    def peek(self) -> list[str]:
        """Return a copy of the stored lines (empty when nothing was yanked)."""
        return list(self._lines)

    @property
    def is_empty(self) -> bool:
        return not self._lines
