"""A single line of buffer text plus its derived render and highlight state."""

from __future__ import annotations

from dataclasses import dataclass, field

from thor.coords import TAB_STOP, char_to_render, render_to_char
from thor.highlight import Highlight


@dataclass
class Row:
    """One buffer line.

    ``chars`` is the owned raw content. ``render`` and ``hl`` are derived
    from it by :meth:`thor.buffer.Buffer.update_row` and must only be
    written there (or by a search overlay that restores them).
    """

    idx: int
    chars: list[str] = field(default_factory=list)
    render: str = ""
    hl: list[Highlight] = field(default_factory=list)
    open_comment: bool = False

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def cx_to_rx(self, cx: int, tab_stop: int = TAB_STOP) -> int:
        return char_to_render(self.chars, cx, tab_stop)

    def rx_to_cx(self, rx: int, tab_stop: int = TAB_STOP) -> int:
        return render_to_char(self.chars, rx, tab_stop)
