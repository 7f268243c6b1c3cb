"""Conversions between character columns and rendered (tab-expanded) columns.

A row's raw characters map one-to-one onto screen columns except for tabs,
which advance to the next multiple of the tab stop.
"""

from __future__ import annotations

from typing import Sequence

TAB_STOP = 8


def char_to_render(chars: Sequence[str], char_col: int, tab_stop: int = TAB_STOP) -> int:
    """Return the rendered column of character index *char_col*."""
    render_col = 0
    for ch in chars[:char_col]:
        if ch == "\t":
            render_col += (tab_stop - 1) - (render_col % tab_stop)
        render_col += 1
    return render_col


def render_to_char(chars: Sequence[str], render_col: int, tab_stop: int = TAB_STOP) -> int:
    """Return the character index whose rendered span contains *render_col*.

    Columns past the end of the row map to the row length.
    """
    cur = 0
    for char_col, ch in enumerate(chars):
        if ch == "\t":
            cur += (tab_stop - 1) - (cur % tab_stop)
        cur += 1
        if cur > render_col:
            return char_col
    return len(chars)


def expand_tabs(chars: Sequence[str], tab_stop: int = TAB_STOP) -> str:
    """Build the rendered form of a row."""
    out: list[str] = []
    for ch in chars:
        if ch == "\t":
            out.append(" ")
            while len(out) % tab_stop != 0:
                out.append(" ")
        else:
            out.append(ch)
    return "".join(out)
