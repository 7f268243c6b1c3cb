"""Per-row syntax classification.

``highlight_line`` is a pure function of a row's rendered text, the active
profile and the previous row's continuation flag (whether it ended inside an
open block comment). Propagating a changed flag to following rows is the
buffer's job, see :meth:`thor.buffer.Buffer.update_syntax`.
"""

from __future__ import annotations

from enum import IntEnum

from thor.syntax import SECONDARY_KEYWORD_MARKER, SyntaxProfile


class Highlight(IntEnum):
    NORMAL = 0
    COMMENT = 1
    MLCOMMENT = 2
    KEYWORD1 = 3
    KEYWORD2 = 4
    STRING = 5
    NUMBER = 6
    MATCH = 7


# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------

_COLORS: dict[Highlight, int] = {
    Highlight.COMMENT: 96,
    Highlight.MLCOMMENT: 96,
    Highlight.KEYWORD1: 93,
    Highlight.KEYWORD2: 92,
    Highlight.STRING: 95,
    Highlight.NUMBER: 91,
    Highlight.MATCH: 43,
}

DEFAULT_COLOR = 37
MATCH_COLOR = _COLORS[Highlight.MATCH]


def syntax_to_color(hl: Highlight) -> int:
    """Map a highlight class to an SGR colour code."""
    return _COLORS.get(hl, DEFAULT_COLOR)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------

_SEPARATORS = frozenset(",.()+-/*=~%<>[];")
_QUOTES = frozenset("\"'`")


def is_separator(ch: str) -> bool:
    """Word-boundary test; the empty string stands for end-of-row."""
    return ch == "" or ch == "\0" or ch.isspace() or ch in _SEPARATORS


def _split_keyword(keyword: str) -> tuple[str, Highlight]:
    if keyword.endswith(SECONDARY_KEYWORD_MARKER):
        return keyword[:-1], Highlight.KEYWORD2
    return keyword, Highlight.KEYWORD1


def highlight_line(  # noqa: C901
    render: str,
    profile: SyntaxProfile | None,
    open_comment: bool = False,
) -> tuple[list[Highlight], bool]:
    """Classify every rendered character of a row.

    Returns the class list and the outgoing continuation flag.
    """
    hl = [Highlight.NORMAL] * len(render)
    if profile is None:
        return hl, False

    scs = profile.singleline_comment_start
    mcs = profile.multiline_comment_start
    mce = profile.multiline_comment_end
    keywords = [_split_keyword(k) for k in profile.keywords if k]

    prev_sep = True
    in_string = ""
    in_comment = open_comment

    size = len(render)
    i = 0
    while i < size:
        c = render[i]
        prev_hl = hl[i - 1] if i > 0 else Highlight.NORMAL

        if scs and not in_string and not in_comment:
            if render.startswith(scs, i):
                hl[i:] = [Highlight.COMMENT] * (size - i)
                break

        if mcs and mce and not in_string:
            if in_comment:
                hl[i] = Highlight.MLCOMMENT
                if render.startswith(mce, i):
                    end = min(i + len(mce), size)
                    hl[i:end] = [Highlight.MLCOMMENT] * (end - i)
                    i = end
                    in_comment = False
                    prev_sep = True
                else:
                    i += 1
                continue
            if render.startswith(mcs, i):
                end = min(i + len(mcs), size)
                hl[i:end] = [Highlight.MLCOMMENT] * (end - i)
                i = end
                in_comment = True
                continue

        if profile.highlight_strings:
            if in_string:
                hl[i] = Highlight.STRING
                if c == "\\" and i + 1 < size:
                    hl[i + 1] = Highlight.STRING
                    i += 2
                    continue
                if c == in_string:
                    in_string = ""
                i += 1
                prev_sep = True
                continue
            if c in _QUOTES:
                in_string = c
                hl[i] = Highlight.STRING
                i += 1
                continue

        if profile.highlight_numbers:
            if ("0" <= c <= "9" and (prev_sep or prev_hl == Highlight.NUMBER)) or (
                c == "." and prev_hl == Highlight.NUMBER
            ):
                hl[i] = Highlight.NUMBER
                i += 1
                prev_sep = False
                continue

        if prev_sep:
            matched = False
            for word, cls in keywords:
                end = i + len(word)
                if render.startswith(word, i) and is_separator(render[end:end + 1]):
                    hl[i:end] = [cls] * len(word)
                    i = end
                    matched = True
                    break
            if matched:
                prev_sep = False
                continue

        prev_sep = is_separator(c)
        i += 1

    return hl, in_comment
