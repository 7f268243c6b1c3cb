"""Filetype profiles used by the syntax highlighter."""

from __future__ import annotations

import os
from dataclasses import dataclass

HL_HIGHLIGHT_NUMBERS = 1 << 0
HL_HIGHLIGHT_STRINGS = 1 << 1

# A keyword ending in this marker is drawn in the secondary keyword colour.
SECONDARY_KEYWORD_MARKER = "|"


@dataclass(frozen=True)
class SyntaxProfile:
    """Immutable highlighting configuration for one filetype."""

    filetype: str
    filematch: tuple[str, ...]
    keywords: tuple[str, ...] = ()
    singleline_comment_start: str = ""
    multiline_comment_start: str = ""
    multiline_comment_end: str = ""
    flags: int = 0

    @property
    def highlight_numbers(self) -> bool:
        return bool(self.flags & HL_HIGHLIGHT_NUMBERS)

    @property
    def highlight_strings(self) -> bool:
        return bool(self.flags & HL_HIGHLIGHT_STRINGS)

    def matches(self, filename: str) -> bool:
        """Check *filename* against the profile's patterns.

        Patterns starting with ``.`` must equal the final extension; anything
        else matches as a substring of the name.
        """
        _, ext = os.path.splitext(filename)
        for pattern in self.filematch:
            if pattern.startswith("."):
                if ext and ext == pattern:
                    return True
            elif pattern in filename:
                return True
        return False


# ---------------------------------------------------------------------------
# Built-in profiles
# ---------------------------------------------------------------------------

C_PROFILE = SyntaxProfile(
    filetype="C",
    filematch=(".c", ".h", ".cpp"),
    keywords=(
        "switch", "if", "while", "for", "break", "continue", "return", "else",
        "struct", "union", "typedef", "enum", "class", "case",
        "int", "long", "double", "float", "char", "unsigned", "signed", "void",
        "#define|", "#include|", "NULL|",
    ),
    singleline_comment_start="//",
    multiline_comment_start="/*",
    multiline_comment_end="*/",
    flags=HL_HIGHLIGHT_NUMBERS | HL_HIGHLIGHT_STRINGS,
)

SHELL_PROFILE = SyntaxProfile(
    filetype="SHELL",
    filematch=(".sh",),
    keywords=(
        "if", "fi", "read", "echo", "for", "while", "do", "done", "elif", "else",
    ),
    singleline_comment_start="#",
    multiline_comment_start="/*",
    multiline_comment_end="*/",
    flags=HL_HIGHLIGHT_NUMBERS | HL_HIGHLIGHT_STRINGS,
)

TEXT_PROFILE = SyntaxProfile(
    filetype="TEXT FILE",
    filematch=(".txt",),
    flags=HL_HIGHLIGHT_NUMBERS,
)

# Priority order: the first matching profile wins.
HLDB: tuple[SyntaxProfile, ...] = (C_PROFILE, SHELL_PROFILE, TEXT_PROFILE)


def select_syntax(
    filename: str | None,
    profiles: tuple[SyntaxProfile, ...] = HLDB,
) -> SyntaxProfile | None:
    """Return the first profile matching *filename*, or ``None``."""
    if not filename:
        return None
    for profile in profiles:
        if profile.matches(filename):
            return profile
    return None
