"""Tests for thor.highlight and thor.syntax -- per-row classification."""

from __future__ import annotations

import pytest

from thor.highlight import (
    DEFAULT_COLOR,
    Highlight,
    highlight_line,
    is_separator,
    syntax_to_color,
)
from thor.syntax import C_PROFILE, HLDB, SHELL_PROFILE, TEXT_PROFILE, select_syntax

H = Highlight


def classes(text: str, open_comment: bool = False, profile=C_PROFILE) -> list[Highlight]:
    hl, _ = highlight_line(text, profile, open_comment)
    return hl


# ---------------------------------------------------------------------------
# Profile selection
# ---------------------------------------------------------------------------


class TestSelectSyntax:
    @pytest.mark.parametrize(
        "name, filetype",
        [
            ("main.c", "C"),
            ("thor.h", "C"),
            ("x.cpp", "C"),
            ("build.sh", "SHELL"),
            ("notes.txt", "TEXT FILE"),
        ],
    )
    def test_extension_match(self, name: str, filetype: str) -> None:
        profile = select_syntax(name)
        assert profile is not None
        assert profile.filetype == filetype

    def test_unknown_extension(self) -> None:
        assert select_syntax("README.md") is None

    def test_no_filename(self) -> None:
        assert select_syntax(None) is None
        assert select_syntax("") is None

    def test_extension_must_match_exactly(self) -> None:
        assert select_syntax("archive.cc") is None

    def test_priority_order(self) -> None:
        assert HLDB[0] is C_PROFILE


class TestColors:
    def test_known_classes(self) -> None:
        assert syntax_to_color(H.COMMENT) == 96
        assert syntax_to_color(H.MLCOMMENT) == 96
        assert syntax_to_color(H.KEYWORD1) == 93
        assert syntax_to_color(H.KEYWORD2) == 92
        assert syntax_to_color(H.STRING) == 95
        assert syntax_to_color(H.NUMBER) == 91
        assert syntax_to_color(H.MATCH) == 43

    def test_normal_uses_default(self) -> None:
        assert syntax_to_color(H.NORMAL) == DEFAULT_COLOR


class TestIsSeparator:
    @pytest.mark.parametrize("ch", list(",.()+-/*=~%<>[];") + [" ", "\t", "\0", ""])
    def test_separators(self, ch: str) -> None:
        assert is_separator(ch)

    @pytest.mark.parametrize("ch", ["a", "Z", "_", "0", "#"])
    def test_word_characters(self, ch: str) -> None:
        assert not is_separator(ch)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


class TestHighlightLine:
    def test_no_profile_is_all_normal(self) -> None:
        hl, open_comment = highlight_line("int x; /* y", None, True)
        assert hl == [H.NORMAL] * len("int x; /* y")
        assert open_comment is False

    def test_length_matches_render(self) -> None:
        text = 'int main() { return "x"; } // done'
        assert len(classes(text)) == len(text)

    def test_single_line_comment_runs_to_end(self) -> None:
        assert classes("x; // hi") == [H.NORMAL, H.NORMAL, H.NORMAL] + [H.COMMENT] * 5

    def test_primary_and_secondary_keywords(self) -> None:
        hl = classes("if NULL")
        assert hl[:2] == [H.KEYWORD1] * 2
        assert hl[2] == H.NORMAL
        assert hl[3:] == [H.KEYWORD2] * 4

    def test_keyword_needs_separator_after(self) -> None:
        assert classes("iffy") == [H.NORMAL] * 4

    def test_keyword_needs_separator_before(self) -> None:
        assert classes("xif") == [H.NORMAL] * 3

    def test_keyword_at_end_of_row(self) -> None:
        assert classes("x=int") == [H.NORMAL, H.NORMAL] + [H.KEYWORD1] * 3

    def test_numbers(self) -> None:
        assert classes("x = 42;") == [H.NORMAL] * 4 + [H.NUMBER] * 2 + [H.NORMAL]

    def test_decimal_point_continues_number(self) -> None:
        assert classes("1.5") == [H.NUMBER] * 3

    def test_digits_inside_identifier_are_normal(self) -> None:
        assert classes("x1") == [H.NORMAL] * 2

    def test_string_with_escaped_quote(self) -> None:
        text = '"a\\"b" x'
        hl = classes(text)
        assert hl[:6] == [H.STRING] * 6
        assert hl[6:] == [H.NORMAL] * 2

    def test_single_and_back_quotes(self) -> None:
        assert classes("'a'") == [H.STRING] * 3
        assert classes("`a`") == [H.STRING] * 3

    def test_comment_marker_inside_string_is_not_comment(self) -> None:
        assert classes('"//"') == [H.STRING] * 4

    def test_block_comment_within_row(self) -> None:
        hl, open_comment = highlight_line("a /* b */ c", C_PROFILE)
        assert hl[2:9] == [H.MLCOMMENT] * 7
        assert hl[10] == H.NORMAL
        assert open_comment is False

    def test_unterminated_block_comment_sets_flag(self) -> None:
        hl, open_comment = highlight_line("/* start", C_PROFILE)
        assert hl == [H.MLCOMMENT] * len("/* start")
        assert open_comment is True

    def test_continuation_from_previous_row(self) -> None:
        text = "end */ int x;"
        hl, open_comment = highlight_line(text, C_PROFILE, True)
        assert hl[:6] == [H.MLCOMMENT] * 6
        assert hl[6] == H.NORMAL
        assert hl[7:10] == [H.KEYWORD1] * 3
        assert hl[10:] == [H.NORMAL] * 3
        assert open_comment is False

    def test_fully_commented_row_keeps_flag(self) -> None:
        hl, open_comment = highlight_line("still inside", C_PROFILE, True)
        assert hl == [H.MLCOMMENT] * len("still inside")
        assert open_comment is True

    def test_single_line_comment_ignored_inside_block(self) -> None:
        hl, open_comment = highlight_line("// x", C_PROFILE, True)
        assert hl == [H.MLCOMMENT] * 4
        assert open_comment is True

    def test_shell_hash_comment(self) -> None:
        hl = classes("echo # hi", profile=SHELL_PROFILE)
        assert hl[:4] == [H.KEYWORD1] * 4
        assert hl[5:] == [H.COMMENT] * 4

    def test_text_profile_only_numbers(self) -> None:
        hl = classes('if "7"', profile=TEXT_PROFILE)
        assert hl[:5] == [H.NORMAL] * 5
        assert hl[4] == H.NORMAL
        assert classes("see 7", profile=TEXT_PROFILE)[4] == H.NUMBER
