"""Tests for thor.utils -- display width helpers."""

from __future__ import annotations

from thor.utils import truncate_to_width, visible_width


class TestVisibleWidth:
    def test_ascii(self) -> None:
        assert visible_width("hello") == 5

    def test_empty(self) -> None:
        assert visible_width("") == 0

    def test_wide_characters(self) -> None:
        assert visible_width("日本") == 4

    def test_combining_mark_has_no_width(self) -> None:
        assert visible_width("e\u0301") == 1


class TestTruncateToWidth:
    def test_short_text_unchanged(self) -> None:
        assert truncate_to_width("abc", 10) == "abc"

    def test_truncates_with_ellipsis(self) -> None:
        assert truncate_to_width("abcdefgh", 6) == "abc..."

    def test_truncates_without_ellipsis(self) -> None:
        assert truncate_to_width("abcdefgh", 3, ellipsis="") == "abc"

    def test_does_not_split_wide_character(self) -> None:
        assert truncate_to_width("日本語", 3, ellipsis="") == "日"

    def test_zero_width(self) -> None:
        assert truncate_to_width("abc", 0) == ""
