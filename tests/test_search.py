"""Tests for incremental search."""

from __future__ import annotations

from thor.highlight import Highlight
from thor.search import SearchObserver

TEXT = "alpha\nx foo y\ngamma foo\n"


class TestSearchObserver:
    def test_first_match(self, make_editor) -> None:
        editor = make_editor(TEXT)
        observer = SearchObserver(editor)
        observer.on_keystroke("foo", "o")

        assert editor.cy == 1
        assert editor.cx == 2
        assert observer.last_match == 1
        assert editor.buffer.rows[1].hl[2:5] == [Highlight.MATCH] * 3
        assert editor.viewport.rowoff == editor.buffer.num_rows

    def test_arrow_steps_forward_and_wraps(self, make_editor) -> None:
        editor = make_editor(TEXT)
        observer = SearchObserver(editor)
        observer.on_keystroke("foo", "o")
        observer.on_keystroke("foo", "down")
        assert editor.cy == 2
        assert editor.cx == 6
        observer.on_keystroke("foo", "right")
        assert editor.cy == 1

    def test_arrow_steps_backward(self, make_editor) -> None:
        editor = make_editor(TEXT)
        observer = SearchObserver(editor)
        observer.on_keystroke("foo", "o")
        observer.on_keystroke("foo", "up")
        assert editor.cy == 2
        observer.on_keystroke("foo", "left")
        assert editor.cy == 1

    def test_previous_overlay_is_restored(self, make_editor) -> None:
        editor = make_editor(TEXT)
        observer = SearchObserver(editor)
        observer.on_keystroke("foo", "o")
        observer.on_keystroke("foo", "down")
        assert Highlight.MATCH not in editor.buffer.rows[1].hl
        assert Highlight.MATCH in editor.buffer.rows[2].hl

    def test_no_match_leaves_cursor(self, make_editor) -> None:
        editor = make_editor(TEXT)
        observer = SearchObserver(editor)
        observer.on_keystroke("zzz", "z")
        assert (editor.cy, editor.cx) == (0, 0)
        assert observer.last_match == -1

    def test_match_found_through_tabs(self, make_editor) -> None:
        editor = make_editor("\tfoo\n")
        observer = SearchObserver(editor)
        observer.on_keystroke("foo", "o")
        assert editor.cy == 0
        assert editor.cx == 1

    def test_escape_resets_state(self, make_editor) -> None:
        editor = make_editor(TEXT)
        observer = SearchObserver(editor)
        observer.on_keystroke("foo", "o")
        observer.on_keystroke("foo", "escape")
        assert observer.last_match == -1
        assert observer.direction == 1
        assert Highlight.MATCH not in editor.buffer.rows[1].hl


class TestFind:
    def test_escape_restores_cursor_and_highlight(self, make_editor) -> None:
        editor = make_editor(TEXT, keys=["f", "o", "o", "escape"])
        before = list(editor.buffer.rows[1].hl)

        editor.find()

        assert (editor.cx, editor.cy) == (0, 0)
        assert (editor.viewport.rowoff, editor.viewport.coloff) == (0, 0)
        assert editor.buffer.rows[1].hl == before

    def test_enter_keeps_match_position(self, make_editor) -> None:
        editor = make_editor(TEXT, keys=["f", "o", "o", "enter"])
        editor.find()
        assert (editor.cy, editor.cx) == (1, 2)
        assert Highlight.MATCH not in editor.buffer.rows[1].hl

    def test_match_is_drawn_while_typing(self, make_editor) -> None:
        editor = make_editor(TEXT, keys=["f", "o", "o", "escape"])
        editor.find()
        frames = editor.terminal.output
        assert "\x1b[30;43mfoo" in frames
