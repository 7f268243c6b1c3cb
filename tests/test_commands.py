"""Tests for thor.commands -- the colon-command language."""

from __future__ import annotations

import pytest

from thor.commands import HELP_TEXTS, execute_command, parse_count


class TestParseCount:
    def test_doubled_letter_is_one(self) -> None:
        assert parse_count("y", "y") == 1
        assert parse_count("d", "d") == 1

    def test_number(self) -> None:
        assert parse_count("12", "y") == 12

    @pytest.mark.parametrize("text", ["x", "d", "1a", "-1", "", "２"])
    def test_anything_else_is_rejected(self, text: str) -> None:
        assert parse_count(text, "y") is None

    def test_cancelled_prompt(self) -> None:
        assert parse_count(None, "y") is None


class TestExecuteCommand:
    def test_goto_line(self, make_editor) -> None:
        editor = make_editor("a\nb\nc\nd\n")
        execute_command(editor, "3")
        assert editor.cy == 2
        execute_command(editor, "1")
        assert editor.cy == 0

    def test_goto_line_clamps(self, make_editor) -> None:
        editor = make_editor("a\nb\n")
        execute_command(editor, "99")
        assert editor.cy == 1
        execute_command(editor, "0")
        assert editor.cy == 0

    def test_write(self, make_editor, tmp_path) -> None:
        editor = make_editor("a\n")
        editor.insert_char("b")
        execute_command(editor, "w")
        assert (tmp_path / "test.txt").read_text() == "ba\n"
        assert editor.buffer.dirty == 0
        assert not editor.should_quit

    def test_quit_clean(self, make_editor) -> None:
        editor = make_editor("a\n")
        execute_command(editor, "q")
        assert editor.should_quit
        assert editor.exit_code == 0

    def test_quit_refused_when_dirty(self, make_editor) -> None:
        editor = make_editor("a\n")
        editor.insert_char("b")
        execute_command(editor, "q")
        assert not editor.should_quit
        assert editor.status.current() == "Unsaved changes detected (use :q! to override)"

    def test_force_quit(self, make_editor) -> None:
        editor = make_editor("a\n")
        editor.insert_char("b")
        execute_command(editor, "q!")
        assert editor.should_quit

    def test_write_quit_needs_successful_save(self, make_editor, tmp_path) -> None:
        editor = make_editor("a\n")
        editor.filename = str(tmp_path)
        editor.insert_char("b")
        execute_command(editor, "wq")
        assert not editor.should_quit
        assert editor.status.current().startswith("Can't save! I/O error: ")

    @pytest.mark.parametrize("command", sorted(HELP_TEXTS))
    def test_help_texts(self, make_editor, command: str) -> None:
        editor = make_editor()
        execute_command(editor, command)
        assert editor.status.current() == HELP_TEXTS[command]

    def test_creds(self, make_editor) -> None:
        editor = make_editor()
        execute_command(editor, "creds")
        assert editor.status.current() == "Made by OrangeXarot, Named by i._.tram"

    @pytest.mark.parametrize("command", ["foo", "wqx", "qq", "help me"])
    def test_invalid(self, make_editor, command: str) -> None:
        editor = make_editor()
        execute_command(editor, command)
        assert editor.status.current() == f'Invalid syntax ":{command}"'
        assert not editor.should_quit
