"""Tests for the thor command-line entry point."""

from __future__ import annotations

import pytest

from thor.cli import main, parse_args


class TestParseArgs:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("THOR_LOG", raising=False)
        args = parse_args([])
        assert args.file is None
        assert args.log_level == "info"
        assert args.log_file is None

    def test_file_and_logging(self) -> None:
        args = parse_args(["main.c", "--log-level", "debug", "--log-file", "thor.log"])
        assert args.file == "main.c"
        assert args.log_level == "debug"
        assert args.log_file == "thor.log"

    def test_log_file_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("THOR_LOG", "/tmp/thor.log")
        assert parse_args([]).log_file == "/tmp/thor.log"

    def test_rejects_unknown_level(self) -> None:
        with pytest.raises(SystemExit):
            parse_args(["--log-level", "loud"])


class TestMain:
    def test_unopenable_file_exits_with_error(
        self,
        tmp_path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.delenv("THOR_LOG", raising=False)
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.chdir(tmp_path)

        with pytest.raises(SystemExit) as excinfo:
            main(["missing.txt"])

        assert excinfo.value.code == 1
        assert "missing.txt" in capsys.readouterr().err
