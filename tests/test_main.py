"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path

import pytest

from spellcheck.constants import DICT_ENV_VAR
from spellcheck.main import COMMANDS, main, parse_args


def _run(capsys, *argv: str) -> tuple[int, str, str]:
    code = main(list(argv))
    captured = capsys.readouterr()
    return code, captured.out, captured.err


class TestParseArgs:
    def test_positional(self) -> None:
        args = parse_args(["check", "cat"])
        assert args.command == "check"
        assert args.word == "cat"
        assert args.dict_path is None
        assert args.verbose is False

    def test_dict_flag(self) -> None:
        args = parse_args(["complete", "ca", "--dict", "words.txt", "-v"])
        assert args.dict_path == "words.txt"
        assert args.verbose is True

    @pytest.mark.parametrize("argv", [[], ["check"], ["check", "cat", "extra"]])
    def test_bad_usage_exits_1(self, argv: list[str], capsys) -> None:
        with pytest.raises(SystemExit) as exc:
            parse_args(argv)
        assert exc.value.code == 1
        assert "usage" in capsys.readouterr().err.lower()


class TestCommands:
    def test_known_commands(self) -> None:
        assert set(COMMANDS) == {"check", "complete", "correct", "suggest"}

    def test_check_correct(self, words_file: Path, capsys) -> None:
        code, out, _ = _run(capsys, "check", "cat", "--dict", str(words_file))
        assert code == 0
        assert out == "correct\n"

    def test_check_incorrect(self, words_file: Path, capsys) -> None:
        code, out, _ = _run(capsys, "check", "cta", "--dict", str(words_file))
        assert code == 0
        assert out == "incorrect\n"

    def test_complete(self, words_file: Path, capsys) -> None:
        code, out, _ = _run(capsys, "complete", "ca", "--dict", str(words_file))
        assert code == 0
        assert out.splitlines() == ["cab", "can", "car", "cat"]

    def test_complete_unknown_prefix(self, words_file: Path, capsys) -> None:
        code, out, err = _run(capsys, "complete", "zzqx", "--dict", str(words_file))
        assert code == 0
        assert out == ""
        assert "zzqx" in err

    def test_correct(self, words_file: Path, capsys) -> None:
        code, out, _ = _run(capsys, "correct", "helo", "--dict", str(words_file))
        assert code == 0
        assert out.splitlines() == ["held", "hell", "help"]

    def test_suggest(self, words_file: Path, capsys) -> None:
        code, out, _ = _run(capsys, "suggest", "xat", "--dict", str(words_file))
        assert code == 0
        assert out.splitlines() == ["bat", "cat", "hat"]

    def test_unknown_command(self, words_file: Path, capsys) -> None:
        code, out, err = _run(capsys, "spell", "cat", "--dict", str(words_file))
        assert code == 1
        assert out == ""
        assert "Unknown command: spell" in err

    def test_missing_dictionary(self, tmp_path: Path, capsys) -> None:
        code, _, err = _run(capsys, "check", "cat", "--dict", str(tmp_path / "none.txt"))
        assert code == 1
        assert "Could not load dictionary" in err

    def test_dictionary_from_env(self, words_file: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setenv(DICT_ENV_VAR, str(words_file))
        code, out, _ = _run(capsys, "check", "hello")
        assert code == 0
        assert out == "correct\n"
