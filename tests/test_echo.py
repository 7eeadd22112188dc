"""Tests for the echo session (core/echo.py and cli/echo_prompt.py).

``questionary`` is mocked for the interactive path; piped input uses an
in-memory stream.
"""

from __future__ import annotations

import io
import sys
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from starter_drills.cli import exit_codes
from starter_drills.cli.echo_prompt import run_echo
from starter_drills.core.echo import echo_lines, is_stop_word
from starter_drills.exceptions import MissingDependencyError


# ---------------------------------------------------------------------------
# Core
# ---------------------------------------------------------------------------

class TestIsStopWord:
    @pytest.mark.parametrize("line", ["stop", "stop\n", "  stop  "])
    def test_stop(self, line: str) -> None:
        assert is_stop_word(line)

    @pytest.mark.parametrize("line", ["Stop", "STOP", "stopping", "", "don't stop"])
    def test_not_stop(self, line: str) -> None:
        assert not is_stop_word(line)


class TestEchoLines:
    def test_echoes_up_to_and_including_stop(self) -> None:
        responses = list(echo_lines(["hello\n", "stop\n", "never\n"]))
        assert responses == ["You typed: hello", "You typed: stop"]

    def test_ends_when_input_is_exhausted(self) -> None:
        assert list(echo_lines(["only\n"])) == ["You typed: only"]

    def test_empty_input(self) -> None:
        assert list(echo_lines([])) == []

    def test_blank_lines_are_echoed(self) -> None:
        assert list(echo_lines(["\n", "stop"])) == ["You typed: ", "You typed: stop"]

    def test_does_not_read_past_stop(self) -> None:
        consumed: list[str] = []

        def _source() -> Iterator[str]:
            for line in ("a", "stop", "b"):
                consumed.append(line)
                yield line

        list(echo_lines(_source()))
        assert consumed == ["a", "stop"]


# ---------------------------------------------------------------------------
# CLI — piped input
# ---------------------------------------------------------------------------

class TestRunEchoPiped:
    def test_echoes_and_says_goodbye(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run_echo(io.StringIO("hi\nstop\nignored\n"))
        captured = capsys.readouterr()

        assert code == exit_codes.SUCCESS
        assert captured.out.splitlines() == [
            "Please type something:",
            "You typed: hi",
            "Please type something:",
            "You typed: stop",
            "Stopping...",
        ]
        assert captured.err == ""

    def test_eof_ends_session(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = run_echo(io.StringIO("one\n"))
        out = capsys.readouterr().out

        assert code == exit_codes.SUCCESS
        assert out.splitlines() == [
            "Please type something:",
            "You typed: one",
            "Please type something:",
            "Stopping...",
        ]

    def test_markup_in_input_is_verbatim(self, capsys: pytest.CaptureFixture[str]) -> None:
        run_echo(io.StringIO("[bold]hi[/bold]\nstop\n"))
        assert "You typed: [bold]hi[/bold]" in capsys.readouterr().out


# ---------------------------------------------------------------------------
# CLI — interactive prompt
# ---------------------------------------------------------------------------

class TestRunEchoInteractive:
    @patch("starter_drills.cli.echo_prompt._import_questionary")
    def test_prompts_until_stop(
        self,
        mock_q: MagicMock,
        tty_stream: io.StringIO,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        questionary = MagicMock()
        questionary.text.return_value.ask.side_effect = ["first", "stop", "unused"]
        mock_q.return_value = questionary

        code = run_echo(tty_stream)

        assert code == exit_codes.SUCCESS
        assert questionary.text.call_count == 2
        questionary.text.assert_called_with("Please type something:")
        assert capsys.readouterr().out.splitlines() == [
            "You typed: first",
            "You typed: stop",
            "Stopping...",
        ]

    @patch("starter_drills.cli.echo_prompt._import_questionary")
    def test_cancelled_prompt_ends_session(
        self,
        mock_q: MagicMock,
        tty_stream: io.StringIO,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        questionary = MagicMock()
        questionary.text.return_value.ask.return_value = None
        mock_q.return_value = questionary

        assert run_echo(tty_stream) == exit_codes.SUCCESS
        assert capsys.readouterr().out.splitlines() == ["Stopping..."]

    def test_missing_questionary_raises(
        self,
        monkeypatch: pytest.MonkeyPatch,
        tty_stream: io.StringIO,
    ) -> None:
        monkeypatch.setitem(sys.modules, "questionary", None)

        with pytest.raises(MissingDependencyError, match="questionary is not installed"):
            run_echo(tty_stream)
