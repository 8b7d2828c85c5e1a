from __future__ import annotations

import io
import sys
from unittest.mock import patch

import pytest

from jbshell.editor import ReadOutcome
from jbshell.terminal import RawTerminalSession, is_tty, raw_terminal

pytestmark = pytest.mark.skipif(sys.platform == "win32", reason="Unix only")


class FakeTTY(io.StringIO):
    """In-memory stream that claims to be a terminal."""

    def isatty(self) -> bool:
        return True

    def fileno(self) -> int:
        return 7


def test_is_tty_on_plain_stream() -> None:
    assert is_tty(io.StringIO()) is False
    assert is_tty(FakeTTY()) is True


def test_raw_terminal_skips_non_tty() -> None:
    with patch("jbshell.terminal.session.termios") as mock_termios:
        with raw_terminal(io.StringIO()) as state:
            assert state is None

    mock_termios.tcgetattr.assert_not_called()


def test_raw_terminal_restores_saved_attributes() -> None:
    saved = [1, 2, 3, 4, 5, 6, []]
    with patch("jbshell.terminal.session.termios") as mock_termios, patch(
        "jbshell.terminal.session.tty"
    ) as mock_tty:
        mock_termios.tcgetattr.return_value = saved
        with raw_terminal(FakeTTY()) as state:
            assert state is not None
            assert state.fd == 7
            mock_tty.setraw.assert_called_once_with(7)
            mock_termios.tcsetattr.assert_not_called()

    mock_termios.tcsetattr.assert_called_once_with(7, mock_termios.TCSADRAIN, saved)


def test_raw_terminal_restores_when_body_raises() -> None:
    with patch("jbshell.terminal.session.termios") as mock_termios, patch(
        "jbshell.terminal.session.tty"
    ):
        mock_termios.tcgetattr.return_value = ["saved"]
        with pytest.raises(RuntimeError):
            with raw_terminal(FakeTTY()):
                raise RuntimeError("boom")

    mock_termios.tcsetattr.assert_called_once()


def test_raw_terminal_restores_on_keyboard_interrupt() -> None:
    with patch("jbshell.terminal.session.termios") as mock_termios, patch(
        "jbshell.terminal.session.tty"
    ):
        with pytest.raises(KeyboardInterrupt):
            with raw_terminal(FakeTTY()):
                raise KeyboardInterrupt

    mock_termios.tcsetattr.assert_called_once()


def test_read_line_prints_prompt_and_echo() -> None:
    stdout = io.StringIO()
    session = RawTerminalSession(
        prompt="$ ", stdin=io.StringIO("echo hi\r"), stdout=stdout
    )

    result = session.read_line()

    assert result.outcome is ReadOutcome.OK
    assert result.text == "echo hi"
    assert stdout.getvalue() == "$ echo hi\r\n"


def test_read_line_consecutive_lines_share_stream() -> None:
    stdin = io.StringIO("one\rtwo\r")
    session = RawTerminalSession(prompt="> ", stdin=stdin, stdout=io.StringIO())

    assert session.read_line().text == "one"
    assert session.read_line().text == "two"
    assert session.read_line().outcome is ReadOutcome.IO_ERROR


def test_read_line_in_raw_mode_restores_terminal() -> None:
    stdin = FakeTTY("ls\r")
    with patch("jbshell.terminal.session.termios") as mock_termios, patch(
        "jbshell.terminal.session.tty"
    ):
        session = RawTerminalSession(prompt="", stdin=stdin, stdout=io.StringIO())
        result = session.read_line()

    assert result.text == "ls"
    mock_termios.tcsetattr.assert_called_once()


def test_read_line_reports_unusable_terminal() -> None:
    with patch("jbshell.terminal.session.termios") as mock_termios:
        mock_termios.tcgetattr.side_effect = OSError("Inappropriate ioctl")
        session = RawTerminalSession(
            prompt="> ", stdin=FakeTTY("ls\r"), stdout=io.StringIO()
        )
        result = session.read_line()

    assert result.outcome is ReadOutcome.IO_ERROR
    assert result.error is not None
    assert result.error.eof is False
