"""Raw terminal mode guard and the one-line read session built on it.

Raw mode:
- Disables line buffering
- Disables local echo
- Disables signal generation (Ctrl+C arrives as code 3)

Supports Unix (Linux, macOS) systems via termios. Streams that are not a TTY
(pipes, files, ``io.StringIO``) are read as-is without touching terminal
attributes.
"""

from __future__ import annotations

import os
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Optional, TextIO

from jbshell.config import DEFAULT_PROMPT
from jbshell.editor import LineEditor, ReadOutcome, ReadResult
from jbshell.errors import TerminalReadError
from jbshell.runtime import telemetry

from .source import CodePointSource, prepare_stream

if os.name != "nt":
    import termios
    import tty

    _TERMINAL_ERRORS: tuple[type[BaseException], ...] = (OSError, termios.error)
else:  # pragma: no cover - termios is unavailable on Windows
    _TERMINAL_ERRORS = (OSError,)


@dataclass(frozen=True)
class TerminalState:
    """Terminal attributes captured before entering raw mode."""

    fd: int
    attributes: Any


def is_tty(stream: TextIO) -> bool:
    """Check if ``stream`` is attached to a terminal."""
    try:
        return stream.isatty()
    except (AttributeError, ValueError):
        return False


@contextmanager
def raw_terminal(stream: TextIO) -> Iterator[Optional[TerminalState]]:
    """
    Hold ``stream``'s terminal in raw mode for the duration of the block.

    The saved attributes are restored when the block exits, whether it
    returns, raises, or is interrupted. Yields the saved
    :class:`TerminalState`, or ``None`` when ``stream`` is not a TTY.

    Usage:
        >>> with raw_terminal(sys.stdin):
        ...     char = sys.stdin.read(1)
    """
    if os.name == "nt" or not is_tty(stream):
        yield None
        return

    fd = stream.fileno()
    saved = TerminalState(fd=fd, attributes=termios.tcgetattr(fd))
    try:
        tty.setraw(fd)
        yield saved
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved.attributes)


class RawTerminalSession:
    """Prints the prompt and reads one edited line under raw mode."""

    def __init__(
        self,
        *,
        prompt: str = DEFAULT_PROMPT,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.prompt = prompt
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.logger_name = "jbshell.terminal"
        prepare_stream(self.stdin)

    def read_line(self) -> ReadResult:
        with telemetry.span(
            "terminal::read_line",
            logger_name=self.logger_name,
            component="terminal",
            metadata={"tty": is_tty(self.stdin)},
        ) as handle:
            try:
                with raw_terminal(self.stdin):
                    self.stdout.write(self.prompt)
                    self.stdout.flush()
                    editor = LineEditor(CodePointSource(self.stdin), self.stdout)
                    result = editor.edit_loop()
            except _TERMINAL_ERRORS as exc:
                handle.add_metadata("terminal_error", exc)
                error = TerminalReadError(f"cannot use terminal: {exc}")
                return ReadResult(text="", outcome=ReadOutcome.IO_ERROR, error=error)
            handle.add_metadata("outcome", result.outcome.value)
            return result


__all__ = [
    "DEFAULT_PROMPT",
    "RawTerminalSession",
    "TerminalState",
    "is_tty",
    "raw_terminal",
]
