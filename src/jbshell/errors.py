"""Exception types raised inside the shell and caught at component seams."""

from __future__ import annotations


class ShellError(Exception):
    """Base class for every error the shell raises on purpose."""


class TerminalReadError(ShellError):
    """Raised when the next code point cannot be read from the terminal.

    ``eof`` is true when the stream simply ended, as opposed to an OS-level
    failure reported by the terminal driver.
    """

    def __init__(self, message: str, *, eof: bool = False) -> None:
        super().__init__(message)
        self.eof = eof


class CommandNotFoundError(ShellError):
    """Raised when a command name resolves to no executable on the path."""

    def __init__(self, command: str) -> None:
        super().__init__(f"{command}: command not found")
        self.command = command


__all__ = ["ShellError", "TerminalReadError", "CommandNotFoundError"]
