"""Terminal access: raw mode guard, code point source, line read session."""

from .session import (
    DEFAULT_PROMPT,
    RawTerminalSession,
    TerminalState,
    is_tty,
    raw_terminal,
)
from .source import CodePointSource, prepare_stream

__all__ = [
    "CodePointSource",
    "DEFAULT_PROMPT",
    "RawTerminalSession",
    "TerminalState",
    "is_tty",
    "prepare_stream",
    "raw_terminal",
]
