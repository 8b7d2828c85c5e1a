"""Input buffer and the raw-mode line editor."""

from .buffer import InputBuffer
from .line_editor import (
    ERASE_SEQUENCE,
    LINE_BREAK,
    LineEditor,
    ReadOutcome,
    ReadResult,
)

__all__ = [
    "ERASE_SEQUENCE",
    "InputBuffer",
    "LINE_BREAK",
    "LineEditor",
    "ReadOutcome",
    "ReadResult",
]
