"""Key events produced by the classifier."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

TAB = "\t"
ESCAPE = "\x1b"
CARRIAGE_RETURN = "\r"
LINE_FEED = "\n"
INTERRUPT = "\x03"
BACKSPACE = "\b"
DELETE = "\x7f"


class KeyKind(str, Enum):
    """Tags of the key event variant."""

    PRINTABLE = "printable"
    SUBMIT = "submit"
    ERASE = "erase"
    INTERRUPT = "interrupt"
    IGNORED = "ignored"


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Single classified key press; ``char`` is only set for printables."""

    kind: KeyKind
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is KeyKind.PRINTABLE:
            if self.char is None or len(self.char) != 1:
                raise ValueError("printable events carry exactly one code point")
        elif self.char is not None:
            raise ValueError(f"{self.kind.value} events carry no code point")

    @classmethod
    def printable(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.PRINTABLE, char)


SUBMIT_EVENT = KeyEvent(KeyKind.SUBMIT)
ERASE_EVENT = KeyEvent(KeyKind.ERASE)
INTERRUPT_EVENT = KeyEvent(KeyKind.INTERRUPT)
IGNORED_EVENT = KeyEvent(KeyKind.IGNORED)


__all__ = [
    "KeyKind",
    "KeyEvent",
    "SUBMIT_EVENT",
    "ERASE_EVENT",
    "INTERRUPT_EVENT",
    "IGNORED_EVENT",
    "TAB",
    "ESCAPE",
    "CARRIAGE_RETURN",
    "LINE_FEED",
    "INTERRUPT",
    "BACKSPACE",
    "DELETE",
]
