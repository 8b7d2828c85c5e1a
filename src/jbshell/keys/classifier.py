"""Turns raw code points into key events."""

from __future__ import annotations

from typing import List, Optional, Protocol

from jbshell.runtime import telemetry

from .events import (
    BACKSPACE,
    CARRIAGE_RETURN,
    DELETE,
    ERASE_EVENT,
    ESCAPE,
    IGNORED_EVENT,
    INTERRUPT,
    INTERRUPT_EVENT,
    LINE_FEED,
    SUBMIT_EVENT,
    TAB,
    KeyEvent,
)
from .sequences import ControlSequenceTable, default_sequences


class CodePointReader(Protocol):
    def peek(self) -> str: ...

    def read(self) -> str: ...


class KeyClassifier:
    """Reads exactly one key event from a code point source.

    Rules are checked in order: tab, escape sequences, submit, interrupt,
    erase, and finally everything else is printable. A
    :class:`~jbshell.errors.TerminalReadError` from the source propagates
    unchanged, including one raised halfway through an escape sequence.
    """

    def __init__(self, sequences: Optional[ControlSequenceTable] = None) -> None:
        self.sequences = sequences if sequences is not None else default_sequences()
        self.logger_name = "jbshell.keys"

    def classify(self, source: CodePointReader) -> KeyEvent:
        char = source.read()

        if char == TAB:
            return IGNORED_EVENT
        if char == ESCAPE:
            return self._classify_escape(source)
        if char in (CARRIAGE_RETURN, LINE_FEED):
            return SUBMIT_EVENT
        if char == INTERRUPT:
            return INTERRUPT_EVENT
        if char in (BACKSPACE, DELETE):
            return ERASE_EVENT
        return KeyEvent.printable(char)

    def _classify_escape(self, source: CodePointReader) -> KeyEvent:
        sequence: List[str] = [ESCAPE]
        while True:
            following = source.peek()
            result = self.sequences.resolve((*sequence, following))
            if result.status == "miss":
                # Unknown sequence: the matched prefix is dropped and the
                # peeked code point stays unread, so `ESC x` still types `x`
                # instead of inserting ESC and consuming `x`.
                telemetry.record_event(
                    "keys.unknown_sequence",
                    level="debug",
                    data={"sequence": "".join(sequence)},
                    logger_name=self.logger_name,
                )
                return IGNORED_EVENT
            source.read()
            sequence.append(following)
            if result.status == "match" and result.event is not None:
                return result.event


__all__ = ["CodePointReader", "KeyClassifier"]
