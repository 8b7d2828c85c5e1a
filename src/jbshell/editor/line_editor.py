"""Line editing loop with manual echo for raw terminals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TextIO

from jbshell.errors import TerminalReadError
from jbshell.keys import KeyClassifier, KeyEvent, KeyKind
from jbshell.keys.classifier import CodePointReader
from jbshell.runtime import telemetry

from .buffer import InputBuffer

ERASE_SEQUENCE = "\b \b"
# Raw mode turns off output post-processing, so "\n" alone would not return
# the carriage.
LINE_BREAK = "\r\n"


class ReadOutcome(str, Enum):
    OK = "ok"
    INTERRUPTED = "interrupted"
    IO_ERROR = "io_error"


@dataclass(slots=True)
class ReadResult:
    """Finished line plus how the read ended."""

    text: str
    outcome: ReadOutcome
    error: Optional[TerminalReadError] = None


class LineEditor:
    """Applies key events to an :class:`InputBuffer` and echoes them.

    Every printable or erase event is written (and flushed) before the next
    event is read, since raw mode leaves echo to us.
    """

    def __init__(
        self,
        source: CodePointReader,
        output: TextIO,
        *,
        classifier: Optional[KeyClassifier] = None,
    ) -> None:
        self.source = source
        self.output = output
        self.classifier = classifier or KeyClassifier()
        self.buffer = InputBuffer()
        self.logger_name = "jbshell.editor"

    def apply(self, event: KeyEvent) -> Optional[ReadResult]:
        """Apply one event; return a result once the line is finished."""

        if event.kind is KeyKind.PRINTABLE and event.char is not None:
            self.buffer.append(event.char)
            self._write(event.char)
            return None

        if event.kind is KeyKind.ERASE:
            if self.buffer.pop() is not None:
                self._write(ERASE_SEQUENCE)
            return None

        if event.kind is KeyKind.SUBMIT:
            return ReadResult(text=self.buffer.take(), outcome=ReadOutcome.OK)

        if event.kind is KeyKind.INTERRUPT:
            self.buffer.clear()
            return ReadResult(text="", outcome=ReadOutcome.INTERRUPTED)

        return None

    def edit_loop(self) -> ReadResult:
        self.buffer.clear()
        with telemetry.span(
            "editor::edit_loop", logger_name=self.logger_name, component="editor"
        ) as handle:
            while True:
                try:
                    event = self.classifier.classify(self.source)
                except TerminalReadError as exc:
                    self.buffer.clear()
                    handle.add_metadata("read_error", exc)
                    return ReadResult(
                        text="", outcome=ReadOutcome.IO_ERROR, error=exc
                    )

                result = self.apply(event)
                if result is None:
                    continue
                if result.outcome is ReadOutcome.OK:
                    self._write(LINE_BREAK)
                handle.add_metadata("outcome", result.outcome.value)
                return result

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()


__all__ = [
    "ERASE_SEQUENCE",
    "LINE_BREAK",
    "LineEditor",
    "ReadOutcome",
    "ReadResult",
]
