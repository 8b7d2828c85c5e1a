"""Pull-based code point reader with a one-slot lookahead."""

from __future__ import annotations

import io
from typing import Optional, TextIO

from jbshell.errors import TerminalReadError

REPLACEMENT_CHARACTER = "\ufffd"


def prepare_stream(stream: TextIO) -> None:
    """Make a text-mode stdin tolerant of raw terminal input.

    Undecodable bytes become U+FFFD and CR is delivered as typed rather than
    held back for newline translation. Only a ``TextIOWrapper`` that has not
    buffered any decoded text can be reconfigured; anything else is left as-is.
    """

    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None:
        return
    try:
        reconfigure(errors="replace", newline="")
    except io.UnsupportedOperation:
        pass


class CodePointSource:
    """Reads one code point at a time from a text stream.

    ``peek`` returns the next code point without consuming it; ``read``
    consumes it. Both raise :class:`TerminalReadError` when the stream has
    ended or the underlying read fails.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._lookahead: Optional[str] = None

    def peek(self) -> str:
        if self._lookahead is None:
            self._lookahead = self._pull()
        return self._lookahead

    def read(self) -> str:
        if self._lookahead is not None:
            char, self._lookahead = self._lookahead, None
            return char
        return self._pull()

    def _pull(self) -> str:
        try:
            char = self._stream.read(1)
        except UnicodeDecodeError:
            return REPLACEMENT_CHARACTER
        except OSError as exc:
            raise TerminalReadError(str(exc)) from exc
        if not char:
            raise TerminalReadError("end of input", eof=True)
        return char


__all__ = ["CodePointSource", "REPLACEMENT_CHARACTER", "prepare_stream"]
