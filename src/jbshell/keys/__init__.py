"""Key event model, escape sequence table and classifier."""

from .classifier import CodePointReader, KeyClassifier
from .events import (
    ERASE_EVENT,
    IGNORED_EVENT,
    INTERRUPT_EVENT,
    SUBMIT_EVENT,
    KeyEvent,
    KeyKind,
)
from .sequences import (
    ARROW_KEYS,
    ControlSequenceTable,
    SequenceConflictError,
    SequenceResult,
    default_sequences,
)

__all__ = [
    "ARROW_KEYS",
    "CodePointReader",
    "ControlSequenceTable",
    "ERASE_EVENT",
    "IGNORED_EVENT",
    "INTERRUPT_EVENT",
    "KeyClassifier",
    "KeyEvent",
    "KeyKind",
    "SUBMIT_EVENT",
    "SequenceConflictError",
    "SequenceResult",
    "default_sequences",
]
