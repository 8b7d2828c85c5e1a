"""Trie of multi-code-point control sequences (arrow keys and friends)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Literal, Optional, Sequence

from .events import ESCAPE, IGNORED_EVENT, KeyEvent

ARROW_KEYS: tuple[str, ...] = (
    ESCAPE + "[A",
    ESCAPE + "[B",
    ESCAPE + "[C",
    ESCAPE + "[D",
)


@dataclass(slots=True)
class TrieNode:
    """Single trie node holding an optional terminal event and children."""

    event: Optional[KeyEvent] = None
    children: Dict[str, "TrieNode"] = field(default_factory=dict)

    def child(self, char: str) -> "TrieNode":
        return self.children.setdefault(char, TrieNode())

    def next_chars(self) -> tuple[str, ...]:
        return tuple(sorted(self.children.keys()))


@dataclass(frozen=True, slots=True)
class SequenceResult:
    """Outcome of walking the trie with the code points seen so far."""

    status: Literal["match", "pending", "miss"]
    event: Optional[KeyEvent] = None
    consumed: int = 0
    next_expected: tuple[str, ...] = ()


class SequenceConflictError(ValueError):
    """Raised when a new sequence overlaps an existing one."""

    def __init__(self, sequence: str, existing: str) -> None:
        super().__init__(f"Sequence {sequence!r} overlaps registered {existing!r}")
        self.sequence = sequence
        self.existing = existing


class ControlSequenceTable:
    """Maps escape sequences to the key event they stand for.

    No registered sequence may be a prefix of another: resolution stops at
    the first complete match.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._sequences: Dict[str, KeyEvent] = {}

    def __contains__(self, sequence: object) -> bool:
        return sequence in self._sequences

    def __iter__(self) -> Iterator[str]:
        return iter(self._sequences)

    def __len__(self) -> int:
        return len(self._sequences)

    def register(self, sequence: str, event: KeyEvent) -> None:
        if len(sequence) < 2 or not sequence.startswith(ESCAPE):
            raise ValueError("control sequences start with ESC and continue")
        for existing in self._sequences:
            if existing.startswith(sequence) or sequence.startswith(existing):
                raise SequenceConflictError(sequence, existing)

        node = self._root
        for char in sequence:
            node = node.child(char)
        node.event = event
        self._sequences[sequence] = event

    def resolve(self, chars: Sequence[str]) -> SequenceResult:
        node = self._root
        consumed = 0
        for char in chars:
            child = node.children.get(char)
            if child is None:
                return SequenceResult(status="miss", consumed=consumed)
            node = child
            consumed += 1

        if node.event is not None:
            return SequenceResult(status="match", event=node.event, consumed=consumed)
        if node.children:
            return SequenceResult(
                status="pending", consumed=consumed, next_expected=node.next_chars()
            )
        return SequenceResult(status="miss", consumed=consumed)


def default_sequences() -> ControlSequenceTable:
    """Table with the arrow keys, all of which are ignored by the editor."""

    table = ControlSequenceTable()
    for sequence in ARROW_KEYS:
        table.register(sequence, IGNORED_EVENT)
    return table


__all__ = [
    "ARROW_KEYS",
    "ControlSequenceTable",
    "SequenceConflictError",
    "SequenceResult",
    "TrieNode",
    "default_sequences",
]
