"""Split a finished input line into a command word and its arguments."""

from __future__ import annotations

from typing import List, Tuple

QUOTE = "'"
SEPARATOR = " "


def split_words(line: str) -> List[str]:
    """Split ``line`` on unquoted spaces.

    Single quotes toggle grouping and are dropped. Each unquoted space ends a
    word, so runs of spaces yield empty words, and the final word is always
    emitted even when empty. An unclosed quote simply keeps every remaining
    space literal.
    """

    words: List[str] = []
    current: List[str] = []
    quoted = False
    for char in line:
        if char == QUOTE:
            quoted = not quoted
        elif char == SEPARATOR and not quoted:
            words.append("".join(current))
            current.clear()
        else:
            current.append(char)
    words.append("".join(current))
    return words


def tokenize(line: str) -> Tuple[str, List[str]]:
    words = split_words(line)
    return words[0], words[1:]


__all__ = ["split_words", "tokenize"]
