"""In-progress input line with the cursor pinned to its end."""

from __future__ import annotations

from typing import List, Optional


class InputBuffer:
    def __init__(self, text: str = "") -> None:
        self._chars: List[str] = list(text)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def append(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError("InputBuffer stores one code point at a time")
        self._chars.append(char)

    def pop(self) -> Optional[str]:
        """Remove and return the last code point, or ``None`` when empty."""

        if not self._chars:
            return None
        return self._chars.pop()

    def clear(self) -> None:
        self._chars.clear()

    def take(self) -> str:
        """Return the text and leave the buffer empty."""

        text = self.text
        self._chars.clear()
        return text


__all__ = ["InputBuffer"]
