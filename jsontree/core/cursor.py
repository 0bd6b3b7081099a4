"""
Character cursor over the decoded input.
"""

from typing import Optional

import regex

from .constants import WHITESPACE_RUN


class Cursor:
    """
    The whole input plus a scan position.

    The position always lies in ``[0, len(text)]``; ``len(text)`` means the
    input is exhausted. Callers check ``at_end()`` or ``has_room()`` before
    consuming, and ``advance`` refuses to move past the end rather than
    clamping.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def __len__(self) -> int:
        return len(self.text)

    def peek(self, offset: int = 0) -> str:
        """Character at the given offset without consuming it, "" past the end."""
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def remaining(self) -> int:
        """Number of characters not yet consumed."""
        return len(self.text) - self.pos

    def has_room(self, count: int = 1) -> bool:
        """Whether at least ``count`` characters remain."""
        return self.remaining() >= count

    def advance(self, count: int = 1) -> None:
        """Consume ``count`` characters."""
        if not self.has_room(count):
            raise IndexError(
                f"Cannot advance {count} from position {self.pos} "
                f"of {len(self.text)}"
            )
        self.pos += count

    def skip_whitespace(self) -> None:
        """Skip space, tab, newline and carriage return."""
        self.pos = WHITESPACE_RUN.match(self.text, self.pos).end()

    def match(
        self, pattern: "regex.Pattern[str]", offset: int = 0
    ) -> Optional["regex.Match[str]"]:
        """Match a compiled pattern at position + offset without consuming."""
        return pattern.match(self.text, self.pos + offset)

    def startswith(self, literal: str) -> bool:
        return self.text.startswith(literal, self.pos)

    def slice(self, start: int, end: Optional[int] = None) -> str:
        return self.text[start:self.pos if end is None else end]
