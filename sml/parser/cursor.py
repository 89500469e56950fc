"""
Immutable cursor over a single line of source text.

Every movement returns a new cursor, so lookahead never disturbs the caller.
"""

from collections.abc import Callable
from dataclasses import dataclass, field, replace


WHITESPACE = " \t"


@dataclass(frozen=True)
class Cursor:
    """A position inside one line."""

    text: str = field(default="", repr=False)
    pos: int = 0
    line: int = 1

    @property
    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    @property
    def column(self) -> int:
        """1-based column of the current character."""
        return self.pos + 1

    def current(self) -> str:
        """Current character, or empty string at end of line."""
        if self.pos >= len(self.text):
            return ""
        return self.text[self.pos]

    def peek(self, offset: int = 1) -> str:
        pos = self.pos + offset
        if pos >= len(self.text):
            return ""
        return self.text[pos]

    def advance(self, count: int = 1) -> "Cursor":
        return replace(self, pos=min(self.pos + count, len(self.text)))

    def skip_while(self, pred: Callable[[str], bool]) -> "Cursor":
        """Move forward while pred holds for the current character."""
        pos = self.pos
        end = len(self.text)
        while pos < end and pred(self.text[pos]):
            pos += 1
        return replace(self, pos=pos)

    def skip_until(self, chars: str) -> "Cursor":
        """Move forward to the first character contained in chars."""
        return self.skip_while(lambda c: c not in chars)

    def skip_whitespace(self) -> "Cursor":
        return self.skip_while(lambda c: c in WHITESPACE)

    def span_to(self, other: "Cursor") -> str:
        """Text between this cursor and a later one."""
        return self.text[self.pos:other.pos]
