"""
Cursor - bounded, case-normalizing access to the notation text.

The cursor is the only thing that touches the raw string. Every token rule
reads through it, so case folding and end-of-input checks happen in one place.
"""

from __future__ import annotations

from chuk_mcp_play.core.errors import UnexpectedEndOfInput


class Cursor:
    """
    An index into the notation text.

    Reading at or past the end is an error, never an implicit sentinel.
    Lookahead (peek_next) is the exception: at the end it returns None,
    which matches no digit, dot or accidental.
    """

    __slots__ = ("text", "index")

    def __init__(self, text: str, index: int = 0) -> None:
        self.text = text
        self.index = index

    def __repr__(self) -> str:
        return f"Cursor(index={self.index}, length={len(self.text)})"

    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self.index >= len(self.text)

    def current(self) -> str:
        """Return the upper-cased character at the index."""
        if self.index >= len(self.text):
            raise UnexpectedEndOfInput(self.index)
        return self.text[self.index].upper()

    def advance_and_read(self) -> str:
        """Move one character forward, then read it."""
        self.index += 1
        return self.current()

    def advance(self) -> None:
        """Commit a character previously seen through peek_next."""
        self.index += 1

    def peek_next(self) -> str | None:
        """Read one character ahead without moving."""
        ahead = self.index + 1
        if ahead >= len(self.text):
            return None
        return self.text[ahead].upper()

    def peek_is_digit(self) -> bool:
        ch = self.peek_next()
        return ch is not None and "0" <= ch <= "9"
