"""Immutable cursor for positional scanning of dateTime strings.

Implements the immutable cursor pattern used by the grammar recognizer.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Matchers return a new cursor on success and None on mismatch,
      so a failed match never consumes input

Complexity:
    Every matcher inspects each character at most once and never moves
    backwards. Scanning is therefore linear in the input length regardless
    of content, which rules out the catastrophic backtracking a regex engine
    can exhibit on hostile input.
"""

from dataclasses import dataclass

from xsdatetime.constants import ASCII_DIGITS

__all__ = ["Cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("2005-11", 0)
        >>> cursor.current
        '2'
        >>> after_year = cursor.digits(4)
        >>> after_year.pos
        4
        >>> cursor.pos  # Original unchanged (immutability)
        0
        >>> cursor.digits(5) is None
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos."""
        return self.source[self.pos : end_pos]

    def expect(self, char: str) -> "Cursor | None":
        """Consume a single literal character.

        Returns:
            Cursor past the character, or None if the current character
            differs or input is exhausted
        """
        if self.peek() != char:
            return None
        return self.advance()

    def digits(self, count: int) -> "Cursor | None":
        """Consume exactly ``count`` ASCII digits.

        Returns:
            Cursor past the digits, or None if fewer than ``count`` ASCII
            digits follow the current position
        """
        for offset in range(count):
            if self.peek(offset) not in ASCII_DIGITS:
                return None
        return self.advance(count)

    def digit_run(self, max_count: int) -> "Cursor":
        """Consume up to ``max_count`` ASCII digits (possibly none).

        Stops at the first non-digit or after ``max_count`` digits, whichever
        comes first. Callers check the consumed length themselves.
        """
        c = self
        consumed = 0
        while consumed < max_count and c.peek() in ASCII_DIGITS:
            c = c.advance()
            consumed += 1
        return c
