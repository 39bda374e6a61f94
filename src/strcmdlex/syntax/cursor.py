"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern used by the choice token parser.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Positions are str indices, so they count code points, not bytes

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from strcmdlex.constants import INFORMATION_SEPARATORS
from strcmdlex.diagnostics import ErrorTemplate

__all__ = ["Cursor", "ParseResult", "is_whitespace"]


def is_whitespace(char: str) -> bool:
    """Check for a Unicode White_Space character.

    Differs from str.isspace only for the information separators
    U+001C..U+001F, which are ordinary token characters here.

    Example:
        >>> is_whitespace("\\u3000")
        True
        >>> is_whitespace("\\x1c")
        False
    """
    return char.isspace() and char not in INFORMATION_SEPARATORS


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> cursor.advance().current
        'e'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
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
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions (clamped to EOF)."""
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive)."""
        return self.source[self.pos : end_pos]

    def skip_whitespace(self) -> "Cursor":
        """Skip any run of whitespace characters.

        Unlike a single-space skip, this accepts tabs, newlines, carriage
        returns and the other Unicode whitespace characters (see
        is_whitespace).

        Example:
            >>> Cursor(" \\t\\r\\n a", 0).skip_whitespace().pos
            5
        """
        c = self
        while not c.is_eof and is_whitespace(c.current):
            c = c.advance()
        return c

    def skip_until(self, stop: str) -> "Cursor":
        """Advance to the next character contained in stop, or to EOF.

        Stops AT the matching character, does not consume it.
        """
        c = self
        while not c.is_eof and c.current not in stop:
            c = c.advance()
        return c

    def skip_token(self, stop: str) -> "Cursor":
        """Advance past a run of non-whitespace characters not in stop."""
        c = self
        while not c.is_eof and not is_whitespace(c.current) and c.current not in stop:
            c = c.advance()
        return c

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor('"a"', 0).expect('"').pos
            1
            >>> Cursor("a", 0).expect('"') is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every sub-parser has signature:
        def parse_foo(cursor: Cursor) -> ParseResult[Foo] | None

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.cursor.pos
        1
    """

    value: T
    cursor: Cursor
