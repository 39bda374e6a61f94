"""Primitive parsers: numbers, identifiers and choice tokens.

The choice token parser walks the token region of a choice list with the
immutable Cursor. Every parser returns ParseResult[T] on success and
None on failure; failures make the enclosing grammar not match.
"""

import re

from strcmdlex.constants import BRACE_ESCAPE, CHOICE_QUOTE, MAX_INDEX
from strcmdlex.syntax.cursor import Cursor, ParseResult

__all__ = [
    "is_case_identifier",
    "is_command_name",
    "is_kind",
    "parse_choice_token",
    "parse_choice_tokens",
    "parse_index",
]

_COMMAND_NAME = re.compile(r"[A-Z][A-Z0-9_]*")
_WORD = re.compile(r"\w+")
_KIND = re.compile(r"[A-Z]")


def parse_index(digits: str | None) -> int | None:
    """Convert a captured digit run to an index.

    Values that do not fit an unsigned 64-bit integer, and digit runs that
    are not ASCII (the patterns accept any Unicode decimal digit), are
    treated as an absent index, not as an error.

    Example:
        >>> parse_index("12")
        12
        >>> parse_index("18446744073709551616") is None
        True
        >>> parse_index("\u0661\u0662") is None  # Arabic-Indic digits
        True
        >>> parse_index(None) is None
        True
    """
    if digits is None or not digits.isascii():
        return None
    try:
        value = int(digits)
    except ValueError:
        # Digit runs beyond the interpreter's int conversion limit
        return None
    if value > MAX_INDEX:
        return None
    return value


def is_command_name(name: str) -> bool:
    """Check a command name: empty, the brace escape, or [A-Z][A-Z0-9_]*."""
    return name in ("", BRACE_ESCAPE) or _COMMAND_NAME.fullmatch(name) is not None


def is_case_identifier(value: str) -> bool:
    """Check a case modifier or gender tag: one or more word characters."""
    return _WORD.fullmatch(value) is not None


def is_kind(value: str) -> bool:
    """Check a choice list kind: a single uppercase letter."""
    return _KIND.fullmatch(value) is not None


def parse_choice_token(cursor: Cursor) -> ParseResult[str] | None:
    """Parse one choice: leading whitespace, then a bare or quoted token.

    Bare tokens are runs of non-whitespace, non-quote characters. Quoted
    tokens are taken verbatim between double quotes and may be empty;
    there is no escape mechanism.

    Example:
        >>> parse_choice_token(Cursor(' "a b" c', 0)).value
        'a b'
        >>> parse_choice_token(Cursor("a", 0)) is None  # Missing whitespace
        True
    """
    start = cursor.skip_whitespace()
    if start.pos == cursor.pos or start.is_eof:
        return None

    after_quote = start.expect(CHOICE_QUOTE)
    if after_quote is not None:
        closing = after_quote.skip_until(CHOICE_QUOTE)
        if closing.is_eof:
            return None
        return ParseResult(after_quote.slice_to(closing.pos), closing.advance())

    end = start.skip_token(CHOICE_QUOTE)
    return ParseResult(start.slice_to(end.pos), end)


def parse_choice_tokens(region: str) -> tuple[str, ...] | None:
    """Split a choice list token region into choices.

    The whole region must be consumed; any leftover that is neither a bare
    nor a quoted token makes the region invalid.

    Example:
        >>> parse_choice_tokens(' "" b')
        ('', 'b')
        >>> parse_choice_tokens(' " a') is None
        True
    """
    cursor = Cursor(region, 0)
    choices: list[str] = []
    while not cursor.is_eof:
        result = parse_choice_token(cursor)
        if result is None:
            return None
        choices.append(result.value)
        cursor = result.cursor
    if not choices:
        return None
    return tuple(choices)
