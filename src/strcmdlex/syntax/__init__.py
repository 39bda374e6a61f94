"""String command syntax package.

Provides parser, fragment definitions and compilation back to text.
Separate from any rendering layer to enable tooling (linters, formatters,
translation editors).

Python 3.13+.
"""

from .ast import (
    ChoiceList,
    Fragment,
    FragmentContent,
    GenderDefinition,
    ParsedString,
    Span,
    StringCommand,
    Text,
)
from .cursor import Cursor, ParseResult
from .parser import StringParser
from .serializer import StringCompiler, compile  # noqa: A004

__all__ = [
    "ChoiceList",
    "Cursor",
    "Fragment",
    "FragmentContent",
    "GenderDefinition",
    "ParseResult",
    "ParsedString",
    "Span",
    "StringCommand",
    "StringCompiler",
    "StringParser",
    "Text",
    "compile",
    "parse",
]


def parse(source: str) -> ParsedString:
    """Parse a string into fragments.

    Convenience function for StringParser.parse().

    Args:
        source: String containing literal text and bracketed commands

    Returns:
        ParsedString containing the fragments

    Raises:
        StringSyntaxError: On the first unterminated or invalid command

    Example:
        >>> from strcmdlex.syntax import parse
        >>> parsed = parse("{G=n}{ORANGE}Text")
        >>> parsed.fragments[1].content.name
        'ORANGE'
    """
    parser = StringParser()
    return parser.parse(source)
