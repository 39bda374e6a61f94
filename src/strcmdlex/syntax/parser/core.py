"""Core string command parser implementation.

This module provides the StringParser class that scans a source string
into fragments defined in :mod:`strcmdlex.syntax.ast`.

Architecture:
    The scanner alternates between literal text and bracketed spans. A
    bracketed span runs from "{" to the first following "}" (braces do
    not nest). Each span is classified by
    :func:`~strcmdlex.syntax.parser.rules.parse_fragment_content`, which
    tries the command, gender and choice list grammars in that order.

Errors:
    Unlike a resource parser that recovers into junk entries, a string
    either parses completely or not at all. The first unterminated or
    unrecognized span raises :class:`~strcmdlex.diagnostics.StringSyntaxError`
    and discards everything recognized so far.

Security:
    An opt-in input size limit bounds memory use for untrusted input.
    Without it, cost is linear in the length of the source.
"""

import logging

from strcmdlex.constants import COMMAND_CLOSE, COMMAND_OPEN, DEFAULT_MAX_SOURCE_SIZE
from strcmdlex.diagnostics import ErrorTemplate, StringSyntaxError
from strcmdlex.syntax.ast import Fragment, ParsedString, Span, Text
from strcmdlex.syntax.parser.rules import parse_fragment_content

__all__ = ["StringParser"]

logger = logging.getLogger(__name__)


class StringParser:
    """String command parser.

    Thread-safe: holds only immutable configuration, all parse state is
    local to the parse() call.

    Attributes:
        max_source_size: Maximum allowed source size in characters (0: unlimited)
    """

    __slots__ = ("_max_source_size",)

    def __init__(self, *, max_source_size: int | None = None) -> None:
        """Initialize parser with optional size limit.

        Args:
            max_source_size: Maximum source size in characters (default: unlimited).
                            0 also means unlimited.
        """
        self._max_source_size = (
            max_source_size if max_source_size is not None else DEFAULT_MAX_SOURCE_SIZE
        )

    @property
    def max_source_size(self) -> int:
        """Maximum allowed source size in characters."""
        return self._max_source_size

    def parse(self, source: str) -> ParsedString:
        """Parse a string into fragments.

        Args:
            source: String containing literal text and bracketed commands

        Returns:
            :class:`~strcmdlex.syntax.ast.ParsedString` whose fragments cover
            the whole source, in order. An empty source yields no fragments.

        Raises:
            StringSyntaxError: On the first unterminated or invalid command
            ValueError: If a size limit is set and source exceeds it

        Example:
            >>> parsed = StringParser().parse("{G=n}{ORANGE}Text")
            >>> [f.span.end for f in parsed.fragments]
            [5, 13, 17]
        """
        if self._max_source_size > 0 and len(source) > self._max_source_size:
            diagnostic = ErrorTemplate.source_too_large(len(source), self._max_source_size)
            raise ValueError(diagnostic.message)

        fragments: list[Fragment] = []
        pos = 0
        length = len(source)

        while pos < length:
            start = source.find(COMMAND_OPEN, pos)
            if start == -1:
                fragments.append(Fragment(Text(source[pos:]), Span(pos, length)))
                break

            if start > pos:
                fragments.append(Fragment(Text(source[pos:start]), Span(pos, start)))
                pos = start

            close = source.find(COMMAND_CLOSE, start)
            if close == -1:
                logger.debug("Unterminated command at position %d", pos)
                raise StringSyntaxError(
                    ErrorTemplate.unterminated_command(source, pos),
                    pos_begin=pos,
                    pos_end=None,
                    source=source,
                )

            end = close + 1
            command = source[start:end]
            content = parse_fragment_content(command)
            if content is None:
                logger.debug("Invalid command %r at positions %d-%d", command, start, end)
                raise StringSyntaxError(
                    ErrorTemplate.invalid_command(source, command, start, end),
                    pos_begin=start,
                    pos_end=end,
                    source=source,
                )

            fragments.append(Fragment(content, Span(start, end)))
            pos = end

        logger.debug("Parsed %d fragments from %d characters", len(fragments), length)
        return ParsedString(fragments=tuple(fragments))
