"""strcmdlex exception hierarchy with structured diagnostics.

All exceptions store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "CompilationValidationError",
    "StringCommandError",
    "StringSyntaxError",
]


class StringCommandError(Exception):
    """Base exception for all strcmdlex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize StringCommandError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class StringSyntaxError(StringCommandError):
    """Syntax error while parsing a string.

    Parsing stops at the first error; no partial result is produced.

    Attributes:
        pos_begin: Character offset where the offending command starts
        pos_end: Character offset just past the offending command, or None
            when the command is unterminated
        message: Human-readable description
        source: The complete string being parsed

    Example:
        >>> from strcmdlex.syntax import parse
        >>> try:
        ...     parse("{G=n}{ORANGE OpenTTD")
        ... except StringSyntaxError as e:
        ...     (e.pos_begin, e.pos_end)
        (5, None)
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        pos_begin: int,
        pos_end: int | None = None,
        source: str = "",
    ) -> None:
        """Initialize StringSyntaxError.

        Args:
            message: Error message string OR Diagnostic object
            pos_begin: Character offset where the problem starts
            pos_end: Character offset after the problem (None if unterminated)
            source: Source string, kept for context formatting
        """
        super().__init__(message)
        self.message = message.message if isinstance(message, Diagnostic) else message
        self.pos_begin = pos_begin
        self.pos_end = pos_end
        self.source = source

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> err = StringSyntaxError("Bad", pos_begin=7, source="hello\\nworld")
            >>> err.format_error()
            '2:2: Bad'
        """
        from strcmdlex.syntax.position import format_position  # noqa: PLC0415 - circular

        return f"{format_position(self.source, self.pos_begin, zero_based=False)}: {self.message}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and a caret under the error.

        Args:
            context_lines: Number of lines to show before/after the error line

        Returns:
            Multi-line formatted error with context
        """
        from strcmdlex.syntax.position import get_error_context  # noqa: PLC0415 - circular

        context = get_error_context(self.source, self.pos_begin, context_lines=context_lines)
        return f"{self.format_error()}\n\n{context}"


class CompilationValidationError(ValueError):
    """Raised when a parsed string cannot be compiled faithfully.

    Only raised when validation is requested. Common causes:
    - ChoiceList without choices
    - Choice text containing a double quote (no escape exists)
    - Fragments built programmatically with invalid names
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic
