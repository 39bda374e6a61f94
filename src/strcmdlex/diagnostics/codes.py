"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        3000-3999: Syntax errors (scanner and grammar failures)
        5000-5099: Validation errors (fragments that cannot be compiled)
    """

    # Syntax errors (3000-3999)
    UNEXPECTED_EOF = 3001
    UNTERMINATED_COMMAND = 3002
    INVALID_COMMAND = 3003
    SOURCE_TOO_LARGE = 3004

    # Validation errors (5000-5099)
    VALIDATION_CHOICE_EMPTY = 5001
    VALIDATION_SUBINDEX_WITHOUT_INDEX = 5002
    VALIDATION_CHOICE_QUOTE = 5003
    VALIDATION_COMMAND_NAME = 5004
    VALIDATION_IDENTIFIER = 5005
    VALIDATION_INDEX_RANGE = 5006
    VALIDATION_TEXT_BRACE = 5007
    VALIDATION_ROUNDTRIP = 5008


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes. For multi-byte UTF-8 characters, character offset differs
        from byte offset. All offsets here are character offsets.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive), None when the
            offending construct runs to the end of input
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int | None
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1, or column is less than 1.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end is not None and self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (editors, translation linters).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for compile-time validation errors)
        hint: Suggestion for fixing the error
        source_text: Offending command text, when there is one
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    source_text: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[INVALID_COMMAND]: Invalid string command: '{1}'
              --> line 1, column 6
              = help: Commands look like {NAME}, {1:NAME.case}, {G=n} or {P a b}

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
