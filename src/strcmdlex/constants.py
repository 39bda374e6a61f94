"""Shared constants for strcmdlex.

Centralized configuration constants used across the syntax and
diagnostics packages. Placing constants here avoids circular imports
and provides a single source of truth.

Constants are grouped by domain:
- Input limits: Optional size constraint for untrusted input
- Numeric limits: Range of index and sub-index references
- Syntax characters: Sentinels shared by parser and compiler

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "DEFAULT_MAX_SOURCE_SIZE",
    # Numeric limits
    "MAX_INDEX",
    # Syntax characters
    "COMMAND_OPEN",
    "COMMAND_CLOSE",
    "BRACE_ESCAPE",
    "GENDER_KIND",
    "CHOICE_QUOTE",
    "ASCII_WHITESPACE",
    "INFORMATION_SEPARATORS",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# Default maximum source size in characters. 0 means unlimited: every
# input parses or raises StringSyntaxError. Callers handling untrusted
# input opt in to a limit through StringParser(max_source_size=...).
DEFAULT_MAX_SOURCE_SIZE: int = 0

# ============================================================================
# NUMERIC LIMITS
# ============================================================================

# Largest representable index or sub-index (unsigned 64-bit).
# Digit runs above this value are treated as an absent index, not an error.
MAX_INDEX: int = 2**64 - 1

# ============================================================================
# SYNTAX CHARACTERS
# ============================================================================

COMMAND_OPEN: str = "{"
COMMAND_CLOSE: str = "}"

# Command name standing for a literal opening brace: "{{}"
BRACE_ESCAPE: str = "{"

# Kind letter reserved for gender declarations ("{G=n}") and gender choice lists
GENDER_KIND: str = "G"

CHOICE_QUOTE: str = '"'

# Characters that force a choice to be quoted when compiled.
# Matches the ASCII whitespace set: space, tab, LF, form feed, CR.
ASCII_WHITESPACE: frozenset[str] = frozenset(" \t\n\x0c\r")

# U+001C..U+001F count as whitespace for str.isspace and the re module, but
# not for the Unicode White_Space property the grammar is defined on.
INFORMATION_SEPARATORS: frozenset[str] = frozenset("\x1c\x1d\x1e\x1f")
