"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]

_COMMAND_FORMS_HINT = "Commands look like {NAME}, {1:NAME.case}, {G=n} or {P a b}"


def _span_for(source: str, start: int, end: int | None) -> SourceSpan:
    """Build a SourceSpan with 1-based line and column for a character offset."""
    line = source.count("\n", 0, start) + 1
    last_newline = source.rfind("\n", 0, start)
    column = start - last_newline if last_newline >= 0 else start + 1
    return SourceSpan(start=start, end=end, line=line, column=column)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def unexpected_eof(position: int) -> Diagnostic:
        """Unexpected end of input while reading a cursor.

        Args:
            position: The position where EOF was encountered

        Returns:
            Diagnostic for UNEXPECTED_EOF
        """
        msg = f"Unexpected EOF at position {position}"
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_EOF,
            message=msg,
            span=None,
            hint="Check is_eof before reading the current character",
        )

    @staticmethod
    def unterminated_command(source: str, position: int) -> Diagnostic:
        """Opening brace without a closing brace.

        Args:
            source: The complete string being parsed
            position: Character offset of the opening brace

        Returns:
            Diagnostic for UNTERMINATED_COMMAND
        """
        msg = "Unterminated string command, '}' expected."
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_COMMAND,
            message=msg,
            span=_span_for(source, position, None),
            hint="Close the command with '}' or write a literal brace as {{}",
        )

    @staticmethod
    def invalid_command(source: str, command: str, start: int, end: int) -> Diagnostic:
        """Bracketed text that matches none of the command grammars.

        Args:
            source: The complete string being parsed
            command: The offending command text, braces included
            start: Character offset of the opening brace
            end: Character offset just past the closing brace

        Returns:
            Diagnostic for INVALID_COMMAND
        """
        msg = f"Invalid string command: '{command}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_COMMAND,
            message=msg,
            span=_span_for(source, start, end),
            hint=_COMMAND_FORMS_HINT,
            source_text=command,
        )

    @staticmethod
    def source_too_large(size: int, limit: int) -> Diagnostic:
        """Source string exceeds the configured size limit.

        Args:
            size: Length of the source in characters
            limit: Configured maximum

        Returns:
            Diagnostic for SOURCE_TOO_LARGE
        """
        msg = f"Source size ({size:,} characters) exceeds maximum ({limit:,} characters)"
        return Diagnostic(
            code=DiagnosticCode.SOURCE_TOO_LARGE,
            message=msg,
            span=None,
            hint="Configure max_source_size in the StringParser constructor to increase limit",
        )

    # =========================================================================
    # VALIDATION ERRORS (5000-5099)
    # =========================================================================

    @staticmethod
    def choice_list_empty(kind: str) -> Diagnostic:
        """Choice list without any choice.

        Args:
            kind: Kind letter of the list

        Returns:
            Diagnostic for VALIDATION_CHOICE_EMPTY
        """
        msg = f"Choice list '{{{kind}}}' has no choices"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_CHOICE_EMPTY,
            message=msg,
            hint='Add at least one choice; use "" for an empty one',
        )

    @staticmethod
    def subindex_without_index(kind: str, subindex: int) -> Diagnostic:
        """Sub-index given while the index reference is absent.

        Args:
            kind: Kind letter of the list
            subindex: The orphan sub-index

        Returns:
            Diagnostic for VALIDATION_SUBINDEX_WITHOUT_INDEX
        """
        msg = f"Choice list '{{{kind}}}' has sub-index {subindex} but no index"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_SUBINDEX_WITHOUT_INDEX,
            message=msg,
            hint="A sub-index is only written after an index, as in {P 1:2 a b}",
        )

    @staticmethod
    def choice_not_representable(kind: str, choice: str, reason: str) -> Diagnostic:
        """Choice text that would not survive a compile/parse round trip.

        Args:
            kind: Kind letter of the list
            choice: The offending choice text
            reason: Why the choice cannot be written

        Returns:
            Diagnostic for VALIDATION_CHOICE_QUOTE
        """
        msg = f"Choice {choice!r} in '{{{kind}}}' cannot be compiled: {reason}"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_CHOICE_QUOTE,
            message=msg,
            hint="Choices have no escape mechanism for double quotes",
            source_text=choice,
        )

    @staticmethod
    def invalid_command_name(name: str) -> Diagnostic:
        """Command name outside the accepted forms.

        Args:
            name: The offending name

        Returns:
            Diagnostic for VALIDATION_COMMAND_NAME
        """
        msg = f"Invalid command name: {name!r}"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_COMMAND_NAME,
            message=msg,
            hint="Names are empty, '{' or uppercase letters, digits and underscores",
            source_text=name,
        )

    @staticmethod
    def invalid_identifier(what: str, value: str) -> Diagnostic:
        """Case, gender or kind identifier outside its grammar.

        Args:
            what: Which identifier ("case", "gender", "kind")
            value: The offending identifier

        Returns:
            Diagnostic for VALIDATION_IDENTIFIER
        """
        msg = f"Invalid {what} identifier: {value!r}"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_IDENTIFIER,
            message=msg,
            source_text=value,
        )

    @staticmethod
    def index_out_of_range(what: str, value: int, limit: int) -> Diagnostic:
        """Index or sub-index below zero or above the representable maximum.

        Args:
            what: Which number ("index", "sub-index")
            value: The offending value
            limit: Largest accepted value

        Returns:
            Diagnostic for VALIDATION_INDEX_RANGE
        """
        msg = f"{what.capitalize()} {value} out of range 0..{limit}"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_INDEX_RANGE,
            message=msg,
            hint="Larger values would be read back as an absent index",
        )

    @staticmethod
    def text_contains_brace(text: str) -> Diagnostic:
        """Literal text containing an opening brace.

        Args:
            text: The offending text

        Returns:
            Diagnostic for VALIDATION_TEXT_BRACE
        """
        msg = f"Text fragment contains '{{': {text!r}"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_TEXT_BRACE,
            message=msg,
            hint="Split the text and use the {{} command for a literal brace",
            source_text=text,
        )

    @staticmethod
    def not_round_trippable(rendered: str) -> Diagnostic:
        """Command whose canonical text parses back to different content.

        Args:
            rendered: The canonical text that would be written

        Returns:
            Diagnostic for VALIDATION_ROUNDTRIP
        """
        msg = f"Command {rendered!r} would be read back as different content"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_ROUNDTRIP,
            message=msg,
            hint="Quote choices that could be mistaken for other command forms",
            source_text=rendered,
        )
