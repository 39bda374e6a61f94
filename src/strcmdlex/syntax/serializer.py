"""Compile parsed strings back to canonical text.

Converts fragments to their canonical textual form. Useful for:
- Normalizing translations (whitespace inside {G = n}, choice spacing)
- Generating strings programmatically
- Property-based testing (roundtrip: parse -> compile -> parse)

Compilation ignores fragment spans; it is a pure function of the content.

Python 3.13+.
"""

import logging

from strcmdlex.constants import (
    ASCII_WHITESPACE,
    CHOICE_QUOTE,
    COMMAND_CLOSE,
    COMMAND_OPEN,
    GENDER_KIND,
    MAX_INDEX,
)
from strcmdlex.diagnostics import CompilationValidationError, ErrorTemplate

from .ast import ChoiceList, FragmentContent, GenderDefinition, ParsedString, StringCommand, Text
from .cursor import is_whitespace
from .parser.primitives import is_case_identifier, is_command_name, is_kind
from .parser.rules import parse_fragment_content

__all__ = ["StringCompiler", "compile", "compile_content", "needs_quotes"]

logger = logging.getLogger(__name__)


def needs_quotes(choice: str) -> bool:
    """Check whether a choice must be written between double quotes.

    Quoting happens exactly when the choice is empty or contains ASCII
    whitespace (space, tab, LF, form feed, CR).

    Example:
        >>> needs_quotes("")
        True
        >>> needs_quotes(" b")
        True
        >>> needs_quotes("cars")
        False
    """
    return not choice or any(ch in ASCII_WHITESPACE for ch in choice)


def _validate_index(what: str, value: int | None) -> None:
    if value is not None and not 0 <= value <= MAX_INDEX:
        raise CompilationValidationError(ErrorTemplate.index_out_of_range(what, value, MAX_INDEX))


def _validate_choice(kind: str, choice: str, first: bool) -> None:
    """Reject choices that would not parse back to the same text."""
    reason: str | None = None
    if CHOICE_QUOTE in choice:
        reason = "contains a double quote"
    elif COMMAND_CLOSE in choice:
        reason = "contains '}'"
    elif not needs_quotes(choice) and any(is_whitespace(ch) for ch in choice):
        reason = "contains non-ASCII whitespace written unquoted"
    elif first and not needs_quotes(choice) and choice[0].isdecimal():
        reason = "would be read as the index"
    if reason is not None:
        raise CompilationValidationError(
            ErrorTemplate.choice_not_representable(kind, choice, reason)
        )


def _validate_content(content: FragmentContent) -> None:
    """Validate one content node for compilation.

    Raises:
        CompilationValidationError: If the node cannot be represented
    """
    match content:
        case Text():
            if COMMAND_OPEN in content.value:
                raise CompilationValidationError(ErrorTemplate.text_contains_brace(content.value))
        case StringCommand():
            _validate_index("index", content.index)
            if not is_command_name(content.name):
                raise CompilationValidationError(ErrorTemplate.invalid_command_name(content.name))
            if content.case is not None and not is_case_identifier(content.case):
                raise CompilationValidationError(
                    ErrorTemplate.invalid_identifier("case", content.case)
                )
        case GenderDefinition():
            if not is_case_identifier(content.gender):
                raise CompilationValidationError(
                    ErrorTemplate.invalid_identifier("gender", content.gender)
                )
        case ChoiceList():
            if not is_kind(content.kind):
                raise CompilationValidationError(
                    ErrorTemplate.invalid_identifier("kind", content.kind)
                )
            _validate_index("index", content.index)
            _validate_index("sub-index", content.subindex)
            if content.subindex is not None and content.index is None:
                raise CompilationValidationError(
                    ErrorTemplate.subindex_without_index(content.kind, content.subindex)
                )
            if not content.choices:
                raise CompilationValidationError(ErrorTemplate.choice_list_empty(content.kind))
            for i, choice in enumerate(content.choices):
                _validate_choice(content.kind, choice, first=i == 0)

    if not Text.guard(content):
        rendered = compile_content(content)
        if parse_fragment_content(rendered) != content:
            raise CompilationValidationError(ErrorTemplate.not_round_trippable(rendered))


def compile_content(content: FragmentContent) -> str:
    """Render a single content node in canonical form.

    Example:
        >>> compile_content(StringCommand(index=1, name="STRING", case="gen"))
        '{1:STRING.gen}'
        >>> compile_content(ChoiceList(kind="P", index=None, subindex=None, choices=("", " b")))
        '{P "" " b"}'
    """
    match content:
        case Text():
            return content.value
        case StringCommand():
            output = [COMMAND_OPEN]
            if content.index is not None:
                output.append(f"{content.index}:")
            output.append(content.name)
            if content.case is not None:
                output.append(f".{content.case}")
            output.append(COMMAND_CLOSE)
            return "".join(output)
        case GenderDefinition():
            return f"{COMMAND_OPEN}{GENDER_KIND}={content.gender}{COMMAND_CLOSE}"
        case ChoiceList():
            output = [COMMAND_OPEN, content.kind]
            if content.index is not None:
                output.append(f" {content.index}")
                # Sub-index is only written after an index
                if content.subindex is not None:
                    output.append(f":{content.subindex}")
            for choice in content.choices:
                if needs_quotes(choice):
                    output.append(f' "{choice}"')
                else:
                    output.append(f" {choice}")
            output.append(COMMAND_CLOSE)
            return "".join(output)


class StringCompiler:
    """Converts a ParsedString back to text.

    Thread-safe compiler with no mutable instance state.

    Usage:
        >>> from strcmdlex.syntax import parse
        >>> StringCompiler().compile(parse("{G = n}{P a b}"))
        '{G=n}{P a b}'
    """

    def compile(self, parsed: ParsedString, *, validate: bool = False) -> str:
        """Compile ParsedString to a string.

        Args:
            parsed: Parsed string
            validate: If True, check every fragment can be written and read
                     back unchanged before compiling (default: False).

        Returns:
            Canonical text: fragments rendered in order and concatenated

        Raises:
            CompilationValidationError: If validate=True and a fragment
                cannot be represented
        """
        if validate:
            logger.debug("Validating %d fragments before compilation", len(parsed.fragments))
            for fragment in parsed.fragments:
                _validate_content(fragment.content)

        return "".join(compile_content(fragment.content) for fragment in parsed.fragments)


def compile(parsed: ParsedString, *, validate: bool = False) -> str:  # noqa: A001
    """Compile ParsedString to canonical text.

    Convenience function for StringCompiler.compile().

    Args:
        parsed: Parsed string
        validate: If True, validate fragments before compiling (default: False).

    Returns:
        Canonical text

    Raises:
        CompilationValidationError: If validate=True and a fragment is invalid

    Example:
        >>> from strcmdlex.syntax import parse
        >>> compile(parse('{P "" b}'))
        '{P "" b}'
    """
    compiler = StringCompiler()
    return compiler.compile(parsed, validate=validate)
