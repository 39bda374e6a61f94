"""String command AST node definitions.

A parsed string is a flat sequence of fragments. Each fragment covers a
half-open character range of the source and carries exactly one content
node: literal text, a command reference, a gender definition or a choice
list. Includes type guards as static methods (eliminates circular imports).

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import TypeIs

from strcmdlex.enums import ChoiceKind, FragmentKind

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Base types
    "Span",
    # Fragment content
    "Text",
    "StringCommand",
    "GenderDefinition",
    "ChoiceList",
    # Aggregates
    "Fragment",
    "ParsedString",
    # Type aliases
    "FragmentContent",
]

# ============================================================================
# BASE TYPES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Span:
    """Source position span.

    Tracks character (code point) offsets in the source string, never byte
    offsets, so multi-byte characters count as one position.

    Attributes:
        start: Starting character offset (inclusive)
        end: Ending character offset (exclusive)

    Example:
        Source: "{G=n}{ORANGE}"
        Gender span: Span(start=0, end=5)
        Command span: Span(start=5, end=13)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate span invariants."""
        if self.start < 0:
            msg = f"Span start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"Span end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)

    def __len__(self) -> int:
        return self.end - self.start


# ============================================================================
# FRAGMENT CONTENT
# ============================================================================


@dataclass(frozen=True, slots=True)
class Text:
    """Literal text between commands."""

    value: str

    @staticmethod
    def guard(content: object) -> TypeIs["Text"]:
        """Type guard for Text.

        Enables type-safe narrowing without circular imports.

        Example:
            if Text.guard(fragment.content):
                fragment.content.value  # Type-safe! mypy knows it is Text
        """
        return isinstance(content, Text)


@dataclass(frozen=True, slots=True)
class StringCommand:
    """Parameter or command reference.

    Examples:
        {}              empty name, next parameter
        {{}             name "{", a literal opening brace
        {STRING}        plain command
        {1:STRING.gen}  index 1, case "gen"
    """

    index: int | None
    name: str
    case: str | None = None

    @staticmethod
    def guard(content: object) -> TypeIs["StringCommand"]:
        """Type guard for StringCommand."""
        return isinstance(content, StringCommand)


@dataclass(frozen=True, slots=True)
class GenderDefinition:
    """Gender declaration governing the following text: {G=n}"""

    gender: str

    @staticmethod
    def guard(content: object) -> TypeIs["GenderDefinition"]:
        """Type guard for GenderDefinition."""
        return isinstance(content, GenderDefinition)


@dataclass(frozen=True, slots=True)
class ChoiceList:
    """Keyed list of alternative strings.

    The kind letter tells consumers how to select (P for plural, G for
    gender). The sub-index is only meaningful when an index is present.

    Examples:
        {P car cars}
        {P 1 "" s}
        {G 2:1 der die das}
    """

    kind: str
    index: int | None
    subindex: int | None
    choices: tuple[str, ...]

    def __post_init__(self) -> None:
        """Freeze choices given as any iterable into a tuple."""
        if not isinstance(self.choices, tuple):
            object.__setattr__(self, "choices", tuple(self.choices))

    @property
    def is_plural(self) -> bool:
        return self.kind == ChoiceKind.PLURAL

    @property
    def is_gender(self) -> bool:
        return self.kind == ChoiceKind.GENDER

    @staticmethod
    def guard(content: object) -> TypeIs["ChoiceList"]:
        """Type guard for ChoiceList."""
        return isinstance(content, ChoiceList)


type FragmentContent = Text | StringCommand | GenderDefinition | ChoiceList

_KINDS: dict[type, FragmentKind] = {
    Text: FragmentKind.TEXT,
    StringCommand: FragmentKind.COMMAND,
    GenderDefinition: FragmentKind.GENDER,
    ChoiceList: FragmentKind.CHOICE,
}

# ============================================================================
# AGGREGATES
# ============================================================================


@dataclass(frozen=True, slots=True)
class Fragment:
    """One contiguous piece of a parsed string.

    Attributes:
        content: Parsed content of the piece
        span: Character range of the piece in the source
    """

    content: FragmentContent
    span: Span

    @property
    def kind(self) -> FragmentKind:
        """Content kind of this fragment."""
        return _KINDS[type(self.content)]

    @property
    def pos_begin(self) -> int:
        return self.span.start

    @property
    def pos_end(self) -> int:
        return self.span.end


@dataclass(frozen=True, slots=True)
class ParsedString:
    """Root node: ordered fragments produced by one parse call.

    Fragment spans are contiguous: the first starts at 0, each ends where
    the next begins, and the last ends at the length of the source.
    """

    fragments: tuple[Fragment, ...]

    def __iter__(self) -> Iterator[Fragment]:
        return iter(self.fragments)

    def __len__(self) -> int:
        return len(self.fragments)

    def commands(self) -> tuple[StringCommand, ...]:
        """All command references, in source order."""
        return tuple(f.content for f in self.fragments if StringCommand.guard(f.content))

    def choice_lists(self) -> tuple[ChoiceList, ...]:
        """All choice lists, in source order."""
        return tuple(f.content for f in self.fragments if ChoiceList.guard(f.content))

    def gender(self) -> str | None:
        """Gender tag of the first gender definition, or None."""
        for fragment in self.fragments:
            if GenderDefinition.guard(fragment.content):
                return fragment.content.gender
        return None

    def compile(self) -> str:
        """Render back to canonical text.

        Convenience method for :func:`strcmdlex.syntax.serializer.compile`.
        """
        from .serializer import compile  # noqa: PLC0415, A004 - circular

        return compile(self)
