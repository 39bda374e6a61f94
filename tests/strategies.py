"""Hypothesis strategies for generating string command content.

Provides custom strategies for property-based testing of the parser and
compiler. Every strategy produces content in canonical form, so that
compiling it and parsing the result gives the same content back.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

from strcmdlex.constants import MAX_INDEX
from strcmdlex.syntax.ast import (
    ChoiceList,
    FragmentContent,
    GenderDefinition,
    StringCommand,
    Text,
)
from strcmdlex.syntax.serializer import needs_quotes

# Characters allowed inside generated choices. Excludes the double quote
# (no escape exists), braces, non-ASCII whitespace and "=" (a gender list
# whose only choice is "=n" reads back as a gender definition).
CHOICE_ALPHABET = string.ascii_letters + string.digits + " \t.,!?-':"

indexes = st.integers(min_value=0, max_value=MAX_INDEX)


@composite
def command_names(draw: st.DrawFn) -> str:
    """Generate command names: empty, the brace escape, or NAME identifiers."""
    return draw(
        st.one_of(
            st.just(""),
            st.just("{"),
            st.from_regex(r"[A-Z][A-Z0-9_]{0,12}", fullmatch=True),
        )
    )


@composite
def word_identifiers(draw: st.DrawFn) -> str:
    """Generate case modifiers and gender tags (ASCII word characters)."""
    return draw(
        st.text(alphabet=string.ascii_letters + string.digits + "_", min_size=1, max_size=8)
    )


@composite
def string_commands(draw: st.DrawFn) -> StringCommand:
    """Generate command references.

    Example:
        StringCommand(index=1, name="STRING", case="gen")
    """
    return StringCommand(
        index=draw(st.none() | indexes),
        name=draw(command_names()),
        case=draw(st.none() | word_identifiers()),
    )


@composite
def gender_definitions(draw: st.DrawFn) -> GenderDefinition:
    """Generate gender definitions."""
    return GenderDefinition(gender=draw(word_identifiers()))


@composite
def choices(draw: st.DrawFn, *, first: bool = False) -> str:
    """Generate one choice, bare or needing quotes.

    A bare first choice never starts with a digit, since the parser would
    read it as the index.
    """
    choice = draw(st.text(alphabet=CHOICE_ALPHABET, max_size=10))
    if first and not needs_quotes(choice) and choice[0].isdigit():
        choice = "n" + choice
    return choice


@composite
def choice_lists(draw: st.DrawFn) -> ChoiceList:
    """Generate choice lists with optional index and sub-index.

    Example:
        ChoiceList(kind="P", index=1, subindex=None, choices=("car", "cars"))
    """
    index = draw(st.none() | indexes)
    subindex = draw(st.none() | indexes) if index is not None else None
    head = draw(choices(first=True))
    tail = draw(st.lists(choices(), max_size=4))
    return ChoiceList(
        kind=draw(st.sampled_from(string.ascii_uppercase)),
        index=index,
        subindex=subindex,
        choices=(head, *tail),
    )


@composite
def texts(draw: st.DrawFn) -> Text:
    """Generate non-empty literal text without opening braces."""
    value = draw(
        st.text(
            alphabet=st.characters(blacklist_characters="{", blacklist_categories=("Cs",)),
            min_size=1,
            max_size=20,
        )
    )
    return Text(value)


command_contents = st.one_of(string_commands(), gender_definitions(), choice_lists())


@composite
def content_sequences(draw: st.DrawFn) -> list[FragmentContent]:
    """Generate fragment contents as a parser would produce them.

    Adjacent Text nodes are never generated, because the parser always
    merges consecutive literal characters into one fragment.
    """
    items = draw(st.lists(st.one_of(texts(), command_contents), max_size=8))
    result: list[FragmentContent] = []
    for item in items:
        if isinstance(item, Text) and result and isinstance(result[-1], Text):
            result[-1] = Text(result[-1].value + item.value)
        else:
            result.append(item)
    return result
