"""Grammar rules for bracketed string commands.

Three grammars compete for every bracketed span, tried in a fixed order:

1. command:          {NAME}, {1:NAME.case}, {}, {{}
2. gender:           {G=n}, {G = n}
3. choice list:      {P a b}, {P 1 "" s}, {G 1:2 der die das}

The order is part of the contract: "{G=n}" is only a gender definition
because the command grammar rejects it first, and "{P}" is a command, not
an empty choice list. Each rule receives the complete span, braces
included, and returns its content node or None when it does not match.
"""

import re
from collections.abc import Callable

from strcmdlex.syntax.ast import ChoiceList, FragmentContent, GenderDefinition, StringCommand
from strcmdlex.syntax.parser.primitives import parse_choice_tokens, parse_index

__all__ = [
    "GRAMMAR_RULES",
    "parse_choice_list",
    "parse_command",
    "parse_fragment_content",
    "parse_gender_definition",
]

# Whitespace as the Unicode White_Space property defines it: \s minus the
# information separators U+001C..U+001F.
_WS = r"[^\S\x1c-\x1f]"

# {  [index ":"]  ( "" | "{" | NAME )  ["." case]  }
_COMMAND = re.compile(r"\{(?:(\d+):)?(|\{|[A-Z][A-Z0-9_]*)(?:\.(\w+))?\}")

# {G  "="  gender}, whitespace allowed around "="
_GENDER = re.compile(r"\{G" + _WS + r"*=" + _WS + r"*(\w+)\}")

# {KIND  [index [":" subindex]]  tokens}
# The token region starts with whitespace and a character that is neither
# whitespace nor a digit, so a bare number is always read as the index.
_CHOICE = re.compile(
    r"\{([A-Z])(?:" + _WS + r"+(\d+)(?::(\d+))?)?"
    r"(" + _WS + r"+(?:[^\s0-9]|[\x1c-\x1f]).*?)" + _WS + r"*\}",
    re.DOTALL,
)


def parse_command(text: str) -> StringCommand | None:
    """Parse a command reference.

    Example:
        >>> parse_command("{1:STRING.gen}")
        StringCommand(index=1, name='STRING', case='gen')
        >>> parse_command("{1}") is None  # Index requires a trailing colon
        True
    """
    match = _COMMAND.fullmatch(text)
    if match is None:
        return None
    index, name, case = match.groups()
    return StringCommand(index=parse_index(index), name=name, case=case)


def parse_gender_definition(text: str) -> GenderDefinition | None:
    """Parse a gender definition.

    Example:
        >>> parse_gender_definition("{G = n}")
        GenderDefinition(gender='n')
    """
    match = _GENDER.fullmatch(text)
    if match is None:
        return None
    return GenderDefinition(gender=match.group(1))


def parse_choice_list(text: str) -> ChoiceList | None:
    """Parse a choice list.

    Example:
        >>> parse_choice_list('{P 1:2 "a b" "c"}')
        ChoiceList(kind='P', index=1, subindex=2, choices=('a b', 'c'))
    """
    match = _CHOICE.fullmatch(text)
    if match is None:
        return None
    kind, index, subindex, region = match.groups()
    choices = parse_choice_tokens(region)
    if choices is None:
        return None
    return ChoiceList(
        kind=kind,
        index=parse_index(index),
        subindex=parse_index(subindex),
        choices=choices,
    )


# Attempt order matters; see module docstring.
GRAMMAR_RULES: tuple[Callable[[str], FragmentContent | None], ...] = (
    parse_command,
    parse_gender_definition,
    parse_choice_list,
)


def parse_fragment_content(text: str) -> FragmentContent | None:
    """Classify a bracketed span; the first matching grammar wins.

    Args:
        text: Complete span including the enclosing braces

    Returns:
        Parsed content, or None when no grammar matches
    """
    for rule in GRAMMAR_RULES:
        content = rule(text)
        if content is not None:
            return content
    return None
