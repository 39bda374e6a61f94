"""Enumerations for strcmdlex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FragmentKind(StrEnum):
    """Kind of content carried by a fragment.

    StrEnum provides automatic string conversion: str(FragmentKind.TEXT) == "text"
    """

    TEXT = "text"
    """Literal text between commands: Hello, world"""

    COMMAND = "command"
    """Parameter or command reference: {1:STRING.gen}"""

    GENDER = "gender"
    """Gender declaration: {G=n}"""

    CHOICE = "choice"
    """Plural or gender choice list: {P 1 item items}"""


class ChoiceKind(StrEnum):
    """Well-known choice list kind letters.

    Any single uppercase letter is accepted by the parser; these are the
    two kinds consumers select on.
    """

    PLURAL = "P"
    """Plural choice: {P car cars}"""

    GENDER = "G"
    """Gender choice: {G 1 der die das}"""


__all__ = [
    "ChoiceKind",
    "FragmentKind",
]
