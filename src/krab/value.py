"""
Krab Literal Values
===================

Runtime values that a literal token can carry. The set is closed: a value
is exactly one of

- ``BooleanValue`` - ``true`` / ``false``
- ``NilValue``     - ``nil``
- ``NumberValue``  - double precision float
- ``StringValue``  - text, no escape processing

The scanner only ever attaches ``NumberValue`` and ``StringValue``. The
keywords ``true``, ``false`` and ``nil`` are emitted as plain keyword
tokens; turning them into values is left to a later stage.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class BooleanValue:
    """A boolean literal."""
    value: bool

    kind = "Boolean"

    def __str__(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class NilValue:
    """The absence of a value. Carries no payload."""

    kind = "Nil"

    @property
    def value(self) -> None:
        return None

    def __str__(self) -> str:
        return "nil"


@dataclass(frozen=True)
class NumberValue:
    """A numeric literal, always stored as a float."""
    value: float

    kind = "Number"

    def __str__(self) -> str:
        return repr(self.value)


@dataclass(frozen=True)
class StringValue:
    """A string literal (the text between the quotes)."""
    value: str

    kind = "String"

    def __str__(self) -> str:
        return repr(self.value)


# The tagged union of all literal values
LiteralValue = Union[BooleanValue, NilValue, NumberValue, StringValue]


__all__ = [
    "BooleanValue",
    "NilValue",
    "NumberValue",
    "StringValue",
    "LiteralValue",
]
