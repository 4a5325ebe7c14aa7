"""
Reserved word table.

Built once at import time and exposed read-only; there is no way to add
or remove keywords at runtime.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from krab.tokens import TokenKind


KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "for": TokenKind.FOR,
    "fun": TokenKind.FUN,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
})


def lookup(text: str) -> Optional[TokenKind]:
    """Return the keyword kind for an exact spelling, or None."""
    return KEYWORDS.get(text)
