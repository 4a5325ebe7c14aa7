"""
Krab Tokens
===========

Token kinds and the immutable token record produced by the scanner.

Token Categories
----------------
- Single-character punctuation: ( ) { } , . - + ; / *
- One or two character operators: ! != = == > >= < <=
- Literals: identifiers, strings, numbers
- Keywords: and, class, else, false, for, fun, if, nil, or, print,
  return, super, this, true, var, while
- EOF: the end-of-input sentinel, always the last token

Example
-------
>>> from krab.tokens import Token, TokenKind
>>> from krab.value import NumberValue
>>> print(Token(TokenKind.NUMBER, "10.5", NumberValue(10.5), 1))
Token(NUMBER, '10.5', 10.5, 1)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from krab.value import LiteralValue


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """
    Token kinds for the Krab language.

    Keywords are distinct kinds rather than identifiers so that a parser
    can dispatch on the kind alone.
    """

    # === Single-character Tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Structural ===
    EOF = auto()


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexeme.

    Attributes:
        kind: The TokenKind classification
        lexeme: The exact source text matched (empty for EOF)
        literal: The literal value for STRING and NUMBER tokens, else None
        line: Line number in source (1-indexed)
    """
    kind: TokenKind
    lexeme: str
    literal: Optional[LiteralValue]
    line: int

    def __str__(self) -> str:
        """Format token for the driver's one-token-per-line output."""
        literal = "None" if self.literal is None else str(self.literal)
        return f"Token({self.kind.name}, {self.lexeme!r}, {literal}, {self.line})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return TokenKind.AND.value <= self.kind.value <= TokenKind.WHILE.value
