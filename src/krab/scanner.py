"""
Krab Scanner
============

This module converts Krab source text into a list of tokens in a single
pass.

Scanning Rules
--------------
- Punctuation ``( ) { } , . - + ; *`` maps straight to a token kind
- ``! = < >`` become ``!= == <= >=`` when followed by ``=``
- ``//`` starts a comment running to the end of the line; a lone ``/``
  is SLASH
- Spaces, tabs and carriage returns are skipped; newlines are skipped
  and bump the line counter
- ``"..."`` is a string literal; it may span lines and has no escape
  sequences
- Numbers are ``digits`` or ``digits.digits``; a trailing ``.`` is not
  part of the number, and there are no exponents or leading-dot forms
- Identifiers start with a letter or ``_`` and continue with letters,
  digits or ``_``; reserved words get their own kind

Error Recovery
--------------
An unterminated string or an unexpected character is reported to the
scanner's ErrorReporter and scanning continues. ``scan_all`` always
returns a complete token list ending with exactly one EOF token.

Example Usage
-------------
>>> from krab.scanner import Scanner
>>> for token in Scanner("var x = 10.5;").scan_all():
...     print(token)
Token(VAR, 'var', None, 1)
Token(IDENTIFIER, 'x', None, 1)
Token(EQUAL, '=', None, 1)
Token(NUMBER, '10.5', 10.5, 1)
Token(SEMICOLON, ';', None, 1)
Token(EOF, '', None, 1)
"""

import logging
import unicodedata
from typing import List, Optional

from krab.cursor import CharacterCursor
from krab.errors import (
    ErrorReporter,
    ScanError,
    StreamReporter,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from krab.keywords import lookup
from krab.tokens import Token, TokenKind
from krab.value import LiteralValue, NumberValue, StringValue

logger = logging.getLogger(__name__)


# Characters that map directly to a token kind
SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# Operators with an "=" variant: char -> (bare kind, equal kind)
EQUAL_VARIANT_TOKENS = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}

WHITESPACE = " \r\t"


def _is_digit(char: str) -> bool:
    # ASCII only; str.isdigit() also accepts other scripts' digits
    return "0" <= char <= "9"


# Categories counted as alphabetic on top of str.isalpha(): letter numbers
# (Ⅻ) and the combining vowel signs of Indic and other scripts (नाम)
_EXTRA_ALPHABETIC_CATEGORIES = ("Nl", "Mn", "Mc")


def _is_alphabetic(char: str) -> bool:
    return char.isalpha() or unicodedata.category(char) in _EXTRA_ALPHABETIC_CATEGORIES


def _is_identifier_start(char: str) -> bool:
    return char == "_" or _is_alphabetic(char)


def _is_identifier_char(char: str) -> bool:
    # isalnum() adds every numeric category (Nd, Nl, No)
    return char == "_" or char.isalnum() or _is_alphabetic(char)


class Scanner:
    """
    Tokenizes Krab source code.

    A Scanner owns its source text and scans it exactly once.

    Usage:
        scanner = Scanner(source_text, reporter)
        tokens = scanner.scan_all()

    Attributes:
        source: The source code being tokenized
        reporter: Sink for lexical errors
        tokens: Tokens emitted so far
        line: Current line number (1-indexed)
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: The Krab source code to tokenize
            reporter: Where to send lexical errors (stderr when None)
        """
        self.source = source
        self.reporter = reporter if reporter is not None else StreamReporter()
        self.tokens: List[Token] = []
        self.line = 1
        self.error_count = 0

        self._cursor = CharacterCursor(source)
        self._scanned = False

    def scan_all(self) -> List[Token]:
        """
        Scan the whole source.

        Returns:
            The token list, always terminated by a single EOF token

        Raises:
            RuntimeError: If this scanner has already been used
        """
        if self._scanned:
            raise RuntimeError("Scanner.scan_all() can only be called once")
        self._scanned = True

        logger.debug("scanning %d characters", len(self.source))

        while not self._cursor.at_end():
            self._cursor.mark_start()
            self._scan_token()

        self.tokens.append(Token(TokenKind.EOF, "", None, self.line))

        logger.debug(
            "scanned %d tokens over %d lines, %d errors",
            len(self.tokens), self.line, self.error_count,
        )
        return self.tokens

    # =========================================================================
    # Token Creation
    # =========================================================================

    def _add_token(self, kind: TokenKind, literal: Optional[LiteralValue] = None) -> None:
        """Emit a token for the current lexeme span."""
        self.tokens.append(Token(kind, self._cursor.lexeme(), literal, self.line))

    def _error(self, error: ScanError) -> None:
        self.error_count += 1
        self.reporter.report(error)

    # =========================================================================
    # Dispatch
    # =========================================================================

    def _scan_token(self) -> None:
        """Scan one lexeme starting at the cursor's start mark."""
        cursor = self._cursor
        char = cursor.advance()

        if char in SINGLE_CHAR_TOKENS:
            self._add_token(SINGLE_CHAR_TOKENS[char])
            return

        if char in EQUAL_VARIANT_TOKENS:
            bare, with_equal = EQUAL_VARIANT_TOKENS[char]
            self._add_token(with_equal if cursor.match("=") else bare)
            return

        if char == "/":
            if cursor.match("/"):
                # Comment runs to the end of the line; the newline is
                # left for the main loop so the line count stays right
                while cursor.peek() != "\n" and not cursor.at_end():
                    cursor.advance()
            else:
                self._add_token(TokenKind.SLASH)
            return

        if char in WHITESPACE:
            return

        if char == "\n":
            self.line += 1
            return

        if char == '"':
            self._scan_string()
        elif _is_digit(char):
            self._scan_number()
        elif _is_identifier_start(char):
            self._scan_identifier()
        else:
            self._error(UnexpectedCharacterError(char, self.line))

    # =========================================================================
    # Literal Handlers
    # =========================================================================

    def _scan_string(self) -> None:
        """
        Scan a double-quoted string literal.

        The opening quote has already been consumed. Newlines inside the
        string are allowed and counted.
        """
        cursor = self._cursor
        while cursor.peek() != '"' and not cursor.at_end():
            if cursor.peek() == "\n":
                self.line += 1
            cursor.advance()

        if cursor.at_end():
            self._error(UnterminatedStringError(self.line))
            return

        cursor.advance()  # consume closing "

        # Strip the surrounding quotes
        text = self.source[cursor.start + 1:cursor.current - 1]
        self._add_token(TokenKind.STRING, StringValue(text))

    def _scan_number(self) -> None:
        """Scan a decimal number with an optional fractional part."""
        cursor = self._cursor
        while _is_digit(cursor.peek()):
            cursor.advance()

        # A "." only belongs to the number when a digit follows it
        if cursor.peek() == "." and _is_digit(cursor.peek(1)):
            cursor.advance()
            while _is_digit(cursor.peek()):
                cursor.advance()

        value = float(cursor.lexeme())
        self._add_token(TokenKind.NUMBER, NumberValue(value))

    def _scan_identifier(self) -> None:
        """Scan an identifier or reserved word."""
        cursor = self._cursor
        while _is_identifier_char(cursor.peek()):
            cursor.advance()

        kind = lookup(cursor.lexeme())
        self._add_token(kind if kind is not None else TokenKind.IDENTIFIER)


def scan_tokens(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Scan source text and return its tokens.

    Args:
        source: Krab source code
        reporter: Where to send lexical errors (stderr when None)

    Returns:
        The token list, ending with EOF
    """
    return Scanner(source, reporter).scan_all()
