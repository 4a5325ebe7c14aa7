"""
Character cursor over Krab source text.

Offsets are code-point indexes into a Python ``str``, so a multi-byte
UTF-8 character is one logical character and every access is O(1).
"""

# Returned by peek() when looking at or past the end of input
NUL = "\0"


class CharacterCursor:
    """
    Look-ahead and consume primitives over a source string.

    The cursor tracks two offsets: ``start`` marks the first character of
    the lexeme being scanned and ``current`` the next character to
    consume. ``0 <= start <= current <= len(source)`` always holds.
    """

    def __init__(self, source: str):
        self.source = source
        self.start = 0
        self.current = 0
        self._length = len(source)

    def at_end(self) -> bool:
        """Check if all characters have been consumed."""
        return self.current >= self._length

    def mark_start(self) -> None:
        """Begin a new lexeme at the current position."""
        self.start = self.current

    def advance(self) -> str:
        """
        Consume and return the current character.

        Raises:
            IndexError: If called at end of input
        """
        if self.at_end():
            raise IndexError("advance() past end of source")
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected: str) -> bool:
        """
        Consume next character if it matches expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self.at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self, offset: int = 0) -> str:
        """Look ``offset`` characters ahead without consuming; NUL past the end."""
        pos = self.current + offset
        if pos >= self._length:
            return NUL
        return self.source[pos]

    def lexeme(self) -> str:
        """Return the source text between start and current."""
        return self.source[self.start:self.current]
