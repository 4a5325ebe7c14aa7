# =============================================================================
# test_cursor.py - Character Cursor and Keyword Table Tests
# =============================================================================

import pytest

from krab.cursor import NUL, CharacterCursor
from krab.keywords import KEYWORDS, lookup
from krab.tokens import TokenKind


class TestCharacterCursor:
    """Tests for the look-ahead/consume primitives."""

    def test_empty_source_is_at_end(self):
        cursor = CharacterCursor("")
        assert cursor.at_end()
        assert cursor.peek() == NUL

    def test_advance_returns_characters_in_order(self):
        cursor = CharacterCursor("ab")
        assert cursor.advance() == "a"
        assert cursor.advance() == "b"
        assert cursor.at_end()

    def test_advance_past_end_raises(self):
        cursor = CharacterCursor("a")
        cursor.advance()
        with pytest.raises(IndexError):
            cursor.advance()

    def test_peek_does_not_consume(self):
        cursor = CharacterCursor("xyz")
        assert cursor.peek() == "x"
        assert cursor.peek(1) == "y"
        assert cursor.peek(2) == "z"
        assert cursor.peek(3) == NUL
        assert cursor.current == 0

    def test_match_consumes_only_on_success(self):
        cursor = CharacterCursor("=x")
        assert not cursor.match("x")
        assert cursor.current == 0
        assert cursor.match("=")
        assert cursor.current == 1

    def test_match_at_end(self):
        cursor = CharacterCursor("")
        assert not cursor.match("=")

    def test_lexeme_span(self):
        cursor = CharacterCursor("var x")
        cursor.advance()
        cursor.advance()
        cursor.advance()
        assert cursor.lexeme() == "var"
        cursor.advance()
        cursor.mark_start()
        cursor.advance()
        assert cursor.lexeme() == "x"
        assert 0 <= cursor.start <= cursor.current <= len(cursor.source)

    def test_multibyte_characters_are_single_units(self):
        """Non-ASCII code points advance one position each."""
        cursor = CharacterCursor("é🦀")
        assert cursor.advance() == "é"
        assert cursor.peek() == "🦀"
        assert cursor.advance() == "🦀"
        assert cursor.at_end()


class TestKeywordTable:
    """Tests for the reserved word table."""

    def test_all_keywords_present(self):
        assert set(KEYWORDS) == {
            "and", "class", "else", "false", "for", "fun", "if", "nil",
            "or", "print", "return", "super", "this", "true", "var", "while",
        }

    def test_lookup_exact_match(self):
        assert lookup("while") == TokenKind.WHILE
        assert lookup("true") == TokenKind.TRUE

    @pytest.mark.parametrize("text", ["While", "whil", "whiles", "", "AND"])
    def test_lookup_no_partial_or_case_insensitive_match(self, text):
        assert lookup(text) is None

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            KEYWORDS["let"] = TokenKind.VAR
