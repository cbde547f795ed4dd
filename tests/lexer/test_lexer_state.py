"""Tests ensuring lexer cursor state is consistent between calls.

These tests look at the private cursor fields to pin down the
invariants the public behavior relies on.
"""

from __future__ import annotations

import pytest

from monkeylex.lexer import Lexer
from monkeylex.tokens import TokenType


class TestConstruction:
    """The first character is loaded before next_token is ever called."""

    def test_first_char_loaded(self) -> None:
        lexer = Lexer("let")
        assert lexer._ch == "l"
        assert lexer._pos == 0
        assert lexer._read_pos == 1

    def test_empty_source_starts_at_end(self) -> None:
        lexer = Lexer("")
        assert lexer._ch is None
        assert lexer.at_end

    def test_rejects_non_str(self) -> None:
        with pytest.raises(TypeError, match="must be str"):
            Lexer(b"let")  # type: ignore[arg-type]


class TestCursorInvariants:
    """read position is always one past the cursor."""

    @pytest.mark.parametrize(
        "source",
        ["", "x", "let five = 5;", "  @@  ", "12 ab\n{}", "é9"],
    )
    def test_read_pos_follows_pos(self, source: str) -> None:
        lexer = Lexer(source)
        assert lexer._read_pos == lexer._pos + 1
        for _ in range(len(source) + 3):
            lexer.next_token()
            assert lexer._read_pos == lexer._pos + 1

    def test_cursor_parks_at_end(self) -> None:
        """Calls past end of input do not move the cursor."""
        lexer = Lexer("ab")
        lexer.next_token()
        assert lexer.at_end
        assert lexer._pos == 2
        for _ in range(3):
            assert lexer.next_token().type == TokenType.EOF
            assert lexer._pos == 2
            assert lexer._ch is None

    def test_read_char_past_end_is_noop(self) -> None:
        lexer = Lexer("a")
        lexer._read_char()
        assert lexer._ch is None
        lexer._read_char()
        lexer._read_char()
        assert lexer._ch is None
        assert (lexer._pos, lexer._read_pos) == (1, 2)


class TestEmitPaths:
    """Run scanners consume their run; single characters advance once."""

    def test_identifier_leaves_cursor_after_run(self) -> None:
        lexer = Lexer("abc;")
        lexer.next_token()
        assert lexer._ch == ";"
        assert lexer._pos == 3

    def test_number_leaves_cursor_after_run(self) -> None:
        lexer = Lexer("42+")
        lexer.next_token()
        assert lexer._ch == "+"
        assert lexer._pos == 2

    def test_single_char_advances_once(self) -> None:
        lexer = Lexer("(x")
        lexer.next_token()
        assert lexer._ch == "x"
        assert lexer._pos == 1

    def test_illegal_advances_once(self) -> None:
        lexer = Lexer("@@")
        lexer.next_token()
        assert lexer._ch == "@"
        assert lexer._pos == 1

    def test_whitespace_not_consumed_after_token(self) -> None:
        """Trailing whitespace is skipped lazily by the next call."""
        lexer = Lexer("x   y")
        lexer.next_token()
        assert lexer._ch == " "
        assert lexer.next_token().literal == "y"

    def test_read_identifier_directly(self) -> None:
        lexer = Lexer("hello world")
        assert lexer._read_identifier() == "hello"
        assert lexer._ch == " "

    def test_read_number_directly(self) -> None:
        lexer = Lexer("123abc")
        assert lexer._read_number() == "123"
        assert lexer._ch == "a"

    def test_read_identifier_on_non_letter_is_empty(self) -> None:
        lexer = Lexer("1")
        assert lexer._read_identifier() == ""
        assert lexer._pos == 0


class TestTokenizeResumes:
    """tokenize() continues from wherever next_token left the cursor."""

    def test_tokenize_after_next_token(self) -> None:
        lexer = Lexer("let x = 1;")
        assert lexer.next_token().type == TokenType.LET
        assert [t.type for t in lexer.tokenize()] == [
            TokenType.IDENT,
            TokenType.ASSIGN,
            TokenType.INT,
            TokenType.SEMICOLON,
            TokenType.EOF,
        ]

    def test_tokenize_after_end_yields_single_eof(self) -> None:
        lexer = Lexer("x")
        list(lexer.tokenize())
        assert [t.type for t in lexer.tokenize()] == [TokenType.EOF]
