"""
Tests for the Monkey token model and keyword table.
"""

import pytest
import sys
import os

# Add the project root to the Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from monkey.lexer.tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, lookup_identifier
)


class TestTokenType:
    """Display strings and keyword lookup."""

    @pytest.mark.parametrize("token_type, want", [
        (TokenType.ILLEGAL, "ILLEGAL"),
        (TokenType.EOF, "EOF"),
        (TokenType.IDENT, "IDENT"),
        (TokenType.INT, "INT"),
        (TokenType.ASSIGN, "ASSIGN"),
        (TokenType.PLUS, "+"),
        (TokenType.EQUAL, "=="),
        (TokenType.NOT_EQUAL, "!="),
        (TokenType.COMMA, ","),
        (TokenType.SEMICOLON, ";"),
        (TokenType.LEFT_PAREN, "("),
        (TokenType.RIGHT_PAREN, ")"),
        (TokenType.LEFT_BRACE, "{"),
        (TokenType.RIGHT_BRACE, "}"),
        (TokenType.FUNCTION, "FUNCTION"),
        (TokenType.LET, "LET"),
        (TokenType.TRUE, "TRUE"),
        (TokenType.FALSE, "FALSE"),
        (TokenType.IF, "IF"),
        (TokenType.ELSE, "ELSE"),
        (TokenType.RETURN, "RETURN"),
    ])
    def test_display_string(self, token_type: TokenType, want: str):
        assert str(token_type) == want
        assert TokenType.describe(token_type) == want

    @pytest.mark.parametrize("unknown", [None, 42, "PLUS", "+"])
    def test_describe_unknown_is_illegal(self, unknown):
        assert TokenType.describe(unknown) == "ILLEGAL"

    @pytest.mark.parametrize("word, want", [
        ("let", TokenType.LET),
        ("fn", TokenType.FUNCTION),
        ("true", TokenType.TRUE),
        ("false", TokenType.FALSE),
        ("if", TokenType.IF),
        ("else", TokenType.ELSE),
        ("return", TokenType.RETURN),
        ("lets", TokenType.IDENT),
        ("Let", TokenType.IDENT),
        ("function", TokenType.IDENT),
    ])
    def test_lookup_identifier(self, word: str, want: TokenType):
        assert lookup_identifier(word) == want

    def test_keyword_table_is_fixed(self):
        assert set(KEYWORDS) == {"let", "fn", "true", "false", "if", "else", "return"}


class TestToken:
    """Token value semantics."""

    def test_location_does_not_affect_equality(self):
        located = Token(TokenType.PLUS, "+", SourceLocation("<test>", 3, 7, 20))
        assert located == Token(TokenType.PLUS, "+")
        assert hash(located) == hash(Token(TokenType.PLUS, "+"))

    def test_type_and_literal_affect_equality(self):
        assert Token(TokenType.IDENT, "x") != Token(TokenType.IDENT, "y")
        assert Token(TokenType.IDENT, "let") != Token(TokenType.LET, "let")

    def test_classification(self):
        assert Token(TokenType.LET, "let").is_keyword
        assert not Token(TokenType.IDENT, "x").is_keyword
        assert Token(TokenType.NOT_EQUAL, "!=").is_operator
        assert not Token(TokenType.INT, "5").is_operator

    def test_str(self):
        assert str(Token(TokenType.IDENT, "foo")) == "IDENT('foo')"
        assert str(SourceLocation("main.mk", 2, 5, 9)) == "main.mk:2:5"
