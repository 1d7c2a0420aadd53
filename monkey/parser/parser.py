"""
Monkey Pratt Parser Implementation

Recursive descent for statements, top-down operator precedence (Pratt)
parsing for expressions. Tokens are pulled from the lexer through a two
token window (current and peek). A statement that fails to parse is
recorded as an error and skipped; the rest of the input is still parsed.
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple
from enum import IntEnum

from ..lexer.lexer import Lexer
from ..lexer.errors import LexerError
from ..lexer.tokens import Token, TokenType
from .ast_nodes import (
    Expression, ExpressionStatement, Identifier, InfixExpression, InfixOperator,
    IntegerLiteral, LetStatement, PrefixExpression, PrefixOperator, Program,
    ReturnStatement, Statement
)
from .errors import (
    ParseError, ParseErrors, create_unexpected_token_error,
    create_missing_prefix_rule_error, create_invalid_integer_error
)


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class Precedence(IntEnum):
    """Operator precedence levels for Pratt parsing."""
    LOWEST = 1
    EQUALS = 2          # ==, !=
    LESS_GREATER = 3    # <, >
    SUM = 4             # +, -
    PRODUCT = 5         # *, /
    PREFIX = 6          # !x, -x
    CALL = 7            # f(x)


PREFIX_OPERATORS = {
    TokenType.BANG: PrefixOperator.NOT,
    TokenType.MINUS: PrefixOperator.NEGATE,
}

INFIX_OPERATORS = {
    TokenType.PLUS: InfixOperator.ADD,
    TokenType.MINUS: InfixOperator.SUBTRACT,
    TokenType.ASTERISK: InfixOperator.MULTIPLY,
    TokenType.SLASH: InfixOperator.DIVIDE,
    TokenType.GREATER_THAN: InfixOperator.GREATER_THAN,
    TokenType.LESS_THAN: InfixOperator.LESS_THAN,
    TokenType.EQUAL: InfixOperator.EQUAL,
    TokenType.NOT_EQUAL: InfixOperator.NOT_EQUAL,
}


class Parser:
    """
    Monkey Pratt parser.

    Builds a Program from the tokens of a Lexer, collecting every
    recoverable error instead of stopping at the first one.
    """

    _logger = logging.getLogger("Parser")

    def __init__(self, lexer: Lexer):
        """
        Initialize parser with a lexer.

        Args:
            lexer: Lexer to pull tokens from
        """
        self.lexer = lexer
        self.current: Optional[Token] = None
        self.peek: Optional[Token] = None
        self.errors: List[ParseError] = []
        self._exhausted = False

        # Initialize parsing tables
        self._init_parsing_tables()

    def _init_parsing_tables(self):
        """Initialize operator precedence and parsing function tables."""

        # Prefix parsing functions (for tokens that can start expressions)
        self.prefix_parsers: Dict[TokenType, Callable[[], Expression]] = {
            TokenType.IDENT: self._parse_identifier,
            TokenType.INT: self._parse_integer_literal,
            TokenType.BANG: self._parse_prefix,
            TokenType.MINUS: self._parse_prefix,
        }

        # Infix parsing functions (for binary operators)
        self.infix_parsers: Dict[TokenType, Callable[[Expression], Expression]] = {
            token_type: self._parse_infix for token_type in INFIX_OPERATORS
        }

        # Operator precedence table
        self.precedences: Dict[TokenType, Precedence] = {
            TokenType.EQUAL: Precedence.EQUALS,
            TokenType.NOT_EQUAL: Precedence.EQUALS,
            TokenType.LESS_THAN: Precedence.LESS_GREATER,
            TokenType.GREATER_THAN: Precedence.LESS_GREATER,
            TokenType.PLUS: Precedence.SUM,
            TokenType.MINUS: Precedence.SUM,
            TokenType.ASTERISK: Precedence.PRODUCT,
            TokenType.SLASH: Precedence.PRODUCT,
        }

    def parse(self) -> Tuple[Program, List[ParseError]]:
        """
        Parse the token stream into an AST.

        Returns:
            The Program and the errors recorded while building it. Statements
            that failed to parse are left out of the Program.
        """
        statements: List[Statement] = []

        # Read the initial tokens, twice to fill both current and peek
        self._advance()
        self._advance()

        while self.current.type != TokenType.EOF:
            try:
                statements.append(self._parse_statement())
            except ParseError as e:
                self._record_error(e, self.current)

            self._advance()

        self._logger.debug(
            "Parsed %s: %d statements, %d errors",
            self.lexer.filename, len(statements), len(self.errors)
        )
        return Program(tuple(statements)), list(self.errors)

    def error(self) -> Optional[ParseErrors]:
        """All recorded errors joined into one, or None if there are none."""
        if not self.errors:
            return None

        return ParseErrors(self.errors)

    def _parse_statement(self) -> Statement:
        """Parse a statement."""
        if self.current.type == TokenType.LET:
            return self._parse_let_statement()

        if self.current.type == TokenType.RETURN:
            return self._parse_return_statement()

        return self._parse_expression_statement()

    def _parse_let_statement(self) -> LetStatement:
        """Parse let <identifier> = <expression>;"""
        let_token = self.current

        self._expect_peek(TokenType.IDENT)
        name = Identifier(self.current, self.current.literal)

        self._expect_peek(TokenType.ASSIGN)
        # now current is the assign, move to the start of the expression
        self._advance()

        value = self.parse_expression(Precedence.LOWEST)
        self._skip_semicolon()

        return LetStatement(let_token, name, value)

    def _parse_return_statement(self) -> ReturnStatement:
        """Parse return <expression>;"""
        return_token = self.current
        self._advance()

        value = self.parse_expression(Precedence.LOWEST)
        self._skip_semicolon()

        return ReturnStatement(return_token, value)

    def _parse_expression_statement(self) -> ExpressionStatement:
        """Parse a bare expression used as a statement."""
        start_token = self.current

        expression = self.parse_expression(Precedence.LOWEST)
        self._skip_semicolon()

        return ExpressionStatement(start_token, expression)

    def parse_expression(self, precedence: Precedence) -> Expression:
        """
        Parse an expression whose operators all bind tighter than precedence.

        On entry current is the first token of the expression; on exit it
        is the last token of the expression.
        """
        prefix_parser = self.prefix_parsers.get(self.current.type)
        if prefix_parser is None:
            raise create_missing_prefix_rule_error(self.current)

        left = prefix_parser()

        while self.peek.type != TokenType.SEMICOLON and precedence < self._peek_precedence():
            infix_parser = self.infix_parsers.get(self.peek.type)
            if infix_parser is None:
                return left

            self._advance()
            left = infix_parser(left)

        return left

    # Prefix parsers (tokens that can start expressions)

    def _parse_identifier(self) -> Identifier:
        return Identifier(self.current, self.current.literal)

    def _parse_integer_literal(self) -> IntegerLiteral:
        """Parse integer literal as a signed 64-bit value."""
        literal = self.current.literal
        if not (literal.isascii() and literal.isdigit()):
            raise create_invalid_integer_error(self.current, "invalid syntax")

        value = int(literal, 10)
        if not INT64_MIN <= value <= INT64_MAX:
            raise create_invalid_integer_error(self.current, "value out of range")

        return IntegerLiteral(self.current, value)

    def _parse_prefix(self) -> PrefixExpression:
        """Parse unary operation; the operand binds at prefix precedence."""
        operator_token = self.current
        operator = PREFIX_OPERATORS[operator_token.type]

        self._advance()
        right = self.parse_expression(Precedence.PREFIX)

        return PrefixExpression(operator_token, operator, right)

    # Infix parsers (binary operators)

    def _parse_infix(self, left: Expression) -> InfixExpression:
        """Parse binary operation; left associative."""
        operator_token = self.current
        operator = INFIX_OPERATORS[operator_token.type]

        precedence = self._current_precedence()
        self._advance()
        right = self.parse_expression(precedence)

        return InfixExpression(operator_token, left, operator, right)

    # Utility methods

    def _advance(self):
        """Shift the token window by one, pulling a new peek token."""
        self.current = self.peek

        if self._exhausted:
            return

        try:
            self.peek = self.lexer.next_token()
        except LexerError as e:
            # Last known token; nothing has been read yet while priming
            self._record_error(e, self.peek or self.current)
            self.peek = Token(TokenType.EOF, "", e.diagnostic.location)

        if self.peek.type == TokenType.EOF:
            self._exhausted = True

    def _expect_peek(self, token_type: TokenType):
        """Advance if peek has type token_type, otherwise raise."""
        if self.peek.type != token_type:
            raise create_unexpected_token_error(token_type, self.peek)

        self._advance()

    def _skip_semicolon(self):
        """Consume an optional statement terminator."""
        if self.peek.type == TokenType.SEMICOLON:
            self._advance()

    def _current_precedence(self) -> Precedence:
        return self.precedences.get(self.current.type, Precedence.LOWEST)

    def _peek_precedence(self) -> Precedence:
        return self.precedences.get(self.peek.type, Precedence.LOWEST)

    def _record_error(self, error: Exception, token: Optional[Token]):
        parse_error = ParseError.wrap(error, token)
        self.errors.append(parse_error)
        self._logger.debug("Recorded parse error: %s", parse_error.summary())


def parse_string(source: str, filename: str = "<string>") -> Program:
    """
    Convenience function to parse a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        Program AST

    Raises:
        ParseErrors: If any error was recorded while parsing
    """
    parser = Parser(Lexer(source, filename))
    program, _ = parser.parse()

    error = parser.error()
    if error is not None:
        raise error

    return program
