"""
Monkey Lexer - turns a character stream into tokens

Pull based: every call to next_token() reads just enough characters to
produce one token, using a single character of lookahead. Nothing about
statements or expressions is known here; bad characters come out as
ILLEGAL tokens and the parser reports them.
"""

import io
import logging
from typing import Iterator, List, Optional, TextIO, Union

from .tokens import Token, TokenType, SourceLocation, SINGLE_CHAR_TOKENS, lookup_identifier
from .errors import EndOfInput, LexerError, create_read_error
from .source import RuneSource


class Lexer:
    """
    Monkey lexical analyzer.

    Converts source text into a stream of tokens, one token per call to
    next_token(), always positioned at the start of the next lexeme.
    """

    _logger = logging.getLogger("Lexer")

    def __init__(self, source: Union[str, TextIO, RuneSource], filename: str = "<unknown>"):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string, text stream or RuneSource
            filename: Name of source for error reporting
        """
        if isinstance(source, str):
            source = io.StringIO(source)

        if not isinstance(source, RuneSource):
            source = RuneSource(source, filename)

        self.source = source
        self.filename = source.filename

    def next_token(self) -> Token:
        """
        Produce the next token.

        Returns:
            The next token; an EOF token once the input is exhausted

        Raises:
            LexerError: If reading the underlying stream fails
        """
        self._skip_whitespace()

        location = self.source.location
        current_char = self._consume()
        if current_char is None:
            return Token(TokenType.EOF, "", location)

        if current_char == '=':
            return self._tokenize_two_char('=', TokenType.EQUAL, TokenType.ASSIGN, current_char, location)

        if current_char == '!':
            return self._tokenize_two_char('=', TokenType.NOT_EQUAL, TokenType.BANG, current_char, location)

        token_type = SINGLE_CHAR_TOKENS.get(current_char)
        if token_type is not None:
            return Token(token_type, current_char, location)

        if current_char.isalpha():
            return self._tokenize_identifier_or_keyword(current_char, location)

        if current_char.isdigit():
            return self._tokenize_number(current_char, location)

        return Token(TokenType.ILLEGAL, current_char, location)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the remaining input.

        Returns:
            List of tokens including the final EOF token
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def _tokenize_two_char(self, second: str, matched: TokenType, single: TokenType,
                           first: str, location: SourceLocation) -> Token:
        """Emit matched if the next character is second, otherwise single."""
        if self._peek() == second:
            self._consume()
            return Token(matched, first + second, location)

        return Token(single, first, location)

    def _tokenize_identifier_or_keyword(self, first: str, location: SourceLocation) -> Token:
        """Tokenize a maximal run of letters as a keyword or identifier."""
        word = self._read_while(first, str.isalpha)
        return Token(lookup_identifier(word), word, location)

    def _tokenize_number(self, first: str, location: SourceLocation) -> Token:
        """Tokenize a maximal run of digits; conversion is left to the parser."""
        digits = self._read_while(first, str.isdigit)
        return Token(TokenType.INT, digits, location)

    def _read_while(self, first: str, predicate) -> str:
        chars = [first]
        next_char = self._peek()
        while next_char is not None and predicate(next_char):
            chars.append(self._consume())
            next_char = self._peek()

        return ''.join(chars)

    def _skip_whitespace(self):
        """Skip whitespace; it is never significant."""
        next_char = self._peek()
        while next_char is not None and next_char.isspace():
            self._consume()
            next_char = self._peek()

    def _peek(self) -> Optional[str]:
        """Peek at the next character, None at end of input."""
        try:
            return self.source.peek()
        except EndOfInput:
            return None
        except (OSError, ValueError) as e:
            raise self._read_failure(e) from e

    def _consume(self) -> Optional[str]:
        """Consume the next character, None at end of input."""
        try:
            return self.source.consume()
        except EndOfInput:
            return None
        except (OSError, ValueError) as e:
            raise self._read_failure(e) from e

    def _read_failure(self, cause: Exception) -> LexerError:
        self._logger.warning("Failed reading %s: %s", self.filename, cause)
        return create_read_error(cause, self.source.location)


def tokenize_string(source: str, filename: str = "<string>") -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting

    Returns:
        List of tokens ending with EOF
    """
    return Lexer(source, filename).tokenize()
