"""
Monkey Lexer - turns source text into tokens, one pull at a time.

The scanner keeps three cursors: ``position`` (index of ``ch``),
``read_position`` (index of the next character to read) and ``ch`` itself.
Single-character tokens, ``==``/``!=``, EOF and ILLEGAL all leave the
cursor on their last character and share one trailing advance at the end
of ``next_token``. Identifier and integer scans stop one past their lexeme
and return early instead.
"""

import logging
from typing import Iterator, List

from .tokens import Token, TokenType, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS, lookup_identifier
from .errors import create_invalid_character_error

logger = logging.getLogger(__name__)

# End-of-input marker; never equal to a real character of the input
EOF_CHAR = ""

WHITESPACE = frozenset(" \t\n\r")


class Lexer:
    """
    Monkey lexical analyzer.

    Construct one per input and call ``next_token`` until it returns EOF.
    Any further call keeps returning EOF. A lexer cannot be restarted;
    build a new one to rescan.
    """

    def __init__(self, source: str):
        self.input = source
        self.position = 0
        self.read_position = 0
        self.ch = EOF_CHAR

        self._read_char()

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self._skip_whitespace()

        ch = self.ch
        if ch in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[ch], ch)
        elif ch in TWO_CHAR_TOKENS:
            single, double = TWO_CHAR_TOKENS[ch]
            if self._peek_char() == "=":
                self._read_char()
                token = Token(double, ch + self.ch)
            else:
                token = Token(single, ch)
        elif ch == EOF_CHAR:
            token = Token(TokenType.EOF, "")
        elif self._is_letter(ch):
            literal = self._read_identifier()
            return Token(lookup_identifier(literal), literal)
        elif self._is_digit(ch):
            return Token(TokenType.INT, self._read_number())
        else:
            logger.debug("Illegal character %r at offset %d", ch, self.position)
            token = Token(TokenType.ILLEGAL, "")

        self._read_char()
        return token

    def tokenize(self) -> List[Token]:
        """
        Drain the lexer.

        Returns:
            List of remaining tokens, ending with exactly one EOF token
        """
        tokens = list(self)
        tokens.append(self.next_token())
        return tokens

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF."""
        token = self.next_token()
        while token.type != TokenType.EOF:
            yield token
            token = self.next_token()

    def _read_char(self):
        """Move the cursor forward one character, sticking at the sentinel."""
        if self.read_position < len(self.input):
            self.ch = self.input[self.read_position]
            self.position = self.read_position
        else:
            self.ch = EOF_CHAR
            self.position = len(self.input)
        self.read_position = self.position + 1

    def _peek_char(self) -> str:
        """Look at the next character without consuming it."""
        if self.read_position < len(self.input):
            return self.input[self.read_position]
        return EOF_CHAR

    def _read_identifier(self) -> str:
        start = self.position
        # Digits do not continue an identifier: "foo1" is IDENT, INT
        while self._is_letter(self.ch):
            self._read_char()
        return self.input[start:self.position]

    def _read_number(self) -> str:
        start = self.position
        while self._is_digit(self.ch):
            self._read_char()
        return self.input[start:self.position]

    def _skip_whitespace(self):
        while self.ch in WHITESPACE:
            self._read_char()

    @staticmethod
    def _is_letter(char: str) -> bool:
        return char.isalpha() or char == "_"

    @staticmethod
    def _is_digit(char: str) -> bool:
        return char != EOF_CHAR and char in "0123456789"


def tokenize_string(source: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        strict: Raise on the first ILLEGAL token instead of returning it

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If ``strict`` and the source contains an illegal character
    """
    tokens = Lexer(source).tokenize()
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))

    if strict:
        for index, token in enumerate(tokens):
            if token.type == TokenType.ILLEGAL:
                raise create_invalid_character_error(index)

    return tokens


def tokenize_file(filepath: str, strict: bool = False) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        strict: Raise on the first ILLEGAL token instead of returning it

    Returns:
        List of tokens ending with EOF

    Raises:
        LexerError: If ``strict`` and the file contains an illegal character
        OSError: If the file cannot be read
        UnicodeDecodeError: If the file is not valid UTF-8
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    logger.debug("Read %s", filepath)
    return tokenize_string(source, strict=strict)
