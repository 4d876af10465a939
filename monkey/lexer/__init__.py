"""
Monkey Lexer Package

Implements a hand-written, character-by-character scanner for the Monkey
language. The scanner is pull-based: each call to ``Lexer.next_token``
returns exactly one token, and unrecognized input degrades to an ILLEGAL
token instead of raising.

Key Features:
- One character of lookahead for ``==`` and ``!=``
- Keyword recognition through a read-only keyword table
- Sticky end-of-input sentinel
- Strict convenience tokenizers that turn ILLEGAL tokens into errors
"""

from .tokens import Token, TokenType, KEYWORDS, lookup_identifier
from .lexer import Lexer, tokenize_string, tokenize_file
from .errors import LexerError, Diagnostic

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "lookup_identifier",
    "tokenize_string",
    "tokenize_file",
    "LexerError",
    "Diagnostic",
]
