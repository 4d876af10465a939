"""
Token definitions for the Monkey lexer.

This module defines all token types supported by Monkey, including:
- Keywords (fn, let, true, false, if, else, return)
- Operators and punctuation
- Literals (identifiers and integers)
- The ILLEGAL and EOF sentinels
"""

from enum import Enum, auto
from dataclasses import dataclass
from types import MappingProxyType


class TokenType(Enum):
    """
    Enumeration of all token types in Monkey.

    Members compare by identity only; ordering between kinds is meaningless.
    """

    # ========================================================================
    # Special Tokens
    # ========================================================================
    ILLEGAL = auto()                # Unrecognized character
    EOF = auto()                    # End of input

    # ========================================================================
    # Identifiers and Literals
    # ========================================================================
    IDENT = auto()                  # add, foobar, x, y
    INT = auto()                    # 1343456

    # ========================================================================
    # Operators
    # ========================================================================
    ASSIGN = auto()                 # =
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    BANG = auto()                   # !
    ASTERISK = auto()               # *
    SLASH = auto()                  # /

    LT = auto()                     # <
    GT = auto()                     # >
    EQ = auto()                     # ==
    NOT_EQ = auto()                 # !=

    # ========================================================================
    # Delimiters
    # ========================================================================
    COMMA = auto()                  # ,
    SEMICOLON = auto()              # ;

    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # ========================================================================
    # Keywords
    # ========================================================================
    FUNCTION = auto()               # fn
    LET = auto()                    # let
    TRUE = auto()                   # true
    FALSE = auto()                  # false
    IF = auto()                     # if
    ELSE = auto()                   # else
    RETURN = auto()                 # return

    @property
    def display(self) -> str:
        """Canonical display string, used only for diagnostics."""
        return TOKEN_DISPLAY[self]


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the Monkey language.

    Fixed-symbol tokens carry their canonical spelling, identifiers and
    integers carry the exact source text consumed, and ILLEGAL/EOF carry
    an empty literal.
    """
    type: TokenType
    literal: str

    def __str__(self) -> str:
        return f"{self.type.name}({self.literal!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a literal value."""
        return self.type in {TokenType.INT, TokenType.TRUE, TokenType.FALSE}

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a keyword."""
        return self.type in KEYWORD_TYPES

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator or delimiter."""
        return self.type in OPERATOR_TYPES

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENT

    @property
    def is_eof(self) -> bool:
        """Check if this token marks end of input."""
        return self.type == TokenType.EOF

    @property
    def is_illegal(self) -> bool:
        """Check if this token is an unrecognized character."""
        return self.type == TokenType.ILLEGAL


# Display strings, one per token type
TOKEN_DISPLAY = MappingProxyType({
    TokenType.ILLEGAL: "ILLEGAL",
    TokenType.EOF: "EOF",
    TokenType.IDENT: "IDENT",
    TokenType.INT: "INT",
    TokenType.ASSIGN: "=",
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.BANG: "!",
    TokenType.ASTERISK: "*",
    TokenType.SLASH: "/",
    TokenType.LT: "<",
    TokenType.GT: ">",
    TokenType.EQ: "==",
    TokenType.NOT_EQ: "!=",
    TokenType.COMMA: ",",
    TokenType.SEMICOLON: ";",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
    TokenType.LBRACE: "{",
    TokenType.RBRACE: "}",
    TokenType.FUNCTION: "FUNCTION",
    TokenType.LET: "LET",
    TokenType.TRUE: "TRUE",
    TokenType.FALSE: "FALSE",
    TokenType.IF: "IF",
    TokenType.ELSE: "ELSE",
    TokenType.RETURN: "RETURN",
})

# Reserved words. Built once at import and never mutated.
KEYWORDS = MappingProxyType({
    "fn": TokenType.FUNCTION,
    "let": TokenType.LET,
    "true": TokenType.TRUE,
    "false": TokenType.FALSE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "return": TokenType.RETURN,
})

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS = MappingProxyType({
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ",": TokenType.COMMA,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "<": TokenType.LT,
    ">": TokenType.GT,
    "/": TokenType.SLASH,
    "*": TokenType.ASTERISK,
})

# Operators that may extend to a second '=' character: (one char, two chars)
TWO_CHAR_TOKENS = MappingProxyType({
    "=": (TokenType.ASSIGN, TokenType.EQ),
    "!": (TokenType.BANG, TokenType.NOT_EQ),
})

KEYWORD_TYPES = frozenset(KEYWORDS.values())

OPERATOR_TYPES = frozenset(SINGLE_CHAR_TOKENS.values()) | frozenset(
    kind for pair in TWO_CHAR_TOKENS.values() for kind in pair
)


def lookup_identifier(ident: str) -> TokenType:
    """Return the keyword type for an exact keyword match, else IDENT."""
    return KEYWORDS.get(ident, TokenType.IDENT)
