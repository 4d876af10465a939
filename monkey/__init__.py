"""
Monkey Language Package

Front end for the Monkey scripting language: a small C-like language with
integer arithmetic, first-class functions and let bindings.

Architecture:
    monkey/
    ├── lexer/           # Tokenization and lexical analysis
    └── repl.py          # Interactive token printer

The parser and evaluator are not part of this package yet; the lexer's
pull-based token stream is the interface they will consume.
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, lookup_identifier

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "lookup_identifier",

    # Version info
    "__version__",
    "__license__",
]
