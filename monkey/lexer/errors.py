"""
Error handling for the Monkey lexer.

The scanner itself never raises: unrecognized characters come back as
ILLEGAL tokens. These types are used by the strict convenience tokenizers,
which turn the first ILLEGAL token of a stream into an exception.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """A single lexer diagnostic."""
    message: str
    severity: str  # "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}"
        if self.code:
            result += f"[{self.code}]"
        result += f": {self.message}"
        if self.help_text:
            result += f"\n  help: {self.help_text}"
        return result


class LexerError(Exception):
    """
    Exception raised when strict tokenization meets an ILLEGAL token.

    Contains the diagnostic and the index of the offending token in the
    token list.
    """

    def __init__(
        self,
        message: str,
        token_index: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.token_index = token_index
        self.diagnostic = Diagnostic(
            message=message,
            severity="error",
            code=code,
            help_text=help_text,
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


ERROR_CODES = {
    "L001": "Invalid character",
}


def create_invalid_character_error(token_index: int) -> LexerError:
    """Create an error for an ILLEGAL token found at ``token_index``."""
    return LexerError(
        message=f"{ERROR_CODES['L001']} (token {token_index})",
        token_index=token_index,
        code="L001",
        help_text="Monkey source may only contain letters, digits, whitespace "
                  "and the operators = + - ! * / < > == != , ; ( ) { }",
    )
