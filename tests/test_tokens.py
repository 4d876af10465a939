"""
Tests for the Monkey token model and keyword table.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from monkey.lexer.tokens import (
    Token, TokenType, KEYWORDS, TOKEN_DISPLAY, SINGLE_CHAR_TOKENS, TWO_CHAR_TOKENS,
    lookup_identifier,
)


class TestKeywordTable(unittest.TestCase):

    def test_keywords(self):
        expected = {
            "fn": TokenType.FUNCTION,
            "let": TokenType.LET,
            "true": TokenType.TRUE,
            "false": TokenType.FALSE,
            "if": TokenType.IF,
            "else": TokenType.ELSE,
            "return": TokenType.RETURN,
        }
        self.assertEqual(dict(KEYWORDS), expected)
        for word, token_type in expected.items():
            self.assertIs(lookup_identifier(word), token_type)

    def test_non_keywords_are_identifiers(self):
        for word in ["foo", "Fn", "LET", "returns", "els", "_", "function"]:
            self.assertIs(lookup_identifier(word), TokenType.IDENT)

    def test_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["while"] = TokenType.IDENT
        self.assertNotIn("while", KEYWORDS)


class TestTokenType(unittest.TestCase):

    def test_every_type_has_a_display_string(self):
        self.assertEqual(set(TOKEN_DISPLAY), set(TokenType))

    def test_display_strings(self):
        self.assertEqual(TokenType.ASSIGN.display, "=")
        self.assertEqual(TokenType.EQ.display, "==")
        self.assertEqual(TokenType.NOT_EQ.display, "!=")
        self.assertEqual(TokenType.FUNCTION.display, "FUNCTION")
        self.assertEqual(TokenType.EOF.display, "EOF")
        self.assertEqual(TokenType.IDENT.display, "IDENT")

    def test_display_strings_are_unique(self):
        self.assertEqual(len(set(TOKEN_DISPLAY.values())), len(TokenType))

    def test_fixed_symbol_display_matches_spelling(self):
        for char, token_type in SINGLE_CHAR_TOKENS.items():
            self.assertEqual(token_type.display, char)
        for char, (single, double) in TWO_CHAR_TOKENS.items():
            self.assertEqual(single.display, char)
            self.assertEqual(double.display, char + "=")


class TestToken(unittest.TestCase):

    def test_immutable(self):
        token = Token(TokenType.IDENT, "x")
        with self.assertRaises(AttributeError):
            token.literal = "y"

    def test_value_equality(self):
        self.assertEqual(Token(TokenType.INT, "5"), Token(TokenType.INT, "5"))
        self.assertNotEqual(Token(TokenType.INT, "5"), Token(TokenType.INT, "6"))
        self.assertNotEqual(Token(TokenType.IDENT, "x"), Token(TokenType.INT, "x"))

    def test_debug_forms(self):
        token = Token(TokenType.LET, "let")
        self.assertEqual(str(token), "LET('let')")
        self.assertEqual(repr(token), "Token(LET, 'let')")

    def test_classification(self):
        self.assertTrue(Token(TokenType.LET, "let").is_keyword)
        self.assertTrue(Token(TokenType.TRUE, "true").is_literal)
        self.assertTrue(Token(TokenType.INT, "1").is_literal)
        self.assertTrue(Token(TokenType.NOT_EQ, "!=").is_operator)
        self.assertTrue(Token(TokenType.SEMICOLON, ";").is_operator)
        self.assertTrue(Token(TokenType.IDENT, "x").is_identifier)
        self.assertTrue(Token(TokenType.EOF, "").is_eof)
        self.assertTrue(Token(TokenType.ILLEGAL, "").is_illegal)

        ident = Token(TokenType.IDENT, "x")
        self.assertFalse(ident.is_keyword)
        self.assertFalse(ident.is_operator)
        self.assertFalse(ident.is_literal)


if __name__ == '__main__':
    unittest.main()
