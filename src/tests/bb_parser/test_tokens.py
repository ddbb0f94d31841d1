"""Tests for token kinds and the token record."""

import unittest

from bb_parser.tokens import PAYLOAD_TYPES, SymbolValue, Token, TokenType


class TestTokenType(unittest.TestCase):

    def test_character_valued_kinds(self):
        self.assertEqual(TokenType.EOF, 0)
        self.assertEqual(TokenType.LBRACKET, ord('['))
        self.assertEqual(TokenType.RBRACKET, ord(']'))
        self.assertEqual(TokenType.EQUALS, ord('='))

    def test_named_kinds_do_not_collide_with_characters(self):
        named = [TokenType.TEXT, TokenType.ID, TokenType.NEWLINE, TokenType.CLOSING_TAG_OPENING,
                 TokenType.MISSING_CLOSING, TokenType.MISSING_OPENING]
        self.assertTrue(all(kind > 255 for kind in named))
        self.assertEqual(len(set(named)), len(named))

    def test_payload_types(self):
        self.assertEqual(PAYLOAD_TYPES, {TokenType.TEXT, TokenType.ID})


class TestToken(unittest.TestCase):

    def test_to_dict(self):
        token = Token(TokenType.ID, "quote", 2, 5)
        self.assertEqual(
            token.to_dict(),
            {'type': 'ID', 'value': 'quote', 'line': 2, 'column': 5},
        )

    def test_has_payload(self):
        self.assertTrue(Token(TokenType.TEXT, "x", 1, 1).has_payload)
        self.assertFalse(Token(TokenType.RBRACKET, "]", 1, 1).has_payload)

    def test_repr(self):
        self.assertEqual(
            repr(Token(TokenType.TEXT, "hi", 1, 4)),
            "Token(TEXT, 'hi', line=1, col=4)",
        )

    def test_symbol_value_default(self):
        self.assertEqual(SymbolValue().value, '')


if __name__ == "__main__":
    unittest.main()
