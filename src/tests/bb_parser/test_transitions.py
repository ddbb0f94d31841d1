"""Tests for the pure lexer transition function."""

import dataclasses
import unittest

from bb_parser.errors import UnsupportedConstructError
from bb_parser.tokens import TokenType
from bb_parser.transitions import (
    INITIAL_STATE,
    LexerMode,
    LexerState,
    Transition,
    transition,
)


class TestEndOfInput(unittest.TestCase):

    def test_eof_with_no_open_tags(self):
        result = transition(INITIAL_STATE, "", 0)
        self.assertEqual(result, Transition(INITIAL_STATE, TokenType.EOF, None, 0))

    def test_missing_closing_decrements_depth(self):
        state = LexerState(LexerMode.TAG_ARGS, 2)
        result = transition(state, "abc", 3)
        self.assertEqual(result.token_type, TokenType.MISSING_CLOSING)
        self.assertEqual(result.state, LexerState(LexerMode.TAG_ARGS, 1))
        self.assertEqual(result.pos, 3)

    def test_repeated_eof_keeps_state(self):
        first = transition(INITIAL_STATE, "x", 1)
        second = transition(first.state, "x", first.pos)
        self.assertEqual(first, second)


class TestInitMode(unittest.TestCase):

    def test_newline(self):
        result = transition(INITIAL_STATE, "\nx", 0)
        self.assertEqual(result, Transition(INITIAL_STATE, TokenType.NEWLINE, None, 1))

    def test_opening_tag(self):
        result = transition(LexerState(LexerMode.INIT, 3), "[code]", 0)
        self.assertEqual(result.token_type, TokenType.LBRACKET)
        self.assertEqual(result.state, LexerState(LexerMode.TAG_START, 4))
        self.assertEqual(result.pos, 1)

    def test_closing_tag(self):
        result = transition(LexerState(LexerMode.INIT, 1), "[/code]", 0)
        self.assertEqual(result.token_type, TokenType.CLOSING_TAG_OPENING)
        self.assertEqual(result.state, LexerState(LexerMode.TAG_START, 0))
        self.assertEqual(result.pos, 2)

    def test_closing_tag_without_opening(self):
        result = transition(INITIAL_STATE, "[/code]", 0)
        self.assertEqual(result.token_type, TokenType.MISSING_OPENING)
        self.assertEqual(result.state, LexerState(LexerMode.TAG_START, 0))
        self.assertEqual(result.pos, 2)

    def test_text_run_from_offset(self):
        result = transition(INITIAL_STATE, "[b]some text\nmore", 3)
        self.assertEqual(result, Transition(INITIAL_STATE, TokenType.TEXT, "some text", 12))


class TestTagStartMode(unittest.TestCase):

    def test_tag_name_is_lowercased(self):
        state = LexerState(LexerMode.TAG_START, 1)
        result = transition(state, "[IMG]", 1)
        self.assertEqual(result, Transition(LexerState(LexerMode.TAG_ARGS, 1), TokenType.ID, "img", 4))

    def test_blanks_before_name(self):
        state = LexerState(LexerMode.TAG_START, 0)
        result = transition(state, "[/ \tb]", 2)
        self.assertEqual((result.token_type, result.payload, result.pos), (TokenType.ID, "b", 5))

    def test_unknown_name_falls_back_to_text(self):
        state = LexerState(LexerMode.TAG_START, 1)
        result = transition(state, "zzz[b]", 0)
        self.assertEqual(result, Transition(LexerState(LexerMode.INIT, 1), TokenType.TEXT, "zzz", 3))


class TestTagArgsMode(unittest.TestCase):

    state = LexerState(LexerMode.TAG_ARGS, 1)

    def test_close_after_whitespace(self):
        result = transition(self.state, " \n ]", 0)
        self.assertEqual(result, Transition(LexerState(LexerMode.INIT, 1), TokenType.RBRACKET, None, 4))

    def test_equals(self):
        result = transition(self.state, "=x", 0)
        self.assertEqual(result, Transition(LexerState(LexerMode.ARG_VALUE, 1), TokenType.EQUALS, None, 1))

    def test_identifier(self):
        result = transition(self.state, "  font_size2=3", 0)
        self.assertEqual(result, Transition(self.state, TokenType.ID, "font_size2", 12))

    def test_non_identifier_becomes_text(self):
        result = transition(self.state, "@@ x]", 0)
        self.assertEqual(result, Transition(self.state, TokenType.TEXT, "@@", 2))

    def test_bracket_is_single_character_text(self):
        result = transition(self.state, "[i]", 0)
        self.assertEqual(result, Transition(self.state, TokenType.TEXT, "[", 1))


class TestArgValueMode(unittest.TestCase):

    state = LexerState(LexerMode.ARG_VALUE, 1)

    def test_value_stops_at_space(self):
        result = transition(self.state, " a=b c]", 0)
        self.assertEqual(result, Transition(LexerState(LexerMode.TAG_ARGS, 1), TokenType.TEXT, "a=b", 4))

    def test_value_stops_at_bracket(self):
        result = transition(self.state, "http://x/?q=1]", 0)
        self.assertEqual(result.payload, "http://x/?q=1")
        self.assertEqual(result.pos, 13)

    def test_empty_value_closes_tag(self):
        result = transition(self.state, "]", 0)
        self.assertEqual(result, Transition(LexerState(LexerMode.INIT, 1), TokenType.RBRACKET, None, 1))

    def test_quoted_value_raises(self):
        for quote in ('"', "'"):
            with self.subTest(quote=quote):
                with self.assertRaises(UnsupportedConstructError) as ctx:
                    transition(self.state, f"x\n  {quote}v{quote}]", 2)
                self.assertEqual((ctx.exception.line, ctx.exception.column), (2, 3))


class TestLexerState(unittest.TestCase):

    def test_state_is_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            INITIAL_STATE.open_depth = 5

    def test_transition_is_pure(self):
        state = LexerState(LexerMode.INIT, 0)
        text = "[b]x"
        self.assertEqual(transition(state, text, 0), transition(state, text, 0))
        self.assertEqual(state, LexerState(LexerMode.INIT, 0))


if __name__ == "__main__":
    unittest.main()
