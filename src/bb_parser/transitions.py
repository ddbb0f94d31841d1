"""
Pure transition function for the bracket-tag lexer.

Each call looks at the current mode, the open-tag depth and the input at one
offset, and returns the next state, the token kind, its payload and the offset
after the consumed characters. Nothing here holds state, so every mode can be
exercised without a Lexer instance.

Modes:
- INIT: ordinary document content
- TAG_START: right after '[' or '[/', expecting a tag name
- TAG_ARGS: inside a tag, expecting ']', '=' or an argument identifier
- ARG_VALUE: right after '=', expecting an unquoted value
"""

import re
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import NamedTuple, Optional

from bb_parser.errors import UnsupportedConstructError, line_and_column
from bb_parser.tags import match_tag, match_tag_name
from bb_parser.tokens import TokenType


class LexerMode(Enum):
    """Lexer operating modes."""
    INIT = auto()
    TAG_START = auto()
    TAG_ARGS = auto()
    ARG_VALUE = auto()


@dataclass(frozen=True)
class LexerState:
    mode: LexerMode = LexerMode.INIT
    open_depth: int = 0


class Transition(NamedTuple):
    state: LexerState
    token_type: TokenType
    payload: Optional[str]
    pos: int


_IDENTIFIER = re.compile(r'[A-Za-z0-9_]+')
_TEXT_RUN = re.compile(r'[^\[\n]*')
_ARG_VALUE = re.compile(r'[^ \]\n]+')
# Fallback for a tag argument that is not an identifier
_ARG_JUNK = re.compile(r'[^\s\]=\[]+')

INITIAL_STATE = LexerState()


def transition(state: LexerState, text: str, pos: int) -> Transition:
    """
    Produce exactly one token from ``text`` at ``pos``.

    :param state: Mode and open-tag depth before this call
    :param text: Full input buffer
    :param pos: Offset of the first unconsumed character
    :return: Transition with the new state, token kind, payload and offset
    :raises UnsupportedConstructError: For a quoted argument value
    """
    if pos >= len(text):
        return _end_of_input(state, pos)

    if state.mode is LexerMode.TAG_START:
        return _lex_tag_start(state, text, pos)
    if state.mode is LexerMode.TAG_ARGS:
        return _lex_tag_args(state, text, pos)
    if state.mode is LexerMode.ARG_VALUE:
        return _lex_arg_value(state, text, pos)
    return _lex_init(state, text, pos)


def _end_of_input(state: LexerState, pos: int) -> Transition:
    # One unclosed tag is reported per call; EOF repeats once depth is drained.
    if state.open_depth > 0:
        return Transition(replace(state, open_depth=state.open_depth - 1),
                          TokenType.MISSING_CLOSING, None, pos)
    return Transition(state, TokenType.EOF, None, pos)


def _skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos].isspace():
        pos += 1
    return pos


def _text_run_end(text: str, pos: int) -> int:
    # The first character always belongs to the run, even a '[' or newline.
    return _TEXT_RUN.match(text, pos + 1).end()


def _lex_init(state: LexerState, text: str, pos: int) -> Transition:
    char = text[pos]
    if char == '\n':
        return Transition(state, TokenType.NEWLINE, None, pos + 1)

    if char == '[' and match_tag(text, pos) is not None:
        pos += 1
        if text[pos] == '/':
            pos += 1
            if state.open_depth <= 0:
                return Transition(LexerState(LexerMode.TAG_START, 0),
                                  TokenType.MISSING_OPENING, None, pos)
            return Transition(LexerState(LexerMode.TAG_START, state.open_depth - 1),
                              TokenType.CLOSING_TAG_OPENING, None, pos)
        return Transition(LexerState(LexerMode.TAG_START, state.open_depth + 1),
                          TokenType.LBRACKET, None, pos)

    end = _text_run_end(text, pos)
    return Transition(state, TokenType.TEXT, text[pos:end], end)


def _lex_tag_start(state: LexerState, text: str, pos: int) -> Transition:
    name_pos = pos
    while name_pos < len(text) and text[name_pos] in ' \t':
        name_pos += 1

    tag = match_tag_name(text, name_pos)
    if tag is not None:
        return Transition(replace(state, mode=LexerMode.TAG_ARGS),
                          TokenType.ID, tag, name_pos + len(tag))

    # Not a tag after all: hand the rest of the run back as text
    end = _text_run_end(text, pos)
    return Transition(replace(state, mode=LexerMode.INIT), TokenType.TEXT, text[pos:end], end)


def _lex_tag_args(state: LexerState, text: str, pos: int) -> Transition:
    pos = _skip_whitespace(text, pos)
    if pos >= len(text):
        return _end_of_input(state, pos)

    char = text[pos]
    if char == ']':
        return Transition(replace(state, mode=LexerMode.INIT), TokenType.RBRACKET, None, pos + 1)
    if char == '=':
        return Transition(replace(state, mode=LexerMode.ARG_VALUE), TokenType.EQUALS, None, pos + 1)

    match = _IDENTIFIER.match(text, pos)
    if match:
        return Transition(state, TokenType.ID, match.group(), match.end())

    match = _ARG_JUNK.match(text, pos)
    end = match.end() if match else pos + 1
    return Transition(state, TokenType.TEXT, text[pos:end], end)


def _lex_arg_value(state: LexerState, text: str, pos: int) -> Transition:
    pos = _skip_whitespace(text, pos)
    if pos >= len(text):
        return _end_of_input(state, pos)

    char = text[pos]
    if char in '"\'':
        line, column = line_and_column(text, pos)
        raise UnsupportedConstructError("Quoted argument value", line, column)

    args_state = replace(state, mode=LexerMode.TAG_ARGS)
    match = _ARG_VALUE.match(text, pos)
    if match is None:
        # Empty value, as in '[url=]'
        return _lex_tag_args(args_state, text, pos)
    return Transition(args_state, TokenType.TEXT, match.group(), match.end())
