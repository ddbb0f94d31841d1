"""Rebuild bracket-tag markup from a token stream."""

from typing import Iterable, List

from bb_parser.tokens import TOKEN_LITERALS, Token, TokenType

_TAG_OPENERS = frozenset({
    TokenType.LBRACKET,
    TokenType.CLOSING_TAG_OPENING,
    TokenType.MISSING_OPENING,
})


def to_markup(tokens: Iterable[Token]) -> str:
    """
    Reassemble markup from tokens produced by the lexer.

    Tag names are written in their canonical lowercase form and whitespace
    inside a tag collapses to a single space, so the result lexes to the same
    token kinds and payloads as the original input.

    :param tokens: Tokens in emission order
    :return: Markup string
    """
    parts: List[str] = []
    in_tag = False
    previous = None

    for token in tokens:
        if token.type in _TAG_OPENERS:
            in_tag = True
        elif token.type is TokenType.RBRACKET:
            in_tag = False

        words_touch = in_tag and previous in (TokenType.TEXT, TokenType.ID)
        if token.type in (TokenType.TEXT, TokenType.ID):
            if words_touch:
                parts.append(' ')
            parts.append(token.value)
        elif words_touch and (token.type is TokenType.MISSING_CLOSING
                              or token.type is TokenType.EQUALS and previous is TokenType.TEXT):
            # A value would swallow the '='; an unclosed tag needs its blank to match
            parts.extend((' ', TOKEN_LITERALS[token.type]))
        else:
            parts.append(TOKEN_LITERALS[token.type])
        previous = token.type

    return ''.join(parts)
