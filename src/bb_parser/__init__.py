"""BB Parser - a tokenizer for bracket-tag markup ([b], [url=...], [quote], ...)."""

from .errors import LexerError, UnsupportedConstructError
from .lexer import BBCodeLexer, tokenize
from .markup import to_markup
from .tags import TAGS, is_known_tag
from .tokens import SymbolValue, Token, TokenType
from .transitions import LexerMode, LexerState, transition

__all__ = [
    'BBCodeLexer',
    'LexerError',
    'LexerMode',
    'LexerState',
    'SymbolValue',
    'TAGS',
    'Token',
    'TokenType',
    'UnsupportedConstructError',
    'is_known_tag',
    'to_markup',
    'tokenize',
    'transition',
]
