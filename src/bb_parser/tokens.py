from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Token kinds handed to the grammar parser.

    Punctuation kinds use the character code as their value and end-of-input
    is 0, the way a yacc-generated parser expects them.
    """
    EOF = 0

    # Punctuation
    LBRACKET = ord('[')     # opening tag start
    RBRACKET = ord(']')     # tag close
    EQUALS = ord('=')       # argument assignment

    # Named tokens
    TEXT = 57346
    ID = 57347
    NEWLINE = 57348
    CLOSING_TAG_OPENING = 57349   # [/ with a tag open
    MISSING_CLOSING = 57350       # unclosed tag drained at end of input
    MISSING_OPENING = 57351       # [/ with no tag open


PAYLOAD_TYPES = frozenset({TokenType.TEXT, TokenType.ID})

# Literal markup each payload-free token stands for
TOKEN_LITERALS = {
    TokenType.EOF: '',
    TokenType.LBRACKET: '[',
    TokenType.RBRACKET: ']',
    TokenType.EQUALS: '=',
    TokenType.NEWLINE: '\n',
    TokenType.CLOSING_TAG_OPENING: '[/',
    TokenType.MISSING_CLOSING: '',
    TokenType.MISSING_OPENING: '[/',
}


@dataclass
class SymbolValue:
    """Value slot filled by the lexer for TEXT and ID tokens.

    The lexer never clears it, so read it only right after a call that
    returned a payload kind.
    """
    value: str = ''


@dataclass
class Token:
    """A lexical token with position information."""
    type: TokenType
    value: str
    line: int
    column: int

    @property
    def has_payload(self) -> bool:
        return self.type in PAYLOAD_TYPES

    def to_dict(self) -> dict:
        return {
            'type': self.type.name,
            'value': self.value,
            'line': self.line,
            'column': self.column,
        }

    def __repr__(self) -> str:
        """Readable representation for debugging."""
        return f"Token({self.type.name}, {self.value!r}, line={self.line}, col={self.column})"
