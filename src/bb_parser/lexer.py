from typing import Generator, List, Optional

from bb_parser.errors import LexerError, UnsupportedConstructError
from bb_parser.tokens import PAYLOAD_TYPES, TOKEN_LITERALS, SymbolValue, Token, TokenType
from bb_parser.transitions import INITIAL_STATE, LexerMode, LexerState, transition
from common.base.logging_config import get_logger

logger = get_logger(__name__)

__all__ = ['BBCodeLexer', 'LexerError', 'UnsupportedConstructError', 'tokenize']


class BBCodeLexer:
    """
    Lexical analyzer for bracket-tag markup ([b], [url=...], [quote], ...).

    Produces one token per call and keeps the open-tag depth so that stray
    closing tags and unclosed tags come out as MISSING_OPENING and
    MISSING_CLOSING tokens instead of errors. One instance lexes one document.
    """

    def __init__(self, text: str = ""):
        self.init(text)

    def init(self, text: str) -> None:
        """Initialize or reset the lexer with new input."""
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.state: LexerState = INITIAL_STATE
        self.last_error: Optional[str] = None

    @property
    def mode(self) -> LexerMode:
        return self.state.mode

    @property
    def open_depth(self) -> int:
        return self.state.open_depth

    @property
    def remaining(self) -> str:
        """The not yet consumed suffix of the input."""
        return self.text[self.pos:]

    def _advance_to(self, new_pos: int) -> None:
        consumed = self.text[self.pos:new_pos]
        newlines = consumed.count('\n')
        if newlines:
            self.line += newlines
            self.column = len(consumed) - consumed.rfind('\n')
        else:
            self.column += len(consumed)
        self.pos = new_pos

    def _step(self):
        result = transition(self.state, self.text, self.pos)
        if result.pos < self.pos:
            raise LexerError("Lexer moved backwards", self.line, self.column)
        self.state = result.state
        return result

    def lex(self, lval: SymbolValue) -> int:
        """
        Produce the next token kind, parser-callback style.

        :param lval: Value slot; set only for TEXT and ID tokens
        :return: Integer token kind, 0 at end of input
        """
        result = self._step()
        self._advance_to(result.pos)
        if result.token_type in PAYLOAD_TYPES:
            lval.value = result.payload
        return int(result.token_type)

    def get_next_token(self) -> Token:
        """Get the next token, with the position of its first consumed character."""
        start_pos = self.pos
        result = self._step()
        if result.token_type in PAYLOAD_TYPES:
            value = result.payload
        else:
            value = TOKEN_LITERALS[result.token_type]

        # Whitespace skipped inside a tag is not part of the token
        self._advance_to(max(start_pos, result.pos - len(value)))
        tok_line, tok_col = self.line, self.column
        self._advance_to(result.pos)

        token = Token(result.token_type, value, tok_line, tok_col)
        logger.debug(f"{token!r} mode={self.state.mode.name} depth={self.state.open_depth}")
        return token

    def error(self, message: str) -> None:
        """Record a syntax error found by the parser. Lexing is unaffected."""
        self.last_error = message
        logger.warning(f"Parser reported syntax error at line {self.line}, column {self.column}: {message}")

    def tokenize(self, text: Optional[str] = None) -> Generator[Token, None, None]:
        """Convert input text into a stream of tokens, ending with the EOF token."""
        if text is not None:
            self.init(text)
        while True:
            token = self.get_next_token()
            yield token
            if token.type is TokenType.EOF:
                return


def tokenize(text: str) -> List[Token]:
    """Tokenize ``text`` and return the tokens, EOF included."""
    lexer = BBCodeLexer()
    return list(lexer.tokenize(text))
