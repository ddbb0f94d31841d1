"""Exceptions raised by the bracket-tag lexer.

Unbalanced tags are never errors here: they are reported as
MISSING_OPENING / MISSING_CLOSING tokens for the parser to handle.
"""


class LexerError(Exception):
    """Exception raised for lexical analysis errors."""
    def __init__(self, message: str, line: int, column: int):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, column {column}")


class UnsupportedConstructError(LexerError):
    """Raised for markup the lexer recognizes but does not implement (quoted argument values)."""
    def __init__(self, construct: str, line: int, column: int):
        self.construct = construct
        super().__init__(f"{construct} is not supported", line, column)


def line_and_column(text: str, pos: int) -> tuple:
    """
    Convert a buffer offset to a 1-based (line, column) pair.

    :param text: Full input buffer
    :param pos: Offset into ``text``
    :return: Tuple of (line, column)
    """
    line = text.count('\n', 0, pos) + 1
    column = pos - (text.rfind('\n', 0, pos) + 1) + 1
    return line, column
