"""Registry of the bracket tags recognized by the lexer."""

import re
from typing import Optional, Tuple

# Registry order matters: where one name prefixes another ('url'/'u', 'img'/'i')
# the longer name is listed first.
TAGS: Tuple[str, ...] = ("url", "img", "b", "i", "u", "s", "quote", "code")


def _compile_tag_pattern(tag: str) -> re.Pattern:
    # '[' or '[/', optional blanks, the name, then one of ']', '=', space or tab
    return re.compile(r"\[/?[ \t]*" + re.escape(tag) + r"(?=[\]= \t])", re.IGNORECASE | re.ASCII)


# Built once at import; (name, matcher) pairs in registry order
TAG_PATTERNS: Tuple[Tuple[str, re.Pattern], ...] = tuple(
    (tag, _compile_tag_pattern(tag)) for tag in TAGS
)


def is_known_tag(name: str) -> bool:
    return _ascii_lower(name) in TAGS


def match_tag(text: str, pos: int = 0) -> Optional[str]:
    """
    Check whether a recognized opening or closing tag starts at ``pos``.

    :param text: Full input buffer
    :param pos: Index of a '[' character
    :return: Canonical tag name of the first matcher that accepts, or None
    """
    for tag, pattern in TAG_PATTERNS:
        if pattern.match(text, pos):
            return tag
    return None


def match_tag_name(text: str, pos: int = 0) -> Optional[str]:
    """
    Literal, case-insensitive prefix match of a tag name at ``pos``.

    :param text: Full input buffer
    :param pos: Index where the tag name is expected
    :return: Lowercase tag name, or None if no registered name prefixes the input
    """
    for tag in TAGS:
        candidate = text[pos:pos + len(tag)]
        if len(candidate) == len(tag) and _ascii_lower(candidate) == tag:
            return tag
    return None


def _ascii_lower(value: str) -> str:
    # str.lower() would also fold non-ASCII letters such as 'İ'
    return value.translate(_ASCII_LOWER)


_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
