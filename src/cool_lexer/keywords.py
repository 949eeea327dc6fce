"""
Keyword and Integer Classification
==================================

Classifies an extracted name span into one of:

| First character | Result                                   |
|-----------------|------------------------------------------|
| digit           | integer (or WrongInteger32FormatError)   |
| keyword match   | keyword (or UppercaseBooleanKeywordError)|
| A-Z             | type identifier                          |
| otherwise       | identifier                               |

Keywords match case-insensitively, but a span starting with a capital
letter is rejected for every keyword, not only ``true`` and ``false``.
"""

from types import MappingProxyType
from typing import Mapping, Optional

from cool_lexer.chars import is_digit, is_upper
from cool_lexer.errors import (
    SourceLocation,
    UppercaseBooleanKeywordError,
    WrongInteger32FormatError,
)
from cool_lexer.tokens import Token, TokenKind


INT32_MAX = 2147483647

# Longest decimal spelling of INT32_MAX
INT32_MAX_DIGITS = 10


# =============================================================================
# Keyword Table
# =============================================================================

KEYWORDS: Mapping[str, TokenKind] = MappingProxyType({
    kind.value: kind
    for kind in (
        TokenKind.CLASS,
        TokenKind.ELSE,
        TokenKind.FALSE,
        TokenKind.FI,
        TokenKind.IF,
        TokenKind.IN,
        TokenKind.INHERITS,
        TokenKind.ISVOID,
        TokenKind.LET,
        TokenKind.LOOP,
        TokenKind.POOL,
        TokenKind.THEN,
        TokenKind.WHILE,
        TokenKind.CASE,
        TokenKind.ESAC,
        TokenKind.NEW,
        TokenKind.OF,
        TokenKind.NOT,
        TokenKind.TRUE,
    )
})


def lookup_keyword(text: str) -> Optional[TokenKind]:
    """Return the keyword kind matching text case-insensitively, or None."""
    return KEYWORDS.get(text.lower())


# =============================================================================
# Integer Validation
# =============================================================================

def is_int32(text: str) -> bool:
    """
    Return True if text spells a positive 32-bit signed integer.

    The span must be non-empty, all digits, at most ten characters (with a
    first digit no bigger than 2 when exactly ten) and no bigger than
    INT32_MAX. Leading zeros are allowed.
    """
    if not text or len(text) > INT32_MAX_DIGITS:
        return False

    if not all(is_digit(char) for char in text):
        return False

    if len(text) == INT32_MAX_DIGITS and text[0] > "2":
        return False

    return int(text) <= INT32_MAX


# =============================================================================
# Span Classification
# =============================================================================

def classify_name(text: str, line: int, location: SourceLocation) -> Token:
    """
    Classify a name span into an integer, keyword, type or identifier token.

    Args:
        text: The extracted span (starts with a name character)
        line: Line number recorded for the token
        location: Cursor location used in diagnostics

    Raises:
        WrongInteger32FormatError: Digit-initial span that is not an int32
        UppercaseBooleanKeywordError: Keyword spelled with a capital initial
    """
    if is_digit(text[0]):
        if not is_int32(text):
            raise WrongInteger32FormatError(text, INT32_MAX, location)
        return Token(TokenKind.INTEGER, line, text)

    keyword = lookup_keyword(text)
    if keyword is not None:
        if is_upper(text[0]):
            raise UppercaseBooleanKeywordError(keyword.value, location)
        return Token(keyword, line)

    if is_upper(text[0]):
        return Token(TokenKind.TYPE, line, text)

    return Token(TokenKind.IDENTIFIER, line, text)
