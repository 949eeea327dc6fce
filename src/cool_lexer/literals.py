"""
Literal and Name Extraction
===========================

Extracts the raw text of string literals and name spans (identifiers,
type names, keywords and integers) from a SourceCursor into a bounded
ScanBuffer.

String Literal Rules
--------------------
- A ``"`` ends the string unless the previously consumed character was
  a backslash. Backslashes are kept verbatim; there is no escape decoding.
- A NUL byte or end of input inside a string is fatal.
- A backslash immediately followed by a newline is a line continuation:
  both characters are dropped and scanning continues on the next line.
- Any other newline inside a string is fatal.

Because only the previous character is checked, ``"abc\\"`` does not end
at its last quote: the backslash before it escapes it.
"""

from typing import Callable

from cool_lexer.chars import is_name_char
from cool_lexer.cursor import EOF, SourceCursor
from cool_lexer.errors import (
    IdentifierNameTooLongError,
    InvalidStringCharacterError,
    LexicalError,
    NonEscapedNewlineError,
    SourceLocation,
    StringLiteralTooLongError,
)


# =============================================================================
# Scan Buffer
# =============================================================================

class ScanBuffer:
    """
    Bounded buffer accumulating one span.

    Appending beyond the capacity raises the error produced by
    ``overflow_error``; the text is never silently truncated.

    Attributes:
        capacity: Maximum number of characters held
    """

    def __init__(
        self,
        capacity: int,
        overflow_error: Callable[[int, SourceLocation], LexicalError],
    ):
        self.capacity = capacity
        self._overflow_error = overflow_error
        self._chars: list[str] = []

    def reset(self) -> None:
        self._chars.clear()

    def append(self, char: str, location: SourceLocation) -> None:
        if len(self._chars) >= self.capacity:
            raise self._overflow_error(self.capacity, location)
        self._chars.append(char)

    @property
    def text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)


def name_buffer(capacity: int) -> ScanBuffer:
    """Create a buffer for identifier/keyword/integer spans."""
    return ScanBuffer(capacity, IdentifierNameTooLongError)


def string_buffer(capacity: int) -> ScanBuffer:
    """Create a buffer for string literal bodies."""
    return ScanBuffer(capacity, StringLiteralTooLongError)


# =============================================================================
# Extraction
# =============================================================================

def extract_string(cursor: SourceCursor, buffer: ScanBuffer) -> str:
    """
    Extract a string literal body; the opening quote was already consumed.

    Returns:
        The body text, without quotes and without continued newlines

    Raises:
        InvalidStringCharacterError: NUL or end of input before the end
        NonEscapedNewlineError: Raw newline inside the string
        StringLiteralTooLongError: Body exceeds the buffer capacity
    """
    buffer.reset()

    while True:
        previous = cursor.current()
        char = cursor.advance()

        if char == '"' and previous != "\\":
            break

        if char == "\0" or char == EOF:
            raise InvalidStringCharacterError(cursor.location)

        # Newline right after the opening quote or after a continuation
        if char == "\n":
            raise NonEscapedNewlineError(cursor.location)

        if cursor.peek() == "\n":
            if char != "\\":
                raise NonEscapedNewlineError(cursor.location)
            cursor.advance()  # consume the continued newline
            continue

        buffer.append(char, cursor.location)

    return buffer.text


def extract_general_name(cursor: SourceCursor, buffer: ScanBuffer) -> str:
    """
    Extract a name span starting at cursor.current().

    Consumes name characters while the lookahead is one.

    Raises:
        IdentifierNameTooLongError: Span exceeds the buffer capacity
    """
    buffer.reset()
    buffer.append(cursor.current(), cursor.location)

    while is_name_char(cursor.peek()):
        buffer.append(cursor.advance(), cursor.location)

    return buffer.text
