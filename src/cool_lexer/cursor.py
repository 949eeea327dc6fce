"""
Buffered Source Cursor
======================

SourceCursor reads a source file through a fixed-size window that is
refilled transparently, and exposes the three operations the scanners are
built on:

- ``advance()``: consume and return the next character
- ``peek()``: return the next character without consuming it
- ``current()``: return the most recently consumed character

Bytes are mapped 1:1 to one-character strings (latin-1), so every byte
value survives the trip to the token stream. End of input is the empty
string ``EOF``.

Example Usage
-------------
>>> from cool_lexer.cursor import SourceCursor
>>> with SourceCursor.open("hello.cl") as cursor:
...     while (char := cursor.advance()) != EOF:
...         ...
"""

from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Union
import logging

from cool_lexer.config import DEFAULT_WINDOW_SIZE
from cool_lexer.errors import SourceFileError, SourceLocation

logger = logging.getLogger(__name__)

# End-of-input marker returned by advance(), peek() and current()
EOF = ""


class SourceCursor:
    """
    Sequential reader with one character of lookahead and line counting.

    The cursor is single-pass: there is no rewind. The window is refilled
    exactly when the read position reaches its length; end of input is
    reported once a refill yields zero bytes.

    Attributes:
        filename: Name of the source (for diagnostics)
        line: Current line number (1-indexed), incremented on every
              consumed newline
    """

    def __init__(
        self,
        stream: BinaryIO,
        filename: str = "<input>",
        window_size: int = DEFAULT_WINDOW_SIZE,
    ):
        """
        Initialize the cursor over an open binary stream.

        Args:
            stream: Readable binary stream; the cursor does not close it
            filename: Source name used in diagnostics
            window_size: Bytes read per refill
        """
        if window_size <= 0:
            raise ValueError(f"window_size must be positive, got {window_size}")

        self.filename = filename
        self.line = 1

        self._stream = stream
        self._window_size = window_size
        self._window = b""
        self._position = 0
        self._length = 0
        self._current = EOF

    @classmethod
    @contextmanager
    def open(
        cls,
        path: Union[str, Path],
        window_size: int = DEFAULT_WINDOW_SIZE,
    ) -> Iterator["SourceCursor"]:
        """
        Open a source file and yield a cursor over it.

        The file is closed on every exit path, including errors raised
        by the caller while lexing.

        Raises:
            SourceFileError: If the file cannot be opened
        """
        try:
            stream = open(path, "rb")
        except OSError as e:
            raise SourceFileError(f"could not open file {path}", str(path)) from e

        with stream:
            logger.debug(f"Opened {path} (window {window_size} bytes)")
            yield cls(stream, str(path), window_size)

    # =========================================================================
    # Character Access
    # =========================================================================

    def advance(self) -> str:
        """
        Consume and return the next character.

        Returns EOF once the source is exhausted (and on every later call).
        """
        if self._position == self._length and not self._refill():
            self._current = EOF
            return EOF

        char = chr(self._window[self._position])
        self._position += 1

        if char == "\n":
            self.line += 1

        self._current = char
        return char

    def peek(self) -> str:
        """Return the character advance() would return next, without consuming it."""
        if self._position == self._length and not self._refill():
            return EOF

        return chr(self._window[self._position])

    def current(self) -> str:
        """Return the most recently consumed character, or EOF if there is none."""
        return self._current

    @property
    def location(self) -> SourceLocation:
        """Return the cursor position as a SourceLocation."""
        return SourceLocation(self.filename, self.line)

    # =========================================================================
    # Window Management
    # =========================================================================

    def _refill(self) -> bool:
        """Read the next window; return False at end of input."""
        try:
            self._window = self._stream.read(self._window_size)
        except OSError as e:
            raise SourceFileError(f"could not read file {self.filename}", self.filename) from e

        self._position = 0
        self._length = len(self._window)

        if self._length:
            logger.debug(f"{self.filename}: refilled window with {self._length} bytes")
        return self._length > 0
