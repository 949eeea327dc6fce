"""
Token Stream Output
===================

Writes tokens in the line-oriented record format consumed by the parser
stage. One record per token:

    <line>
    <kind>
    <lexeme>        (strings, integers, identifiers and types only)

Example for ``x <- "hi"``::

    1
    identifier
    x
    1
    larrow
    1
    string
    hi

Text is encoded as latin-1 so that each source byte is written back
unchanged.
"""

from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterable, Iterator, Union
import logging

from cool_lexer.config import DEFAULT_OUTPUT_SUFFIX
from cool_lexer.errors import SourceFileError
from cool_lexer.tokens import Token

logger = logging.getLogger(__name__)

ENCODING = "latin-1"


def format_token(token: Token) -> str:
    """Format one token record, including the trailing newline."""
    record = f"{token.line}\n{token.kind.value}\n"
    if token.lexeme is not None:
        record += f"{token.lexeme}\n"
    return record


def default_output_path(
    input_path: Union[str, Path],
    suffix: str = DEFAULT_OUTPUT_SUFFIX,
) -> Path:
    """Return the input path with the suffix appended (hello.cl -> hello.cl-lex)."""
    return Path(f"{input_path}{suffix}")


class TokenWriter:
    """
    Writes token records to a binary stream.

    Attributes:
        count: Number of tokens written so far
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.count = 0

    @classmethod
    @contextmanager
    def open(cls, path: Union[str, Path]) -> Iterator["TokenWriter"]:
        """
        Create (or truncate) an output file and yield a writer for it.

        Raises:
            SourceFileError: If the file cannot be created
        """
        try:
            stream = open(path, "wb")
        except OSError as e:
            raise SourceFileError(f"could not open output file {path}", str(path)) from e

        with stream:
            yield cls(stream)

    def write(self, token: Token) -> None:
        self._stream.write(format_token(token).encode(ENCODING))
        self.count += 1

    def write_all(self, tokens: Iterable[Token]) -> int:
        """Write every token; return the number written."""
        for token in tokens:
            self.write(token)
        logger.debug(f"Wrote {self.count} token records")
        return self.count
