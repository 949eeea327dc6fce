"""
COOL Lexer (Tokenizer)
======================

This module implements the driver loop that turns a SourceCursor into an
ordered stream of tokens.

Token Categories
----------------
- Keywords: class, if, then, else, fi, while, loop, pool, let, in, ...
- Identifiers: lowercase-initial names (``foo``, ``_tmp``)
- Type identifiers: uppercase-initial names (``Main``, ``IO``)
- Integers: positive 32-bit decimal literals
- Strings: "double quoted", backslash-newline continues a line
- Operators: ( ) * + , - . / : ; @ { } ~ < <- <= = =>

Comments
--------
- Single-line: -- comment
- Multi-line: (* comment *), not nestable

Dispatch
--------
Each iteration consumes one character and then:

1. end of input ends the pass
2. whitespace is skipped
3. a comment opener hands over to the comment skipper
4. ``"`` extracts a string literal
5. any other non-name character must be an operator
6. a name character extracts a span that is classified as integer,
   keyword, type or identifier

The line number is recorded once per token, when it is dispatched.
The first lexical error aborts the pass.

Example Usage
-------------
>>> from cool_lexer.lexer import tokenize_bytes
>>> for token in tokenize_bytes(b'class Main { x <- 42; };'):
...     print(token)
Token(class, line 1)
Token(type, 'Main', line 1)
Token(lbrace, line 1)
Token(identifier, 'x', line 1)
Token(larrow, line 1)
Token(integer, '42', line 1)
Token(semi, line 1)
Token(rbrace, line 1)
Token(semi, line 1)
"""

from pathlib import Path
from typing import Iterator, Optional, Union
import io
import logging

from cool_lexer.chars import is_name_char, is_whitespace
from cool_lexer.comments import skip_comment
from cool_lexer.config import LexerOptions
from cool_lexer.cursor import EOF, SourceCursor
from cool_lexer.errors import InvalidCharacterError
from cool_lexer.keywords import classify_name
from cool_lexer.literals import extract_general_name, extract_string, name_buffer, string_buffer
from cool_lexer.operators import scan_operator
from cool_lexer.tokens import Token, TokenKind

logger = logging.getLogger(__name__)


class Lexer:
    """
    Tokenizes COOL source read through a SourceCursor.

    Usage:
        with SourceCursor.open("hello.cl") as cursor:
            tokens = list(Lexer(cursor).tokenize())

    The lexer does not own the cursor; the caller keeps the underlying
    stream open until the token generator is exhausted.

    Attributes:
        cursor: The character source
        options: Buffer capacities and other settings
    """

    def __init__(self, cursor: SourceCursor, options: Optional[LexerOptions] = None):
        self.cursor = cursor
        self.options = options or LexerOptions()

        self._names = name_buffer(self.options.max_name_length)
        self._strings = string_buffer(self.options.max_string_length)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens until the end of input.

        Yields:
            Token objects in source order

        Raises:
            LexicalError: On the first lexical error
        """
        cursor = self.cursor
        count = 0
        logger.debug(f"Lexing {cursor.filename}")

        while True:
            char = cursor.advance()

            if char == EOF:
                break

            if is_whitespace(char):
                continue

            if skip_comment(cursor):
                continue

            line = cursor.line

            if char == '"':
                text = extract_string(cursor, self._strings)
                token = Token(TokenKind.STRING, line, text)

            elif not is_name_char(char):
                kind = scan_operator(cursor)
                if kind is None:
                    raise InvalidCharacterError(char, cursor.location)
                token = Token(kind, line)

            else:
                text = extract_general_name(cursor, self._names)
                token = classify_name(text, line, cursor.location)

            count += 1
            yield token

        logger.debug(f"Finished {cursor.filename}: {count} tokens, {cursor.line} lines")


# =============================================================================
# Convenience Functions
# =============================================================================

def tokenize_file(
    path: Union[str, Path],
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """
    Tokenize a source file.

    Raises:
        SourceFileError: If the file cannot be opened or read
        LexicalError: On the first lexical error
    """
    options = options or LexerOptions()
    with SourceCursor.open(path, options.window_size) as cursor:
        return list(Lexer(cursor, options).tokenize())


def tokenize_bytes(
    data: bytes,
    filename: str = "<input>",
    options: Optional[LexerOptions] = None,
) -> list[Token]:
    """Tokenize in-memory source bytes."""
    options = options or LexerOptions()
    cursor = SourceCursor(io.BytesIO(data), filename, options.window_size)
    return list(Lexer(cursor, options).tokenize())
