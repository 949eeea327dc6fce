"""
COOL Lexer - Lexical Analyzer for the COOL Teaching Language
============================================================

This package converts COOL source files (a small class-based teaching
language) into the token stream consumed by a downstream parser.

Main Components
---------------
- **cursor**: buffered source reader with one character of lookahead
- **comments**, **literals**, **operators**: scanners built on the cursor
- **keywords**: keyword table and integer validation
- **lexer**: the driver loop producing Token objects
- **output**: the line-oriented token record format

Quick Start
-----------
Tokenize a file:
    >>> from cool_lexer import tokenize_file
    >>> for token in tokenize_file("hello.cl"):
    ...     print(token.line, token.kind.value, token.lexeme)

Or use the command-line tool:
    $ coolex hello.cl              # writes hello.cl-lex
    $ coolex hello.cl -o -         # writes to stdout
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from cool_lexer.config import LexerOptions
from cool_lexer.cursor import EOF, SourceCursor
from cool_lexer.errors import (
    CoolLexerError,
    ErrorKind,
    SourceLocation,
    SourceFileError,
    LexicalError,
    IdentifierNameTooLongError,
    StringLiteralTooLongError,
    WrongInteger32FormatError,
    UppercaseBooleanKeywordError,
    InvalidCharacterError,
    InvalidStringCharacterError,
    NonEscapedNewlineError,
)
from cool_lexer.lexer import Lexer, tokenize_bytes, tokenize_file
from cool_lexer.output import TokenWriter, format_token
from cool_lexer.tokens import Token, TokenKind

__all__ = [
    "__version__",
    "LexerOptions",
    "EOF",
    "SourceCursor",
    "CoolLexerError",
    "ErrorKind",
    "SourceLocation",
    "SourceFileError",
    "LexicalError",
    "IdentifierNameTooLongError",
    "StringLiteralTooLongError",
    "WrongInteger32FormatError",
    "UppercaseBooleanKeywordError",
    "InvalidCharacterError",
    "InvalidStringCharacterError",
    "NonEscapedNewlineError",
    "Lexer",
    "tokenize_bytes",
    "tokenize_file",
    "TokenWriter",
    "format_token",
    "Token",
    "TokenKind",
]
