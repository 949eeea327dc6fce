"""
COOL Lexer Error Hierarchy
==========================

This module defines the exception hierarchy for the lexer. All exceptions
inherit from CoolLexerError, allowing callers to catch every lexer-related
error with a single except clause.

Exception Hierarchy
-------------------
CoolLexerError (base)
├── SourceFileError - source or output file cannot be opened/read/written
└── LexicalError (base for fatal scanning errors)
    ├── IdentifierNameTooLongError - name span exceeds the buffer capacity
    ├── StringLiteralTooLongError - string body exceeds the buffer capacity
    ├── WrongInteger32FormatError - digit span is not a positive int32
    ├── UppercaseBooleanKeywordError - keyword spelled with a capital initial
    ├── InvalidCharacterError - character that starts no token
    ├── InvalidStringCharacterError - NUL or end of input inside a string
    └── NonEscapedNewlineError - raw newline inside a string

Every lexical error is fatal: the first one aborts the pass. The CLI maps
each ErrorKind 1:1 to a process exit code.

Error Message Format
--------------------
    filename:line: ERROR: description
    HINT: suggestion for fixing (when available)
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


# =============================================================================
# Error Kinds
# =============================================================================

class ErrorKind(IntEnum):
    """
    Closed set of failure kinds.

    The numeric values are the process exit codes used by the coolex
    command-line tool.
    """
    INCORRECT_USAGE = 1
    FILE_IO = 2
    IDENTIFIER_NAME_TOO_LONG = 3
    STRING_LITERAL_TOO_LONG = 4
    WRONG_INTEGER32_FORMAT = 5
    UPPERCASE_BOOLEAN_KEYWORD = 6
    INVALID_CHARACTER = 7
    INVALID_STRING_CHARACTER = 8
    NON_ESCAPED_NEWLINE = 9


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in a source file for error reporting.

    Attributes:
        filename: Name of the source file (or "<input>" for in-memory input)
        line: Line number (1-indexed)
    """
    filename: str
    line: int

    def __str__(self) -> str:
        """Format as 'filename:line' for diagnostics."""
        return f"{self.filename}:{self.line}"


# =============================================================================
# Base Exceptions
# =============================================================================

class CoolLexerError(Exception):
    """
    Base exception for all lexer errors.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        kind: The ErrorKind, set by each concrete subclass
    """

    kind: ErrorKind

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the diagnostic with location prefix and optional hint.

            hello.cl:3: ERROR: invalid character $
        """
        if self.location is not None:
            parts = [f"{self.location}: ERROR: {self.message}"]
        else:
            parts = [f"ERROR: {self.message}"]

        if self.hint:
            parts.append(f"HINT: {self.hint}")

        return "\n".join(parts)


class SourceFileError(CoolLexerError):
    """
    A source or output file could not be opened, read or written.

    Attributes:
        path: The offending file path
    """

    kind = ErrorKind.FILE_IO

    def __init__(self, message: str, path: str):
        self.path = path
        super().__init__(message)


class LexicalError(CoolLexerError):
    """
    Base class for fatal errors raised while scanning source text.

    Lexical errors always carry a location: the source name and the line
    the cursor was on when the error was detected.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        hint: Optional[str] = None,
    ):
        super().__init__(message, location=location, hint=hint)


# =============================================================================
# Lexical Errors
# =============================================================================

class IdentifierNameTooLongError(LexicalError):
    """An identifier, type or keyword span exceeded the name buffer."""

    kind = ErrorKind.IDENTIFIER_NAME_TOO_LONG

    def __init__(self, max_length: int, location: SourceLocation):
        self.max_length = max_length
        super().__init__(
            f"identifier or keyword name too long (max {max_length} chars allowed)",
            location,
        )


class StringLiteralTooLongError(LexicalError):
    """A string literal body exceeded the string buffer."""

    kind = ErrorKind.STRING_LITERAL_TOO_LONG

    def __init__(self, max_length: int, location: SourceLocation):
        self.max_length = max_length
        super().__init__(
            f"literal string too long (max {max_length} chars allowed)",
            location,
        )


class WrongInteger32FormatError(LexicalError):
    """
    A digit-initial span is not a positive 32-bit signed integer.

    Raised for spans longer than ten characters, spans mixing digits and
    letters (``12abc``) and values above 2147483647.
    """

    kind = ErrorKind.WRONG_INTEGER32_FORMAT

    def __init__(self, text: str, max_value: int, location: SourceLocation):
        self.text = text
        super().__init__(
            f"{text} is not a positive 32-bit signed integer "
            f"(max value allowed {max_value})",
            location,
        )


class UppercaseBooleanKeywordError(LexicalError):
    """A keyword was spelled with a capital initial letter."""

    kind = ErrorKind.UPPERCASE_BOOLEAN_KEYWORD

    def __init__(self, keyword: str, location: SourceLocation):
        self.keyword = keyword
        super().__init__(
            f"keyword {keyword} may not start with a capital letter",
            location,
        )


class InvalidCharacterError(LexicalError):
    """A character that cannot start any token."""

    kind = ErrorKind.INVALID_CHARACTER

    def __init__(self, char: str, location: SourceLocation):
        self.char = char
        super().__init__(f"invalid character {char}", location)


class InvalidStringCharacterError(LexicalError):
    """A NUL byte or end of input inside a string literal."""

    kind = ErrorKind.INVALID_STRING_CHARACTER

    def __init__(self, location: SourceLocation):
        super().__init__(
            "literal string may not contain null character or EOF",
            location,
        )


class NonEscapedNewlineError(LexicalError):
    """A raw newline inside a string literal without a preceding backslash."""

    kind = ErrorKind.NON_ESCAPED_NEWLINE

    def __init__(self, location: SourceLocation):
        super().__init__(
            "non-escaped newline character inside literal string.",
            location,
            hint='add \\ before newline or close this string with "',
        )
