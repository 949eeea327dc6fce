# =============================================================================
# test_literals.py - String and Name Extraction Unit Tests
# =============================================================================
# Tests for extract_string (quote/escape/continuation rules, fatal
# characters, length limit) and extract_general_name (greedy name spans).
# =============================================================================

import io

import pytest

from cool_lexer.cursor import EOF, SourceCursor
from cool_lexer.errors import (
    IdentifierNameTooLongError,
    InvalidStringCharacterError,
    NonEscapedNewlineError,
    StringLiteralTooLongError,
)
from cool_lexer.literals import (
    ScanBuffer,
    extract_general_name,
    extract_string,
    name_buffer,
    string_buffer,
)


def cursor_at_start(data: bytes, window_size: int = 4096) -> SourceCursor:
    """Return a cursor whose current character is the first byte of data."""
    cursor = SourceCursor(io.BytesIO(data), "<test>", window_size)
    cursor.advance()
    return cursor


def string_of(data: bytes, capacity: int = 1024) -> str:
    """Extract the string literal at the start of data (including its quote)."""
    return extract_string(cursor_at_start(data), string_buffer(capacity))


def name_of(data: bytes, capacity: int = 1024) -> str:
    return extract_general_name(cursor_at_start(data), name_buffer(capacity))


# =============================================================================
# Scan Buffer
# =============================================================================

class TestScanBuffer:
    """Test the bounded buffer."""

    def test_accumulates_and_resets(self):
        buffer = name_buffer(4)
        location = cursor_at_start(b"x").location
        buffer.append("a", location)
        buffer.append("b", location)
        assert buffer.text == "ab"
        assert len(buffer) == 2
        buffer.reset()
        assert buffer.text == ""

    def test_overflow_raises_configured_error(self):
        buffer = ScanBuffer(1, StringLiteralTooLongError)
        location = cursor_at_start(b"x").location
        buffer.append("a", location)
        with pytest.raises(StringLiteralTooLongError) as exc_info:
            buffer.append("b", location)
        assert exc_info.value.max_length == 1
        assert buffer.text == "a"


# =============================================================================
# String Literals
# =============================================================================

class TestStringLiterals:
    """Test string literal extraction."""

    def test_simple_string(self):
        assert string_of(b'"abc"') == "abc"

    def test_empty_string(self):
        assert string_of(b'""') == ""

    def test_stops_at_closing_quote(self):
        cursor = cursor_at_start(b'"ab" cd')
        assert extract_string(cursor, string_buffer(1024)) == "ab"
        assert cursor.advance() == " "

    def test_escaped_quote_is_kept_verbatim(self):
        """The backslash is preserved and the quote does not terminate."""
        assert string_of(b'"a\\"b"') == 'a\\"b'

    def test_escape_sequences_are_not_decoded(self):
        assert string_of(b'"tab\\there\\n"') == "tab\\there\\n"

    def test_comment_markers_inside_string(self):
        assert string_of(b'"-- (* not a comment *)"') == "-- (* not a comment *)"

    def test_line_continuation(self):
        """Backslash-newline is dropped and scanning continues."""
        cursor = cursor_at_start(b'"ab\\\ncd"')
        assert extract_string(cursor, string_buffer(1024)) == "abcd"
        assert cursor.line == 2

    def test_multiple_continuations(self):
        assert string_of(b'"a\\\nb\\\nc"') == "abc"

    def test_continuation_across_window_boundary(self):
        cursor = cursor_at_start(b'"ab\\\ncd"', window_size=1)
        assert extract_string(cursor, string_buffer(1024)) == "abcd"

    def test_high_bytes_kept(self):
        assert string_of(b'"caf\xe9"') == "caf\xe9"


class TestStringEdgeCases:
    """Pin the behavior of backslashes right before the closing quote."""

    def test_trailing_backslash_escapes_the_quote(self):
        """"abc\\" keeps going past its last quote."""
        assert string_of(b'"abc\\" def"') == 'abc\\" def'

    def test_trailing_backslash_at_end_of_input(self):
        with pytest.raises(InvalidStringCharacterError):
            string_of(b'"abc\\"')

    def test_double_backslash_still_escapes(self):
        """Only the immediately preceding character is checked."""
        assert string_of(b'"a\\\\" b"') == 'a\\\\" b'


class TestStringErrors:
    """Test fatal string errors."""

    def test_unterminated_at_end_of_input(self):
        with pytest.raises(InvalidStringCharacterError, match="null character or EOF"):
            string_of(b'"abc')

    def test_nul_character(self):
        with pytest.raises(InvalidStringCharacterError):
            string_of(b'"a\x00b"')

    def test_raw_newline(self):
        with pytest.raises(NonEscapedNewlineError) as exc_info:
            string_of(b'"ab\ncd"')
        assert exc_info.value.location.line == 1
        assert exc_info.value.hint is not None

    def test_raw_newline_after_opening_quote(self):
        with pytest.raises(NonEscapedNewlineError):
            string_of(b'"\nab"')

    def test_second_newline_after_continuation(self):
        with pytest.raises(NonEscapedNewlineError):
            string_of(b'"a\\\n\nb"')

    def test_at_capacity(self):
        assert string_of(b'"abc"', capacity=3) == "abc"

    def test_over_capacity(self):
        with pytest.raises(StringLiteralTooLongError, match="max 3 chars"):
            string_of(b'"abcd"', capacity=3)

    def test_default_capacity(self):
        assert len(string_of(b'"' + b"x" * 1024 + b'"')) == 1024
        with pytest.raises(StringLiteralTooLongError):
            string_of(b'"' + b"x" * 1025 + b'"')

    def test_continuation_does_not_count_towards_length(self):
        assert string_of(b'"ab\\\nc"', capacity=3) == "abc"


# =============================================================================
# General Names
# =============================================================================

class TestGeneralNames:
    """Test name span extraction."""

    def test_stops_at_non_name_character(self):
        cursor = cursor_at_start(b"foo bar")
        assert extract_general_name(cursor, name_buffer(1024)) == "foo"
        assert cursor.advance() == " "

    def test_underscores_and_digits(self):
        cursor = cursor_at_start(b"a_1(x")
        assert extract_general_name(cursor, name_buffer(1024)) == "a_1"
        assert cursor.current() == "1"
        assert cursor.peek() == "("

    def test_single_character(self):
        assert name_of(b"x") == "x"

    def test_digit_span(self):
        assert name_of(b"123abc;") == "123abc"

    def test_across_window_boundaries(self):
        cursor = cursor_at_start(b"hello world", window_size=1)
        assert extract_general_name(cursor, name_buffer(1024)) == "hello"

    def test_non_ascii_ends_name(self):
        cursor = cursor_at_start(b"ab\xe9")
        assert extract_general_name(cursor, name_buffer(1024)) == "ab"
        assert cursor.advance() == "\xe9"

    def test_at_capacity(self):
        assert name_of(b"abc", capacity=3) == "abc"

    def test_over_capacity(self):
        with pytest.raises(IdentifierNameTooLongError, match="max 3 chars"):
            name_of(b"abcd", capacity=3)

    def test_default_capacity(self):
        assert len(name_of(b"n" * 1024)) == 1024
        with pytest.raises(IdentifierNameTooLongError):
            name_of(b"n" * 1025)

    def test_end_of_input(self):
        cursor = cursor_at_start(b"abc")
        extract_general_name(cursor, name_buffer(1024))
        assert cursor.advance() == EOF
