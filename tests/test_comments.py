# =============================================================================
# test_comments.py - Comment Skipper Unit Tests
# =============================================================================
# Tests for line (--) and block ((* *)) comments, including the permissive
# unterminated block comment and the non-nesting rule.
# =============================================================================

import io

from cool_lexer.comments import skip_comment
from cool_lexer.cursor import EOF, SourceCursor


def cursor_at_start(data: bytes) -> SourceCursor:
    """Return a cursor whose current character is the first byte of data."""
    cursor = SourceCursor(io.BytesIO(data), "<test>", window_size=2)
    cursor.advance()
    return cursor


class TestLineComments:
    """Test -- comments."""

    def test_consumes_through_newline(self):
        cursor = cursor_at_start(b"-- comment\nx")
        assert skip_comment(cursor) is True
        assert cursor.line == 2
        assert cursor.advance() == "x"

    def test_runs_to_end_of_input(self):
        cursor = cursor_at_start(b"-- no newline")
        assert skip_comment(cursor) is True
        assert cursor.advance() == EOF

    def test_empty_line_comment(self):
        cursor = cursor_at_start(b"--\ny")
        assert skip_comment(cursor) is True
        assert cursor.advance() == "y"

    def test_single_minus_is_not_a_comment(self):
        """Nothing is consumed when no comment starts."""
        cursor = cursor_at_start(b"-x")
        assert skip_comment(cursor) is False
        assert cursor.current() == "-"
        assert cursor.advance() == "x"


class TestBlockComments:
    """Test (* *) comments."""

    def test_simple_block(self):
        cursor = cursor_at_start(b"(* hello *)x")
        assert skip_comment(cursor) is True
        assert cursor.advance() == "x"

    def test_multiline_block_counts_lines(self):
        cursor = cursor_at_start(b"(* a\nb\n*)z")
        assert skip_comment(cursor) is True
        assert cursor.line == 3
        assert cursor.advance() == "z"

    def test_first_close_ends_comment(self):
        """Block comments do not nest."""
        cursor = cursor_at_start(b"(* (* inner *) rest *)")
        assert skip_comment(cursor) is True
        assert cursor.advance() == " "
        assert cursor.advance() == "r"

    def test_star_of_opener_can_close(self):
        """(*) is a complete comment."""
        cursor = cursor_at_start(b"(*)x")
        assert skip_comment(cursor) is True
        assert cursor.advance() == "x"

    def test_unterminated_block_runs_to_end(self):
        """An unterminated block comment is not an error."""
        cursor = cursor_at_start(b"(* abc")
        assert skip_comment(cursor) is True
        assert cursor.advance() == EOF

    def test_lparen_alone_is_not_a_comment(self):
        cursor = cursor_at_start(b"(x")
        assert skip_comment(cursor) is False
        assert cursor.advance() == "x"

    def test_other_characters(self):
        assert skip_comment(cursor_at_start(b"*)")) is False
        assert skip_comment(cursor_at_start(b"a")) is False
