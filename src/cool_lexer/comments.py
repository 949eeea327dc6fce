"""
Comment Skipping
================

Two comment forms are recognised at the cursor's current character:

- Line comment: ``-- ...`` through the end of the line (or end of input)
- Block comment: ``(* ... *)``, closed by the first ``*)``; not nestable

An unterminated block comment silently runs to the end of input.
"""

from cool_lexer.cursor import EOF, SourceCursor


def skip_comment(cursor: SourceCursor) -> bool:
    """
    Consume a comment starting at cursor.current().

    Returns:
        True if a comment was consumed, False if the current character
        does not start one (nothing is consumed in that case)
    """
    char = cursor.current()

    if char == "-" and cursor.peek() == "-":
        _skip_line_comment(cursor)
        return True

    if char == "(" and cursor.peek() == "*":
        _skip_block_comment(cursor)
        return True

    return False


def _skip_line_comment(cursor: SourceCursor) -> None:
    """Consume up to and including the next newline."""
    char = cursor.advance()
    while char != "\n" and char != EOF:
        char = cursor.advance()


def _skip_block_comment(cursor: SourceCursor) -> None:
    """
    Consume up to and including the first ``*)``.

    The search starts at the opening ``(``, so the ``*`` of the opener
    can also close the comment: ``(*)`` is a complete comment.
    """
    char = cursor.current()
    while char != EOF:
        if char == "*" and cursor.peek() == ")":
            cursor.advance()  # consume )
            return
        char = cursor.advance()
