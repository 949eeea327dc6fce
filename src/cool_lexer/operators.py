"""
Operator Recognition
====================

Maps the cursor's current character (plus at most one character of
lookahead) to an operator or delimiter kind.

| Text | Kind   | Text | Kind   | Text | Kind   |
|------|--------|------|--------|------|--------|
| (    | lparen | /    | divide | =>   | rarrow |
| )    | rparen | :    | colon  | =    | equals |
| *    | times  | ;    | semi   | @    | at     |
| +    | plus   | <-   | larrow | {    | lbrace |
| ,    | comma  | <=   | le     | }    | rbrace |
| -    | minus  | <    | lt     | ~    | tilde  |
| .    | dot    |      |        |      |        |
"""

from types import MappingProxyType
from typing import Mapping, Optional

from cool_lexer.cursor import SourceCursor
from cool_lexer.tokens import TokenKind


SINGLE_CHAR_OPERATORS: Mapping[str, TokenKind] = MappingProxyType({
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "*": TokenKind.TIMES,
    "+": TokenKind.PLUS,
    ",": TokenKind.COMMA,
    "-": TokenKind.MINUS,
    ".": TokenKind.DOT,
    "/": TokenKind.DIVIDE,
    ":": TokenKind.COLON,
    ";": TokenKind.SEMI,
    "@": TokenKind.AT,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "~": TokenKind.TILDE,
})


def scan_operator(cursor: SourceCursor) -> Optional[TokenKind]:
    """
    Recognize the operator starting at cursor.current().

    The second character of ``<-``, ``<=`` and ``=>`` is consumed when it
    matches; otherwise nothing beyond the current character is consumed.

    Returns:
        The operator kind, or None if the character starts no operator
    """
    char = cursor.current()

    if char == "<":
        following = cursor.peek()
        if following == "-":
            cursor.advance()
            return TokenKind.LARROW
        if following == "=":
            cursor.advance()
            return TokenKind.LE
        return TokenKind.LT

    if char == "=":
        if cursor.peek() == ">":
            cursor.advance()
            return TokenKind.RARROW
        return TokenKind.EQUALS

    return SINGLE_CHAR_OPERATORS.get(char)
