"""Character class predicates shared by the scanners (ASCII only)."""

import string

WHITESPACE = frozenset(" \t\n\r\f\v")

NAME_CHARS = frozenset(string.ascii_letters + string.digits + "_")

DIGITS = frozenset(string.digits)

UPPERCASE = frozenset(string.ascii_uppercase)


def is_whitespace(char: str) -> bool:
    """Space, tab, newline, carriage return, form feed or vertical tab."""
    return char in WHITESPACE


def is_name_char(char: str) -> bool:
    """ASCII letter, digit or underscore."""
    return char in NAME_CHARS


def is_digit(char: str) -> bool:
    return char in DIGITS


def is_upper(char: str) -> bool:
    return char in UPPERCASE
