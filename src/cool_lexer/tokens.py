"""
Token Definitions
=================

TokenKind is the closed set of token kinds. Each member's value is the
kind name written to the token stream, so ``TokenKind.LARROW.value`` is
``"larrow"`` and ``TokenKind.INHERITS.value`` is ``"inherits"``.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Token kinds of the COOL language."""

    # === Operators and Delimiters ===
    LPAREN = "lparen"       # (
    RPAREN = "rparen"       # )
    TIMES = "times"         # *
    PLUS = "plus"           # +
    COMMA = "comma"         # ,
    MINUS = "minus"         # -
    DOT = "dot"             # .
    DIVIDE = "divide"       # /
    COLON = "colon"         # :
    SEMI = "semi"           # ;
    LARROW = "larrow"       # <-
    LE = "le"               # <=
    LT = "lt"               # <
    RARROW = "rarrow"       # =>
    EQUALS = "equals"       # =
    AT = "at"               # @
    LBRACE = "lbrace"       # {
    RBRACE = "rbrace"       # }
    TILDE = "tilde"         # ~

    # === Literals and Names ===
    STRING = "string"
    INTEGER = "integer"
    IDENTIFIER = "identifier"
    TYPE = "type"

    # === Keywords ===
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FI = "fi"
    IF = "if"
    IN = "in"
    INHERITS = "inherits"
    ISVOID = "isvoid"
    LET = "let"
    LOOP = "loop"
    POOL = "pool"
    THEN = "then"
    WHILE = "while"
    CASE = "case"
    ESAC = "esac"
    NEW = "new"
    OF = "of"
    NOT = "not"
    TRUE = "true"


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexical unit.

    Attributes:
        kind: The TokenKind classification
        line: Line number where the token starts (1-indexed)
        lexeme: Source text for strings, integers, identifiers and types;
                None for operators and keywords
    """
    kind: TokenKind
    line: int
    lexeme: Optional[str] = None

    def __repr__(self) -> str:
        if self.lexeme is not None:
            return f"Token({self.kind.value}, {self.lexeme!r}, line {self.line})"
        return f"Token({self.kind.value}, line {self.line})"
