"""
COOL Lexer Command-Line Interface
=================================

This package provides the ``coolex`` command-line tool, a Click-based
application that tokenizes a COOL source file and reports lexical
errors with distinct exit codes.
"""

__all__ = ["coolex"]
