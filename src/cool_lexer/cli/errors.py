"""
Unified CLI Error Handling
==========================

Maps every failure kind 1:1 to a process exit code and prints the
diagnostic on stderr.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn, Optional

import click

from cool_lexer.errors import CoolLexerError


class ExitCode(IntEnum):
    """Exit codes of the coolex tool, one per failure kind."""
    SUCCESS = 0
    INCORRECT_USAGE = 1         # Missing or invalid arguments
    FILE_IO = 2                 # Source or output file cannot be used
    IDENTIFIER_NAME_TOO_LONG = 3
    STRING_LITERAL_TOO_LONG = 4
    WRONG_INTEGER32_FORMAT = 5
    UPPERCASE_BOOLEAN_KEYWORD = 6
    INVALID_CHARACTER = 7
    INVALID_STRING_CHARACTER = 8
    NON_ESCAPED_NEWLINE = 9
    INTERNAL_ERROR = 10  # Unexpected exception


def format_diagnostic(error: CoolLexerError, styled: bool = False) -> str:
    """
    Format a lexer error for the terminal.

    When styled, the ERROR tag is red and the HINT tag cyan.
    """
    text = str(error)
    if not styled:
        return text

    text = text.replace("ERROR:", click.style("ERROR:", fg="red"), 1)
    if error.hint:
        text = text.replace("HINT:", click.style("HINT:", fg="cyan"), 1)
    return text


def handle_cli_exception(
    error: Exception,
    verbose: bool = False,
    color: Optional[bool] = None,
) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Prints the diagnostic and exits with the code of the error kind.
    ``color=None`` styles the output only when stderr is a terminal.

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, CoolLexerError):
        click.echo(format_diagnostic(error, styled=color is not False), err=True, color=color)
        sys.exit(ExitCode(error.kind))

    elif isinstance(error, OSError):
        # Output file problems surface as plain OSError
        click.echo(f"ERROR: {error}", err=True)
        sys.exit(ExitCode.FILE_IO)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
