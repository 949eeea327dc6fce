"""
coolex - COOL Lexer Command-Line Interface
==========================================

This module implements the command-line interface for the COOL lexer.
It reads one source file and writes its token stream in the record
format expected by the parser stage.

Usage Examples
--------------
Basic lexing (writes hello.cl-lex):
    $ coolex hello.cl

With output file:
    $ coolex hello.cl -o hello.tokens

To standard output:
    $ coolex hello.cl -o -

Verbose mode:
    $ coolex -v hello.cl

Exit Codes
----------
0 success, 1 incorrect usage, 2 file I/O error, 3-9 one per lexical
error kind, 10 internal error.
"""

from pathlib import Path
from typing import Optional
import logging

import click

from cool_lexer import __version__
from cool_lexer.cli.errors import ExitCode, handle_cli_exception
from cool_lexer.config import LexerOptions
from cool_lexer.cursor import SourceCursor
from cool_lexer.lexer import Lexer
from cool_lexer.output import TokenWriter, default_output_path


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


class LexerCommand(click.Command):
    """Click command whose usage errors exit with INCORRECT_USAGE."""

    def make_context(self, info_name, args, parent=None, **extra):
        try:
            return super().make_context(info_name, args, parent=parent, **extra)
        except click.UsageError as e:
            e.exit_code = ExitCode.INCORRECT_USAGE
            raise


# =============================================================================
# CLI Definition
# =============================================================================

@click.command(cls=LexerCommand)
@click.argument(
    "input_file",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    help="Output token file (default: INPUT_FILE-lex, '-' for stdout)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.option(
    "--color/--no-color",
    default=None,
    help="Force or disable colored diagnostics (default: auto)",
)
@click.version_option(version=__version__, prog_name="coolex")
def main(
    input_file: Path,
    output: Optional[Path],
    verbose: bool,
    color: Optional[bool],
) -> None:
    """
    Tokenize a COOL source file.

    INPUT_FILE is the COOL source file (.cl) to tokenize.

    Each token is written as its line number, its kind and, for strings,
    integers, identifiers and types, its text, one item per line.

    \b
    Examples:
        coolex hello.cl              # Outputs hello.cl-lex
        coolex hello.cl -o out.lex   # Specify output file
        coolex hello.cl -o -         # Print tokens
    """
    setup_logging(verbose)
    options = LexerOptions.from_env()

    if output is None:
        output = default_output_path(input_file, options.output_suffix)
    to_stdout = str(output) == "-"

    if verbose:
        click.echo(f"Lexing {input_file}...", err=to_stdout)

    try:
        with SourceCursor.open(input_file, options.window_size) as cursor:
            tokens = Lexer(cursor, options).tokenize()

            if to_stdout:
                writer = TokenWriter(click.get_binary_stream("stdout"))
                count = writer.write_all(tokens)
            else:
                with TokenWriter.open(output) as writer:
                    count = writer.write_all(tokens)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose, color=color)

    if verbose:
        click.echo(f"Lexed {input_file} -> {output} ({count} tokens)", err=to_stdout)


if __name__ == "__main__":
    main()
