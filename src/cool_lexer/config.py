"""
Lexer Configuration
===================

Tunable parameters for a lexing pass. Configuration can come from:
- Default values (defined here)
- Environment variables (``LexerOptions.from_env``)
- Command-line options (the coolex CLI)

The window size only affects performance; the two maximum lengths are
part of the language contract and exceeding them is a fatal error.
"""

from dataclasses import dataclass
import os


DEFAULT_WINDOW_SIZE = 4096
DEFAULT_MAX_NAME_LENGTH = 1024
DEFAULT_MAX_STRING_LENGTH = 1024
DEFAULT_OUTPUT_SUFFIX = "-lex"


@dataclass
class LexerOptions:
    """
    Lexer configuration options.

    Attributes:
        window_size: Bytes read from the source per refill
        max_name_length: Capacity of the identifier/keyword/integer buffer
        max_string_length: Capacity of the string literal buffer
        output_suffix: Appended to the input path to form the default
                       output path (hello.cl -> hello.cl-lex)
    """
    window_size: int = DEFAULT_WINDOW_SIZE
    max_name_length: int = DEFAULT_MAX_NAME_LENGTH
    max_string_length: int = DEFAULT_MAX_STRING_LENGTH
    output_suffix: str = DEFAULT_OUTPUT_SUFFIX

    def __post_init__(self):
        for name in ("window_size", "max_name_length", "max_string_length"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_env(cls) -> "LexerOptions":
        """
        Create LexerOptions from environment variables.

        Environment variables (all optional):
            COOLEX_WINDOW_SIZE: Read window size in bytes
            COOLEX_MAX_NAME_LENGTH: Maximum identifier length
            COOLEX_MAX_STRING_LENGTH: Maximum string literal length
            COOLEX_OUTPUT_SUFFIX: Default output file suffix

        Returns:
            LexerOptions with values from environment variables
        """
        options = cls()

        for env_name, attr in (
            ("COOLEX_WINDOW_SIZE", "window_size"),
            ("COOLEX_MAX_NAME_LENGTH", "max_name_length"),
            ("COOLEX_MAX_STRING_LENGTH", "max_string_length"),
        ):
            if value := os.environ.get(env_name):
                try:
                    number = int(value)
                except ValueError:
                    continue  # Ignore invalid values
                if number > 0:
                    setattr(options, attr, number)

        if suffix := os.environ.get("COOLEX_OUTPUT_SUFFIX"):
            options.output_suffix = suffix

        return options
