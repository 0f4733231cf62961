# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Paramline.

Exception Hierarchy:
- ParamlineError
    ├── InvalidNumberFormatError
    ├── CommandLineSyntaxError
    └── ConfigError

`InvalidNumberFormatError` is the only error raised while resolving a syntax
tree into parameters. `CommandLineSyntaxError` is raised by the lexer and the
grammar when a raw command line cannot be turned into a syntax tree, and
`ConfigError` by the settings loader of the command-line tool.
"""


class ParamlineError(Exception):
    """Base exception for all Paramline errors."""


class InvalidNumberFormatError(ParamlineError, ValueError):
    """Exception raised when a numeric token is not in the invariant number format."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Invalid number format: '{token}'")


class CommandLineSyntaxError(ParamlineError):
    """Exception raised when a command line cannot be turned into a syntax tree."""

    def __init__(self, message: str, position: int | None = None) -> None:
        self.position = position
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)


class ConfigError(ParamlineError):
    """Exception raised when a settings file cannot be read or validated."""
