# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLineParser`, the entry point that turns a command
line into typed parameters.

A command line can be given in three shapes:

- a `CommandLine` syntax tree, resolved as is;
- a raw string, lexed with `tokenize`;
- a sequence of strings such as `sys.argv[1:]`, lexed with `tokenize_argv`.

Example Usage:
    result = parse('-abc --name "hello world" /level 3 input.txt')

    result.positional       # (DefaultParameter('input.txt'),)
    result["a"]             # BooleanParameter(True)
    result["name"]          # StringParameter('hello world')
    result["level"]         # NumberParameter(Decimal('3'))

Parsing is synchronous and keeps no state between calls, so a single parser
can serve any number of callers.
"""
from __future__ import annotations

from collections.abc import Sequence
from typing import Union

from paramline.grammar import build_syntax_tree
from paramline.lexer import Token, tokenize, tokenize_argv
from paramline.logger import logger
from paramline.parameters import ParseResult
from paramline.resolver import resolve
from paramline.syntax import CommandLine

CommandLineSource = Union[CommandLine, str, Sequence[str]]


class CommandLineParser:
    """
    Parses command lines into `ParseResult` objects.

    Supports:
    - UNIX flag clusters (`-abc`) and alias parameters (`-abc VALUE`).
    - UNIX long switches and parameters (`--name`, `--name VALUE`).
    - Windows switches and parameters (`/name`, `/name VALUE`).
    - Strings, quoted strings, decimal numbers, booleans and nested arrays.
    """

    def tokenize(self, source: str | Sequence[str]) -> list[Token]:
        """Lex a raw string or an argument vector."""
        if isinstance(source, str):
            return tokenize(source)
        if isinstance(source, Sequence) and all(
            isinstance(item, str) for item in source
        ):
            return tokenize_argv(source)
        raise TypeError(
            f"Expected a command-line string or a sequence of strings, "
            f"got {type(source).__name__}"
        )

    def parse_syntax_tree(self, source: str | Sequence[str]) -> CommandLine:
        """Build the syntax tree of a command line without resolving it."""
        return build_syntax_tree(self.tokenize(source))

    def parse(self, source: CommandLineSource) -> ParseResult:
        """
        Parse a command line into positional and named parameters.

        Args:
            source (CommandLine | str | Sequence[str]): A syntax tree, a raw
                command-line string or an argument vector.

        Returns:
            ParseResult: The typed parameters.

        Raises:
            CommandLineSyntaxError: If a string or argv cannot be parsed.
            InvalidNumberFormatError: If a number token is malformed.
            TypeError: If `source` is none of the supported shapes.
        """
        if isinstance(source, CommandLine):
            tree = source
        else:
            tree = self.parse_syntax_tree(source)
        logger.debug("Resolving command line with %d top-level nodes.", len(tree))
        return resolve(tree)

    def __repr__(self) -> str:
        return "CommandLineParser()"


default_parser = CommandLineParser()


def parse(source: CommandLineSource) -> ParseResult:
    """Parse a syntax tree, command-line string or argv with the default parser."""
    return default_parser.parse(source)


def parse_syntax_tree(source: str | Sequence[str]) -> CommandLine:
    """Build the syntax tree of a command-line string or argv."""
    return default_parser.parse_syntax_tree(source)
