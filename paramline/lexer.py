# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits command lines into classified tokens for the grammar.

Two entry points are provided:

- `tokenize(text)`: lexes a raw command-line string. Words are separated by
  whitespace; a double quote opens a span that runs to the next unescaped
  double quote and may contain whitespace. A word containing a quoted span is
  a `QUOTED_STRING`. A `[` at the start of a word opens an array, and inside an
  array `[`, `]` and `,` are tokens of their own.
- `tokenize_argv(argv)`: lexes an argument vector that a shell has already
  split and unquoted. Each item is one token, except items starting with `[`,
  which are lexed as array literals.

Word classification, in order:

- contains `"`              → `QUOTED_STRING`
- `[+-]digits[.digits]`     → `NUMBER`
- `true` / `false`          → `BOOLEAN` (any letter case)
- `--name`                  → `UNIX_IDENTIFIER`
- `-abc`                    → `UNIX_FLAGGED_IDENTIFIERS` (letters or `?`)
- `/name`                   → `WINDOWS_IDENTIFIER`
- anything else             → `STRING`
"""
from __future__ import annotations

import re
from dataclasses import dataclass, replace
from enum import Enum
from typing import Sequence

from paramline.coercion import NUMBER_PATTERN, QUOTE
from paramline.exceptions import CommandLineSyntaxError

BOOLEAN_PATTERN = re.compile(r"(?i:true|false)")
UNIX_IDENTIFIER_PATTERN = re.compile(r"--[A-Za-z_][\w-]*")
UNIX_FLAGGED_IDENTIFIERS_PATTERN = re.compile(r"-[A-Za-z?]+")
WINDOWS_IDENTIFIER_PATTERN = re.compile(r"/[A-Za-z_?][\w?-]*")

ESCAPE = "\\"
ARRAY_DELIMITERS = "[],"


class TokenType(Enum):
    """Lexical category of a `Token`."""

    STRING = "string"
    QUOTED_STRING = "quoted_string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    UNIX_FLAGGED_IDENTIFIERS = "unix_flagged_identifiers"
    UNIX_IDENTIFIER = "unix_identifier"
    WINDOWS_IDENTIFIER = "windows_identifier"
    LEFT_BRACKET = "left_bracket"
    RIGHT_BRACKET = "right_bracket"
    COMMA = "comma"

    def __str__(self) -> str:
        return self.value


SWITCH_TOKEN_TYPES = frozenset(
    {
        TokenType.UNIX_FLAGGED_IDENTIFIERS,
        TokenType.UNIX_IDENTIFIER,
        TokenType.WINDOWS_IDENTIFIER,
    }
)

LITERAL_TOKEN_TYPES = frozenset(
    {
        TokenType.STRING,
        TokenType.QUOTED_STRING,
        TokenType.NUMBER,
        TokenType.BOOLEAN,
    }
)


@dataclass(frozen=True)
class Token:
    """
    A classified piece of a command line.

    Attributes:
        type (TokenType): Lexical category.
        text (str): Raw text, quotes and markers included.
        position (int): Character offset for `tokenize`, argv index for
            `tokenize_argv`.
    """

    type: TokenType
    text: str
    position: int = 0


def classify(word: str) -> TokenType:
    """Return the token type of a single word."""
    if QUOTE in word:
        return TokenType.QUOTED_STRING
    if NUMBER_PATTERN.fullmatch(word):
        return TokenType.NUMBER
    if BOOLEAN_PATTERN.fullmatch(word):
        return TokenType.BOOLEAN
    if UNIX_IDENTIFIER_PATTERN.fullmatch(word):
        return TokenType.UNIX_IDENTIFIER
    if UNIX_FLAGGED_IDENTIFIERS_PATTERN.fullmatch(word):
        return TokenType.UNIX_FLAGGED_IDENTIFIERS
    if WINDOWS_IDENTIFIER_PATTERN.fullmatch(word):
        return TokenType.WINDOWS_IDENTIFIER
    return TokenType.STRING


def _find_closing_quote(text: str, start: int) -> int:
    """Return the index of the quote closing the span opened at `start`."""
    index = start + 1
    while index < len(text):
        char = text[index]
        if char == ESCAPE and index + 1 < len(text):
            index += 2
            continue
        if char == QUOTE:
            return index
        index += 1
    raise CommandLineSyntaxError("Unterminated quoted string", start)


def _read_word(text: str, start: int, in_array: bool) -> int:
    """Return the index just past the word starting at `start`."""
    index = start
    while index < len(text):
        char = text[index]
        if char.isspace():
            break
        if in_array and char in ARRAY_DELIMITERS:
            break
        if char == QUOTE:
            index = _find_closing_quote(text, index)
        index += 1
    return index


def tokenize(text: str) -> list[Token]:
    """
    Lex a raw command-line string.

    Args:
        text (str): The command line, e.g. `-abc --name "hello world" /flag`.

    Returns:
        list[Token]: Tokens in source order.

    Raises:
        CommandLineSyntaxError: If a quoted string is not terminated.
    """
    tokens: list[Token] = []
    depth = 0
    index = 0
    while index < len(text):
        char = text[index]
        if char.isspace():
            index += 1
            continue
        if char == "[":
            tokens.append(Token(TokenType.LEFT_BRACKET, char, index))
            depth += 1
            index += 1
            continue
        if depth and char == "]":
            tokens.append(Token(TokenType.RIGHT_BRACKET, char, index))
            depth -= 1
            index += 1
            continue
        if depth and char == ",":
            tokens.append(Token(TokenType.COMMA, char, index))
            index += 1
            continue
        end = _read_word(text, index, in_array=depth > 0)
        word = text[index:end]
        tokens.append(Token(classify(word), word, index))
        index = end
    return tokens


def tokenize_argv(argv: Sequence[str]) -> list[Token]:
    """
    Lex an argument vector, one token per item except for array literals.

    Args:
        argv (Sequence[str]): Arguments as received from the shell.

    Returns:
        list[Token]: Tokens in order; positions are argv indices.

    Raises:
        CommandLineSyntaxError: If an array literal holds an unterminated quote.
    """
    tokens: list[Token] = []
    for position, item in enumerate(argv):
        if item.startswith("["):
            tokens.extend(
                replace(token, position=position) for token in tokenize(item)
            )
        else:
            tokens.append(Token(classify(item), item, position))
    return tokens
