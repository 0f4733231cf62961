# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Builds a `CommandLine` syntax tree from lexer tokens.

The grammar, in the notation of the lexer's token types:

    command_line := (switch value? | literal)*
    switch       := UNIX_FLAGGED_IDENTIFIERS | UNIX_IDENTIFIER | WINDOWS_IDENTIFIER
    value        := literal | array
    literal      := STRING | QUOTED_STRING | NUMBER | BOOLEAN
    array        := "[" (value ("," value)*)? "]"

A switch directly followed by a value binds it, so `-o out.txt` assigns
`out.txt` to `o` and `--level 3` assigns `3` to `level`. A literal that no
switch consumes is a default parameter; numbers and booleans in that position
keep their text. Arrays must be bound to a switch.
"""
from __future__ import annotations

from typing import Sequence

from paramline.exceptions import CommandLineSyntaxError
from paramline.lexer import LITERAL_TOKEN_TYPES, SWITCH_TOKEN_TYPES, Token, TokenType
from paramline.logger import logger
from paramline.syntax import CommandLine, NodeKind, SyntaxNode, punctuation

_LITERAL_NODE_KINDS = {
    TokenType.STRING: NodeKind.STRING,
    TokenType.QUOTED_STRING: NodeKind.QUOTED_STRING,
    TokenType.NUMBER: NodeKind.NUMBER,
    TokenType.BOOLEAN: NodeKind.BOOLEAN,
}

_SWITCH_NODE_KINDS = {
    TokenType.UNIX_FLAGGED_IDENTIFIERS: NodeKind.UNIX_FLAGGED_SWITCH,
    TokenType.UNIX_IDENTIFIER: NodeKind.UNIX_SWITCH,
    TokenType.WINDOWS_IDENTIFIER: NodeKind.WINDOWS_SWITCH,
}

_PARAMETER_NODE_KINDS = {
    TokenType.UNIX_FLAGGED_IDENTIFIERS: NodeKind.UNIX_ALIAS_PARAMETER,
    TokenType.UNIX_IDENTIFIER: NodeKind.UNIX_PARAMETER,
    TokenType.WINDOWS_IDENTIFIER: NodeKind.WINDOWS_PARAMETER,
}


class CommandLineGrammar:
    """Recursive-descent parser over one token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens: Sequence[Token] = tokens
        self.index: int = 0

    def _peek(self) -> Token | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def _starts_value(self) -> bool:
        token = self._peek()
        return token is not None and (
            token.type in LITERAL_TOKEN_TYPES or token.type is TokenType.LEFT_BRACKET
        )

    def _end_position(self) -> int:
        if not self.tokens:
            return 0
        last = self.tokens[-1]
        return last.position + len(last.text)

    def parse(self) -> CommandLine:
        default_parameters: list[SyntaxNode] = []
        parameters: list[SyntaxNode] = []
        while (token := self._peek()) is not None:
            if token.type in SWITCH_TOKEN_TYPES:
                parameters.append(self._parse_switch())
            elif token.type in LITERAL_TOKEN_TYPES:
                default_parameters.append(self._parse_default_parameter())
            elif token.type is TokenType.LEFT_BRACKET:
                raise CommandLineSyntaxError(
                    "Array values must follow a switch", token.position
                )
            else:
                raise CommandLineSyntaxError(
                    f"Unexpected '{token.text}'", token.position
                )
        logger.debug(
            "Built syntax tree with %d default parameters and %d parameters.",
            len(default_parameters),
            len(parameters),
        )
        return CommandLine(tuple(default_parameters), tuple(parameters))

    def _parse_default_parameter(self) -> SyntaxNode:
        token = self._advance()
        if token.type is TokenType.QUOTED_STRING:
            value = SyntaxNode(NodeKind.QUOTED_STRING, token.text)
        else:
            value = SyntaxNode(NodeKind.STRING, token.text)
        return SyntaxNode(NodeKind.DEFAULT_PARAMETER, token.text, value=value)

    def _parse_switch(self) -> SyntaxNode:
        token = self._advance()
        if self._starts_value():
            return SyntaxNode(
                _PARAMETER_NODE_KINDS[token.type], token.text, value=self._parse_value()
            )
        return SyntaxNode(_SWITCH_NODE_KINDS[token.type], token.text)

    def _parse_value(self) -> SyntaxNode:
        token = self._peek()
        if token is None:
            raise CommandLineSyntaxError("Expected a value", self._end_position())
        if token.type is TokenType.LEFT_BRACKET:
            return self._parse_array()
        if token.type in LITERAL_TOKEN_TYPES:
            self._advance()
            return SyntaxNode(_LITERAL_NODE_KINDS[token.type], token.text)
        raise CommandLineSyntaxError(
            f"Expected a value, found '{token.text}'", token.position
        )

    def _parse_array(self) -> SyntaxNode:
        opening = self._advance()
        children = [punctuation(opening.text)]
        token = self._peek()
        if token is not None and token.type is TokenType.RIGHT_BRACKET:
            children.append(punctuation(self._advance().text))
            return SyntaxNode(NodeKind.ARRAY, children=tuple(children))
        while True:
            children.append(self._parse_value())
            token = self._peek()
            if token is None:
                raise CommandLineSyntaxError(
                    "Unclosed array, expected ']'", opening.position
                )
            if token.type is TokenType.COMMA:
                children.append(punctuation(self._advance().text))
            elif token.type is TokenType.RIGHT_BRACKET:
                children.append(punctuation(self._advance().text))
                return SyntaxNode(NodeKind.ARRAY, children=tuple(children))
            else:
                raise CommandLineSyntaxError(
                    f"Expected ',' or ']' in array, found '{token.text}'",
                    token.position,
                )


def build_syntax_tree(tokens: Sequence[Token]) -> CommandLine:
    """
    Build a syntax tree from a token sequence.

    Args:
        tokens (Sequence[Token]): Output of `tokenize` or `tokenize_argv`.

    Returns:
        CommandLine: Default parameters and parameters in source order.

    Raises:
        CommandLineSyntaxError: If the tokens do not form a valid command line.
    """
    return CommandLineGrammar(tokens).parse()
