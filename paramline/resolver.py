# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Resolves a command-line syntax tree into a `ParseResult`.

`resolve()` is a pure fold over a `CommandLine`: every call builds new
positional and named collections and returns them frozen in a `ParseResult`,
so nothing carries over between parses.

Naming rules per node kind:

- `-abc` (UNIX flagged switch): `a`, `b` and `c` are each set to `True`.
- `--name` (UNIX switch) and `/name` (Windows switch): `name` is set to `True`.
- `--name VALUE` and `/name VALUE`: `name` is set to the coerced value.
- `-abc VALUE` (UNIX alias parameter): the value is coerced once and the same
  parameter is set under `a`, `b` and `c`.

Identifiers are normalized by removing every occurrence of the style's marker
character (`-` or `/`), not just the leading one. When a name is assigned more
than once, in any style, the last assignment wins.

An `InvalidNumberFormatError` raised while coercing a value aborts the whole
resolve; no partial result is returned.
"""
from __future__ import annotations

from paramline.coercion import coerce_string, coerce_value
from paramline.logger import logger
from paramline.parameters import (
    BooleanParameter,
    DefaultParameter,
    Parameter,
    ParseResult,
)
from paramline.syntax import CommandLine, NodeKind, SyntaxNode

UNIX_MARKER = "-"
WINDOWS_MARKER = "/"


def normalize_identifier(text: str, marker: str) -> str:
    """Remove every occurrence of `marker` from an identifier."""
    return text.replace(marker, "")


def resolve_default_parameter(node: SyntaxNode) -> DefaultParameter:
    """Turn a default parameter node into a positional `DefaultParameter`."""
    if node.kind is not NodeKind.DEFAULT_PARAMETER:
        raise TypeError(f"Expected a default parameter node, got {node.kind}")
    if node.value is None:
        raise TypeError(f"Default parameter node '{node.text}' has no string node")
    return DefaultParameter(coerce_string(node.value).value)


def _coerce_bound_value(node: SyntaxNode) -> Parameter:
    if node.value is None:
        raise TypeError(f"{node.kind} node '{node.text}' has no value")
    parameter = coerce_value(node.value)
    if parameter is None:
        raise TypeError(f"{node.kind} node '{node.text}' is bound to punctuation")
    return parameter


def resolve_parameter(node: SyntaxNode) -> list[tuple[str, Parameter]]:
    """
    Return the `(name, parameter)` assignments produced by one parameter node.

    Args:
        node (SyntaxNode): A switch node or a switch with a bound value.

    Returns:
        list[tuple[str, Parameter]]: Assignments in the order they apply.

    Raises:
        InvalidNumberFormatError: If the bound value holds a malformed number.
        TypeError: If `node` is not a switch or parameter node.
    """
    match node.kind:
        case NodeKind.UNIX_FLAGGED_SWITCH:
            flags = normalize_identifier(node.text, UNIX_MARKER)
            return [(flag, BooleanParameter(True)) for flag in flags]
        case NodeKind.UNIX_SWITCH:
            name = normalize_identifier(node.text, UNIX_MARKER)
            return [(name, BooleanParameter(True))]
        case NodeKind.WINDOWS_SWITCH:
            name = normalize_identifier(node.text, WINDOWS_MARKER)
            return [(name, BooleanParameter(True))]
        case NodeKind.UNIX_PARAMETER:
            name = normalize_identifier(node.text, UNIX_MARKER)
            return [(name, _coerce_bound_value(node))]
        case NodeKind.UNIX_ALIAS_PARAMETER:
            parameter = _coerce_bound_value(node)
            flags = normalize_identifier(node.text, UNIX_MARKER)
            return [(flag, parameter) for flag in flags]
        case NodeKind.WINDOWS_PARAMETER:
            name = normalize_identifier(node.text, WINDOWS_MARKER)
            return [(name, _coerce_bound_value(node))]
        case _:
            raise TypeError(f"Expected a switch or parameter node, got {node.kind}")


def resolve(tree: CommandLine) -> ParseResult:
    """
    Resolve a syntax tree into positional and named parameters.

    Default parameters are resolved first, in order, then every parameter node
    in order, with later assignments to a name replacing earlier ones.

    Args:
        tree (CommandLine): The syntax tree to resolve.

    Returns:
        ParseResult: A new result owned by the caller.

    Raises:
        InvalidNumberFormatError: If any number token is malformed.
    """
    positional = [resolve_default_parameter(node) for node in tree.default_parameters]
    named: dict[str, Parameter] = {}
    for node in tree.parameters:
        for name, parameter in resolve_parameter(node):
            if name in named:
                logger.debug("Parameter '%s' given again, replacing it.", name)
            named[name] = parameter
    logger.debug(
        "Resolved %d positional and %d named parameters.", len(positional), len(named)
    )
    return ParseResult(positional=tuple(positional), named=named)
