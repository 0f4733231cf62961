# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion: turns literal syntax nodes into typed parameters.

Each function here maps one value node of the syntax tree to exactly one
`Parameter` and has no side effects:

- `coerce_boolean`: `true`/`false` keyword to `BooleanParameter`.
- `coerce_number`: invariant decimal text to `NumberParameter`.
- `coerce_string`: string or quoted string to `StringParameter`.
- `coerce_array`: array node to `ArrayParameter`, recursively.
- `coerce_value`: dispatches on the node kind; returns None for punctuation.

Numbers use a fixed, locale-independent format: an optional leading sign,
digits, and a period as the decimal point. There are no grouping separators,
exponents or special values. `format_number` writes numbers back in the same
format.

Quoted strings lose every double quote character they contain, not only the
delimiting pair, so `"say \\"hi\\""` coerces to `say \\hi\\`.
"""
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from paramline.exceptions import InvalidNumberFormatError
from paramline.parameters import (
    ArrayParameter,
    BooleanParameter,
    NumberParameter,
    Parameter,
    StringParameter,
)
from paramline.syntax import NodeKind, SyntaxNode

NUMBER_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
TRUE_KEYWORD = "true"
QUOTE = '"'


def parse_number(text: str) -> Decimal:
    """
    Parse `text` as an invariant decimal number.

    Args:
        text (str): Token text, e.g. `42`, `-3.5`, `.25`.

    Returns:
        Decimal: The exact value of the token.

    Raises:
        InvalidNumberFormatError: If `text` is not in the invariant format.
    """
    if not NUMBER_PATTERN.fullmatch(text):
        raise InvalidNumberFormatError(text)
    try:
        return Decimal(text)
    except InvalidOperation:
        raise InvalidNumberFormatError(text) from None


def format_number(value: Decimal) -> str:
    """Format a finite decimal in the invariant fixed-point format."""
    if not value.is_finite():
        raise ValueError(f"Cannot format non-finite number: {value}")
    return format(value, "f")


def strip_quotes(text: str) -> str:
    """Remove every double quote character from `text`."""
    return text.replace(QUOTE, "")


def coerce_boolean(node: SyntaxNode) -> BooleanParameter:
    return BooleanParameter(node.text.lower() == TRUE_KEYWORD)


def coerce_number(node: SyntaxNode) -> NumberParameter:
    return NumberParameter(parse_number(node.text))


def coerce_string(node: SyntaxNode) -> StringParameter:
    """Coerce an unquoted string verbatim, or a quoted string without its quotes."""
    if node.kind is NodeKind.QUOTED_STRING:
        return StringParameter(strip_quotes(node.text))
    return StringParameter(node.text)


def coerce_array(node: SyntaxNode) -> ArrayParameter:
    """Coerce every value child of an array node, skipping punctuation."""
    items = []
    for child in node.children:
        parameter = coerce_value(child)
        if parameter is not None:
            items.append(parameter)
    return ArrayParameter(tuple(items))


def coerce_value(node: SyntaxNode) -> Parameter | None:
    """
    Coerce a value node into a `Parameter`.

    Args:
        node (SyntaxNode): A literal, array or punctuation node.

    Returns:
        Parameter | None: The coerced parameter, or None for punctuation.

    Raises:
        InvalidNumberFormatError: If a number node holds malformed text.
        TypeError: If `node` is not a value node.
    """
    match node.kind:
        case NodeKind.BOOLEAN:
            return coerce_boolean(node)
        case NodeKind.NUMBER:
            return coerce_number(node)
        case NodeKind.STRING | NodeKind.QUOTED_STRING:
            return coerce_string(node)
        case NodeKind.ARRAY:
            return coerce_array(node)
        case NodeKind.PUNCTUATION:
            return None
        case _:
            raise TypeError(f"Cannot coerce a {node.kind} node to a value")
