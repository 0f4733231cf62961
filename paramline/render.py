# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Converts parsed parameters into plain Python values, serialized text and
Rich renderables.

Functions:
- to_builtin: Convert a `Parameter` into `str`, `Decimal`/`int`/`float`, `bool`
  or `list`.
- result_to_dict: Convert a `ParseResult` into `{"positional": [...], "named": {...}}`.
- dump_json / dump_yaml / dump_toml: Serialize a `ParseResult`.
- format_parameter: Short display text for one parameter.
- build_tree / build_table: Rich views of a `ParseResult` for the console.

Serializers cannot carry `Decimal`, so they convert numbers with
`exact_numbers=False`: integral values become `int`, others `float`. A
fraction too large for a float is written as its exact decimal text.
"""
from __future__ import annotations

import json
import math
from decimal import Decimal
from typing import Any

import toml
import yaml
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from paramline.coercion import format_number
from paramline.parameters import (
    ArrayParameter,
    BooleanParameter,
    DefaultParameter,
    NumberParameter,
    Parameter,
    ParseResult,
    StringParameter,
)


def _number_to_native(value: Decimal) -> int | float | str:
    if value == value.to_integral_value():
        return int(value)
    native = float(value)
    if math.isinf(native):
        return format_number(value)
    return native


def to_builtin(parameter: Parameter, exact_numbers: bool = True) -> Any:
    """
    Convert a parameter into a plain Python value.

    Args:
        parameter (Parameter): The parameter to convert.
        exact_numbers (bool): Keep numbers as `Decimal` when True, otherwise
            convert them to `int` or `float` (or decimal text when a float
            would overflow).

    Returns:
        Any: `str`, `Decimal`, `int`, `float`, `bool` or `list`.

    Raises:
        TypeError: If `parameter` is not a parameter.
    """
    match parameter:
        case DefaultParameter(value=value) | StringParameter(value=value):
            return value
        case NumberParameter(value=value):
            return value if exact_numbers else _number_to_native(value)
        case BooleanParameter(value=value):
            return value
        case ArrayParameter(items=items):
            return [to_builtin(item, exact_numbers) for item in items]
        case _:
            raise TypeError(f"Not a parameter: {parameter!r}")


def result_to_dict(result: ParseResult, exact_numbers: bool = True) -> dict[str, Any]:
    """Convert a parse result into plain Python containers."""
    return {
        "positional": [to_builtin(item, exact_numbers) for item in result.positional],
        "named": {
            name: to_builtin(parameter, exact_numbers)
            for name, parameter in result.named.items()
        },
    }


def dump_json(result: ParseResult, indent: int | None = 2) -> str:
    return json.dumps(
        result_to_dict(result, exact_numbers=False), indent=indent, allow_nan=False
    )


def dump_yaml(result: ParseResult) -> str:
    return yaml.safe_dump(
        result_to_dict(result, exact_numbers=False),
        sort_keys=False,
        allow_unicode=True,
    )


def dump_toml(result: ParseResult) -> str:
    return toml.dumps(result_to_dict(result, exact_numbers=False))


def format_parameter(parameter: Parameter) -> str:
    """Return a short, markup-free display text for a parameter."""
    match parameter:
        case DefaultParameter(value=value) | StringParameter(value=value):
            return json.dumps(value, ensure_ascii=False)
        case NumberParameter(value=value):
            return format_number(value)
        case BooleanParameter(value=value):
            return "true" if value else "false"
        case ArrayParameter(items=items):
            return "[" + ", ".join(format_parameter(item) for item in items) + "]"
        case _:
            raise TypeError(f"Not a parameter: {parameter!r}")


def _add_branch(tree: Tree, label: str, parameter: Parameter) -> None:
    style = f"parameter.{parameter.kind}"
    if isinstance(parameter, ArrayParameter):
        branch = tree.add(
            f"{label}[{style}]array[/] [parameter.kind]({len(parameter)} items)[/]"
        )
        for index, item in enumerate(parameter):
            _add_branch(branch, f"[parameter.kind]{index}:[/] ", item)
        return
    tree.add(
        f"{label}[{style}]{escape(format_parameter(parameter))}[/] "
        f"[parameter.kind]({parameter.kind})[/]"
    )


def build_tree(result: ParseResult, title: str = "Parameters") -> Tree:
    """Build a Rich tree of positional and named parameters."""
    tree = Tree(f"[bold]{escape(title)}[/]")
    positional = tree.add("[parameter.name]positional[/]")
    for index, parameter in enumerate(result.positional):
        _add_branch(positional, f"[parameter.kind]{index}:[/] ", parameter)
    named = tree.add("[parameter.name]named[/]")
    for name, parameter in result.named.items():
        _add_branch(named, f"[parameter.name]{escape(name)}[/] = ", parameter)
    return tree


def build_table(result: ParseResult, title: str = "Parameters") -> Table:
    """Build a Rich table with one row per parameter."""
    table = Table(title=title, show_lines=False)
    table.add_column("Name", style="parameter.name")
    table.add_column("Kind", style="parameter.kind")
    table.add_column("Value")
    for index, parameter in enumerate(result.positional):
        table.add_row(
            f"#{index}", str(parameter.kind), escape(format_parameter(parameter))
        )
    for name, parameter in result.named.items():
        table.add_row(
            escape(name), str(parameter.kind), escape(format_parameter(parameter))
        )
    return table
