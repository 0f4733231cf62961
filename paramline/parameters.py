# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the typed parameter model produced by parsing a command line.

A `Parameter` is one of five immutable value classes:

- `DefaultParameter`: a positional argument, carried as raw text.
- `StringParameter`: an unquoted or quoted string option value.
- `NumberParameter`: a `Decimal` parsed with the invariant number format.
- `BooleanParameter`: a `true`/`false` literal, or `True` for a bare switch.
- `ArrayParameter`: an ordered tuple of nested parameters of any kind.

Each class carries a `kind` tag (`ParameterKind`) so callers can branch on it
without `isinstance` chains, and every consumer in this package matches over
all five classes, raising `TypeError` for anything else.

`ParseResult` bundles the positional parameters and the named parameters of
one parse. It is frozen, hashable, and its `named` mapping is a read-only view.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, Mapping, Union


class ParameterKind(Enum):
    """Tag identifying which kind of value a `Parameter` holds."""

    DEFAULT = "default"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DefaultParameter:
    """A positional argument."""

    value: str
    kind: ClassVar[ParameterKind] = ParameterKind.DEFAULT


@dataclass(frozen=True)
class StringParameter:
    """A string value bound to an option."""

    value: str
    kind: ClassVar[ParameterKind] = ParameterKind.STRING


@dataclass(frozen=True)
class NumberParameter:
    """A decimal number bound to an option."""

    value: Decimal
    kind: ClassVar[ParameterKind] = ParameterKind.NUMBER


@dataclass(frozen=True)
class BooleanParameter:
    """A boolean bound to an option, `True` for bare switches."""

    value: bool
    kind: ClassVar[ParameterKind] = ParameterKind.BOOLEAN


@dataclass(frozen=True)
class ArrayParameter:
    """An ordered sequence of nested parameters."""

    items: tuple[Parameter, ...] = ()
    kind: ClassVar[ParameterKind] = ParameterKind.ARRAY

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        # An empty array is still a given value.
        return True

    def __iter__(self) -> Iterator[Parameter]:
        return iter(self.items)

    def __getitem__(self, index: int) -> Parameter:
        return self.items[index]


Parameter = Union[
    DefaultParameter,
    StringParameter,
    NumberParameter,
    BooleanParameter,
    ArrayParameter,
]

PARAMETER_TYPES: tuple[type, ...] = (
    DefaultParameter,
    StringParameter,
    NumberParameter,
    BooleanParameter,
    ArrayParameter,
)


def is_parameter(value: Any) -> bool:
    """Return True if `value` is an instance of one of the parameter classes."""
    return isinstance(value, PARAMETER_TYPES)


@dataclass(frozen=True)
class ParseResult:
    """
    The outcome of parsing one command line.

    Attributes:
        positional (tuple[DefaultParameter, ...]): Positional parameters in the
            order they appeared.
        named (Mapping[str, Parameter]): Option parameters keyed by name. When
            a name is assigned more than once the last assignment wins.
    """

    positional: tuple[DefaultParameter, ...] = ()
    named: Mapping[str, Parameter] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "positional", tuple(self.positional))
        object.__setattr__(self, "named", MappingProxyType(dict(self.named)))
        for name, parameter in self.named.items():
            if not is_parameter(parameter):
                raise TypeError(
                    f"Named value '{name}' is not a parameter: {parameter!r}"
                )

    def __hash__(self) -> int:
        return hash((self.positional, frozenset(self.named.items())))

    def __contains__(self, name: object) -> bool:
        return name in self.named

    def __getitem__(self, name: str) -> Parameter:
        return self.named[name]

    def get(self, name: str, default: Parameter | None = None) -> Parameter | None:
        """Return the named parameter `name`, or `default` if it was not given."""
        return self.named.get(name, default)

    @property
    def is_empty(self) -> bool:
        """True when the command line held no parameters at all."""
        return not self.positional and not self.named

    def __str__(self) -> str:
        return (
            f"ParseResult(positional={len(self.positional)}, "
            f"named={sorted(self.named)})"
        )
