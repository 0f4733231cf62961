# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the command-line syntax tree consumed by the parameter resolver.

The tree uses a single node type, `SyntaxNode`, tagged with a `NodeKind`.
Every node keeps the raw text of the token it was built from:

- Default parameter nodes wrap one `STRING` or `QUOTED_STRING` node in `value`.
- Switch nodes (`UNIX_FLAGGED_SWITCH`, `UNIX_SWITCH`, `WINDOWS_SWITCH`) carry
  the identifier text including its marker, e.g. `-abc`, `--name`, `/flag`.
- Parameter nodes (`UNIX_PARAMETER`, `UNIX_ALIAS_PARAMETER`,
  `WINDOWS_PARAMETER`) carry the identifier text and bind a value node.
- Literal nodes (`BOOLEAN`, `NUMBER`, `STRING`, `QUOTED_STRING`) carry the
  token text verbatim, quotes included.
- `ARRAY` nodes hold their children in source order, including the
  `PUNCTUATION` nodes for `[`, `,` and `]`.

`CommandLine` is the root: the default parameter nodes and the parameter nodes
of one command line, each in source order.

The builder functions at the bottom of this module build well-formed nodes and
are what the grammar and the tests use.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class NodeKind(Enum):
    """Tag identifying the grammar rule a `SyntaxNode` was produced by."""

    DEFAULT_PARAMETER = "default_parameter"
    UNIX_FLAGGED_SWITCH = "unix_flagged_switch"
    UNIX_SWITCH = "unix_switch"
    WINDOWS_SWITCH = "windows_switch"
    UNIX_PARAMETER = "unix_parameter"
    UNIX_ALIAS_PARAMETER = "unix_alias_parameter"
    WINDOWS_PARAMETER = "windows_parameter"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    QUOTED_STRING = "quoted_string"
    ARRAY = "array"
    PUNCTUATION = "punctuation"

    def __str__(self) -> str:
        return self.value


SWITCH_KINDS = frozenset(
    {
        NodeKind.UNIX_FLAGGED_SWITCH,
        NodeKind.UNIX_SWITCH,
        NodeKind.WINDOWS_SWITCH,
    }
)

PARAMETER_KINDS = frozenset(
    {
        NodeKind.UNIX_PARAMETER,
        NodeKind.UNIX_ALIAS_PARAMETER,
        NodeKind.WINDOWS_PARAMETER,
    }
)

VALUE_KINDS = frozenset(
    {
        NodeKind.BOOLEAN,
        NodeKind.NUMBER,
        NodeKind.STRING,
        NodeKind.QUOTED_STRING,
        NodeKind.ARRAY,
    }
)


@dataclass(frozen=True)
class SyntaxNode:
    """
    A node of the command-line syntax tree.

    Attributes:
        kind (NodeKind): The grammar rule this node represents.
        text (str): Raw token text (identifier, literal or punctuation).
        value (SyntaxNode | None): The bound value of a parameter node, or the
            string node of a default parameter.
        children (tuple[SyntaxNode, ...]): Child nodes of an array, in order.
    """

    kind: NodeKind
    text: str = ""
    value: SyntaxNode | None = None
    children: tuple[SyntaxNode, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))


@dataclass(frozen=True)
class CommandLine:
    """
    Root of a syntax tree: default parameters and parameters, each in order.

    Raises:
        ValueError: If a node is in the wrong list for its kind.
    """

    default_parameters: tuple[SyntaxNode, ...] = ()
    parameters: tuple[SyntaxNode, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "default_parameters", tuple(self.default_parameters))
        object.__setattr__(self, "parameters", tuple(self.parameters))
        for node in self.default_parameters:
            if node.kind is not NodeKind.DEFAULT_PARAMETER:
                raise ValueError(f"Expected a default parameter node, got {node.kind}")
        for node in self.parameters:
            if node.kind not in SWITCH_KINDS | PARAMETER_KINDS:
                raise ValueError(
                    f"Expected a switch or parameter node, got {node.kind}"
                )

    def __len__(self) -> int:
        return len(self.default_parameters) + len(self.parameters)


def punctuation(text: str) -> SyntaxNode:
    return SyntaxNode(NodeKind.PUNCTUATION, text)


def boolean(text: str) -> SyntaxNode:
    return SyntaxNode(NodeKind.BOOLEAN, text)


def number(text: str) -> SyntaxNode:
    return SyntaxNode(NodeKind.NUMBER, text)


def string(text: str) -> SyntaxNode:
    return SyntaxNode(NodeKind.STRING, text)


def quoted_string(text: str) -> SyntaxNode:
    return SyntaxNode(NodeKind.QUOTED_STRING, text)


def array(items: Iterable[SyntaxNode]) -> SyntaxNode:
    """Build an array node, interleaving the bracket and comma punctuation."""
    children = [punctuation("[")]
    for index, item in enumerate(items):
        if index:
            children.append(punctuation(","))
        children.append(item)
    children.append(punctuation("]"))
    return SyntaxNode(NodeKind.ARRAY, children=tuple(children))


def default_parameter(node: SyntaxNode) -> SyntaxNode:
    """Wrap a `STRING` or `QUOTED_STRING` node as a positional argument."""
    if node.kind not in (NodeKind.STRING, NodeKind.QUOTED_STRING):
        raise ValueError(f"Default parameters hold strings, not {node.kind} nodes")
    return SyntaxNode(NodeKind.DEFAULT_PARAMETER, node.text, value=node)


def unix_flagged_switch(identifiers: str) -> SyntaxNode:
    return SyntaxNode(NodeKind.UNIX_FLAGGED_SWITCH, identifiers)


def unix_switch(identifier: str) -> SyntaxNode:
    return SyntaxNode(NodeKind.UNIX_SWITCH, identifier)


def windows_switch(identifier: str) -> SyntaxNode:
    return SyntaxNode(NodeKind.WINDOWS_SWITCH, identifier)


def _bind(kind: NodeKind, text: str, value: SyntaxNode) -> SyntaxNode:
    if value.kind not in VALUE_KINDS:
        raise ValueError(f"Parameters bind value nodes, not {value.kind} nodes")
    return SyntaxNode(kind, text, value=value)


def unix_parameter(identifier: str, value: SyntaxNode) -> SyntaxNode:
    return _bind(NodeKind.UNIX_PARAMETER, identifier, value)


def unix_alias_parameter(identifiers: str, value: SyntaxNode) -> SyntaxNode:
    return _bind(NodeKind.UNIX_ALIAS_PARAMETER, identifiers, value)


def windows_parameter(identifier: str, value: SyntaxNode) -> SyntaxNode:
    return _bind(NodeKind.WINDOWS_PARAMETER, identifier, value)
