"""
Paramline Command Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    CommandLineSyntaxError,
    ConfigError,
    InvalidNumberFormatError,
    ParamlineError,
)
from .parameters import (
    ArrayParameter,
    BooleanParameter,
    DefaultParameter,
    NumberParameter,
    Parameter,
    ParameterKind,
    ParseResult,
    StringParameter,
)
from .parser import CommandLineParser, parse, parse_syntax_tree
from .resolver import resolve
from .syntax import CommandLine, NodeKind, SyntaxNode
from .version import __version__

logger = logging.getLogger("paramline")


__all__ = [
    "__version__",
    "ArrayParameter",
    "BooleanParameter",
    "CommandLine",
    "CommandLineParser",
    "CommandLineSyntaxError",
    "ConfigError",
    "DefaultParameter",
    "InvalidNumberFormatError",
    "NodeKind",
    "NumberParameter",
    "Parameter",
    "ParameterKind",
    "ParamlineError",
    "ParseResult",
    "StringParameter",
    "SyntaxNode",
    "parse",
    "parse_syntax_tree",
    "resolve",
]
