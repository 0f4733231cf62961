"""
Paramline Command Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from argparse import ArgumentParser, RawDescriptionHelpFormatter
from typing import Sequence

from rich.markup import escape

from paramline.config import LOG_LEVELS, OUTPUT_FORMATS, Settings, load_settings
from paramline.console import console
from paramline.exceptions import ConfigError, ParamlineError
from paramline.logger import logger
from paramline.parameters import ParseResult
from paramline.parser import parse
from paramline.render import build_table, build_tree, dump_json, dump_toml, dump_yaml
from paramline.utils import LOG_MODES, setup_logging
from paramline.version import __version__

ARGUMENT_SEPARATOR = "--"


def get_root_parser(prog: str | None = "paramline") -> ArgumentParser:
    parser = ArgumentParser(
        prog=prog,
        description="Parse a command line into typed positional and named parameters.",
        epilog=(
            "examples:\n"
            "  paramline -- -abc --name \"hello world\" /level 3 input.txt\n"
            "  paramline --format json --line '--tags [\"a\", \"b\"] /debug'\n"
        ),
        formatter_class=RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=OUTPUT_FORMATS,
        help="Output format (default: tree, or the settings file value).",
    )
    parser.add_argument(
        "--line",
        help="Parse this raw command-line string instead of the arguments after '--'.",
    )
    parser.add_argument("--config", help="Path to a YAML or TOML settings file.")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, help="Console log level."
    )
    parser.add_argument("--log-mode", choices=LOG_MODES, help="Console log format.")
    parser.add_argument("--log-file", help="Also write logs to this file.")
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def split_arguments(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Split argv into the tool's own options and the arguments after '--'."""
    argv = list(argv)
    if ARGUMENT_SEPARATOR in argv:
        index = argv.index(ARGUMENT_SEPARATOR)
        return argv[:index], argv[index + 1 :]
    return argv, []


def render_result(result: ParseResult, output_format: str) -> None:
    if output_format == "tree":
        console.print(build_tree(result))
    elif output_format == "table":
        console.print(build_table(result))
    elif output_format == "json":
        console.out(dump_json(result), highlight=False)
    elif output_format == "yaml":
        console.out(dump_yaml(result), highlight=False, end="")
    elif output_format == "toml":
        console.out(dump_toml(result), highlight=False, end="")
    else:
        raise ValueError(f"Invalid output format: {output_format}")


def main(argv: Sequence[str] | None = None) -> int:
    own_arguments, arguments = split_arguments(
        sys.argv[1:] if argv is None else argv
    )
    parser = get_root_parser()
    args = parser.parse_args(own_arguments)
    if args.line is not None and arguments:
        parser.error("--line cannot be combined with arguments after '--'")

    try:
        settings: Settings = load_settings(args.config).merged(
            output_format=args.output_format,
            log_level=args.log_level,
            log_mode=args.log_mode,
            log_file=args.log_file,
        )
    except ConfigError as error:
        console.print(f"[error]error:[/] {escape(str(error))}")
        return 1

    setup_logging(
        mode=settings.log_mode,
        console_log_level=settings.console_log_level,
        log_filename=settings.log_file,
    )

    source = args.line if args.line is not None else arguments
    try:
        result = parse(source)
    except ParamlineError as error:
        logger.debug("Parsing failed: %s", error)
        console.print(f"[error]error:[/] {escape(str(error))}")
        return 1

    render_result(result, settings.output_format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
