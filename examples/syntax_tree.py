"""Resolve a syntax tree built by hand, without the bundled lexer."""
from paramline import resolve
from paramline.console import console
from paramline.render import dump_json
from paramline.syntax import (
    CommandLine,
    array,
    boolean,
    default_parameter,
    number,
    quoted_string,
    string,
    unix_alias_parameter,
    unix_flagged_switch,
    windows_parameter,
)

tree = CommandLine(
    default_parameters=[default_parameter(quoted_string('"report.csv"'))],
    parameters=[
        unix_flagged_switch("-abc"),
        unix_alias_parameter("-io", string("shared")),
        windows_parameter("/limits", array([number("1.5"), array([boolean("true")])])),
    ],
)

console.out(dump_json(resolve(tree)), highlight=False)
