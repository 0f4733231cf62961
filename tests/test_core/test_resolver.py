from decimal import Decimal

import pytest

from paramline.exceptions import InvalidNumberFormatError
from paramline.parameters import (
    ArrayParameter,
    BooleanParameter,
    DefaultParameter,
    NumberParameter,
    ParseResult,
    StringParameter,
)
from paramline.resolver import (
    normalize_identifier,
    resolve,
    resolve_default_parameter,
    resolve_parameter,
)
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
    unix_parameter,
    unix_switch,
    windows_parameter,
    windows_switch,
)


def test_resolve_empty_command_line():
    result = resolve(CommandLine())
    assert result == ParseResult()
    assert result.is_empty


def test_resolve_default_parameters_keep_order():
    tree = CommandLine(
        default_parameters=[
            default_parameter(string("first")),
            default_parameter(quoted_string('"second item"')),
            default_parameter(string("third")),
        ]
    )
    result = resolve(tree)
    assert result.positional == (
        DefaultParameter("first"),
        DefaultParameter("second item"),
        DefaultParameter("third"),
    )
    assert dict(result.named) == {}


def test_resolve_default_parameter_strips_all_quotes():
    node = default_parameter(quoted_string('"a"b"c"'))
    assert resolve_default_parameter(node) == DefaultParameter("abc")


def test_resolve_default_parameter_rejects_other_nodes():
    with pytest.raises(TypeError):
        resolve_default_parameter(unix_switch("--name"))


def test_flagged_switch_sets_every_flag():
    result = resolve(CommandLine(parameters=[unix_flagged_switch("-abc")]))
    assert dict(result.named) == {
        "a": BooleanParameter(True),
        "b": BooleanParameter(True),
        "c": BooleanParameter(True),
    }


def test_flagged_switch_with_repeated_flag():
    assert resolve_parameter(unix_flagged_switch("-vvv")) == [
        ("v", BooleanParameter(True)),
        ("v", BooleanParameter(True)),
        ("v", BooleanParameter(True)),
    ]
    result = resolve(CommandLine(parameters=[unix_flagged_switch("-vvv")]))
    assert dict(result.named) == {"v": BooleanParameter(True)}


@pytest.mark.parametrize(
    "node, name",
    [
        (unix_switch("--verbose"), "verbose"),
        (windows_switch("/verbose"), "verbose"),
        (windows_switch("/?"), "?"),
    ],
)
def test_bare_switches_are_true(node, name):
    assert resolve_parameter(node) == [(name, BooleanParameter(True))]


def test_unix_parameter():
    result = resolve(
        CommandLine(
            parameters=[unix_parameter("--name", quoted_string('"hello world"'))]
        )
    )
    assert dict(result.named) == {"name": StringParameter("hello world")}


def test_windows_parameter():
    result = resolve(CommandLine(parameters=[windows_parameter("/level", number("3"))]))
    assert dict(result.named) == {"level": NumberParameter(Decimal("3"))}


def test_alias_parameter_shares_one_value():
    node = unix_alias_parameter("-io", array([string("x"), number("1")]))
    result = resolve(CommandLine(parameters=[node]))
    assert set(result.named) == {"i", "o"}
    assert result["i"] == ArrayParameter(
        (StringParameter("x"), NumberParameter(Decimal("1")))
    )
    assert result["i"] is result["o"]


def test_identifier_normalization_removes_every_marker():
    assert normalize_identifier("--dry-run", "-") == "dryrun"
    assert normalize_identifier("/a/b", "/") == "ab"
    assert resolve_parameter(unix_switch("--dry-run")) == [
        ("dryrun", BooleanParameter(True))
    ]
    assert resolve_parameter(windows_switch("/out-dir")) == [
        ("out-dir", BooleanParameter(True))
    ]


def test_last_occurrence_wins_across_styles():
    tree = CommandLine(
        parameters=[
            unix_parameter("--level", number("1")),
            windows_parameter("/level", string("high")),
            unix_switch("--level"),
            windows_parameter("/level", number("5")),
        ]
    )
    result = resolve(tree)
    assert dict(result.named) == {"level": NumberParameter(Decimal("5"))}


def test_alias_then_flag_override():
    tree = CommandLine(
        parameters=[
            unix_alias_parameter("-x", number("5")),
            unix_alias_parameter("-x", boolean("true")),
        ]
    )
    assert dict(resolve(tree).named) == {"x": BooleanParameter(True)}


def test_cluster_overrides_only_its_own_flags():
    tree = CommandLine(
        parameters=[
            unix_alias_parameter("-ab", string("value")),
            unix_flagged_switch("-b"),
        ]
    )
    result = resolve(tree)
    assert result["a"] == StringParameter("value")
    assert result["b"] == BooleanParameter(True)


def test_resolve_mixed_command_line():
    tree = CommandLine(
        default_parameters=[default_parameter(string("positional1"))],
        parameters=[
            unix_flagged_switch("-abc"),
            unix_parameter("--name", quoted_string('"hello world"')),
            windows_switch("/flag"),
        ],
    )
    result = resolve(tree)
    assert result.positional == (DefaultParameter("positional1"),)
    assert dict(result.named) == {
        "a": BooleanParameter(True),
        "b": BooleanParameter(True),
        "c": BooleanParameter(True),
        "name": StringParameter("hello world"),
        "flag": BooleanParameter(True),
    }


def test_invalid_number_aborts_resolve():
    tree = CommandLine(
        default_parameters=[default_parameter(string("file"))],
        parameters=[
            unix_switch("--ok"),
            unix_parameter("--count", number("1,5")),
        ],
    )
    with pytest.raises(InvalidNumberFormatError) as excinfo:
        resolve(tree)
    assert excinfo.value.token == "1,5"
    assert "1,5" in str(excinfo.value)


def test_resolve_builds_a_new_result_each_call():
    tree = CommandLine(parameters=[unix_switch("--verbose")])
    first = resolve(tree)
    second = resolve(tree)
    assert first == second
    assert first is not second
    assert first.named is not second.named


def test_resolve_parameter_rejects_value_nodes():
    with pytest.raises(TypeError):
        resolve_parameter(string("value"))


def test_parameter_without_value_is_rejected():
    from paramline.syntax import NodeKind, SyntaxNode

    with pytest.raises(TypeError):
        resolve_parameter(SyntaxNode(NodeKind.UNIX_PARAMETER, "--name"))


def test_default_parameter_without_string_node_is_rejected():
    from paramline.syntax import NodeKind, SyntaxNode

    with pytest.raises(TypeError):
        resolve_default_parameter(SyntaxNode(NodeKind.DEFAULT_PARAMETER, '"x"'))
