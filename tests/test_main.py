import json
from pathlib import Path

import pytest
import yaml

import paramline.__main__ as cli
from paramline.__main__ import get_root_parser, main, split_arguments


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    """Keep tests away from real settings files and from the root logger."""
    monkeypatch.setattr(Path, "home", lambda: tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("PARAMLINE_CONFIG", raising=False)
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: calls.append(kwargs))
    return calls


def test_split_arguments():
    assert split_arguments(["-f", "json", "--", "-abc", "--", "x"]) == (
        ["-f", "json"],
        ["-abc", "--", "x"],
    )
    assert split_arguments(["--line", "-x 1"]) == (["--line", "-x 1"], [])


def test_root_parser_options():
    args = get_root_parser().parse_args(["--format", "yaml", "--log-level", "debug"])
    assert args.output_format == "yaml"
    assert args.log_level == "DEBUG"
    assert args.line is None


def test_main_json_from_argv(capsys):
    exit_code = main(["--format", "json", "--", "-ab", "--level", "2.5", "file.txt"])
    assert exit_code == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {
        "positional": ["file.txt"],
        "named": {"a": True, "b": True, "level": 2.5},
    }


def test_main_yaml_from_line(capsys):
    exit_code = main(["-f", "yaml", "--line", 'input.txt /tags [1, "two"] --on'])
    assert exit_code == 0
    data = yaml.safe_load(capsys.readouterr().out)
    assert data == {
        "positional": ["input.txt"],
        "named": {"tags": [1, "two"], "on": True},
    }


def test_main_default_tree(capsys):
    assert main(["--", "--name", "value"]) == 0
    output = capsys.readouterr().out
    assert "named" in output
    assert "name" in output
    assert '"value"' in output


def test_main_table(capsys):
    assert main(["--format", "table", "--", "/x", "1"]) == 0
    assert "number" in capsys.readouterr().out


def test_main_toml(capsys):
    assert main(["--format", "toml", "--", "pos", "--n", "4"]) == 0
    output = capsys.readouterr().out
    assert 'positional = [ "pos",]' in output
    assert "n = 4" in output


def test_main_syntax_error(capsys):
    assert main(["--line=--list [1, 2"]) == 1
    assert "Unclosed array" in capsys.readouterr().out


def test_main_rejects_line_with_arguments(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--line", "abc", "--", "-y"])
    assert excinfo.value.code == 2


def test_main_uses_settings_file(tmp_path, capsys, isolated):
    (tmp_path / "paramline.yaml").write_text("output_format: json\nlog_level: info\n")
    assert main(["--", "--ok"]) == 0
    assert json.loads(capsys.readouterr().out)["named"] == {"ok": True}
    assert isolated[0]["console_log_level"] == 20


def test_main_options_override_settings_file(tmp_path, capsys):
    (tmp_path / "paramline.yaml").write_text("output_format: table\n")
    assert main(["--format", "json", "--", "a"]) == 0
    assert json.loads(capsys.readouterr().out)["positional"] == ["a"]


def test_main_invalid_settings_file(tmp_path, capsys):
    (tmp_path / "paramline.yaml").write_text("output_format: xml\n")
    assert main(["--", "a"]) == 1
    assert "Invalid settings" in capsys.readouterr().out


def test_main_undecodable_settings_file(tmp_path, capsys):
    (tmp_path / "paramline.yaml").write_bytes(b"output_format: \xff\xfe json\n")
    assert main(["--", "a"]) == 1
    assert "Could not read" in capsys.readouterr().out


def test_main_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "paramline" in capsys.readouterr().out
