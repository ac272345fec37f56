"""Tests for the textmask command-line interface."""

from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from textmask.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def test_format_arguments():
    result = runner.invoke(
        app,
        ["format", "01234567890123456789", "--pattern", "#####-####", "--prefix", "+55 "],
    )

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["+55 01234-5678"]


def test_format_reads_stdin_lines():
    result = runner.invoke(app, ["format", "-p", "##/##/####"], input="25121999\n0101\n")

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["25/12/1999", "01/01"]


def test_format_json_output():
    result = runner.invoke(app, ["format", "abcdeABCDE", "-p", "AAAAA.AAAAA", "--json"])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload == {"raw_input": "abcdeABCDE", "output": "ABCDE.ABCDE", "max_length": 11}


def test_format_uses_spec_file(tmp_path):
    spec_path = tmp_path / "cep.json"
    spec_path.write_text(json.dumps({"pattern": "#####-###"}), encoding="utf-8")

    result = runner.invoke(app, ["format", "01310100", "--spec", str(spec_path)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "01310-100"


def test_format_option_overrides_spec_file(tmp_path):
    spec_path = tmp_path / "cep.json"
    spec_path.write_text(json.dumps({"pattern": "#####-###", "prefix": "CEP "}), encoding="utf-8")

    result = runner.invoke(
        app, ["format", "01310100", "--spec", str(spec_path), "--prefix", ""]
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == "01310-100"


def test_format_invalid_spec_file_exits_with_error(tmp_path):
    spec_path = tmp_path / "bad.json"
    spec_path.write_text("not json", encoding="utf-8")

    result = runner.invoke(app, ["format", "123", "--spec", str(spec_path)])

    assert result.exit_code == 2


def test_format_falls_back_to_configured_defaults(monkeypatch):
    monkeypatch.setenv("TEXTMASK_DEFAULT_PATTERN", "###.###")

    result = runner.invoke(app, ["format", "123456"])

    assert result.exit_code == 0
    assert result.stdout.strip() == "123.456"


def test_describe_lists_slots():
    result = runner.invoke(app, ["describe", "-p", "#-A", "--prefix", "+1 "])

    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert "digit" in lines[0]
    assert "literal" in lines[1]
    assert "upper_letter" in lines[2]
    assert lines[-1] == "max length: 6"


def test_describe_empty_pattern():
    result = runner.invoke(app, ["describe"])

    assert result.exit_code == 0
    assert "passes through unchanged" in result.stdout


def test_format_pretty_json_output():
    result = runner.invoke(app, ["format", "123", "-p", "#-#", "--json", "--pretty"])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == [
        "{",
        '  "max_length": 3,',
        '  "output": "1-2",',
        '  "raw_input": "123"',
        "}",
    ]


def test_module_entry_point(monkeypatch, capsys):
    import runpy

    monkeypatch.setattr("sys.argv", ["textmask", "format", "1198765432", "-p", "(##) ####-####"])

    with pytest.raises(SystemExit) as excinfo:
        runpy.run_module("textmask", run_name="__main__")

    assert excinfo.value.code == 0
    assert capsys.readouterr().out.strip() == "(11) 9876-5432"
