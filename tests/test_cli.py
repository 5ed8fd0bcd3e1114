"""Tests for the kvbind inspection CLI."""

import pytest
from kvbind.cli.main import main


@pytest.fixture
def conf(tmp_path):
    path = tmp_path / "app.conf"
    path.write_text("# app\nname=piyo\nage=28\nbroken line\n=nameless\n", encoding="utf-8")
    return path


def test_get_prints_value(conf, capsys):
    assert main(["get", str(conf), "age", "--type", "int"]) == 0
    assert capsys.readouterr().out == "28\n"


def test_get_uses_defaults(conf, capsys):
    assert main(["get", str(conf), "debug", "--type", "bool", "-d", "debug=T"]) == 0
    assert capsys.readouterr().out == "true\n"


def test_get_malformed_number(conf, capsys):
    assert main(["get", str(conf), "name", "--type", "int"]) == 1
    assert "not a valid integer" in capsys.readouterr().out


def test_get_missing_name(conf, capsys):
    assert main(["get", str(conf), "missing"]) == 1
    assert "not found" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main(["show", str(tmp_path / "nope.conf")]) == 2
    assert "cannot read" in capsys.readouterr().out


def test_show_kv_format(conf, capsys):
    assert main(["show", str(conf), "--format", "kv", "-d", "port=80"]) == 0
    assert capsys.readouterr().out == "name=piyo\nage=28\nport=80\n"


def test_show_table(conf, capsys):
    assert main(["show", str(conf), "-d", "port=80"]) == 0
    out = capsys.readouterr().out
    assert "piyo" in out
    assert "default" in out


def test_show_rejects_bad_default(conf, capsys):
    assert main(["show", str(conf), "-d", "novalue"]) == 1
    assert "invalid default" in capsys.readouterr().out


def test_lint_reports_malformed_lines(conf, capsys):
    assert main(["lint", str(conf)]) == 1
    out = capsys.readouterr().out
    assert "broken line" in out
    assert "=nameless" in out


def test_lint_clean_file(tmp_path, capsys):
    path = tmp_path / "ok.conf"
    path.write_text("a=1\n# c\n\n", encoding="utf-8")
    assert main(["lint", str(path)]) == 0
    assert "no malformed lines" in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "usage" in capsys.readouterr().out.lower()
