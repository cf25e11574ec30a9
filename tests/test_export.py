import pytest

from tinyshell.export import (
    export_builtin,
    format_export,
    handle_export_arg,
    is_valid_identifier,
    print_export,
)
from tinyshell.state import Shell


@pytest.mark.parametrize("arg", ["A", "_x", "abc_1", "A=1", "B=", "C=a=b"])
def test_valid_identifiers(arg):
    assert is_valid_identifier(arg) is True


@pytest.mark.parametrize("arg", ["", "1A", "=x", "A-B", "A B=1", "-n"])
def test_invalid_identifiers(arg):
    assert is_valid_identifier(arg) is False


def test_format_export_sorts_and_quotes():
    lines = format_export(["B=2", "A=1", "C="])
    assert lines == ['declare -x A="1"', 'declare -x B="2"', "declare -x C"]


def test_format_export_skips_entries_without_equals():
    assert format_export(["NOEQ", "X=y"]) == ['declare -x X="y"']


def test_format_export_keeps_value_with_equals():
    assert format_export(["K=a=b"]) == ['declare -x K="a=b"']


def test_print_export_writes_lines(capsys):
    print_export(["Z=1", "Y=2"])
    assert capsys.readouterr().out == 'declare -x Y="2"\ndeclare -x Z="1"\n'


def test_handle_export_arg_sets_value():
    shell = Shell()
    assert handle_export_arg(shell, "FOO=bar=baz") == 0
    assert shell.get_env("FOO") == "bar=baz"


def test_handle_export_arg_without_value_sets_empty():
    shell = Shell(env={"FOO": "old"})
    assert handle_export_arg(shell, "FOO") == 0
    assert shell.get_env("FOO") == ""


def test_handle_export_arg_invalid(capsys):
    shell = Shell()
    assert handle_export_arg(shell, "1BAD=x") == 1
    assert "export: `1BAD=x': not a valid identifier" in capsys.readouterr().err
    assert shell.env == {}


def test_export_builtin_processes_all_args():
    shell = Shell()
    status = export_builtin(shell, ["export", "A=1", "9=no", "B=2"])
    assert status == 1
    assert shell.env == {"A": "1", "B": "2"}


def test_export_builtin_lists_without_args(capsys):
    shell = Shell(env={"HOME": "/home/u", "EMPTY": ""})
    assert export_builtin(shell, ["export"]) == 0
    assert capsys.readouterr().out == (
        'declare -x EMPTY\ndeclare -x HOME="/home/u"\n'
    )