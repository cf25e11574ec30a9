import pytest

from tinyshell.errors import ShellExit
from tinyshell.exit_builtin import exit_builtin, parse_exit_code
from tinyshell.state import Shell


def test_missing_argument_gives_last_status():
    assert parse_exit_code(None, 17) == 17


@pytest.mark.parametrize("arg", ["0", "42", "255", "  7", "+9", "12 "])
def test_small_codes_pass_through(arg):
    assert parse_exit_code(arg, 0) == int(arg)


def test_codes_wrap_modulo_256():
    assert parse_exit_code("256", 3) == 0
    assert parse_exit_code("-1", 0) == 255


def test_result_always_in_byte_range():
    for arg in ["1000", "-1000", "9223372036854775807", "-9223372036854775808"]:
        assert 0 <= parse_exit_code(arg, 0) <= 255


def test_inner_spaces_keep_leading_number():
    assert parse_exit_code("12 34", 0) == 12


@pytest.mark.parametrize(
    "arg", ["", "   ", "abc", "-", "+", "1a", "--1", "9223372036854775808",
            "-9223372036854775809"]
)
def test_invalid_arguments_raise(arg):
    with pytest.raises(ValueError):
        parse_exit_code(arg, 0)


def test_exit_without_argument_uses_last_status():
    shell = Shell(last_exit_code=5)
    with pytest.raises(ShellExit) as info:
        exit_builtin(shell, ["exit"])
    assert info.value.status == 5


def test_exit_with_code():
    with pytest.raises(ShellExit) as info:
        exit_builtin(Shell(), ["exit", "42"])
    assert info.value.status == 42


def test_exit_non_numeric_reports_and_exits_2(capsys):
    with pytest.raises(ShellExit) as info:
        exit_builtin(Shell(), ["exit", "abc"])
    assert info.value.status == 2
    assert "exit: abc: numeric argument required" in capsys.readouterr().err


def test_exit_too_many_arguments_returns(capsys):
    status = exit_builtin(Shell(), ["exit", "1", "2"])
    assert status == 1
    assert "exit: too many arguments" in capsys.readouterr().err


def test_interactive_prints_exit(capsys):
    with pytest.raises(ShellExit):
        exit_builtin(Shell(interactive=True), ["exit"])
    assert capsys.readouterr().err.splitlines()[0] == "exit"


def test_pipeline_is_quiet(capsys):
    with pytest.raises(ShellExit):
        exit_builtin(Shell(interactive=True, in_pipeline=True), ["exit"])
    assert capsys.readouterr().err == ""