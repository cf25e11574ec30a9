from tinyshell.state import Shell
from tinyshell.unset import unset_builtin


def test_unset_removes_variables():
    shell = Shell(env={"A": "1", "B": "2", "C": "3"})
    assert unset_builtin(shell, ["unset", "A", "C"]) == 0
    assert shell.env == {"B": "2"}


def test_unset_missing_variable_is_fine():
    shell = Shell(env={"A": "1"})
    assert unset_builtin(shell, ["unset", "NOPE"]) == 0
    assert shell.env == {"A": "1"}


def test_unset_without_args():
    shell = Shell(env={"A": "1"})
    assert unset_builtin(shell, ["unset"]) == 0
    assert shell.env == {"A": "1"}


def test_unset_rejects_assignment(capsys):
    shell = Shell(env={"A": "1"})
    assert unset_builtin(shell, ["unset", "A=1"]) == 1
    assert "unset: `A=1': not a valid identifier" in capsys.readouterr().err
    assert shell.env == {"A": "1"}


def test_unset_continues_after_invalid(capsys):
    shell = Shell(env={"A": "1", "B": "2"})
    assert unset_builtin(shell, ["unset", "1X", "B"]) == 1
    assert shell.env == {"A": "1"}
    assert "`1X'" in capsys.readouterr().err