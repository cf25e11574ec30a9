"""The cd builtin."""

from __future__ import annotations

import errno
import os
from typing import Sequence

from tinyshell.errors import report_cmd_error
from tinyshell.state import Shell
from tinyshell.textutils import is_space

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def _update_working_dirs(shell: Shell, new_dir: str) -> None:
    shell.set_env("OLDPWD", shell.get_env("PWD"))
    shell.set_env("PWD", new_dir)
    if shell.old_working_dir:
        shell.old_working_dir = shell.working_dir
    if shell.working_dir:
        shell.working_dir = new_dir


def _change_dir(shell: Shell, path: str) -> bool:
    try:
        os.chdir(path)
    except OSError as err:
        code = err.errno or errno.ENOENT
        if code == errno.ESTALE:
            code = errno.ENOENT
        report_cmd_error("cd", path, os.strerror(code), code)
        return False
    try:
        new_dir = os.getcwd()
    except OSError as err:
        code = err.errno or errno.ENOENT
        report_cmd_error(
            "cd: error retriving current directory",
            "getcwd: cannot access parent directories",
            os.strerror(code),
            code,
        )
        new_dir = f"{shell.working_dir or ''}/{path}"
    _update_working_dirs(shell, new_dir)
    return True


def _status(ok: bool) -> int:
    return EXIT_SUCCESS if ok else EXIT_FAILURE


def cd_builtin(shell: Shell, args: Sequence[str]) -> int:
    """Change directory to the argument, HOME, or OLDPWD for ``-``."""
    target = args[1] if len(args) > 1 else None
    if not target or is_space(target[0]) or target == "--":
        home = shell.get_env("HOME")
        if not home or is_space(home[0]):
            return report_cmd_error("cd", None, "HOME not set", EXIT_FAILURE)
        return _status(_change_dir(shell, home))
    if len(args) > 2:
        return report_cmd_error("cd", None, "too many arguments", EXIT_FAILURE)
    if target == "-":
        old = shell.get_env("OLDPWD")
        if old is None:
            return report_cmd_error("cd", None, "OLDPWD not set", EXIT_FAILURE)
        return _status(_change_dir(shell, old))
    return _status(_change_dir(shell, target))