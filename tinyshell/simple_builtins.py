"""The echo, env and pwd builtins."""

from __future__ import annotations

import os
import sys
from typing import Sequence

from tinyshell.errors import report_cmd_error
from tinyshell.state import Shell

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def is_n_flag(arg: str) -> bool:
    """True for a dash followed only by ``n`` characters (a lone dash too)."""
    return arg.startswith("-") and set(arg[1:]) <= {"n"}


def echo_builtin(shell: Shell, args: Sequence[str]) -> int:
    """Print the arguments separated by spaces, honouring ``-n``."""
    words = list(args[1:])
    if words and words[0] == "$?":
        sys.stdout.write(f"{shell.last_exit_code}\n")
        return EXIT_SUCCESS
    newline = True
    while words and is_n_flag(words[0]):
        newline = False
        words.pop(0)
    sys.stdout.write(" ".join(words) + ("\n" if newline else ""))
    return EXIT_SUCCESS


def env_builtin(shell: Shell, args: Sequence[str]) -> int:
    """Print every variable that has a non-empty value."""
    if len(args) > 1:
        return report_cmd_error("env", None, "Too many arguments", 2)
    for key, value in shell.env.items():
        if value:
            sys.stdout.write(f"{key}={value}\n")
    return EXIT_SUCCESS


def pwd_builtin(shell: Shell, args: Sequence[str]) -> int:
    """Print the remembered working directory, or the process one."""
    if shell.working_dir:
        sys.stdout.write(f"{shell.working_dir}\n")
        return EXIT_SUCCESS
    try:
        cwd = os.getcwd()
    except OSError as err:
        message = os.strerror(err.errno) if err.errno else str(err)
        report_cmd_error("pwd", None, message, err.errno or EXIT_FAILURE)
        return EXIT_FAILURE
    sys.stdout.write(f"{cwd}\n")
    return EXIT_SUCCESS