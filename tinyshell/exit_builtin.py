"""The exit builtin."""

from __future__ import annotations

import re
import sys
from typing import Optional, Sequence

from tinyshell.errors import exit_shell, report_cmd_error
from tinyshell.state import Shell

_SPACES = "\t\n\v\f\r "
_LEADING_INT = re.compile(r"([+-]?)([0-9]+)")
_LONG_MAX = 2**63 - 1
_LONG_MIN_MAGNITUDE = 2**63


def _looks_numeric(arg: str) -> bool:
    body = arg.lstrip(_SPACES)
    if not body:
        return False
    if body[0] in "+-":
        body = body[1:]
    if not body or not "0" <= body[0] <= "9":
        return False
    return all("0" <= c <= "9" or c in _SPACES for c in body)


def _leading_integer(arg: str) -> int:
    match = _LEADING_INT.match(arg.lstrip(_SPACES))
    if match is None:
        return 0
    sign, digits = match.groups()
    magnitude = int(digits)
    negative = sign == "-"
    limit = _LONG_MIN_MAGNITUDE if negative else _LONG_MAX
    if magnitude > limit:
        raise ValueError(f"numeric argument out of range: {arg!r}")
    return -magnitude if negative else magnitude


def parse_exit_code(arg: Optional[str], last_status: int) -> int:
    """Turn an exit argument into a status in 0..255.

    A missing argument yields last_status. Raises ValueError when the
    argument is not a number or does not fit in a signed 64-bit integer.
    """
    if arg is None:
        return last_status
    if not _looks_numeric(arg):
        raise ValueError(f"numeric argument required: {arg!r}")
    return _leading_integer(arg) % 256


def exit_builtin(shell: Shell, args: Sequence[str]) -> int:
    """End the shell; returns only when there are too many arguments."""
    if not shell.in_pipeline and shell.interactive:
        print("exit", file=sys.stderr)
    if len(args) < 2:
        status = shell.last_exit_code
    else:
        try:
            status = parse_exit_code(args[1], shell.last_exit_code)
        except ValueError:
            status = report_cmd_error(
                "exit", args[1], "numeric argument required", 2
            )
        else:
            if len(args) > 2:
                return report_cmd_error("exit", None, "too many arguments", 1)
    exit_shell(status)