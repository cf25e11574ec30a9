"""The unset builtin."""

from __future__ import annotations

from typing import Sequence

from tinyshell.errors import report_cmd_error
from tinyshell.export import is_valid_identifier
from tinyshell.state import Shell

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def unset_builtin(shell: Shell, args: Sequence[str]) -> int:
    """Remove each named variable; report names that are not valid."""
    status = EXIT_SUCCESS
    for arg in args[1:]:
        if not is_valid_identifier(arg) or "=" in arg:
            report_cmd_error("unset", arg, "not a valid identifier", EXIT_FAILURE)
            status = EXIT_FAILURE
        else:
            shell.unset_env(arg)
    return status