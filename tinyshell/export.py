"""The export builtin."""

from __future__ import annotations

import sys
from typing import Iterable, Sequence

from tinyshell.errors import report_cmd_error
from tinyshell.state import Shell
from tinyshell.textutils import is_alnum, is_alpha

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def is_valid_identifier(arg: str) -> bool:
    """True when the part before any '=' is a valid variable name."""
    name = arg.split("=", 1)[0]
    if not name or not (is_alpha(name[0]) or name[0] == "_"):
        return False
    return all(is_alnum(c) or c == "_" for c in name)


def format_export(env_lines: Iterable[str]) -> list[str]:
    """Return ``declare -x`` lines for the entries, sorted by name."""
    lines = []
    for entry in sorted(env_lines):
        key, eq, value = entry.partition("=")
        if not eq:
            continue
        if value:
            lines.append(f'declare -x {key}="{value}"')
        else:
            lines.append(f"declare -x {key}")
    return lines


def print_export(env_lines: Iterable[str]) -> None:
    """Write the sorted export listing to stdout."""
    for line in format_export(env_lines):
        sys.stdout.write(f"{line}\n")


def handle_export_arg(shell: Shell, arg: str) -> int:
    """Set one variable from ``KEY=VALUE`` or ``KEY``; return its status."""
    if not is_valid_identifier(arg):
        report_cmd_error("export", arg, "not a valid identifier", EXIT_FAILURE)
        return EXIT_FAILURE
    key, _, value = arg.partition("=")
    shell.set_env(key, value)
    return EXIT_SUCCESS


def export_builtin(shell: Shell, args: Sequence[str]) -> int:
    """Export each argument, or list the environment when there are none."""
    if len(args) < 2:
        print_export(shell.env_lines())
        return EXIT_SUCCESS
    status = EXIT_SUCCESS
    for arg in args[1:]:
        if handle_export_arg(shell, arg) != EXIT_SUCCESS:
            status = EXIT_FAILURE
    return status