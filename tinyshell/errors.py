"""Error reporting and shell termination."""

from __future__ import annotations

import sys
from typing import NoReturn, Optional

PROGRAM_NAME = "tinyshell"

_QUOTED_DETAIL_COMMANDS = frozenset({"export", "unset"})


class ShellExit(Exception):
    """Raised to end the shell with the given exit status."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status


def format_cmd_error(
    command: Optional[str], detail: Optional[str], message: str
) -> str:
    """Build ``<prog>: command: detail: message``.

    The detail is quoted as `detail' for export and unset.
    """
    parts = [f"{PROGRAM_NAME}: "]
    if command is not None:
        parts.append(f"{command}: ")
    if detail is not None:
        if command in _QUOTED_DETAIL_COMMANDS:
            parts.append(f"`{detail}': ")
        else:
            parts.append(f"{detail}: ")
    parts.append(message)
    return "".join(parts)


def report_cmd_error(
    command: Optional[str], detail: Optional[str], message: str, status: int
) -> int:
    """Write a command error to stderr and return status."""
    print(format_cmd_error(command, detail, message), file=sys.stderr)
    return status


def format_error(message: str, detail: Optional[str], quotes: bool) -> str:
    """Build ``<prog>: message `detail'`` or ``<prog>: message: detail``."""
    parts = [f"{PROGRAM_NAME}: ", message, " `" if quotes else ": "]
    if detail is not None:
        parts.append(detail)
    if quotes:
        parts.append("'")
    return "".join(parts)


def report_error(message: str, detail: Optional[str], quotes: bool) -> None:
    """Write a general error to stderr."""
    print(format_error(message, detail, quotes), file=sys.stderr)


def usage_message() -> str:
    """Write the command-line usage to stderr and return the text written."""
    text = "\n".join(
        (
            f"Usage: {PROGRAM_NAME}",
            f'Usage: {PROGRAM_NAME} -c "input line"',
        )
    ) + "\n"
    sys.stderr.write(text)
    return text


def exit_shell(status: int) -> NoReturn:
    """End the shell with the given status."""
    raise ShellExit(status)