"""Shell state, builtins, error reporting and text helpers for a small shell."""

__version__ = "0.1.0"

__all__ = [
    "cd",
    "errors",
    "exit_builtin",
    "export",
    "simple_builtins",
    "state",
    "textutils",
    "unset",
]