"""Shell state: environment, working directories and the last exit status."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class Shell:
    """Mutable state shared by the builtins.

    ``env`` keeps variables in insertion order, the way they appear in the
    environment listing. ``in_pipeline`` is true while the current command
    runs as one stage of a pipeline.
    """

    env: dict[str, str] = field(default_factory=dict)
    interactive: bool = False
    working_dir: Optional[str] = None
    old_working_dir: Optional[str] = None
    last_exit_code: int = 0
    in_pipeline: bool = False

    def __post_init__(self) -> None:
        self.env = dict(self.env)

    def get_env(self, key: str) -> Optional[str]:
        """Return the value of a variable, or None when it is not set."""
        return self.env.get(key)

    def set_env(self, key: str, value: Optional[str]) -> None:
        """Set a variable, keeping its position if it already exists.

        A missing value is stored as an empty string.
        """
        self.env[key] = "" if value is None else value

    def unset_env(self, key: str) -> bool:
        """Remove a variable; return whether it was present."""
        return self.env.pop(key, None) is not None

    def env_lines(self) -> list[str]:
        """Return the environment as ``KEY=VALUE`` strings in order."""
        return [f"{key}={value}" for key, value in self.env.items()]