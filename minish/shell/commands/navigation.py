"""Navigation-oriented commands."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from ...exceptions import ExecutionError, UsageError
from ..registry import COMMAND_REGISTRY

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@COMMAND_REGISTRY.command(
    "cd",
    syntax="cd [[-Path] <string>]",
    description="Change the working directory",
)
def cd(shell: "Shell", args: list[str]) -> None:
    if not args:
        raise UsageError("cd needs a directory")
    try:
        os.chdir(args[0])
    except (OSError, ValueError) as exc:
        raise ExecutionError(f"Error while changing directory: {exc}") from exc
