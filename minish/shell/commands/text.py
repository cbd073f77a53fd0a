"""Text output commands."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..registry import COMMAND_REGISTRY, CommandResult

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell

STATUS_TOKEN = "$?"


@COMMAND_REGISTRY.command(
    "echo",
    syntax="echo [-InputObject] <psobject[]>",
    description="Print arguments",
)
def echo(shell: "Shell", args: list[str]) -> CommandResult:
    expanded = [str(shell.last_status) if arg == STATUS_TOKEN else arg for arg in args]
    return CommandResult(stdout=" ".join(expanded) + "\n")
