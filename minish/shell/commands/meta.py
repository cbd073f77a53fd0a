"""Meta commands for shell introspection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...exceptions import UsageError
from ...path_utils import find_in_path
from ..registry import COMMAND_REGISTRY, CommandResult

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@COMMAND_REGISTRY.command(
    "help",
    syntax="help [[-Name] <string>]",
    description="Show available commands",
)
def help(shell: "Shell", args: list[str]) -> CommandResult:  # noqa: A001
    if args:
        name = args[0]
        spec = shell.commands.get(name)
        if spec is None:
            raise UsageError(f"no such command '{name}'")
        return CommandResult(stdout=f"{spec.name}: {spec.syntax}\n")
    lines = ["Available commands:"]
    for name in shell.available_commands():
        lines.append(f"  {name:<10} {shell.commands[name].syntax}")
    return CommandResult(stdout="\n".join(lines) + "\n")


@COMMAND_REGISTRY.command(
    "type",
    syntax="type [[-Path] <string>]",
    description="Describe how a command name would be resolved",
)
def type_(shell: "Shell", args: list[str]) -> CommandResult:
    if not args:
        raise UsageError("type needs the name of a command")
    name = args[0]
    if name in shell.commands:
        return CommandResult(stdout=f"{name} is a shell builtin\n")
    found = find_in_path(name, shell.config().search_path)
    if found is None:
        return CommandResult(stdout=f"{name} not found\n")
    return CommandResult(stdout=f"{name} is {found}\n")
