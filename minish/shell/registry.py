"""Registry for shell commands."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .core import Shell


@dataclass(slots=True)
class CommandResult:
    """Outcome of a command: text for stdout and the status to record."""

    stdout: str = ""
    exit_code: int = 0


# Handlers signal failure by raising ShellError.
ShellCommand = Callable[["Shell", list[str]], CommandResult | str | None]


@dataclass(frozen=True, slots=True)
class CommandSpec:
    name: str
    handler: ShellCommand
    syntax: str = ""
    description: str = ""

    def execute(self, shell: "Shell", args: list[str]) -> CommandResult:
        result = self.handler(shell, list(args))
        if isinstance(result, CommandResult):
            return result
        if result is None:
            return CommandResult()
        return CommandResult(stdout=str(result))


class CommandRegistry:
    """Ordered container of command specs keyed by name."""

    def __init__(self) -> None:
        self._commands: dict[str, CommandSpec] = {}

    def register(
        self,
        name: str,
        handler: ShellCommand,
        *,
        syntax: str = "",
        description: str = "",
    ) -> ShellCommand:
        if name in self._commands:
            raise ValueError(f"Command '{name}' is already registered")
        self._commands[name] = CommandSpec(name, handler, syntax, description)
        return handler

    def command(
        self,
        name: str,
        *,
        syntax: str = "",
        description: str = "",
    ) -> Callable[[ShellCommand], ShellCommand]:
        """Decorator variant for registering shell commands."""

        def decorator(func: ShellCommand) -> ShellCommand:
            return self.register(name, func, syntax=syntax, description=description)

        return decorator

    def get(self, name: str) -> CommandSpec | None:
        return self._commands.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __len__(self) -> int:
        return len(self._commands)

    def iter_commands(self) -> Iterable[CommandSpec]:
        return tuple(self._commands.values())


COMMAND_REGISTRY = CommandRegistry()


__all__ = ["COMMAND_REGISTRY", "CommandRegistry", "CommandSpec", "CommandResult", "ShellCommand"]
