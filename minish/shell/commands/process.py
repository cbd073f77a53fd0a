"""Host process execution."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ...exceptions import UsageError
from ...path_utils import has_path_separator, resolve_executable
from ..registry import COMMAND_REGISTRY, CommandResult
from ..host import run_host_process

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..core import Shell


@COMMAND_REGISTRY.command(
    "exec",
    syntax="exec [[-ProgramName] <string>] [[-Args] <string[]>]",
    description="Run a host program",
)
def exec_(shell: "Shell", args: list[str]) -> CommandResult:
    if not args:
        raise UsageError("exec needs a program to execute")
    program, *program_args = args
    if has_path_separator(program):
        path = program
    else:
        config = shell.config()
        path = resolve_executable(program, config.search_path, config.suffixes)
    shell.stdout.flush()
    return run_host_process(program, path, program_args, env=shell.env)
