"""minish package: a minimal interactive/batch command interpreter."""

from .config import ShellConfig
from .exceptions import CommandNotFound, ExecutionError, ShellError, UsageError
from .line_source import iter_script_lines
from .shell import CommandResult, CommandSpec, Shell

__all__ = [
    "Shell",
    "CommandResult",
    "CommandSpec",
    "ShellConfig",
    "ShellError",
    "UsageError",
    "ExecutionError",
    "CommandNotFound",
    "iter_script_lines",
]
