"""Error hierarchy for minish.

Every failure raised by a command is a :class:`ShellError`. The dispatcher
turns it into a diagnostic line plus a status code, so nothing raised here is
ever fatal to the interpreter.
"""

from __future__ import annotations


class ShellError(Exception):
    """Base class for all shell errors.

    Attributes:
        message: Human readable error message
        exit_code: Status recorded when the error escapes a command
    """

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self) -> str:
        return self.message


class UsageError(ShellError):
    """Raised when a built-in is called with missing or invalid arguments."""


class ExecutionError(ShellError):
    """Raised when the OS rejects an operation (chdir, spawn, wait)."""


class CommandNotFound(ShellError):
    """Raised when a program cannot be located in the search path."""

    def __init__(self, program: str, message: str | None = None) -> None:
        if message is None:
            message = f"{program}: command not found in PATH"
        super().__init__(message, exit_code=127)
        self.program = program


__all__ = ["ShellError", "UsageError", "ExecutionError", "CommandNotFound"]
