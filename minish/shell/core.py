"""Core Shell implementation."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import TextIO

from ..config import ShellConfig
from ..exceptions import CommandNotFound, ShellError
from .registry import COMMAND_REGISTRY, CommandRegistry, CommandResult, CommandSpec

logger = logging.getLogger(__name__)

FALLBACK_COMMAND = "exec"
NOT_FOUND_STATUS = 127


class Shell:
    """Dispatches command lines to built-ins or host programs.

    The registry is snapshotted at construction and never changes afterward.
    ``last_status`` is read-only for commands; only :meth:`dispatch` updates it.
    """

    def __init__(
        self,
        *,
        env: Mapping[str, str] | None = None,
        registry: CommandRegistry | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        if registry is None:
            # Import command modules for their side effects (registration)
            from . import commands  # noqa: F401

            registry = COMMAND_REGISTRY
        self._commands: Mapping[str, CommandSpec] = MappingProxyType(
            {spec.name: spec for spec in registry.iter_commands()}
        )
        self._last_status = 0
        self.env = env
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    # ------------------------------------------------------------------
    # Read-only view for commands
    # ------------------------------------------------------------------
    @property
    def commands(self) -> Mapping[str, CommandSpec]:
        return self._commands

    @property
    def last_status(self) -> int:
        return self._last_status

    def available_commands(self) -> list[str]:
        return sorted(self._commands)

    def config(self) -> ShellConfig:
        """Read the search settings afresh; the environment may have changed."""
        return ShellConfig.from_env(self.env)

    # ------------------------------------------------------------------
    # Dispatcher
    # ------------------------------------------------------------------
    @staticmethod
    def tokenize(line: str) -> list[str]:
        return line.split()

    def dispatch(self, line: str) -> int:
        tokens = self.tokenize(line)
        if not tokens:
            return self._last_status
        name, *args = tokens
        spec = self._commands.get(name)
        if spec is not None:
            status = self._run_builtin(spec, args)
        else:
            status = self._run_fallback(name, tokens)
        logger.debug("%s (%d args) -> status %d", name, len(args), status)
        self._last_status = status
        return status

    def run_lines(self, lines: Iterable[str]) -> int:
        for line in lines:
            self.dispatch(line)
        return self._last_status

    def _run_builtin(self, spec: CommandSpec, args: list[str]) -> int:
        try:
            result = spec.execute(self, args)
        except ShellError as exc:
            self._report(str(exc))
            return 1
        except Exception as exc:  # unexpected failure path
            logger.debug("%s raised", spec.name, exc_info=True)
            self._report(f"{spec.name} failed: {exc}")
            return 1
        return self._emit(result)

    def _run_fallback(self, name: str, tokens: list[str]) -> int:
        fallback = self._commands.get(FALLBACK_COMMAND)
        if fallback is None:
            self._report(f"{name}: command not found")
            return NOT_FOUND_STATUS
        try:
            result = fallback.execute(self, tokens)
        except CommandNotFound as exc:
            self._report(str(exc))
            return NOT_FOUND_STATUS
        except ShellError as exc:
            self._report(str(exc))
            return 1
        except Exception as exc:  # unexpected failure path
            logger.debug("%s raised", name, exc_info=True)
            self._report(f"{name} failed: {exc}")
            return 1
        return self._emit(result)

    def _emit(self, result: CommandResult) -> int:
        if result.stdout:
            self.stdout.write(result.stdout)
            self.stdout.flush()
        return result.exit_code

    def _report(self, message: str) -> None:
        self.stderr.write(f"Error: {message}\n")
        self.stderr.flush()


__all__ = ["Shell"]
