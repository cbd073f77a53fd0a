"""Running host programs on behalf of the shell."""

from __future__ import annotations

import logging
import signal
import subprocess
from collections.abc import Mapping

from ..exceptions import ExecutionError
from .registry import CommandResult

logger = logging.getLogger(__name__)


def exit_status(returncode: int) -> int:
    """Map a ``Popen.returncode`` to a shell status.

    A child killed by signal N reports ``-N``; shells record ``128 + N``.
    """

    if returncode < 0:
        return 128 - returncode
    return returncode


def run_host_process(
    program: str,
    path: str,
    args: list[str],
    *,
    env: Mapping[str, str] | None = None,
) -> CommandResult:
    """Spawn ``path`` with ``args`` and block until it exits.

    The child inherits the interpreter's standard streams.
    """

    argv = [path, *args]
    logger.debug("Spawning %s", argv)
    try:
        process = subprocess.Popen(argv, env=dict(env) if env is not None else None)
    except (OSError, ValueError) as exc:
        # ValueError: the argument list holds a NUL byte
        raise ExecutionError(f"Error starting {program}: {exc}") from exc
    try:
        returncode = process.wait()
    except OSError as exc:
        raise ExecutionError(f"Error while waiting {program}: {exc}") from exc
    status = exit_status(returncode)
    if returncode < 0:
        try:
            name = signal.Signals(-returncode).name
        except ValueError:
            name = str(-returncode)
        logger.info("%s terminated by signal %s", program, name)
    logger.debug("%s exited with status %d", program, status)
    return CommandResult(exit_code=status)


__all__ = ["run_host_process", "exit_status"]
