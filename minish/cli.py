"""Command-line interface for minish."""

from __future__ import annotations

import argparse
import logging
import os
import sys

from .config import LOG_LEVEL_VAR, ShellConfig
from .line_source import iter_script_lines
from .shell import Shell

logger = logging.getLogger(__name__)

EXIT_COMMAND = "exit"


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root = logging.getLogger("minish")
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)


def _prompt() -> str:
    return f"{os.getcwd()}> "


def _run_script(shell: Shell, path: str) -> int:
    try:
        handle = open(path, "rb")
    except OSError as exc:
        logger.debug("Cannot open %s: %s", path, exc)
        sys.stderr.write(f"Error in the opening of the file: {path}\n")
        return 0
    with handle:
        status = shell.run_lines(iter_script_lines(handle, stderr=sys.stderr))
    logger.debug("Script %s finished with last status %d", path, status)
    return 0


def _run_interactive(shell: Shell) -> int:
    try:
        while True:
            try:
                prompt = _prompt()
            except OSError as exc:
                sys.stderr.write(f"Error in obtaining the current directory: {exc}\n")
                return 0
            try:
                line = input(prompt)
            except UnicodeDecodeError:
                sys.stderr.write("Error while reading the input\n")
                continue
            line = line.strip()
            if line == EXIT_COMMAND:
                return 0
            shell.dispatch(line)
    except (EOFError, KeyboardInterrupt):
        return 0


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="minish",
        description="Minimal command interpreter. Runs a script, or starts an interactive loop.",
    )
    parser.add_argument("script", nargs="?", help="Script file to execute line by line")
    parser.add_argument(
        "--log-level",
        default=None,
        help=f"Logging level (defaults to ${LOG_LEVEL_VAR} or WARNING)",
    )
    args = parser.parse_args(argv)
    _configure_logging(args.log_level or ShellConfig.from_env().log_level)

    shell = Shell()
    if args.script is None:
        exit_code = _run_interactive(shell)
    else:
        exit_code = _run_script(shell, args.script)
    raise SystemExit(exit_code)


__all__ = ["main"]
