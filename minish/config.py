"""Environment-derived shell configuration."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass

from .path_utils import split_search_path, split_suffixes

SEARCH_PATH_VAR = "PATH"
SUFFIXES_VAR = "PATHEXT"
LOG_LEVEL_VAR = "MINISH_LOG_LEVEL"

WINDOWS_SUFFIXES = ".EXE;.BAT;.CMD"
DEFAULT_LOG_LEVEL = "WARNING"


def default_suffixes(platform: str | None = None) -> str:
    """Suffix list used when PATHEXT is unset.

    Windows gets the usual executable extensions; everywhere else the bare
    program name is tried.
    """

    platform = platform or sys.platform
    if platform.startswith("win"):
        return WINDOWS_SUFFIXES
    return ""


@dataclass(frozen=True)
class ShellConfig:
    search_path: tuple[str, ...] = ()
    suffixes: tuple[str, ...] = ("",)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        platform: str | None = None,
    ) -> "ShellConfig":
        env = os.environ if env is None else env
        raw_path = env.get(SEARCH_PATH_VAR)
        raw_suffixes = env.get(SUFFIXES_VAR)
        if raw_suffixes is None:
            raw_suffixes = default_suffixes(platform)
        log_level = env.get(LOG_LEVEL_VAR) or DEFAULT_LOG_LEVEL
        return cls(
            search_path=tuple(split_search_path(raw_path)),
            suffixes=tuple(split_suffixes(raw_suffixes)),
            log_level=log_level.upper(),
        )


__all__ = [
    "ShellConfig",
    "default_suffixes",
    "SEARCH_PATH_VAR",
    "SUFFIXES_VAR",
    "LOG_LEVEL_VAR",
    "WINDOWS_SUFFIXES",
    "DEFAULT_LOG_LEVEL",
]
