"""Helpers for locating programs in the host search path."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Iterator

from .exceptions import CommandNotFound

logger = logging.getLogger(__name__)

SUFFIX_SEPARATOR = ";"


def split_search_path(raw: str | None) -> list[str]:
    if raw is None:
        return []
    # An empty entry is the current directory, as in POSIX shells.
    return [entry or os.curdir for entry in raw.split(os.pathsep)]


def split_suffixes(raw: str) -> list[str]:
    return raw.split(SUFFIX_SEPARATOR)


def has_path_separator(name: str) -> bool:
    separators = {"/", os.sep}
    if os.altsep:
        separators.add(os.altsep)
    return any(sep in name for sep in separators)


def find_in_path(name: str, directories: Iterable[str]) -> str | None:
    """Return the first ``directory/name`` that exists, or ``None``.

    Any kind of filesystem entry matches; no suffixes are tried and the
    executable bit is not checked.
    """

    for directory in directories:
        candidate = os.path.join(directory, name)
        if os.path.exists(candidate):
            return candidate
    return None


def candidate_paths(
    name: str,
    directories: Iterable[str],
    suffixes: Iterable[str],
) -> Iterator[str]:
    """Yield lookup candidates, directory order outer and suffix order inner."""

    suffixes = list(suffixes)
    for directory in directories:
        for suffix in suffixes:
            yield os.path.join(directory, f"{name}{suffix}")


def resolve_executable(
    name: str,
    directories: Iterable[str],
    suffixes: Iterable[str],
) -> str:
    for candidate in candidate_paths(name, directories, suffixes):
        if os.path.exists(candidate):
            logger.debug("Resolved %s to %s", name, candidate)
            return candidate
    raise CommandNotFound(name)


__all__ = [
    "split_search_path",
    "split_suffixes",
    "has_path_separator",
    "find_in_path",
    "candidate_paths",
    "resolve_executable",
]
