"""Turn script files into a stream of command lines."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Iterator
from typing import BinaryIO, TextIO

logger = logging.getLogger(__name__)


def iter_script_lines(
    handle: BinaryIO | Iterable[bytes],
    *,
    encoding: str = "utf-8",
    stderr: TextIO | None = None,
) -> Iterator[str]:
    """Yield trimmed, non-empty lines from a binary script handle.

    A line that cannot be decoded is reported and skipped; the remaining
    lines are still produced.
    """

    err = stderr if stderr is not None else sys.stderr
    for index, raw in enumerate(handle, start=1):
        try:
            line = raw.decode(encoding)
        except UnicodeDecodeError as exc:
            logger.warning("Skipping undecodable line %d: %s", index, exc)
            err.write(f"Error at line {index}: {exc}\n")
            continue
        line = line.strip()
        if line:
            yield line


__all__ = ["iter_script_lines"]
