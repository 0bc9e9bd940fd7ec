"""One-shot directory scan producing the carousel's item collection.

Every entry of the directory becomes an item, in whatever order the filesystem
yields them. Nothing is filtered or sorted.

Read failures never escape `load()`: a missing, unreadable or non-directory
path yields an empty collection. `scan()` keeps the failure around so callers
can tell "empty" apart from "could not read".
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .logger import get_logger

_logger = get_logger("dir_loader")

ItemCollection = tuple[str, ...]


@dataclass(frozen=True)
class DirectoryScan:
    path: str
    items: ItemCollection = ()
    error: OSError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


def scan(path: str | Path) -> DirectoryScan:
    """Read `path` once and report its entries or the error that stopped the read."""
    dir_path = os.fspath(path)
    items: list[str] = []
    try:
        with os.scandir(dir_path) as it:
            for entry in it:
                items.append(entry.path)
    except OSError as e:
        return DirectoryScan(path=dir_path, error=e)
    return DirectoryScan(path=dir_path, items=tuple(items))


def load(path: str | Path) -> ItemCollection:
    result = scan(path)
    if result.failed:
        _logger.warning("directory read failed, continuing with no items: %s (%s)", result.path, result.error)
    else:
        _logger.debug("directory loaded: %s, items=%d", result.path, len(result.items))
    return result.items
