"""Directory listing, ignore-list filtering and ordering."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable

from lstree.models import Entry, EntryKind, TreeError

logger = logging.getLogger(__name__)


class InvalidPathError(TreeError):
    """Raised when a path is neither a regular file nor a directory."""

    def __init__(self, path: str | os.PathLike[str], reason: str | None = None):
        self.path = os.fspath(path)
        if reason is None:
            reason = "is neither a file nor a directory"
        super().__init__(f"'{self.path}' {reason}")


def classify_path(path: str | os.PathLike[str]) -> EntryKind:
    """Return the kind of *path*, following symlinks.

    Raises:
        InvalidPathError: *path* is missing, a broken symlink, a device,
            a socket or anything else that is not a file or directory.
    """
    p = Path(path)
    if p.is_file():
        return EntryKind.FILE
    if p.is_dir():
        return EntryKind.DIRECTORY
    if not os.path.lexists(p):
        raise InvalidPathError(path, "does not exist")
    raise InvalidPathError(path)


def is_ignored(name: str, ignore: Iterable[str]) -> bool:
    """Exact, case-sensitive name match against the ignore list (no globbing)."""
    return name in ignore


def collect(
    directory: str | os.PathLike[str],
    ignore: Iterable[str] = frozenset(),
    sort: bool = True,
) -> list[Entry]:
    """List the immediate children of *directory* as Entry objects.

    Names found in *ignore* are dropped. With *sort* the result is ordered
    by name (codepoint ascending) with files and directories interleaved;
    without it the operating system's enumeration order is kept.
    """
    ignore = frozenset(ignore)
    with os.scandir(directory) as it:
        names = [entry.name for entry in it if not is_ignored(entry.name, ignore)]

    if sort:
        names.sort()

    base = Path(directory)
    entries = [
        Entry(name=name, path=base / name, kind=classify_path(base / name))
        for name in names
    ]
    logger.debug("Collected %d entries from %s", len(entries), directory)
    return entries
