"""Depth-first directory tree rendering."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from lstree.collector import classify_path, collect
from lstree.glyphs import entry_line
from lstree.level_state import LevelStateTable
from lstree.models import Counters, EntryKind, IterationState, RenderConfig, TreeError

logger = logging.getLogger(__name__)


class EmptyPathError(TreeError):
    """Raised when an empty path reaches the traversal."""

    def __init__(self) -> None:
        super().__init__("Path is empty!")


class TreeRenderer:
    """Prints one directory tree, line by line, to *out*.

    A renderer keeps its level-state table and counters per call to
    :meth:`render`, so the same instance can be reused.
    """

    def __init__(self, config: RenderConfig | None = None, out: TextIO | None = None):
        self.config = config or RenderConfig()
        self.out = out if out is not None else sys.stdout
        self._table = LevelStateTable.for_root()
        self._counters = Counters()
        self._lines_written = 0

    def render(self, path: str | os.PathLike[str]) -> Counters:
        """Render the tree rooted at *path* and return the final counts.

        The root directory counts as one directory. A regular file given as
        the root is printed on its own and counted as one file.

        Raises:
            EmptyPathError: *path* is empty.
            InvalidPathError: *path*, or any entry below it, is neither a
                file nor a directory. Lines already printed stay printed.
        """
        self._table = LevelStateTable.for_root()
        self._counters = Counters()
        self._lines_written = 0

        raw = os.fspath(path)
        if not raw:
            raise EmptyPathError()

        if classify_path(raw) is EntryKind.FILE:
            self._counters.files += 1
            self._emit(raw, 0)
            return self._counters

        self._counters.directories += 1
        display_name = raw if raw.endswith("/") else raw + "/"
        self._render_directory(Path(raw), display_name, 0)
        return self._counters

    def _render_directory(self, path: Path, display_name: str, depth: int) -> None:
        logger.debug("Entering %s at depth %d", path, depth)
        self._emit(display_name, depth)

        children = collect(path, self.config.ignore, self.config.sort)
        depth += 1
        for index, entry in enumerate(children, start=1):
            state = IterationState.ITERATING if index < len(children) else IterationState.LAST
            self._table.set(depth, state)

            if entry.is_dir:
                self._counters.directories += 1
                self._render_directory(entry.path, entry.name + "/", depth)
            else:
                self._counters.files += 1
                self._emit(entry.name, depth)

    def _emit(self, name: str, depth: int) -> None:
        text = entry_line(
            name,
            depth,
            self.config,
            self._table,
            first_line=self._lines_written == 0,
        )
        self.out.write(text + "\n")
        self._lines_written += text.count("\n") + 1


def render_tree(
    path: str | os.PathLike[str],
    config: RenderConfig | None = None,
    out: TextIO | None = None,
) -> Counters:
    """Render the tree rooted at *path*; see :meth:`TreeRenderer.render`."""
    return TreeRenderer(config, out).render(path)


def _plural(count: int, singular: str, plural: str) -> str:
    return f"{count} {singular if count == 1 else plural}"


def format_summary(counters: Counters) -> str:
    """Return e.g. ``"1 directory, 2 files"``."""
    return (
        f"{_plural(counters.directories, 'directory', 'directories')}, "
        f"{_plural(counters.files, 'file', 'files')}"
    )
