"""Data classes for lstree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class TreeError(Exception):
    """Base class for errors that abort a tree render."""


class IterationState(Enum):
    ITERATING = "iterating"  # more siblings follow at this depth
    LAST = "last"
    ROOT = "root"  # depth 0 only, no connector


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Entry:
    name: str
    path: Path
    kind: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class RenderConfig:
    x_spacing: int = 3
    y_spacing: int = 1
    sort: bool = True
    ignore: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.x_spacing < 0:
            raise ValueError(f"x_spacing must be non-negative, got {self.x_spacing}")
        if self.y_spacing < 0:
            raise ValueError(f"y_spacing must be non-negative, got {self.y_spacing}")
        # Accept any iterable of names from callers
        object.__setattr__(self, "ignore", frozenset(self.ignore))


@dataclass
class Counters:
    directories: int = 0
    files: int = 0

    @property
    def total(self) -> int:
        return self.directories + self.files
