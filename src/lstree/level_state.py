"""Per-depth iteration state used to draw ancestor connector lines."""

from __future__ import annotations

from lstree.models import IterationState, TreeError


class MissingLevelError(TreeError):
    """Raised when an ancestor depth is read before it was ever set."""

    def __init__(self, depth: int):
        self.depth = depth
        super().__init__(f"Level {depth} doesn't exist!")


class LevelStateTable:
    """Mapping of depth → IterationState, indexed directly by depth.

    Entries deeper than the current traversal point are left in place;
    they are always overwritten before they are read again.
    """

    def __init__(self) -> None:
        self._states: list[IterationState | None] = []

    @classmethod
    def for_root(cls) -> LevelStateTable:
        table = cls()
        table.set(0, IterationState.ROOT)
        return table

    def set(self, depth: int, state: IterationState) -> None:
        if depth < 0:
            raise ValueError(f"depth must be non-negative, got {depth}")
        if depth >= len(self._states):
            self._states.extend([None] * (depth + 1 - len(self._states)))
        self._states[depth] = state

    def get(self, depth: int) -> IterationState:
        state = self._states[depth] if 0 <= depth < len(self._states) else None
        if state is None:
            raise MissingLevelError(depth)
        return state

    def __contains__(self, depth: object) -> bool:
        return (
            isinstance(depth, int)
            and 0 <= depth < len(self._states)
            and self._states[depth] is not None
        )

    def __len__(self) -> int:
        return len(self._states)
