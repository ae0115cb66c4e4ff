"""Connector glyphs and padding strings for tree lines."""

from __future__ import annotations

from lstree.level_state import LevelStateTable
from lstree.models import IterationState, RenderConfig

BRANCH = "├"
LAST_BRANCH = "└"
VERTICAL = "│"
HORIZONTAL = "─"

_CONNECTORS: dict[IterationState, str] = {
    IterationState.ITERATING: BRANCH,
    IterationState.LAST: LAST_BRANCH,
    IterationState.ROOT: "",
}


def connector_glyph(state: IterationState) -> str:
    """Return the connector drawn in front of an entry in *state*."""
    return _CONNECTORS[state]


def horizontal_bar(spacing: int) -> str:
    return HORIZONTAL * spacing


def vertical_padding(depth: int, spacing: int, table: LevelStateTable) -> str:
    """Build the indentation for an entry at *depth*.

    Each ancestor level 1..depth-1 contributes a continuation bar while it
    still has siblings to come, or plain blanks once its last sibling has
    been reached.

    Raises:
        MissingLevelError: an ancestor depth was never recorded.
    """
    parts: list[str] = []
    for level in range(1, depth):
        if table.get(level) is IterationState.ITERATING:
            parts.append(VERTICAL + " " * spacing)
        else:
            parts.append(" " * (spacing + 1))
    return "".join(parts)


def entry_line(
    name: str,
    depth: int,
    config: RenderConfig,
    table: LevelStateTable,
    *,
    first_line: bool = False,
) -> str:
    """Render the (possibly multi-line) text for one entry.

    Example with ``x_spacing=3`` and ``y_spacing=1``:
        │   │
        │   ├───main.py

    Args:
        first_line: True when nothing has been written yet in this run;
            the first gap line is then dropped.
    """
    state = table.get(depth)
    if state is IterationState.ROOT:
        return name

    padding = vertical_padding(depth, config.x_spacing, table)
    gap_lines = [padding + VERTICAL] * config.y_spacing
    if first_line and gap_lines:
        gap_lines = gap_lines[1:]

    line = padding + connector_glyph(state) + horizontal_bar(config.x_spacing) + name
    return "\n".join([*gap_lines, line])
