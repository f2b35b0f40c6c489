"""
ASCII rendering for path-counting snapshots.

Each cell is drawn with the color of its highest-priority role:
updating > current > stack > contributing > visited > unvisited.
"""

from __future__ import annotations

import logging
from enum import Enum
from math import comb
from typing import Callable

import simple_chalk as chalk  # type: ignore[import-untyped]

from path_types import Cell, Snapshot

logger = logging.getLogger(__name__)


class CellRole(Enum):
    """Display role of a cell, declared in priority order (highest first)."""

    UPDATING = "Updating Cell"
    CURRENT = "Current Cell"
    STACK = "Stack"
    CONTRIBUTING = "Contributing Cell"
    VISITED = "Visited Cell"
    UNVISITED = "Unvisited Cell"


ROLE_COLORS: dict[CellRole, Callable[[str], str]] = {
    CellRole.UPDATING: chalk.bgRed.black,
    CellRole.CURRENT: chalk.bgGreen.black,
    CellRole.STACK: chalk.bgBlue.black,
    CellRole.CONTRIBUTING: chalk.bgYellow.black,
    CellRole.VISITED: chalk.bgMagenta.black,
    CellRole.UNVISITED: chalk.bgWhite.black,
}

UNRESOLVED = "-"


def cell_role(snapshot: Snapshot, cell: Cell) -> CellRole:
    """Pick the single role a cell is displayed with."""
    if snapshot.updating_cell == cell:
        return CellRole.UPDATING
    if snapshot.current_cell == cell:
        return CellRole.CURRENT
    if cell in snapshot.stack:
        return CellRole.STACK
    if cell in snapshot.contributing:
        return CellRole.CONTRIBUTING
    if cell in snapshot.visited:
        return CellRole.VISITED
    return CellRole.UNVISITED


def cell_width_for(grid_size: int) -> int:
    """Characters per cell: wide enough for the largest answer plus padding."""
    largest = comb(2 * (grid_size - 1), grid_size - 1)
    width = max(5, len(str(largest)) + 2)
    logger.debug("cell_width_for: grid=%d, largest=%d, width=%d", grid_size, largest, width)
    return width


def render_grid(snapshot: Snapshot, cell_width: int | None = None, color: bool = True) -> str:
    """
    Render a snapshot as a boxed character grid.

    Args:
        snapshot: The traversal state to draw
        cell_width: Characters per cell (default: sized for the largest answer)
        color: Apply ANSI role colors (False gives plain text)

    Returns:
        Rendered grid string
    """
    n = snapshot.grid_size
    if cell_width is None:
        cell_width = cell_width_for(n)

    title = f" {n}x{n} "
    inner_width = n * cell_width
    title_start = max(0, (inner_width - len(title)) // 2)
    lines = ["┌" + "─" * title_start + title + "─" * max(0, inner_width - title_start - len(title)) + "┐"]

    for r in range(n):
        line_parts = ["│"]
        for c in range(n):
            cell = Cell(r, c)
            answer = snapshot.answers.get(cell)
            content = (UNRESOLVED if answer is None else str(answer)).center(cell_width)
            if color:
                content = ROLE_COLORS[cell_role(snapshot, cell)](content)
            line_parts.append(content)
        line_parts.append("│")
        lines.append("".join(line_parts))

    lines.append("└" + "─" * inner_width + "┘")
    return "\n".join(lines)


def render_legend(color: bool = True) -> str:
    """One-line legend listing the roles in priority order."""
    parts = []
    for role in CellRole:
        swatch = ROLE_COLORS[role]("  ") if color else "[]"
        parts.append(f"{swatch} {role.value}")
    return "   ".join(parts)


def describe(snapshot: Snapshot) -> str:
    """Short status line for a snapshot, e.g. 'totaled 1,2  stack: 0,0 > 0,1 > 1,1'."""
    focus = snapshot.updating_cell or snapshot.current_cell
    stack = " > ".join(cell.key for cell in snapshot.stack) or "(empty)"
    head = snapshot.kind.value if focus is None else f"{snapshot.kind.value} {focus.key}"
    return f"{head}  stack: {stack}"
