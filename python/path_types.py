"""
Shared type definitions for the path-counting visualizer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


@dataclass(frozen=True, order=True)
class Cell:
    """A cell coordinate on the square grid (0-indexed)."""

    row: int
    col: int

    @property
    def key(self) -> str:
        """Canonical string key, e.g. '2,3'."""
        return f"{self.row},{self.col}"

    @classmethod
    def parse_key(cls, key: str) -> Cell:
        row_str, sep, col_str = key.partition(",")
        if not sep:
            raise ValueError(f"Invalid cell key: '{key}' (expected 'row,col')")
        return cls(int(row_str), int(col_str))

    @property
    def right(self) -> Cell:
        return Cell(self.row, self.col + 1)

    @property
    def down(self) -> Cell:
        return Cell(self.row + 1, self.col)

    def in_bounds(self, grid_size: int) -> bool:
        return 0 <= self.row < grid_size and 0 <= self.col < grid_size


class SnapshotKind(Enum):
    """The traversal step a snapshot was taken at."""

    VISITING = "visiting"  # Cell entered and marked visited
    SETTLED = "settled"  # Goal cell reached, count fixed at 1
    TOTALED = "totaled"  # Right + down results summed and memoized
    CONTRIBUTING_SHOWN = "contributing-shown"  # Neighbors supplying the total are visible
    RESOLVED = "resolved"  # Answer written, cell is the updating cell
    CLEANUP = "cleanup"  # Cell popped, contributing cleared
    RESET = "reset"  # Idle state, never emitted by a run


# Delay multiplier applied after each kind of snapshot
PAUSES: dict[SnapshotKind, int] = {
    SnapshotKind.VISITING: 1,
    SnapshotKind.SETTLED: 1,
    SnapshotKind.TOTALED: 2,
    SnapshotKind.CONTRIBUTING_SHOWN: 4,
    SnapshotKind.RESOLVED: 2,
    SnapshotKind.CLEANUP: 0,
    SnapshotKind.RESET: 0,
}


@dataclass(frozen=True)
class Snapshot:
    """Immutable record of the traversal state at one animation step."""

    kind: SnapshotKind
    grid_size: int
    generation: int
    current_cell: Cell | None = None
    updating_cell: Cell | None = None
    visited: frozenset[Cell] = frozenset()
    stack: tuple[Cell, ...] = ()
    contributing: frozenset[Cell] = frozenset()
    answers: dict[Cell, int] = field(default_factory=dict)

    @property
    def pause(self) -> int:
        """How many step delays the view should wait after showing this snapshot."""
        return PAUSES[self.kind]
