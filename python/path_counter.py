"""
Memoized depth-first path counting on a square grid, exposed step by step.
Two-layer design: visit (generator of Snapshots) -> PathCountRun (pacing + cancellation).
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Generator, Iterator

from path_types import Cell, Snapshot, SnapshotKind

logger = logging.getLogger(__name__)

DEFAULT_GRID_SIZE = 5
DEFAULT_STEP_DELAY = 0.3  # seconds

ORIGIN = Cell(0, 0)

# Callback receiving each snapshot as it is emitted
SnapshotFn = Callable[[Snapshot], None]

# Sleep function used for pacing (injectable for tests)
SleepFn = Callable[[float], None]


def validate_grid_size(grid_size: object) -> int:
    """Return grid_size as an int, or raise ValueError if it cannot be traversed."""
    if isinstance(grid_size, bool) or not isinstance(grid_size, int):
        raise ValueError(
            f"Invalid grid size: {grid_size!r}\n"
            f"  Grid size must be an integer >= 1"
        )
    if grid_size < 1:
        raise ValueError(
            f"Invalid grid size: {grid_size}\n"
            f"  A grid needs at least one cell (grid size >= 1)"
        )
    return grid_size


def validate_step_delay(step_delay: object) -> float:
    """Return step_delay as a float number of seconds, or raise ValueError."""
    if isinstance(step_delay, bool) or not isinstance(step_delay, (int, float)):
        raise ValueError(f"Invalid step delay: {step_delay!r} (expected seconds as a number)")
    if step_delay < 0:
        raise ValueError(f"Invalid step delay: {step_delay} (must not be negative)")
    return float(step_delay)


# =============================================================================
# Traversal State
# =============================================================================


@dataclass
class TraversalState:
    """
    Mutable context shared by every visit() call of one run.

    The memo table is the cache consulted before expansion; answers is what the
    view displays and trails memo by the finalization animation.
    """

    grid_size: int
    generation: int
    visited: set[Cell] = field(default_factory=set)
    memo: dict[Cell, int] = field(default_factory=dict)
    answers: dict[Cell, int] = field(default_factory=dict)
    stack: list[Cell] = field(default_factory=list)
    contributing: set[Cell] = field(default_factory=set)
    current_cell: Cell | None = None
    updating_cell: Cell | None = None

    @property
    def goal(self) -> Cell:
        return Cell(self.grid_size - 1, self.grid_size - 1)

    def is_safe(self, cell: Cell) -> bool:
        return cell.in_bounds(self.grid_size)

    def snapshot(self, kind: SnapshotKind) -> Snapshot:
        return Snapshot(
            kind=kind,
            grid_size=self.grid_size,
            generation=self.generation,
            current_cell=self.current_cell,
            updating_cell=self.updating_cell,
            visited=frozenset(self.visited),
            stack=tuple(self.stack),
            contributing=frozenset(self.contributing),
            answers=dict(self.answers),
        )

    def pop(self, cell: Cell) -> None:
        # The popped cell is always the top of the stack
        top = self.stack.pop()
        assert top == cell, f"stack corrupted: popped {top}, expected {cell}"


def visit(state: TraversalState, cell: Cell) -> Generator[Snapshot, None, int]:
    """
    Count monotone paths from cell to the goal, yielding a Snapshot at each step.

    Recursion is right-first, then down, each subtree fully resolved (including
    its snapshots) before the next begins. The count is the generator's return
    value, so callers recurse with ``yield from``.

    A visited cell without a memo entry contributes 0. Under right/down moves such
    a cell is always an ancestor on the current stack, so this cutoff never hides
    a real path; cells that have been resolved are answered from the memo table.

    Args:
        state: Shared traversal context (mutated in place)
        cell: Cell to expand

    Returns:
        Number of monotone paths from cell to the goal
    """
    if not state.is_safe(cell):
        return 0
    if cell in state.visited and cell not in state.memo:
        return 0

    state.stack.append(cell)
    state.current_cell = cell

    if cell in state.memo:
        logger.debug("memo hit at %s -> %d", cell.key, state.memo[cell])
        state.pop(cell)
        return state.memo[cell]

    if cell == state.goal:
        state.memo[cell] = 1
        state.visited.add(cell)
        state.answers[cell] = 1
        yield state.snapshot(SnapshotKind.SETTLED)
        state.pop(cell)
        return 1

    logger.debug("visiting %s (depth %d)", cell.key, len(state.stack))
    state.visited.add(cell)
    yield state.snapshot(SnapshotKind.VISITING)

    right_paths = yield from visit(state, cell.right)
    down_paths = yield from visit(state, cell.down)
    total = right_paths + down_paths

    # Neighbors are staged here and published one step later
    staged = {n for n in (cell.right, cell.down) if state.is_safe(n)}
    state.memo[cell] = total
    state.current_cell = cell
    yield state.snapshot(SnapshotKind.TOTALED)

    state.contributing |= staged
    yield state.snapshot(SnapshotKind.CONTRIBUTING_SHOWN)

    state.answers[cell] = total
    state.updating_cell = cell
    yield state.snapshot(SnapshotKind.RESOLVED)

    state.pop(cell)
    state.contributing -= staged
    state.updating_cell = None
    yield state.snapshot(SnapshotKind.CLEANUP)

    return total


# =============================================================================
# Runs
# =============================================================================


class PathCountRun:
    """
    Iterator over one run's snapshots, tagged with the generation it belongs to.

    The run checks its generation against the counter before every resumption of
    the traversal. Once the counter has been reset (or another run started), the
    run stops without resuming, so a superseded run never mutates state again.

    Usage:
        run = counter.start()
        for snapshot in run:
            draw(snapshot)
        print(run.total)  # None if the run was superseded
    """

    def __init__(self, counter: PathCounter, state: TraversalState) -> None:
        self._counter = counter
        self._state = state
        self._iterator = visit(state, ORIGIN)
        self.generation = state.generation
        self.total: int | None = None
        self.finished = False

    @property
    def cancelled(self) -> bool:
        """True once a newer run or a reset has superseded this one."""
        return self._counter.generation != self.generation

    @property
    def step_delay(self) -> float:
        return self._counter.step_delay

    def __iter__(self) -> Iterator[Snapshot]:
        return self

    def __next__(self) -> Snapshot:
        if self.finished:
            raise StopIteration
        if self.cancelled:
            logger.debug(
                "discarding stale run (generation %d, current %d)",
                self.generation,
                self._counter.generation,
            )
            self.finished = True
            self._iterator.close()
            raise StopIteration
        try:
            return next(self._iterator)
        except StopIteration as done:
            self.finished = True
            self.total = done.value
            logger.info(
                "run %d finished: %d paths on a %dx%d grid",
                self.generation,
                self.total,
                self._state.grid_size,
                self._state.grid_size,
            )
            raise

    def play(self, on_snapshot: SnapshotFn | None = None, sleep: SleepFn = time.sleep) -> int | None:
        """
        Drive the run to completion, pausing step_delay * snapshot.pause after each snapshot.

        Args:
            on_snapshot: Optional callback for each snapshot
            sleep: Pause function (default time.sleep)

        Returns:
            Total path count, or None if the run was superseded before finishing
        """
        for snapshot in self:
            if on_snapshot is not None:
                on_snapshot(snapshot)
            if snapshot.pause and self.step_delay:
                sleep(self.step_delay * snapshot.pause)
        return self.total


# =============================================================================
# Control Surface
# =============================================================================


class PathCounter:
    """
    Owner of the traversal state and the control surface used by a view.

    Every reset bumps the generation, which invalidates whatever run was in
    flight. Only the most recently started run can make progress.
    """

    def __init__(self, grid_size: int = DEFAULT_GRID_SIZE, step_delay: float = DEFAULT_STEP_DELAY) -> None:
        self.grid_size = validate_grid_size(grid_size)
        self.step_delay = validate_step_delay(step_delay)
        self.generation = 0
        self.state = TraversalState(self.grid_size, self.generation)

    def configure(self, grid_size: int, step_delay: float) -> None:
        """Validate and apply new parameters, then reset all state."""
        self.grid_size = validate_grid_size(grid_size)
        self.step_delay = validate_step_delay(step_delay)
        self.reset()

    def reset(self) -> None:
        """Clear all transient state without starting a run."""
        self.generation += 1
        self.state = TraversalState(self.grid_size, self.generation)

    def start(self) -> PathCountRun:
        """Reset and begin a new run from (0, 0), superseding any earlier run."""
        self.reset()
        logger.info(
            "run %d started on a %dx%d grid (step delay %.3fs)",
            self.generation,
            self.grid_size,
            self.grid_size,
            self.step_delay,
        )
        return PathCountRun(self, self.state)

    def snapshot(self) -> Snapshot:
        """Snapshot of the current state, for rendering between steps or when idle."""
        return self.state.snapshot(SnapshotKind.RESET)

    def run(
        self,
        grid_size: int | None = None,
        step_delay: float | None = None,
        on_snapshot: SnapshotFn | None = None,
        sleep: SleepFn = time.sleep,
    ) -> int:
        """
        Count paths from (0, 0) to the opposite corner, emitting every snapshot.

        Args:
            grid_size: Grid size N (default: keep the configured one)
            step_delay: Seconds per pause unit (default: keep the configured one)
            on_snapshot: Optional callback for each snapshot
            sleep: Pause function (default time.sleep)

        Returns:
            Number of monotone paths on the N x N grid
        """
        if grid_size is not None or step_delay is not None:
            self.configure(
                self.grid_size if grid_size is None else grid_size,
                self.step_delay if step_delay is None else step_delay,
            )
        run = self.start()
        total = run.play(on_snapshot, sleep)
        if total is None:
            # Only reachable if on_snapshot itself reset or restarted the counter
            raise RuntimeError(f"run {run.generation} was superseded before finishing")
        return total


def count_paths(grid_size: int) -> int:
    """Count monotone paths on an N x N grid, draining the traversal without pauses."""
    return PathCounter(grid_size, 0).run()
