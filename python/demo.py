"""
Demonstration scripts for the path-counting visualizer.
"""

from math import comb

from grid_render import describe, render_grid, render_legend
from path_counter import PathCounter, count_paths
from path_types import Snapshot, SnapshotKind


def demo() -> None:
    """Print path counts for a range of grid sizes next to the closed form."""
    print("=" * 40)
    print("Monotone path counts (memoized DFS):")
    print("=" * 40)
    for n in range(1, 11):
        total = count_paths(n)
        expected = comb(2 * (n - 1), n - 1)
        mark = "✓" if total == expected else "✗"
        print(f"  {n:2d}x{n:<2d}  {total:>8d}  C({2 * (n - 1)},{n - 1}) = {expected:<8d} {mark}")
    print()


def traversal_demo(grid_size: int = 3) -> None:
    """Print every snapshot of one run, with its step number and the rendered grid."""
    counter = PathCounter(grid_size, 0)
    frames: list[Snapshot] = []
    total = counter.run(on_snapshot=frames.append)

    print("=" * 40)
    print(f"Traversal of a {grid_size}x{grid_size} grid ({len(frames)} snapshots):")
    print("=" * 40)
    print(render_legend())
    print()
    for step, snapshot in enumerate(frames, start=1):
        print(f"[{step}] {describe(snapshot)}")
        print(render_grid(snapshot))
        print()

    settled = sum(1 for s in frames if s.kind == SnapshotKind.SETTLED)
    print(f"Total: {total} paths (goal settled {settled} time(s), {len(frames[-1].visited)} cells visited)")


def cancellation_demo() -> None:
    """Show that starting a new run silences a run that was still in progress."""
    counter = PathCounter(4, 0)
    first = counter.start()
    for _ in range(5):
        next(first)

    second = counter.start()
    leftover = list(first)
    total = second.play()

    print("=" * 40)
    print("Restarting mid-run:")
    print("=" * 40)
    print(f"First run (generation {first.generation}): cancelled={first.cancelled}, "
          f"snapshots after restart={len(leftover)}, total={first.total}")
    print(f"Second run (generation {second.generation}): total={total}")


if __name__ == "__main__":
    demo()
    print()
    traversal_demo(2)
    print()
    cancellation_demo()
