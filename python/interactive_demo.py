"""
Interactive demo for memoized DFS path counting.
Animate the traversal on a grid and change its parameters with keyboard commands.
"""

import logging
import queue
import sys
import threading
import time
from typing import Callable

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from grid_render import describe, render_grid, render_legend
from path_counter import PathCounter, PathCountRun
from path_types import Snapshot
from visualizer_config import VisualizerConfig, parse_config

logger = logging.getLogger(__name__)

GRID_SIZE_STEP = 1
STEP_DELAY_STEP_MS = 100


class InteractiveDemo:
    """Interactive demo driving a PathCounter at the configured pace."""

    def __init__(self, config: VisualizerConfig, clock: Callable[[], float] = time.monotonic) -> None:
        self.config = config
        self.counter = PathCounter(config.grid_size, config.step_delay)
        self.console = Console()
        self.clock = clock
        self.status_message = "Ready - press G to start"
        self.active_run: PathCountRun | None = None
        self.snapshot: Snapshot = self.counter.snapshot()
        self.next_step_at = 0.0
        self._keys: queue.Queue[str] = queue.Queue()

    def generate_display(self) -> Panel:
        """Generate the current display with grid, legend and status."""
        status = Text()
        status.append("Grid Size: ", style="bold")
        status.append(f"{self.config.grid_size}    ")
        status.append("Step Delay: ", style="bold")
        status.append(f"{self.config.step_delay_ms} ms\n\n")

        status.append(Text.from_ansi(render_legend()))
        status.append("\n\n")
        status.append(Text.from_ansi(render_grid(self.snapshot)))
        status.append("\n\n")
        status.append("Step: ", style="bold")
        status.append(describe(self.snapshot) + "\n\n")

        status.append("Keys:\n", style="bold cyan")
        status.append("  G - Start DFS\n")
        status.append("  R - Reset\n")
        status.append("  + / - - Grid size\n")
        status.append("  ] / [ - Step delay\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="DFS Path Counting Visualization", border_style="green")

    def start(self) -> None:
        """Start a fresh run, superseding any run in flight."""
        self.active_run = self.counter.start()
        self.snapshot = self.counter.snapshot()
        self.next_step_at = self.clock()
        self.status_message = f"Running DFS on a {self.config.grid_size}x{self.config.grid_size} grid..."

    def reset(self) -> None:
        """Stop the current run and clear the grid."""
        self.counter.reset()
        self.active_run = None
        self.snapshot = self.counter.snapshot()

    def apply_config(self, config: VisualizerConfig) -> None:
        """Apply new parameters; this resets the grid like any parameter change."""
        if config == self.config:
            self.status_message = "Already at the limit"
            return
        logger.info("config changed: grid %d, step delay %d ms", config.grid_size, config.step_delay_ms)
        self.config = config
        self.counter.configure(config.grid_size, config.step_delay)
        self.active_run = None
        self.snapshot = self.counter.snapshot()
        self.status_message = f"Grid {config.grid_size}x{config.grid_size}, {config.step_delay_ms} ms per step"

    def advance(self) -> None:
        """Emit the next snapshot of the active run if its pause has elapsed."""
        run = self.active_run
        if run is None:
            return
        now = self.clock()
        if now < self.next_step_at:
            return
        try:
            self.snapshot = next(run)
        except StopIteration:
            self.active_run = None
            self.snapshot = self.counter.snapshot()
            if run.total is not None:
                self.status_message = f"✓ Done: {run.total} paths from (0,0) to the opposite corner"
            return
        self.next_step_at = now + self.counter.step_delay * self.snapshot.pause

    def handle_key(self, key: str) -> bool:
        """Apply one key press. Returns False when the demo should quit."""
        key = key.lower()
        if key == "q":
            self.status_message = "Quitting..."
            return False
        if key == "g":
            self.start()
        elif key == "r":
            self.reset()
            self.status_message = "Reset"
        elif key in ("+", "="):
            self.apply_config(self.config.with_grid_size(self.config.grid_size + GRID_SIZE_STEP))
        elif key == "-":
            self.apply_config(self.config.with_grid_size(self.config.grid_size - GRID_SIZE_STEP))
        elif key == "]":
            self.apply_config(self.config.with_step_delay_ms(self.config.step_delay_ms + STEP_DELAY_STEP_MS))
        elif key == "[":
            self.apply_config(self.config.with_step_delay_ms(self.config.step_delay_ms - STEP_DELAY_STEP_MS))
        else:
            self.status_message = f"Unknown key: {repr(key)}"
        return True

    def _read_keys(self) -> None:
        while True:
            self._keys.put(readchar.readkey())

    def run(self) -> None:
        """Run the demo until Q is pressed."""
        threading.Thread(target=self._read_keys, daemon=True).start()

        with Live(self.generate_display(), console=self.console, refresh_per_second=20) as live:
            try:
                while True:
                    try:
                        key = self._keys.get(timeout=0.02)
                    except queue.Empty:
                        key = None

                    if key is not None and not self.handle_key(key):
                        live.update(self.generate_display())
                        break

                    self.advance()
                    live.update(self.generate_display())

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


def main(config: VisualizerConfig) -> None:
    """Run the interactive demo."""
    demo = InteractiveDemo(config)
    demo.run()


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render the final state
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering final state')
        print()

        config = parse_config(*sys.argv[2:4])
        counter = PathCounter(config.grid_size, 0)
        total = counter.run()
        print(render_legend())
        print()
        print(render_grid(counter.snapshot()))
        print(f"\n{total} paths")
    else:
        logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
        try:
            config = parse_config(*sys.argv[1:3])
        except ValueError as e:
            print(f"ERROR: {e}")
            sys.exit(2)
        main(config)
