"""
Configuration for the path-counting visualizer: input bounds, parsing and clamping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

logger = logging.getLogger(__name__)

GRID_SIZE_MIN = 2
GRID_SIZE_MAX = 20
STEP_DELAY_MS_MIN = 100
STEP_DELAY_MS_MAX = 1000

DEFAULT_GRID_SIZE = 5
DEFAULT_STEP_DELAY_MS = 300


def _clamp(name: str, value: int, low: int, high: int) -> int:
    clamped = max(low, min(high, value))
    if clamped != value:
        logger.warning("%s %d out of range [%d, %d], using %d", name, value, low, high, clamped)
    return clamped


def _to_int(name: str, value: int | float | str, low: int, high: int) -> int:
    """Convert user input to an int, raising ValueError with the accepted range on failure."""
    try:
        if isinstance(value, bool):
            raise TypeError(value)
        number = value if isinstance(value, (int, float)) else float(value.strip())
        return int(number)
    except (AttributeError, TypeError, ValueError, OverflowError):
        raise ValueError(
            f"Invalid {name}: {value!r}\n"
            f"  Expected a number between {low} and {high}"
        ) from None


@dataclass(frozen=True)
class VisualizerConfig:
    """Grid size and step delay as accepted by the visualizer's inputs."""

    grid_size: int = DEFAULT_GRID_SIZE
    step_delay_ms: int = DEFAULT_STEP_DELAY_MS

    @property
    def step_delay(self) -> float:
        """Step delay in seconds."""
        return self.step_delay_ms / 1000

    def with_grid_size(self, grid_size: int) -> VisualizerConfig:
        return replace(self, grid_size=_clamp("grid size", grid_size, GRID_SIZE_MIN, GRID_SIZE_MAX))

    def with_step_delay_ms(self, step_delay_ms: int) -> VisualizerConfig:
        return replace(
            self,
            step_delay_ms=_clamp("step delay (ms)", step_delay_ms, STEP_DELAY_MS_MIN, STEP_DELAY_MS_MAX),
        )


def parse_config(
    grid_size: int | float | str = DEFAULT_GRID_SIZE,
    step_delay_ms: int | float | str = DEFAULT_STEP_DELAY_MS,
) -> VisualizerConfig:
    """
    Build a config from raw input values.

    Numbers (or numeric strings) are clamped into the accepted ranges;
    anything non-numeric raises ValueError before a run can start.

    Args:
        grid_size: Cells per side, clamped to [2, 20]
        step_delay_ms: Milliseconds per pause unit, clamped to [100, 1000]

    Returns:
        A valid VisualizerConfig
    """
    size = _to_int("grid size", grid_size, GRID_SIZE_MIN, GRID_SIZE_MAX)
    delay = _to_int("step delay (ms)", step_delay_ms, STEP_DELAY_MS_MIN, STEP_DELAY_MS_MAX)
    return VisualizerConfig().with_grid_size(size).with_step_delay_ms(delay)
