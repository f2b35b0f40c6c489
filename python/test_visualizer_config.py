"""Tests for visualizer_config module."""

import logging

import pytest

from visualizer_config import (
    GRID_SIZE_MAX,
    GRID_SIZE_MIN,
    STEP_DELAY_MS_MAX,
    STEP_DELAY_MS_MIN,
    VisualizerConfig,
    parse_config,
)


class TestVisualizerConfig:
    """Tests for the config value type."""

    def test_defaults(self) -> None:
        """Defaults are a 5x5 grid at 300 ms."""
        config = VisualizerConfig()
        assert config.grid_size == 5
        assert config.step_delay_ms == 300
        assert config.step_delay == pytest.approx(0.3)

    def test_with_grid_size_clamps(self) -> None:
        """Grid size is clamped into range."""
        config = VisualizerConfig()
        assert config.with_grid_size(25).grid_size == GRID_SIZE_MAX
        assert config.with_grid_size(1).grid_size == GRID_SIZE_MIN
        assert config.with_grid_size(7).grid_size == 7

    def test_with_step_delay_clamps(self) -> None:
        """Step delay is clamped into range."""
        config = VisualizerConfig()
        assert config.with_step_delay_ms(50).step_delay_ms == STEP_DELAY_MS_MIN
        assert config.with_step_delay_ms(5000).step_delay_ms == STEP_DELAY_MS_MAX

    def test_copies_are_independent(self) -> None:
        """with_* returns a new config and leaves the original alone."""
        config = VisualizerConfig()
        changed = config.with_grid_size(8)
        assert config.grid_size == 5
        assert changed.step_delay_ms == config.step_delay_ms

    def test_clamp_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Clamping is reported as a warning."""
        with caplog.at_level(logging.WARNING, logger="visualizer_config"):
            VisualizerConfig().with_grid_size(99)
        assert "out of range" in caplog.text

    def test_in_range_is_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        """Values already in range produce no warning."""
        with caplog.at_level(logging.WARNING, logger="visualizer_config"):
            VisualizerConfig().with_grid_size(6)
        assert caplog.text == ""


class TestParseConfig:
    """Tests for parsing raw input values."""

    def test_no_arguments(self) -> None:
        """No input gives the defaults."""
        assert parse_config() == VisualizerConfig()

    def test_numeric_strings(self) -> None:
        """Command-line strings are accepted."""
        assert parse_config("7", "250") == VisualizerConfig(7, 250)

    def test_whitespace_and_float_text(self) -> None:
        """Surrounding whitespace and decimal text are tolerated."""
        assert parse_config(" 12.0 ", "400") == VisualizerConfig(12, 400)

    def test_numbers_are_clamped(self) -> None:
        """Out-of-range numbers are clamped, not rejected."""
        assert parse_config(1, 5000) == VisualizerConfig(GRID_SIZE_MIN, STEP_DELAY_MS_MAX)
        assert parse_config(100, 0) == VisualizerConfig(GRID_SIZE_MAX, STEP_DELAY_MS_MIN)

    @pytest.mark.parametrize("bad", ["abc", "", "inf", float("nan"), None, True])
    def test_non_numeric_grid_size(self, bad: object) -> None:
        """Non-numeric grid sizes are rejected with the field name."""
        with pytest.raises(ValueError, match="Invalid grid size"):
            parse_config(bad)  # type: ignore[arg-type]

    def test_non_numeric_step_delay(self) -> None:
        """Non-numeric step delays are rejected with the accepted range."""
        with pytest.raises(ValueError, match="between 100 and 1000"):
            parse_config(5, "fast")
