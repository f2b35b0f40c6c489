"""Smoke tests for the demonstration scripts."""

import pytest

from demo import cancellation_demo, demo, traversal_demo


def test_count_table(capsys: pytest.CaptureFixture[str]) -> None:
    """Every row of the table matches the closed form."""
    demo()
    out = capsys.readouterr().out
    assert out.count("✓") == 10
    assert "✗" not in out


def test_traversal_trace(capsys: pytest.CaptureFixture[str]) -> None:
    """The 2x2 trace shows all 16 snapshots and the total."""
    traversal_demo(2)
    out = capsys.readouterr().out
    assert "(16 snapshots)" in out
    assert "[16] cleanup 0,0  stack: (empty)" in out
    assert "Total: 2 paths (goal settled 1 time(s), 4 cells visited)" in out


def test_cancellation(capsys: pytest.CaptureFixture[str]) -> None:
    """The superseded run emits nothing after the restart."""
    cancellation_demo()
    out = capsys.readouterr().out
    assert "cancelled=True, snapshots after restart=0, total=None" in out
    assert "total=20" in out
