"""Trend classification shared by the comparison and live paths."""

from __future__ import annotations

from manda.benchmarks.schemas import Trend

COMPARISON_THRESHOLD = 0.05
LIVE_THRESHOLD = 0.005


def classify_trend(
    current: float,
    reference: float,
    threshold: float,
) -> tuple[Trend, float]:
    """Compare ``current`` to ``reference`` with a relative dead band.

    Returns:
        ``(trend, change_percent)`` where ``change_percent`` is the signed
        relative change, rounded to one decimal place.
    """
    if reference == 0:
        if current > 0:
            return Trend.UP, 0.0
        if current < 0:
            return Trend.DOWN, 0.0
        return Trend.STABLE, 0.0

    change = round((current / reference - 1) * 100, 1)

    if current > reference * (1 + threshold):
        return Trend.UP, change
    if current < reference * (1 - threshold):
        return Trend.DOWN, change
    return Trend.STABLE, change
