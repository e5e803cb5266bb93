"""Tests for response time statistics."""

import pytest

from app.utils.metrics_calculator import MetricsCalculator


def test_percentile_interpolates() -> None:
    values = [float(v) for v in range(1, 101)]
    assert MetricsCalculator.percentile(values, 95) == pytest.approx(95.05)
    assert MetricsCalculator.percentile(values, 50) == pytest.approx(50.5)


def test_percentile_edge_cases() -> None:
    assert MetricsCalculator.percentile([], 95) == 0.0
    assert MetricsCalculator.percentile([42.0], 95) == 42.0


def test_response_time_stats() -> None:
    stats = MetricsCalculator.calculate_response_time_stats([30.0, 10.0, 20.0])
    assert stats.avg_value == pytest.approx(20.0)
    assert stats.p95_value == pytest.approx(29.0)
    assert isinstance(stats.p95_value, float)


def test_response_time_stats_empty() -> None:
    stats = MetricsCalculator.calculate_response_time_stats([])
    assert (stats.avg_value, stats.p95_value) == (0.0, 0.0)


def test_success_rate_is_bounded() -> None:
    assert MetricsCalculator.calculate_success_rate(0, 0) == 0.0
    assert MetricsCalculator.calculate_success_rate(10, 20) == 0.0
    assert MetricsCalculator.calculate_success_rate(10, -1) == 100.0
    assert MetricsCalculator.calculate_success_rate(4, 1) == pytest.approx(75.0)
