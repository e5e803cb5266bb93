"""Tests for mock metric generation used by the dashboard."""

import random

import pytest

from app.services.testing.mock_metrics_service import generate_mock_metrics


@pytest.mark.parametrize("seed", range(25))
def test_summary_ranges(seed) -> None:
    summary = generate_mock_metrics(random.Random(seed)).summary
    assert 1000 <= summary.total_requests <= 10999
    assert 95 <= summary.success_rate <= 100
    assert 100 <= summary.avg_response_time <= 300
    assert 200 <= summary.p95_response_time <= 500
    assert 50 <= summary.rps <= 150
    assert 0 <= summary.errors <= 49
    assert summary.errors <= summary.total_requests


def test_timeline_shape() -> None:
    timeline = generate_mock_metrics(random.Random(7)).timeline
    assert len(timeline) == 20
    assert timeline[0].timestamp == "0s"
    assert timeline[-1].timestamp == "95s"
    for point in timeline:
        assert 80 <= point.response_time <= 230
        assert 40 <= point.rps <= 120
        assert 0 <= point.errors <= 2


def test_seeded_generation_is_reproducible() -> None:
    first = generate_mock_metrics(random.Random(42))
    second = generate_mock_metrics(random.Random(42))
    assert first == second


def test_serializes_with_camel_case_keys() -> None:
    data = generate_mock_metrics(random.Random(1)).model_dump(by_alias=True)
    assert set(data["summary"]) == {
        "totalRequests", "successRate", "avgResponseTime", "p95ResponseTime", "rps", "errors",
    }
    assert set(data["timeline"][0]) == {"timestamp", "responseTime", "rps", "errors"}
