"""Shared test fixtures."""

import json
import os
import tempfile
from typing import Callable, List

import pytest

# settings 는 import 시점에 환경 변수를 읽는다
os.environ.setdefault("K6_SCRIPT_FILE_FOLDER", os.path.join(tempfile.gettempdir(), "api-perf-tester-tests"))
os.environ.setdefault("DASHBOARD_MOCK_MODE", "true")

from fastapi.testclient import TestClient

from app.core.limiter import limiter
from app.dependencies import get_k6_runner
from app.main import app


# =============================================================================
# Pytest configuration
# =============================================================================


def pytest_collection_modifyitems(config, items):
    """Auto-apply markers based on test directory structure."""
    for item in items:
        test_path = str(item.fspath)
        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Sample data
# =============================================================================


@pytest.fixture
def config_payload() -> dict:
    return {
        "url": "https://jsonplaceholder.typicode.com/posts",
        "method": "GET",
        "headers": '{"Content-Type": "application/json"}',
        "body": "",
        "vus": 10,
        "duration": "30s",
        "testType": "load",
    }


def k6_point(metric: str, time: str, value: float) -> str:
    return json.dumps({
        "type": "Point",
        "metric": metric,
        "data": {"time": time, "value": value, "tags": {"method": "GET", "status": "200"}},
    })


def k6_metric(metric: str, metric_type: str) -> str:
    return json.dumps({
        "type": "Metric",
        "metric": metric,
        "data": {"name": metric, "type": metric_type, "contains": "default", "thresholds": [], "submetrics": None},
    })


@pytest.fixture
def k6_request_lines() -> Callable[..., List[str]]:
    """Build k6 JSON lines for one request per (second offset, duration ms, failed) tuple."""

    def _build(requests) -> List[str]:
        lines = [
            k6_metric("http_reqs", "counter"),
            k6_metric("http_req_duration", "trend"),
            k6_metric("http_req_failed", "rate"),
        ]
        for offset, duration_ms, failed in requests:
            time = f"2025-10-19T10:00:{offset:02d}.123456789+09:00"
            lines.append(k6_point("http_reqs", time, 1))
            lines.append(k6_point("http_req_duration", time, duration_ms))
            lines.append(k6_point("http_req_failed", time, 1 if failed else 0))
        return lines

    return _build


# =============================================================================
# App / client
# =============================================================================


@pytest.fixture
def client():
    previous = limiter.enabled
    limiter.enabled = False
    with TestClient(app) as test_client:
        yield test_client
    limiter.enabled = previous
    app.dependency_overrides.clear()


@pytest.fixture
def override_runner():
    """Replace the k6 runner dependency with the given object."""

    def _override(runner):
        app.dependency_overrides[get_k6_runner] = lambda: runner
        return runner

    yield _override
    app.dependency_overrides.clear()
