"""
대시보드 결과 화면용 뷰 모델 생성
요약 카드, 상세 지표, Chart.js 시계열 데이터를 만든다.
"""
from typing import Any, Dict, List

from app.schemas.load_test.test_metrics_response import MetricsSummary, TestMetrics
from app.utils.metrics_calculator import MetricsCalculator


def format_duration(ms: float) -> str:
    """1초 미만은 ms, 이상은 초 단위(소수 둘째 자리)로 표시"""
    if ms < 1000:
        return f"{ms:.0f}ms"
    return f"{ms / 1000:.2f}s"


def success_rate_level(rate: float) -> str:
    if rate >= 99:
        return "success"
    if rate >= 95:
        return "warning"
    return "error"


def error_rate(summary: MetricsSummary) -> float:
    return MetricsCalculator.calculate_error_rate(summary.total_requests, summary.errors)


def _summary_cards(summary: MetricsSummary) -> List[Dict[str, str]]:
    return [
        {"label": "Total Requests", "value": f"{summary.total_requests:,}", "tone": "primary"},
        {
            "label": "Success Rate",
            "value": f"{summary.success_rate:.2f}%",
            "tone": success_rate_level(summary.success_rate),
        },
        {"label": "Avg Response", "value": format_duration(summary.avg_response_time), "tone": "secondary"},
        {"label": "Requests/sec", "value": f"{summary.rps:.1f}", "tone": "warning"},
    ]


def _performance_details(summary: MetricsSummary) -> List[Dict[str, str]]:
    error_variant = "destructive" if summary.errors > 0 else "secondary"
    return [
        {"label": "P95 Response Time", "value": format_duration(summary.p95_response_time), "variant": "outline"},
        {"label": "Total Errors", "value": str(summary.errors), "variant": error_variant},
        {"label": "Error Rate", "value": f"{error_rate(summary):.2f}%", "variant": error_variant},
    ]


def build_chart_data(metrics: TestMetrics) -> Dict[str, List[Any]]:
    """Chart.js 에 그대로 넘기는 시계열 데이터 (x 축: timestamp)"""
    return {
        "labels": [point.timestamp for point in metrics.timeline],
        "responseTime": [round(point.response_time, 2) for point in metrics.timeline],
        "rps": [round(point.rps, 2) for point in metrics.timeline],
        "errors": [point.errors for point in metrics.timeline],
    }


def build_metrics_view(metrics: TestMetrics) -> Dict[str, Any]:
    return {
        "cards": _summary_cards(metrics.summary),
        "details": _performance_details(metrics.summary),
        "charts": build_chart_data(metrics),
    }
