from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass
class MetricStats:
    """응답시간 통계 결과"""
    avg_value: float
    p95_value: float


class MetricsCalculator:
    """k6 결과 메트릭 통계 계산 유틸리티"""

    @staticmethod
    def average(values: List[float]) -> float:
        if not values:
            return 0.0
        return float(np.mean(np.asarray(values, dtype=np.float64)))

    @staticmethod
    def percentile(values: List[float], pct: float) -> float:
        """
        선형 보간 백분위수 (k6 의 p(95) 계산 방식과 동일)

        Args:
            values: 계산할 값들의 리스트
            pct: 0 ~ 100 사이 백분위

        Returns:
            float: 백분위 값 (값이 없으면 0.0)
        """
        if not values:
            return 0.0
        return float(np.percentile(np.asarray(values, dtype=np.float64), pct))

    @staticmethod
    def calculate_response_time_stats(values: List[float]) -> MetricStats:
        """평균 / P95 응답시간 계산"""
        if not values:
            return MetricStats(0.0, 0.0)

        arr = np.asarray(values, dtype=np.float64)
        return MetricStats(
            avg_value=float(np.mean(arr)),
            p95_value=float(np.percentile(arr, 95)),
        )

    @staticmethod
    def calculate_success_rate(total_requests: int, errors: int) -> float:
        """성공률 (%) 계산. 요청이 없으면 0.0, 항상 0 ~ 100 범위"""
        if total_requests <= 0:
            return 0.0
        errors = min(max(errors, 0), total_requests)
        return (total_requests - errors) / total_requests * 100

    @staticmethod
    def calculate_error_rate(total_requests: int, errors: int) -> float:
        """에러율 (%) 계산. 요청이 없으면 0.0"""
        if total_requests <= 0:
            return 0.0
        return errors / total_requests * 100
