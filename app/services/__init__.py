from app.services.testing.k6_runner import K6Runner
from app.services.testing.k6_script_service import generate_k6_script
from app.services.testing.mock_metrics_service import generate_mock_metrics

__all__ = [
    "K6Runner",
    "generate_k6_script",
    "generate_mock_metrics",
]
