from functools import lru_cache

from app.services.testing.k6_runner import K6Runner

@lru_cache()
def get_k6_runner() -> K6Runner:
    return K6Runner()
