from .services import get_k6_runner

# Singleton Instance 관리 패키지
__all__ = [
    "get_k6_runner",
]
