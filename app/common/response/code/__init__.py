from app.common.response.code.base_code import BaseCode
from app.common.response.code.failure_code import FailureCode

__all__ = [
    'FailureCode',
    'BaseCode',
]
