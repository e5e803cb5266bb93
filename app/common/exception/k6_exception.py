from typing import Optional

from app.common.exception.api_exception import ApiException
from app.common.response.code import FailureCode


class ScriptWriteError(ApiException):
    """k6 스크립트 파일 저장 실패"""
    def __init__(self, details: Optional[str] = None):
        super().__init__(FailureCode.SCRIPT_WRITE_FAILED, details=details)


class K6ExecutionError(ApiException):
    """k6 실행 실패 (바이너리 없음, non-zero exit, timeout)"""
    def __init__(self, details: Optional[str] = None, returncode: Optional[int] = None):
        self.returncode = returncode
        super().__init__(FailureCode.K6_EXECUTION_FAILED, details=details)


class K6ResultParseError(ApiException):
    """k6 JSON 결과 파싱 실패"""
    def __init__(self, details: Optional[str] = None):
        super().__init__(FailureCode.K6_RESULT_PARSE_FAILED, details=details)
