from typing import Any, Optional

from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder
from app.common.response.code import BaseCode

class ResponseTemplate:
    """
    /api 응답 포맷
    - 성공: {"success": true, "metrics": ...}
    - 실패: {"error": "...", "details": "..."}
    """

    @classmethod
    def success(cls, metrics: Any = None):
        response_body = {
            "success": True,
            "metrics": metrics,
        }
        return JSONResponse(content=jsonable_encoder(response_body, by_alias=True), status_code=200)

    @classmethod
    def fail(cls, code: BaseCode, custom_message: str = None, details: Optional[str] = None):
        # 응답을 바로 만들어서 반환
        status_code = code.status_code()
        message = custom_message or code.message()

        response_body = {
            "error": message,
            "details": details,
        }
        return JSONResponse(content=jsonable_encoder(response_body), status_code=status_code)
