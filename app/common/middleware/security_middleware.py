"""
보안 관련 미들웨어
- 기본 보안 헤더 추가
- 요청 바디 크기 제한
"""
import logging

from fastapi import FastAPI, Request

from app.common.response.code import FailureCode
from app.common.response.response_template import ResponseTemplate
from app.core.config import settings

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "Cross-Origin-Opener-Policy": "same-origin",
}


def register_security_headers_middleware(app: FastAPI):
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response = await call_next(request)
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        return response


SIZE_CHECKED_METHODS = ("POST", "PUT", "PATCH", "DELETE")


def register_body_size_limit_middleware(app: FastAPI):
    @app.middleware("http")
    async def limit_body_size(request: Request, call_next):
        content_length = request.headers.get("content-length")
        if content_length and content_length.isdigit():
            body_size = int(content_length)
        elif content_length is None and request.method in SIZE_CHECKED_METHODS:
            # chunked 전송은 헤더가 없으므로 실제 바디 크기로 검사
            body_size = len(await request.body())
        else:
            body_size = 0

        if body_size > settings.MAX_REQUEST_BODY_BYTES:
            logger.warning(f"Request body too large: {body_size} bytes ({request.url.path})")
            return ResponseTemplate.fail(
                FailureCode.PAYLOAD_TOO_LARGE,
                details=f"Request body exceeds {settings.MAX_REQUEST_BODY_BYTES} bytes",
            )
        return await call_next(request)
