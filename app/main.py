import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.api import api_router
from app.core.config import settings
from app.core.limiter import limiter
from app.common.exceptionhandler import register_exception_handler
from app.common.middleware import (register_cors_middleware,
                                   register_security_headers_middleware,
                                   register_body_size_limit_middleware)
from app.utils.file_writer import FileWriter

# 로깅 설정
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 라이프사이클 관리"""
    # 시작 시 실행
    logger.info("Starting API Perf Tester...")

    if not settings.validate_k6_config():
        logger.warning(f"Invalid k6 configuration: {settings.get_k6_config()}")

    if FileWriter.ensure_directory_exists(settings.K6_SCRIPT_FILE_FOLDER):
        logger.info(f"k6 script folder ready: {settings.K6_SCRIPT_FILE_FOLDER}")

    if settings.DASHBOARD_MOCK_MODE:
        logger.info("Dashboard is running in mock mode")

    yield

    # 종료 시 실행
    logger.info("Shutting down API Perf Tester...")


app = FastAPI(
    title="API Perf Tester",
    description="k6 부하테스트 스크립트를 생성/실행하고 결과를 시각화하는 API 입니다.",
    version="1.0.0",
    docs_url="/api/swagger",
    lifespan=lifespan
)

app.state.limiter = limiter

app.include_router(api_router)

register_body_size_limit_middleware(app)
register_security_headers_middleware(app)
register_cors_middleware(app)
register_exception_handler(app)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"API Perf Tester running on port {settings.PORT}")
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
