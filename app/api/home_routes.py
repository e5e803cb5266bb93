from datetime import datetime

import pytz
from fastapi import APIRouter, Request

from app.core.config import settings
from app.core.limiter import limiter
from app.schemas.load_test.test_metrics_response import HealthResponse

router = APIRouter()


def current_timestamp() -> str:
    """ISO-8601 UTC 타임스탬프 (밀리초, Z 접미사)"""
    now = datetime.now(pytz.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@router.get(
    path="/health",
    summary="health check",
    description="health check 용 엔드포인트",
    response_model=HealthResponse,
)
@limiter.shared_limit(settings.RATE_LIMIT, scope="api")
async def health(request: Request):
    return {"status": "OK", "timestamp": current_timestamp()}
