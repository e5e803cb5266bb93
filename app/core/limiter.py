from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# /api 라우트에 클라이언트 IP 기준으로 적용
limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)
