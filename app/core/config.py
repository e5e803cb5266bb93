import os
from typing import List
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """애플리케이션 설정"""

    # 서버 설정
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "3001"))

    # 로깅 설정
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # k6 설정
    K6_BINARY: str = os.getenv("K6_BINARY", "k6")
    K6_SCRIPT_FILE_FOLDER: str = os.getenv("K6_SCRIPT_FILE_FOLDER", "./temp")
    K6_RUN_TIMEOUT_SECONDS: int = int(os.getenv("K6_RUN_TIMEOUT_SECONDS", "3600"))  # 0이면 제한 없음
    K6_TIMELINE_BUCKET_SECONDS: int = int(os.getenv("K6_TIMELINE_BUCKET_SECONDS", "5"))

    # 시간대 (파일명, health 응답)
    TIMEZONE: str = os.getenv("TIMEZONE", "UTC")

    # 보안 / 요청 제한 설정
    CORS_ALLOW_ORIGINS: List[str] = [
        origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
    ]
    RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    RATE_LIMIT: str = os.getenv("RATE_LIMIT", "100 per 15 minutes")
    MAX_REQUEST_BODY_BYTES: int = int(os.getenv("MAX_REQUEST_BODY_BYTES", str(10 * 1024 * 1024)))

    # 대시보드 설정 (true 이면 k6 대신 mock 메트릭 사용)
    DASHBOARD_MOCK_MODE: bool = os.getenv("DASHBOARD_MOCK_MODE", "true").lower() == "true"

    @classmethod
    def get_k6_config(cls) -> dict:
        """k6 실행 설정을 딕셔너리로 반환"""
        return {
            "binary": cls.K6_BINARY,
            "script_folder": cls.K6_SCRIPT_FILE_FOLDER,
            "timeout_seconds": cls.K6_RUN_TIMEOUT_SECONDS or None,
            "bucket_seconds": cls.K6_TIMELINE_BUCKET_SECONDS,
        }

    @classmethod
    def validate_k6_config(cls) -> bool:
        """k6 설정 유효성 검증"""
        try:
            if not cls.K6_BINARY or not cls.K6_SCRIPT_FILE_FOLDER:
                return False

            if cls.K6_RUN_TIMEOUT_SECONDS < 0:
                return False

            if cls.K6_TIMELINE_BUCKET_SECONDS < 1:
                return False

            return True
        except (ValueError, TypeError):
            return False


settings = Settings()
