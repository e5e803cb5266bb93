import logging

from fastapi import APIRouter, Depends, Request

from app.common.response.response_template import ResponseTemplate
from app.core.config import settings
from app.core.limiter import limiter
from app.dependencies import get_k6_runner
from app.schemas.load_test.test_config_request import TestConfigRequest
from app.schemas.load_test.test_metrics_response import ErrorResponse, RunTestResponse
from app.services.testing.k6_runner import K6Runner

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post(
    path="/run-test",
    summary="K6 부하테스트 실행 API",
    description="""
    테스트 설정을 입력받아 K6 스크립트를 생성하고 k6 를 실행한 뒤 결과 메트릭을 반환합니다.

    ## 📝 요청 파라미터
    - **url**: 대상 URL (http/https)
    - **method**: GET, POST, PUT, DELETE, PATCH
    - **headers**: HTTP 헤더 (JSON 텍스트 또는 객체, 선택)
    - **body**: 요청 바디 (JSON 텍스트 또는 객체, 선택)
    - **vus**: 가상 사용자 수 (1 ~ 1000)
    - **duration**: 테스트 지속 시간 (예: "30s", "5m", "1h")
    - **testType**: load, stress, spike, soak
      - `load`, `soak`: vus 고정
      - `spike`: vus → 2배 급증 → vus → 0
      - `stress`: vus → 1.5배 → 2배 → 0 단계적 증가

    ## 📤 응답값
    - 성공: `{"success": true, "metrics": {"summary": {...}, "timeline": [...]}}`
    - 실패: `{"error": "...", "details": "..."}` (k6 실행/파싱 실패시 500)

    ## ⚙️ 동작 과정
    1. **스크립트 생성**: testType 에 따른 stage 구성
    2. **파일 저장**: 요청마다 고유한 파일명으로 임시 저장
    3. **테스트 실행**: `k6 run --out json=...`
    4. **결과 변환**: JSON Lines 출력을 요약/시계열 메트릭으로 집계
    5. **정리**: 스크립트와 결과 파일 삭제
    """,
    response_model=RunTestResponse,
    responses={
        400: {"model": ErrorResponse, "description": "잘못된 테스트 설정"},
        429: {"model": ErrorResponse, "description": "요청 한도 초과"},
        500: {"model": ErrorResponse, "description": "스크립트 저장 / k6 실행 / 결과 파싱 실패"},
    },
)
@limiter.shared_limit(settings.RATE_LIMIT, scope="api")
async def run_test(
        request: Request,
        config: TestConfigRequest,
        k6_runner: K6Runner = Depends(get_k6_runner),
):
    logger.info(f"Run test requested: {config.method.value} {config.url} ({config.test_type.value})")
    metrics = await k6_runner.run(config)
    return ResponseTemplate.success(metrics)
