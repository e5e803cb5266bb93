import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError

from app.common.exception.api_exception import ApiException
from app.core.config import settings
from app.dependencies import get_k6_runner
from app.schemas.load_test.test_config_request import (BODY_METHODS, INVALID_JSON_MESSAGE, INVALID_JSON_TITLE,
                                                       HttpMethod, TestConfigRequest, TestType,
                                                       validate_json_fields)
from app.services.dashboard.metrics_presenter import build_metrics_view
from app.services import K6Runner, generate_mock_metrics

router = APIRouter()
logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

DEFAULT_FORM: Dict[str, Any] = {
    "url": "https://jsonplaceholder.typicode.com/posts",
    "method": "GET",
    "headers": '{"Content-Type": "application/json"}',
    "body": "",
    "vus": 10,
    "duration": "30s",
    "testType": "load",
}

TEST_TYPE_LABELS = {
    TestType.LOAD.value: "Load Test",
    TestType.STRESS.value: "Stress Test",
    TestType.SPIKE.value: "Spike Test",
    TestType.SOAK.value: "Soak Test",
}


def _notification(title: str, description: str, variant: str = "default") -> Dict[str, str]:
    return {"title": title, "description": description, "variant": variant}


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _parse_vus(value: str) -> int:
    # 앞쪽 정수만 사용 ("12abc" -> 12), 숫자가 없거나 0 이면 1
    match = _LEADING_INT.match(value or "")
    if not match:
        return 1
    return int(match.group(1)) or 1


def _render(
        request: Request,
        form: Dict[str, Any],
        metrics_view: Optional[Dict[str, Any]] = None,
        notification: Optional[Dict[str, str]] = None,
        last_test: Optional[Dict[str, Any]] = None,
        status_code: int = 200,
):
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "form": form,
            "methods": [method.value for method in HttpMethod],
            "body_methods": [method.value for method in BODY_METHODS],
            "test_types": TEST_TYPE_LABELS,
            "metrics": metrics_view,
            "notification": notification,
            "last_test": last_test,
            "mock_mode": settings.DASHBOARD_MOCK_MODE,
        },
        status_code=status_code,
    )


def _render_failure(request: Request, form: Dict[str, Any], status_code: int):
    return _render(
        request, form,
        notification=_notification(
            "Test failed",
            "Unable to run performance test. Please check your configuration.",
            "destructive",
        ),
        last_test=form,
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, summary="대시보드 화면")
async def dashboard(request: Request):
    return _render(request, dict(DEFAULT_FORM))


@router.post("/", response_class=HTMLResponse, summary="대시보드 테스트 실행")
async def submit_test(
        request: Request,
        url: str = Form(""),
        method: str = Form("GET"),
        headers: str = Form(""),
        body: str = Form(""),
        vus: str = Form("10"),
        duration: str = Form("30s"),
        test_type: str = Form("load", alias="testType"),
        k6_runner: K6Runner = Depends(get_k6_runner),
):
    method = method.upper()
    # body 입력란은 POST/PUT/PATCH 에서만 노출
    if method not in [m.value for m in BODY_METHODS]:
        body = ""

    form = {
        "url": url,
        "method": method,
        "headers": headers,
        "body": body,
        "vus": _parse_vus(vus),
        "duration": duration,
        "testType": test_type,
    }

    # 1. JSON 형식 검증 (headers / body)
    if validate_json_fields(headers, body):
        return _render(
            request, form,
            notification=_notification(INVALID_JSON_TITLE, INVALID_JSON_MESSAGE, "destructive"),
            status_code=400,
        )

    # 2. 설정 검증
    try:
        config = TestConfigRequest(**form)
    except ValidationError as e:
        details = "; ".join(error["msg"] for error in e.errors())
        logger.warning(f"Invalid dashboard configuration: {details}")
        return _render(
            request, form,
            notification=_notification("Invalid configuration", details, "destructive"),
            status_code=400,
        )

    # 3. 테스트 실행 (mock 모드면 임의 메트릭)
    try:
        if settings.DASHBOARD_MOCK_MODE:
            metrics = generate_mock_metrics()
        else:
            metrics = await k6_runner.run(config)
    except ApiException as e:
        logger.error(f"Dashboard test run failed: {e.message} - {e.details}")
        return _render_failure(request, form, e.code.status_code())
    except Exception as e:
        logger.error(f"Unexpected error during dashboard test run: {e}", exc_info=True)
        return _render_failure(request, form, 500)

    return _render(
        request, form,
        metrics_view=build_metrics_view(metrics),
        notification=_notification(
            "Test completed successfully",
            f"Processed {metrics.summary.total_requests:,} requests",
        ),
        last_test=form,
    )
