"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Captures request/response data of every API call and ingests one structured
event per request into an Axiom dataset: method, path, params, JSON body,
status code, duration and the error detail of failed responses.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.config import settings

# 마스킹 대상 키 패턴 — Keys whose values never leave the process
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

_MAX_BODY_LEN = 2000
_MAX_ERROR_LEN = 500


def _truncate(value: str, max_len: int) -> str:
    """로그 크기 제한 — Truncate long strings to keep events small."""
    if len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def _mask_dict(data: dict[str, Any]) -> dict[str, Any]:
    """민감 필드 마스킹 — Replace values of sensitive keys with "***"."""
    return {k: "***" if _SENSITIVE_KEYS.search(k) else v for k, v in data.items()}


def _parse_body(body: bytes) -> Any:
    """요청 body를 JSON으로 해석합니다 (non-JSON bodies are summarized)."""
    if not body:
        return None
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return "(non-json body)"
    if isinstance(data, str):
        return _truncate(data, _MAX_BODY_LEN)
    return data


def _error_detail(body: bytes) -> str:
    """에러 응답 body에서 detail 추출 — Extract "detail" from an error response."""
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _truncate(body.decode("utf-8", errors="replace"), _MAX_ERROR_LEN)
    detail = data.get("detail", data) if isinstance(data, dict) else data
    return _truncate(detail if isinstance(detail, str) else json.dumps(detail), _MAX_ERROR_LEN)


def build_log_event(
    request: Request,
    status_code: int,
    duration_ms: float,
    request_body: Any = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Axiom 로그 이벤트를 구성합니다.

    Build the event dict ingested into Axiom for one request.
    Optional keys are only present when they carry a value.
    """
    event: dict[str, Any] = {
        "method": request.method,
        "path": request.url.path,
        "status_code": status_code,
        "duration_ms": duration_ms,
    }
    if request.query_params:
        event["query_params"] = _mask_dict(dict(request.query_params))
    if request.path_params:
        event["path_params"] = dict(request.path_params)
    if request_body is not None:
        event["request_body"] = request_body
    if error:
        event["error"] = error
    return event


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 API 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs all API requests and responses to Axiom.
    Acts as a pass-through when no Axiom token/dataset is configured.
    """

    def __init__(self, app: Any, client: AxiomClient | None = None, dataset: str | None = None) -> None:
        super().__init__(app)
        self._dataset: str = dataset if dataset is not None else settings.AXIOM_DATASET
        self._client: AxiomClient | None = client

        if self._client is None and settings.AXIOM_API_TOKEN and self._dataset:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._client or request.url.path in _SKIP_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()

        # Request body 읽기 — Only methods that carry a body
        request_body: Any = None
        if request.method in ("POST", "PUT", "PATCH"):
            request_body = _parse_body(await request.body())

        error: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code

            # 에러 응답시 body에서 사유 추출 후 다시 감싸서 반환
            # Error responses: read the streamed body, then re-wrap it
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                error = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
            event = build_log_event(request, status_code, duration_ms, request_body, error)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록 — Never break a request on log failure

        return response
