import logging
import time
import uuid

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

logger = logging.getLogger("souldiary")


def _level_for(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class LoggingMiddleware(BaseHTTPMiddleware):
    """요청/응답 로그 - 4xx는 WARNING, 5xx는 ERROR"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        request_id = request.headers.get("x-request-id") or uuid.uuid4().hex[:12]
        client = request.client.host if request.client else "-"
        line = f"{request.method} {request.url.path} from {client} [{request_id}]"

        logger.info(f"[Request] {line}")
        try:
            response = await call_next(request)
        except Exception:
            logger.exception(f"[Unhandled Error] {line}")
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        logger.log(
            _level_for(response.status_code),
            f"[Response] {line} -> {response.status_code} in {duration_ms:.1f}ms",
        )
        response.headers["X-Request-ID"] = request_id
        return response
