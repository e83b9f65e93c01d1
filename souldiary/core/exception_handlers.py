import logging
import traceback
from typing import Any, Dict

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.exc import DisconnectionError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from .exceptions import InternalServerError, StoreUnavailableError

logger = logging.getLogger("souldiary")


def _request_context(request: Request) -> Dict[str, Any]:
    client = request.client.host if request.client else "-"
    return {
        "method": request.method,
        "url": str(request.url),
        "client": client,
    }


async def handle_base_api_exception(request, exc):
    ctx = _request_context(request)
    if getattr(exc, "status_code", 500) >= 500:
        logger.error(
            f"[BaseAPIException] {ctx['method']} {ctx['url']} from {ctx['client']} -> {exc.status_code}: {exc.detail}"
        )
    else:
        logger.warning(
            f"[BaseAPIException] {ctx['method']} {ctx['url']} from {ctx['client']} -> {exc.status_code}: {exc.detail}"
        )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.detail,  # type: ignore[arg-type]
        headers=getattr(exc, "headers", None),
    )


async def handle_http_exception(request, exc):
    ctx = _request_context(request)
    error_msg = f"[HTTPException] {ctx['method']} {ctx['url']} from {ctx['client']} -> {exc.status_code}: {exc.detail}"

    if getattr(exc, "status_code", 500) >= 500:
        tb_str = "".join(traceback.format_tb(exc.__traceback__))
        logger.error(f"{error_msg}\n\nStack Trace:\n{tb_str}")
    else:
        logger.warning(error_msg)
    # If detail is already structured (e.g., from BaseAPIException), pass through; else normalize
    if isinstance(exc.detail, dict) and "error" in exc.detail:  # type: ignore[truthy-bool]
        content = exc.detail  # type: ignore[assignment]
    else:
        content = {
            "success": False,
            "message": str(exc.detail),
            "error": {
                "code": "HTTP_ERROR",
                "message": str(exc.detail),
                "details": {},
            },
        }
    return JSONResponse(
        status_code=exc.status_code,
        content=content,
        headers=getattr(exc, "headers", None),
    )


async def handle_validation_error(request, exc):
    """누락/형식 오류 필드는 400으로 응답"""
    ctx = _request_context(request)
    logger.warning(
        f"[ValidationError] {ctx['method']} {ctx['url']} from {ctx['client']} -> 400: {exc.errors()}"
    )
    content = {
        "success": False,
        "message": "Missing or invalid fields",
        "error": {
            "code": "VALIDATION_001",
            "message": "Missing or invalid fields",
            "details": {"errors": jsonable_encoder(exc.errors())},
        },
    }
    return JSONResponse(status_code=400, content=content)


async def handle_database_error(request, exc):
    """DB 오류 - 원인은 서버 로그에만 남기고 클라이언트에는 일반 메시지만 반환"""
    ctx = _request_context(request)
    logger.error(
        f"[DatabaseError] {ctx['method']} {ctx['url']} from {ctx['client']}: {type(exc).__name__}: {exc}",
        exc_info=exc,
    )
    if isinstance(exc, (PoolTimeoutError, OperationalError, DisconnectionError)):
        error = StoreUnavailableError()
    else:
        error = InternalServerError()
    return JSONResponse(status_code=error.status_code, content=error.detail)  # type: ignore[arg-type]


async def handle_unexpected_error(request, exc):
    ctx = _request_context(request)

    tb_str = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error(
        f"[Unhandled Error] {ctx['method']} {ctx['url']} from {ctx['client']}\n"
        f"Exception Type: {type(exc).__name__}\n"
        f"Exception Message: {str(exc)}\n\n"
        f"Full Stack Trace:\n{tb_str}"
    )

    internal = InternalServerError()
    return JSONResponse(status_code=internal.status_code, content=internal.detail)  # type: ignore[arg-type]
