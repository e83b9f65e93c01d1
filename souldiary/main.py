import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from mangum import Mangum
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware

from souldiary.containers import Container
from souldiary.core.exception_handlers import (
    handle_base_api_exception,
    handle_database_error,
    handle_http_exception,
    handle_unexpected_error,
    handle_validation_error,
)
from souldiary.core.exceptions import BaseAPIException
from souldiary.core.logging_middleware import LoggingMiddleware
from souldiary.logging_config import setup_logging
from souldiary.routers import (
    auth_router,
    calendar_router,
    diary_router,
    health_router,
    sticker_router,
    user_router,
)

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> FastAPI:
    if container is None:
        load_dotenv()
        container = Container()

    settings = container.config()
    setup_logging(settings.LOG_LEVEL, json_logs=settings.LOG_JSON)

    app = FastAPI(title=settings.APP_NAME, debug=settings.DEBUG)
    app.container = container  # type: ignore

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.add_exception_handler(BaseAPIException, handle_base_api_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(SQLAlchemyError, handle_database_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    @app.get("/")
    def hello() -> dict:
        return {"success": True, "message": "Welcome to SoulDiary API"}

    app.include_router(health_router.router)
    app.include_router(auth_router.router)
    app.include_router(user_router.router)
    app.include_router(diary_router.router)
    app.include_router(sticker_router.router)
    app.include_router(calendar_router.router)

    logger.info(f"{settings.APP_NAME} started ({settings.ENVIRONMENT})")
    return app


app = create_app()

handler = Mangum(app)
