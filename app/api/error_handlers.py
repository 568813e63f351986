from __future__ import annotations

from typing import Any, Callable

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.errors import ApiError
from app.services.responses import failure

INTERNAL_ERROR_MESSAGE = "サーバー内部エラーが発生しました"
INVALID_REQUEST_MESSAGE = "リクエストが不正です"

logger = structlog.get_logger(__name__)


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    logger.warning("request.failed", status_code=exc.status_code, error=exc.message)
    return JSONResponse(status_code=exc.status_code, content=failure(exc.message, exc.detail))


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}" for error in exc.errors()
    )
    return JSONResponse(status_code=400, content=failure(INVALID_REQUEST_MESSAGE, detail))


async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=failure(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_error_handler)


class ErrorBoundaryMiddleware:
    """Turns any exception escaping a handler into a 500 error envelope."""

    def __init__(self, app: Callable[..., Any]) -> None:
        self.app = app

    async def __call__(self, scope: dict[str, Any], receive: Callable[..., Any], send: Callable[..., Any]) -> None:
        if scope.get("type") != "http":
            await self.app(scope, receive, send)
            return

        response_started = False

        async def send_wrapper(message: dict[str, Any]) -> None:
            nonlocal response_started
            if message.get("type") == "http.response.start":
                response_started = True
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        except Exception as exc:
            logger.exception("request.unhandled_error", error=str(exc))
            if response_started:
                # Headers are already on the wire; nothing sensible left to send.
                raise
            response = JSONResponse(
                status_code=500,
                content=failure(INTERNAL_ERROR_MESSAGE, str(exc) or type(exc).__name__),
            )
            await response(scope, receive, send)
