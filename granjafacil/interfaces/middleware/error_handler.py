from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException

from granjafacil.domain.errors import AppError, InfrastructureError, ValidationError

logger = logging.getLogger(__name__)


def _error_body(code: str, message: str, details=None) -> dict:
    payload = {"code": code, "message": message}
    if details is not None:
        payload["details"] = jsonable_encoder(details)
    return payload


def register_error_handlers(app: FastAPI) -> None:
    """Every failure leaves the API as `{"code", "message", "details"?}`."""

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError) -> JSONResponse:
        logger.info(
            "Application error handled: %s - %s (status: %d)",
            exc.code,
            exc.message,
            exc.status_code,
            extra={"path": request.url.path, "method": request.method},
        )
        details = dict(exc.details) if exc.details is not None else None
        return JSONResponse(
            status_code=exc.status_code, content=_error_body(exc.code, exc.message, details)
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        content = _error_body(
            ValidationError.code, "Invalid request payload", {"errors": exc.errors()}
        )
        return JSONResponse(status_code=ValidationError.status_code, content=content)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code, content=_error_body("http_error", str(exc.detail))
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        error = InfrastructureError("Unexpected server error")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=_error_body(error.code, error.message),
        )
