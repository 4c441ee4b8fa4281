"""
Exception handlers.

Every error leaves the API with the same body shape:
``{"status_code": ..., "error": ..., "message": ...}``.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.exceptions import AuthenticationError, InternalError, TaskBridgeError

from .models import ValidationErrorResponse

logger = logging.getLogger(__name__)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _error_body(status_code: int, error: str, message: str) -> dict:
    return {"status_code": status_code, "error": error, "message": message}


async def taskbridge_error_handler(request: Request, exc: TaskBridgeError) -> JSONResponse:
    """Render domain errors with their own status code."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.code}: {exc.message}")
    # Relayed upstream 401s keep their status but carry no challenge
    headers = BEARER_CHALLENGE if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework errors (unknown route, wrong method) in the common shape."""
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    error = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.status_code, error, message),
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed bodies and query strings with field details."""
    body = ValidationErrorResponse(details=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=body.status_code, content=body.model_dump())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: never leak internals to the client."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    """Attach all handlers to ``app``."""
    app.add_exception_handler(TaskBridgeError, taskbridge_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
