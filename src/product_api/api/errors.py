# src/product_api/api/errors.py
"""
Single translation point from failures to HTTP error responses.

Every error body has the shape ``{"error": {"name", "message", "statusCode"}}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from product_api.core.metrics import API_ERROR_COUNT
from product_api.domain.errors import ApiError, NotFoundError, ValidationError
from product_api.domain.models import ErrorDetail, ErrorEnvelope

logger = logging.getLogger(__name__)

GENERIC_ERROR_NAME = "Error"
GENERIC_ERROR_MESSAGE = "Internal Server Error"


def error_response(name: str, message: str, status_code: int) -> JSONResponse:
    API_ERROR_COUNT.labels(name=name).inc()
    envelope = ErrorEnvelope(
        error=ErrorDetail(name=name, message=message, status_code=status_code)
    )
    return JSONResponse(content=envelope.model_dump(by_alias=True), status_code=status_code)


def translate(exc: Exception) -> JSONResponse:
    """Maps any failure to its error response. Unknown failures become 500."""
    if isinstance(exc, ApiError):
        return error_response(exc.name, exc.message, exc.status_code)
    return error_response(
        GENERIC_ERROR_NAME,
        str(exc) or GENERIC_ERROR_MESSAGE,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def _api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return translate(exc)


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return await _api_error_handler(request, NotFoundError("Endpoint not found"))
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return error_response(GENERIC_ERROR_NAME, str(exc.detail), exc.status_code)


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return await _api_error_handler(request, ValidationError("Invalid request parameters"))


async def _unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return translate(exc)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_exception_handler)
