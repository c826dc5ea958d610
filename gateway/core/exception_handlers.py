"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to ``{"error": ...}`` JSON responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gateway.core.config import get_settings
from gateway.domain.exceptions import GatewayException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 400,
    "TENANT_NOT_FOUND": 404,
    "FEATURE_DISABLED": 403,
    "INTERNAL_ERROR": 500,
}


def _gateway_exception_handler(request: Request, exc: GatewayException) -> JSONResponse:
    """Return exc.to_dict() with the status mapped from its error_code.

    500 bodies also carry the underlying reason as "message" when
    EXPOSE_ERROR_DETAILS is on.
    """
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    content: dict[str, Any] = exc.to_dict()
    if status >= 500:
        reason = exc.details.get("reason")
        if reason and get_settings().expose_error_details:
            content["message"] = reason
    else:
        logger.info("%s %s -> %s: %s", request.method, request.url.path, status, exc.message)
    return JSONResponse(status_code=status, content=content)


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include the exception message when details are exposed."""
    logger.exception("Unhandled exception: %s", exc)
    content: dict[str, Any] = {"error": "An unexpected error occurred"}
    if get_settings().expose_error_details:
        content["message"] = str(exc)
    return JSONResponse(status_code=500, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: GatewayException (and
    subclasses), RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(GatewayException, _gateway_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
