"""
Exception Handlers for FastAPI Application.

Every error leaves the API as ``{"error": ..., "message": ...}``:

- request validation failures become 400 with per-field ``details``
- ``HTTPException`` and service errors keep their status, with the HTTP
  reason phrase as ``error``
- anything else becomes 500 with an ``error_id`` that is also logged with the
  full traceback
"""

import traceback
import uuid
from http import HTTPStatus
from typing import Any, Dict, List

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from skillbridge.core.logging_config import get_logger
from skillbridge.core.monitoring import log_error
from skillbridge.server.services.errors import ServiceError

logger = get_logger(__name__)


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_body(status_code: int, message: str, **extra: Any) -> Dict[str, Any]:
    return {"error": _reason(status_code), "message": message, **extra}


def _field_errors(exc: RequestValidationError) -> List[Dict[str, str]]:
    details = []
    for err in exc.errors():
        # Drop the leading "body"/"query"/"path" segment
        loc = [str(part) for part in err.get("loc", ())[1:]]
        details.append({"field": ".".join(loc) or "body", "message": err.get("msg", "Invalid value")})
    return details


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Render request validation failures as 400 with per-field details."""
    details = _field_errors(exc)
    logger.debug(f"Validation failed for {request.method} {request.url.path}: {details}")
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation Error",
            "message": details[0]["message"] if details else "Invalid request",
            "details": details,
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render ``HTTPException`` in the common error shape."""
    message = exc.detail if isinstance(exc.detail, str) else _reason(exc.status_code)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Render errors raised by the service layer."""
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.status_code, exc.message))


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler to log detailed error information.

    This handler is called for any unhandled exception in the application.
    It logs the full error context and returns a JSON response with an error ID
    that clients can use to reference the error when reporting issues.

    Args:
        request: The HTTP request that caused the exception
        exc: The exception that was raised

    Returns:
        JSONResponse with error details and error ID
    """
    error_id = uuid.uuid4().hex

    logger.error(
        f"Unhandled exception [{error_id}] in {request.method} {request.url.path}: {str(exc)}",
        exc_info=True,
        extra={
            "error_id": error_id,
            "method": request.method,
            "path": request.url.path,
            "query_params": dict(request.query_params),
            "client": request.client.host if request.client else "unknown",
            "error_type": type(exc).__name__,
            "traceback": traceback.format_exc(),
        },
    )
    log_error(type(exc).__name__, str(exc), {"error_id": error_id, "path": request.url.path})

    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal Server Error",
            "message": "Internal server error",
            "error_id": error_id,
        },
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI application.

    This function should be called during application initialization to set up
    all custom exception handlers.

    Args:
        app: The FastAPI application instance
    """
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(ServiceError, service_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
    logger.debug("Exception handlers registered successfully")
