"""Exception handlers rendering every failure as ``{error_code, message, details}``."""

from typing import Any

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.config import settings
from core.exceptions import AppException, ErrorCode

logger = structlog.get_logger()


def _error_response(
    status_code: int, error_code: str, message: str, details: Any = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error_code": error_code, "message": message, "details": details},
    )


async def handle_app_exception(request: Request, exc: AppException) -> JSONResponse:
    # Rejected credentials are routine; upstream CAPTCHA outages are not.
    if exc.status_code >= 500:
        log = logger.error
    elif exc.status_code in (401, 403):
        log = logger.info
    else:
        log = logger.warning
    log(
        "app_exception",
        error_code=exc.error_code.value,
        message=exc.message,
        status_code=exc.status_code,
    )
    return _error_response(exc.status_code, exc.error_code.value, exc.message, exc.details)


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Unknown routes, wrong methods and other framework-level errors."""
    return _error_response(exc.status_code, "HTTP_ERROR", str(exc.detail))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies, ids or query parameters, before any field rule runs."""
    errors = [
        {
            "field": ".".join(str(x) for x in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.info("validation_error", fields=[e["field"] for e in errors])
    return _error_response(
        422, ErrorCode.VALIDATION_ERROR.value, "Request validation failed", errors
    )


async def handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    """Anything else, including store errors other than duplicate screen names."""
    request_id = getattr(request.state, "request_id", "unknown")
    logger.error(
        "unhandled_exception",
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=request_id,
        exc_info=True,
    )
    message = "An unexpected error occurred" if settings.is_production else str(exc)
    return _error_response(
        500, ErrorCode.INTERNAL_ERROR.value, message, {"request_id": request_id}
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app."""
    app.add_exception_handler(AppException, handle_app_exception)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected)
