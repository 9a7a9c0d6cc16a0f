"""
Exception handlers for FastAPI application.

This module follows SRP by centralizing all exception handling logic.
Every error response has the same body:

    {"title", "timestamp", "status", "exception", "details"}
"""

import logging
from datetime import UTC, datetime
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.domain.exceptions import (
    BusinessException,
    DomainException,
    DuplicateEntityException,
    IllegalStateException,
)

logger = logging.getLogger(__name__)

BAD_REQUEST_TITLE = "Bad Request! Consult the documentation"
CONFLICT_TITLE = "Conflict! Consult the documentation"
INTERNAL_ERROR_TITLE = "Internal Error! Contact the administrator"

# Most specific class first
DOMAIN_EXCEPTION_MAP: tuple[tuple[type[DomainException], int, str], ...] = (
    (DuplicateEntityException, status.HTTP_409_CONFLICT, CONFLICT_TITLE),
    (BusinessException, status.HTTP_400_BAD_REQUEST, BAD_REQUEST_TITLE),
    (IllegalStateException, status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_TITLE),
)

# Location prefixes that carry no meaning for the client
VALIDATION_LOC_PREFIXES = ("body", "query", "path", "header", "cookie")


def build_error_body(title: str, status_code: int, exception: str, details: dict[str, Any]) -> dict[str, Any]:
    """Build the standard error response body."""
    return {
        "title": title,
        "timestamp": datetime.now(UTC).isoformat(),
        "status": status_code,
        "exception": exception,
        "details": details,
    }


def resolve_domain_exception(exc: DomainException) -> tuple[int, str]:
    """Map a domain exception to (status code, title)."""
    for exc_type, status_code, title in DOMAIN_EXCEPTION_MAP:
        if isinstance(exc, exc_type):
            return status_code, title
    return status.HTTP_400_BAD_REQUEST, BAD_REQUEST_TITLE


def _validation_field(loc: tuple[Any, ...]) -> str:
    parts = list(loc)
    if len(parts) > 1 and parts[0] in VALIDATION_LOC_PREFIXES:
        parts = parts[1:]
    return ".".join(str(part) for part in parts)


def _validation_message(error: dict[str, Any]) -> str:
    # Messages raised by field validators come back as "Value error, <msg>"
    ctx = error.get("ctx") or {}
    if error.get("type") == "value_error" and "error" in ctx:
        return str(ctx["error"])
    return error["msg"]


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle domain exceptions according to DOMAIN_EXCEPTION_MAP."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code, title = resolve_domain_exception(exc)
    details: dict[str, Any] = {"detail": exc.message}
    if isinstance(exc, DuplicateEntityException):
        for field in exc.fields:
            details[field] = "already registered"

    if status_code >= 500:
        logger.error(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"{exc.__class__.__name__} on {request.method} {request.url.path}: {exc.message}")

    return JSONResponse(
        status_code=status_code,
        content=build_error_body(title, status_code, exc.__class__.__name__, details),
    )


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle request validation errors, one entry per failing field."""
    if not isinstance(exc, RequestValidationError):
        return await global_exception_handler(request, exc)

    details: dict[str, Any] = {}
    for error in exc.errors():
        field = _validation_field(tuple(error.get("loc", ())))
        # Keep the first message per field
        details.setdefault(field, _validation_message(error))

    logger.warning(f"Validation error on {request.url.path}: {details}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=build_error_body(
            BAD_REQUEST_TITLE,
            status.HTTP_400_BAD_REQUEST,
            exc.__class__.__name__,
            details,
        ),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle HTTPException (unknown routes, wrong methods) with the standard body."""
    if not isinstance(exc, StarletteHTTPException):
        return await global_exception_handler(request, exc)

    status_code = exc.status_code
    if status_code >= 500:
        title = INTERNAL_ERROR_TITLE
    elif status_code == status.HTTP_409_CONFLICT:
        title = CONFLICT_TITLE
    else:
        title = BAD_REQUEST_TITLE

    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Error"

    return JSONResponse(
        status_code=status_code,
        content=build_error_body(title, status_code, phrase, {"detail": exc.detail}),
        headers=getattr(exc, "headers", None),
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Handle all unhandled exceptions.

    Logs the full exception with traceback and returns a safe error response.
    """
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc!s}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=build_error_body(
            INTERNAL_ERROR_TITLE,
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            exc.__class__.__name__,
            {"detail": "Internal server error"},
        ),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register all exception handlers with the FastAPI application.

    Args:
        app: FastAPI application instance
    """
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)

    logger.info("Exception handlers registered")
