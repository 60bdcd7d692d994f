"""Application-wide exception classes and handlers.

Every error leaves the API in the same envelope as a success, with
``status`` set to ``"error"``:

    {"status": "error", "message": "...", "error": "..."}
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from http import HTTPStatus
from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base exception for application errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error: str | None = None,
        details: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.error = error
        self.details = details or {}
        self.headers = headers
        super().__init__(message)


class UnauthorizedError(AppError):
    """Authentication required error (401)."""

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )


class ForbiddenError(AppError):
    """Access forbidden error (403)."""

    def __init__(self, message: str = "Access forbidden"):
        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            error="Forbidden",
        )

class StatisticsRetrievalError(AppError):
    """Any failure while querying or shaping dashboard data (500)."""

    def __init__(self, message: str = "Error retrieving statistics", error: str | None = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            error=error,
        )


class ValidationError(AppError):
    """Malformed request input (400)."""

    def __init__(self, message: str = "Invalid query parameter", field: str | None = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            error=f"Invalid value for '{field}'" if field else message,
            details=details,
        )


@contextmanager
def retrieval_errors(message: str) -> Iterator[None]:
    """Convert anything raised inside the block into a StatisticsRetrievalError.

    Errors that already carry an HTTP meaning pass through untouched.
    """
    try:
        yield
    except (AppError, HTTPException):
        raise
    except Exception as exc:
        structlog.get_logger(__name__).error(
            "statistics_retrieval_failed",
            message=message,
            error=str(exc),
            exc_type=type(exc).__name__,
        )
        raise StatisticsRetrievalError(message, error=str(exc)) from exc


def error_envelope(message: str, error: str | None = None) -> dict[str, Any]:
    return {"status": "error", "message": message, "error": error}


async def app_exception_handler(request: Request, exc: AppError) -> JSONResponse:
    """Handle AppError and return the standard error envelope."""
    level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(
        level,
        "AppError: %s (status=%d)",
        exc.message,
        exc.status_code,
        extra={"details": exc.details, "path": request.url.path},
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(exc.message, exc.error),
        headers=exc.headers,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework-raised HTTP errors (404, 405) in the error envelope."""
    try:
        phrase = HTTPStatus(exc.status_code).phrase
    except ValueError:
        phrase = None

    return JSONResponse(
        status_code=exc.status_code,
        content=error_envelope(str(exc.detail), phrase),
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Reject malformed query strings with 400 instead of FastAPI's 422."""
    problems = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err.get("loc", ()) if part != "query")
        problems.append(f"{location}: {err.get('msg', 'invalid value')}")

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_envelope("Invalid query parameter", "; ".join(problems)),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions with a generic error response."""
    logger.exception("Unhandled exception: %s", str(exc))

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_envelope("Internal server error"),
    )


def register_exception_handlers(app: FastAPI, *, debug: bool = False) -> None:
    """Register exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance.
        debug: If True, unhandled exceptions propagate with stack traces.
    """
    app.add_exception_handler(AppError, app_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_handler)  # type: ignore[arg-type]
    if not debug:
        app.add_exception_handler(Exception, unhandled_exception_handler)
