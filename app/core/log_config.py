import logging
import sys
import time
import uuid
from collections.abc import Awaitable, Callable
from typing import Any

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from structlog.typing import EventDict, WrappedLogger

from app.core.config import settings

REQUEST_ID_HEADER = "X-Request-ID"


def drop_empty_fields(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Remove keys whose value is None so log lines stay compact."""
    return {key: value for key, value in event_dict.items() if value is not None}


def setup_logging(level: str | None = None) -> None:
    """Route structlog and stdlib logging through one handler.

    JSON lines when ``DEBUG`` is off, coloured console output when it is on.
    Values bound with ``structlog.contextvars`` (the request id) are merged
    into every event, including stdlib records from SQLAlchemy or uvicorn.

    Args:
        level: Root log level name. Defaults to ``settings.LOG_LEVEL``.
    """
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        drop_empty_fields,
    ]

    renderer: Any = (
        structlog.dev.ConsoleRenderer() if settings.DEBUG else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel((level or settings.LOG_LEVEL).upper())

    # Request lines come from RequestLoggingMiddleware instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with an id and log its outcome.

    An incoming ``X-Request-ID`` is reused, otherwise one is generated. The
    id is bound to structlog's context for the duration of the request and
    echoed back in the response header.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)

        logger = structlog.get_logger("http")
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start) * 1000, 2)

        status_code = response.status_code
        if status_code >= 500:
            log = logger.aerror
        elif status_code >= 400:
            log = logger.awarning
        else:
            log = logger.ainfo

        await log(
            "request",
            method=request.method,
            path=request.url.path,
            query=request.url.query or None,
            status=status_code,
            duration_ms=duration_ms,
            client=request.client.host if request.client else None,
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        structlog.contextvars.clear_contextvars()
        return response
