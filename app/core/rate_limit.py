import structlog
from fastapi import Request, status
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from app.core.config import settings
from app.core.exceptions import error_envelope

logger = structlog.get_logger(__name__)

limiter = Limiter(key_func=get_remote_address)


def public_rate_limit() -> str:
    """Limit for the unauthenticated endpoints, read on every request."""
    return settings.PUBLIC_RATE_LIMIT


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning("rate_limit_exceeded", path=request.url.path, limit=str(exc.detail))
    return JSONResponse(
        status_code=status.HTTP_429_TOO_MANY_REQUESTS,
        content=error_envelope("Too many requests", f"Rate limit exceeded: {exc.detail}"),
    )
