"""Access token verification.

Tokens are issued by the platform's auth service; this API only verifies
them with the shared ``SECRET_KEY``.
"""

import logging
from typing import Any

from jose import JWTError, jwt

from app.core.config import settings

logger = logging.getLogger(__name__)


def decode_token(token: str) -> dict[str, Any] | None:
    try:
        payload: dict[str, Any] = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
        return payload
    except JWTError as exc:
        logger.debug("Rejected access token: %s", exc)
        return None
