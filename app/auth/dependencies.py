import logging
import uuid
from typing import Annotated, cast

from fastapi import Cookie, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.auth.models.user import User
from app.core import security
from app.core.exceptions import ForbiddenError, UnauthorizedError
from app.db.session import get_db

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_access_token(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
    access_token: Annotated[str | None, Cookie()] = None,
) -> str:
    """Take the access token from the Authorization header, else the cookie"""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    if access_token:
        return access_token
    raise UnauthorizedError("Not authenticated")


async def get_validated_token_payload(
    token: str,
    expected_type: str = "access",
) -> dict:
    """Decode and validate JWT token"""
    payload = security.decode_token(token)

    if payload is None:
        raise UnauthorizedError("Could not validate credentials")

    if payload.get("type") != expected_type:
        raise UnauthorizedError(f"Invalid token type, expected {expected_type}")

    return payload


async def get_current_user(
    access_token: str = Depends(get_access_token),
    db: Session = Depends(get_db),
) -> User:
    """Get current authenticated user from access token"""
    payload = await get_validated_token_payload(access_token, expected_type="access")

    user_id: str | None = payload.get("sub")
    if user_id is None:
        raise UnauthorizedError("Could not validate credentials")

    user = db.get(User, _parse_user_id(user_id))
    if user is None:
        raise UnauthorizedError("User not found")

    if not user.is_active:
        raise UnauthorizedError("Account is inactive")

    return cast(User, user)


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != "admin":
        logger.info("Non-admin user %s denied admin statistics", current_user.id)
        raise ForbiddenError("Admin privileges required")
    return current_user


def _parse_user_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError:
        raise UnauthorizedError("Could not validate credentials") from None
