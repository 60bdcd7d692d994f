from datetime import UTC, datetime, timedelta
from typing import Any

import httpx
from jose import jwt

from app.core.config import settings


def create_access_token(
    data: dict[str, Any], expires_in: timedelta = timedelta(minutes=30)
) -> str:
    """Sign a token the way the platform's auth service issues them."""
    now = datetime.now(UTC)
    claims = {**data, "exp": now + expires_in, "iat": now, "type": "access"}
    token: str = jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.ALGORITHM)
    return token


def create_auth_headers(token: str) -> dict[str, str]:
    """Create Authorization headers with Bearer token."""
    return {"Authorization": f"Bearer {token}"}


def set_access_token_cookie(client: httpx.AsyncClient, access_token: str) -> None:
    """Set only the access token cookie on the test client."""
    client.cookies.set("access_token", access_token)


def assert_success_envelope(body: dict[str, Any], message: str) -> dict[str, Any]:
    assert body["status"] == "success"
    assert body["message"] == message
    assert "data" in body
    return body["data"]


def assert_error_envelope(body: dict[str, Any], message: str | None = None) -> None:
    assert body["status"] == "error"
    assert "error" in body
    if message is not None:
        assert body["message"] == message


def assert_pagination(
    data: dict[str, Any], *, page: int, total_pages: int, total_items: int, per_page: int
) -> None:
    assert data["pagination"] == {
        "currentPage": page,
        "totalPages": total_pages,
        "totalItems": total_items,
        "itemsPerPage": per_page,
    }
