import uuid

import pytest

from app.auth.dependencies import get_current_user, get_validated_token_payload, require_admin
from app.core.exceptions import ForbiddenError, UnauthorizedError
from tests.utils.factories import create_user_factory
from tests.utils.helpers import create_access_token


class TestTokenPayload:
    @pytest.mark.asyncio
    async def test_should_reject_garbage_token(self):
        with pytest.raises(UnauthorizedError) as exc_info:
            await get_validated_token_payload("garbage")

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_should_reject_wrong_token_type(self):
        token = create_access_token({"sub": str(uuid.uuid4())})

        with pytest.raises(UnauthorizedError) as exc_info:
            await get_validated_token_payload(token, expected_type="refresh")

        assert "expected refresh" in exc_info.value.message


class TestCurrentUser:
    @pytest.mark.asyncio
    async def test_should_load_user_from_token(self, db_session, test_admin, test_admin_token):
        user = await get_current_user(access_token=test_admin_token, db=db_session)

        assert user.id == test_admin.id

    @pytest.mark.asyncio
    async def test_should_reject_unknown_user(self, db_session):
        token = create_access_token({"sub": str(uuid.uuid4())})

        with pytest.raises(UnauthorizedError) as exc_info:
            await get_current_user(access_token=token, db=db_session)

        assert exc_info.value.status_code == 401
        assert exc_info.value.message == "User not found"

    @pytest.mark.asyncio
    async def test_should_reject_inactive_user(self, db_session):
        user = create_user_factory(db_session, role="admin", is_active=False)
        token = create_access_token({"sub": str(user.id)})

        with pytest.raises(UnauthorizedError) as exc_info:
            await get_current_user(access_token=token, db=db_session)

        assert exc_info.value.message == "Account is inactive"

    @pytest.mark.asyncio
    async def test_should_reject_malformed_subject(self, db_session):
        token = create_access_token({"sub": "not-a-uuid"})

        with pytest.raises(UnauthorizedError) as exc_info:
            await get_current_user(access_token=token, db=db_session)

        assert exc_info.value.status_code == 401


class TestRequireAdmin:
    @pytest.mark.asyncio
    async def test_should_pass_admin_through(self, test_admin):
        assert await require_admin(current_user=test_admin) is test_admin

    @pytest.mark.asyncio
    async def test_should_forbid_regular_user(self, test_user):
        with pytest.raises(ForbiddenError) as exc_info:
            await require_admin(current_user=test_user)

        assert exc_info.value.status_code == 403
