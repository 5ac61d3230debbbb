"""Unit tests for GetCurrentIdentityUseCase."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from quill.application.usecase.auth import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityUseCase,
)
from quill.config import AuthSettings
from quill.domain.repository import UserRepository
from quill.domain.value import Role
from tests.conftest import make_user, token_for
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCurrentIdentityUseCase:
    """Tests for GetCurrentIdentityUseCase."""

    @pytest.mark.asyncio
    async def test_no_token_is_anonymous(self, unit_env):
        """Requests without a cookie are anonymous."""
        use_case = await unit_env.get(GetCurrentIdentityUseCase)

        identity = await use_case.execute(GetCurrentIdentityRequest(token=None))

        assert identity.is_anonymous

    @pytest.mark.asyncio
    async def test_valid_token_resolves_stored_role(self, unit_env):
        """A valid token yields the user with the role stored for them."""
        # Arrange
        use_case = await unit_env.get(GetCurrentIdentityUseCase)
        user_repo = await unit_env.get(UserRepository)
        settings = await unit_env.get(AuthSettings)
        admin = await user_repo.save(make_user(Role.ADMIN))

        # Act
        identity = await use_case.execute(
            GetCurrentIdentityRequest(token=token_for(admin, settings))
        )

        # Assert
        assert identity.user_id == admin.id
        assert identity.is_admin

    @pytest.mark.asyncio
    async def test_garbage_token_is_anonymous(self, unit_env):
        """Unverifiable tokens are treated as no token."""
        use_case = await unit_env.get(GetCurrentIdentityUseCase)

        identity = await use_case.execute(GetCurrentIdentityRequest(token="not-a-jwt"))

        assert identity.is_anonymous

    @pytest.mark.asyncio
    async def test_expired_token_is_anonymous(self, unit_env):
        """Expired tokens are treated as no token."""
        use_case = await unit_env.get(GetCurrentIdentityUseCase)
        user_repo = await unit_env.get(UserRepository)
        settings = await unit_env.get(AuthSettings)
        user = await user_repo.save(make_user())
        expired = jwt.encode(
            {
                "sub": str(user.id),
                "iat": datetime.now(timezone.utc) - timedelta(days=2),
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        identity = await use_case.execute(GetCurrentIdentityRequest(token=expired))

        assert identity.is_anonymous

    @pytest.mark.asyncio
    async def test_unknown_user_is_anonymous(self, unit_env):
        """Tokens for users that no longer exist are anonymous."""
        use_case = await unit_env.get(GetCurrentIdentityUseCase)
        settings = await unit_env.get(AuthSettings)

        identity = await use_case.execute(
            GetCurrentIdentityRequest(token=token_for(make_user(), settings))
        )

        assert identity.is_anonymous

    @pytest.mark.asyncio
    async def test_malformed_user_id_is_anonymous(self, unit_env):
        """Tokens whose subject is not a UUID are anonymous."""
        use_case = await unit_env.get(GetCurrentIdentityUseCase)
        settings = await unit_env.get(AuthSettings)
        token = jwt.encode(
            {
                "sub": f"not-a-uuid-{uuid4().hex[:4]}",
                "iat": datetime.now(timezone.utc),
                "exp": datetime.now(timezone.utc) + timedelta(days=1),
            },
            settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
        )

        identity = await use_case.execute(GetCurrentIdentityRequest(token=token))

        assert identity.is_anonymous
