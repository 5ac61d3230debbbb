"""Get current identity use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.service import JWTService, UserService
from quill.domain.value import Identity, UserId


class GetCurrentIdentityRequest(BaseModel):
    """Get current identity request."""

    token: str | None = None  # JWT from the auth cookie, if any


class GetCurrentIdentityUseCase(BaseUseCase):
    """Resolve the identity behind a request.

    Never fails: a missing or unusable token, or one for a user that no
    longer exists, yields the anonymous identity. The role is read from the
    stored user, not from the token.
    """

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current identity use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentIdentityRequest) -> Identity:
        raw_user_id = self.jwt_service.get_user_id_from_token(request.token)
        if raw_user_id is None:
            return Identity.anonymous()

        try:
            user_id = UserId(UUID(raw_user_id))
        except ValueError:
            logfire.warn("Token carries a malformed user id")
            return Identity.anonymous()

        return await self.user_service.resolve_identity(user_id)
