"""User domain service."""

import logfire

from quill.domain.repository import UserRepository
from quill.domain.value import Identity, UserId

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def resolve_identity(self, user_id: UserId) -> Identity:
        """Build the request identity for a user ID.

        The role is read from the stored user, so a token cannot carry a
        stale or forged role.

        Args:
            user_id: User ID taken from a verified token

        Returns:
            Identity of the user, or the anonymous identity if the user no
            longer exists
        """
        with logfire.span("user_service.resolve_identity", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if user is None:
                logfire.warn("Token refers to unknown user", user_id=str(user_id))
                return Identity.anonymous()
            return Identity(user_id=user.id, role=user.role)
