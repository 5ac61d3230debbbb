"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from quill.domain.model.user import User
from quill.domain.value import UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    The request path only reads users (identity resolution); writes come
    from the seed script and tests.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find the user a token refers to."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert the user, or overwrite the stored user with the same ID.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
