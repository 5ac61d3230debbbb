"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from quill.domain.model.post import Post
from quill.domain.policy import PostScope
from quill.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        scope: PostScope,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts inside a scope, newest first.

        Args:
            scope: Visibility scope to filter by
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the scope
        """
        pass

    @abstractmethod
    async def count(self, scope: PostScope) -> int:
        """Count posts inside a scope.

        Args:
            scope: Visibility scope to filter by

        Returns:
            Total number of posts matching the scope
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        An update never changes ``published``; that flag belongs to
        ``mark_published``.

        Args:
            post: The post to save

        Returns:
            The post as stored, with the stored ``published`` flag
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Comments must be removed first, see CommentRepository.delete_by_post.

        Args:
            post_id: The post ID to delete
        """
        pass

    @abstractmethod
    async def mark_published(self, post_id: PostId) -> Optional[Post]:
        """Atomically move a draft to published.

        Must be a single conditional update (``WHERE published = false``),
        never a read followed by a write, so that concurrent publishers
        cannot both observe the draft state.

        Args:
            post_id: The post ID

        Returns:
            The updated post if this call performed the transition, None if
            the post is missing or was already published
        """
        pass
