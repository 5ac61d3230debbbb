"""In-memory post repository for testing."""

from datetime import datetime
from typing import Optional

from quill.domain.model.post import Post
from quill.domain.policy import PostScope
from quill.domain.repository.post import PostRepository
from quill.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        scope: PostScope,
        limit: int = 30,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts inside a scope, newest first."""
        posts = [p for p in self._posts.values() if scope.matches(p)]
        posts.sort(key=lambda p: (p.created_at, str(p.id)), reverse=True)
        return posts[offset : offset + limit]

    async def count(self, scope: PostScope) -> int:
        """Count posts inside a scope."""
        return sum(1 for p in self._posts.values() if scope.matches(p))

    async def save(self, post: Post) -> Post:
        """Save a post, keeping the stored publish flag."""
        existing = self._posts.get(post.id)
        if existing is not None and existing.published != post.published:
            # published is owned by mark_published
            post = post.model_copy(update={"published": existing.published})
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        self._posts.pop(post_id, None)

    async def mark_published(self, post_id: PostId) -> Optional[Post]:
        """Move a draft to published.

        No await between the check and the write, so concurrent callers on
        one event loop cannot interleave.
        """
        post = self._posts.get(post_id)
        if post is None or post.published:
            return None

        published = post.model_copy(
            update={"published": True, "updated_at": datetime.now()}
        )
        self._posts[post_id] = published
        return published
