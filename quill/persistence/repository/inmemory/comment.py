"""In-memory comment repository for testing."""

from typing import Optional

from quill.domain.model.comment import Comment
from quill.domain.repository.comment import CommentRepository
from quill.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find all comments for a post, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: (c.created_at, str(c.id)))
        return comments

    async def count_by_post(self, post_id: PostId) -> int:
        """Count comments for a post."""
        return sum(1 for c in self._comments.values() if c.post_id == post_id)

    async def count_by_posts(self, post_ids: list[PostId]) -> dict[PostId, int]:
        """Count comments for several posts."""
        counts = {post_id: 0 for post_id in post_ids}
        for comment in self._comments.values():
            if comment.post_id in counts:
                counts[comment.post_id] += 1
        return counts

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment (hard delete)."""
        self._comments.pop(comment_id, None)

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for comment_id in doomed:
            del self._comments[comment_id]
        return len(doomed)
