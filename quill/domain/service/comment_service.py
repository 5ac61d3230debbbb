"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from quill.domain.error import ValidationError
from quill.domain.model.comment import Comment
from quill.domain.model.post import Post
from quill.domain.repository import CommentRepository
from quill.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(self, post: Post, owner_id: UserId, body: str) -> Comment:
        """Create a comment on a post.

        Args:
            post: Parent post, as currently stored
            owner_id: Commenting user
            body: Comment text

        Returns:
            Created comment

        Raises:
            ValidationError: If the post is not published or the body is blank
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post.id),
            owner_id=str(owner_id),
        ):
            existing = await self.comment_repository.count_by_post(post.id)
            try:
                post.assert_accepts_comments(existing + 1)
            except ValidationError:
                logfire.warn(
                    "Comment rejected on unpublished post", post_id=str(post.id)
                )
                raise

            now = datetime.now()
            try:
                comment = Comment(
                    id=CommentId(uuid4()),
                    post_id=post.id,
                    owner_id=owner_id,
                    body=body,
                    created_at=now,
                    updated_at=now,
                )
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post.id)
            )
            return saved

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments for a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            List of comments
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def update_comment(self, comment: Comment, body: str) -> Comment:
        """Replace the body of a comment.

        Args:
            comment: Current comment
            body: New body

        Returns:
            Updated comment

        Raises:
            ValidationError: If the body is blank
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=str(comment.id)
        ):
            try:
                updated = comment.revise(body=body, updated_at=datetime.now())
            except PydanticValidationError as e:
                raise ValidationError.from_pydantic(e)

            saved = await self.comment_repository.save(updated)
            logfire.info(
                "Comment updated",
                comment_id=str(saved.id),
                post_id=str(saved.post_id),
                body_length=len(saved.body),
            )
            return saved

    async def destroy_comment(self, comment_id: CommentId) -> None:
        """Delete a comment.

        Args:
            comment_id: Comment ID
        """
        with logfire.span(
            "comment_service.destroy_comment", comment_id=str(comment_id)
        ):
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment destroyed", comment_id=str(comment_id))
