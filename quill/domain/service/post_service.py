"""Post domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from quill.domain.error import NotFoundError, ValidationError
from quill.domain.model.post import Post
from quill.domain.policy import PostScope
from quill.domain.repository import CommentRepository, PostRepository
from quill.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def create_post(self, owner_id: UserId, title: str, body: str) -> Post:
        """Create a draft post.

        Args:
            owner_id: Creating user, who becomes the owner
            title: Post title
            body: Post body

        Returns:
            Saved post

        Raises:
            ValidationError: If title or body is blank
        """
        with logfire.span("post_service.create_post", owner_id=str(owner_id)):
            now = datetime.now()
            try:
                post = Post(
                    id=PostId(uuid4()),
                    owner_id=owner_id,
                    title=title,
                    body=body,
                    published=False,
                    created_at=now,
                    updated_at=now,
                )
            except PydanticValidationError as e:
                error = ValidationError.from_pydantic(e)
                logfire.warn(
                    "Post rejected", field=error.field, message=error.message
                )
                raise error

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), title=saved.title)
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_post_in_scope(self, post_id: PostId, scope: PostScope) -> Post:
        """Get a post only if it lies inside a visibility scope.

        A post outside the scope is reported exactly like a missing one, so
        callers cannot probe for hidden drafts.

        Args:
            post_id: Post ID
            scope: Visibility scope of the caller

        Returns:
            The post

        Raises:
            NotFoundError: If the post is missing or outside the scope
        """
        post = await self.get_post_by_id(post_id)
        if post is None or not scope.matches(post):
            raise NotFoundError("Post", str(post_id))
        return post

    async def require_post(self, post_id: PostId) -> Post:
        """Get a post by ID, raising when it does not exist.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", str(post_id))
        return post

    async def list_posts(
        self, scope: PostScope, limit: int = 30, offset: int = 0
    ) -> tuple[list[Post], int]:
        """List posts inside a scope, newest first.

        Args:
            scope: Visibility scope
            limit: Page size
            offset: Number of posts to skip

        Returns:
            Page of posts and the total number of posts in the scope
        """
        with logfire.span(
            "post_service.list_posts",
            scope=scope.kind.value,
            limit=limit,
            offset=offset,
        ):
            total = await self.post_repository.count(scope)
            posts = await self.post_repository.find_all(
                scope, limit=limit, offset=offset
            )
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def update_post(
        self,
        post: Post,
        title: str | None = None,
        body: str | None = None,
    ) -> Post:
        """Edit the title and/or body of a post.

        Args:
            post: Current post
            title: New title (None to keep)
            body: New body (None to keep)

        Returns:
            Updated post

        Raises:
            ValidationError: If a field is blank or the update would leave a
                draft carrying comments
        """
        with logfire.span("post_service.update_post", post_id=str(post.id)):
            changes: dict[str, object] = {"updated_at": datetime.now()}
            if title is not None:
                changes["title"] = title
            if body is not None:
                changes["body"] = body

            try:
                updated = post.revise(**changes)
            except PydanticValidationError as e:
                error = ValidationError.from_pydantic(e)
                logfire.warn(
                    "Post update rejected",
                    post_id=str(post.id),
                    field=error.field,
                    message=error.message,
                )
                raise error

            comment_count = await self.comment_repository.count_by_post(post.id)
            updated.assert_accepts_comments(comment_count)

            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(saved.id), title=saved.title)
            return saved

    async def destroy_post(self, post_id: PostId) -> int:
        """Delete a post together with its comments.

        Args:
            post_id: Post ID

        Returns:
            Number of comments deleted with the post
        """
        with logfire.span("post_service.destroy_post", post_id=str(post_id)):
            removed = await self.comment_repository.delete_by_post(post_id)
            await self.post_repository.delete(post_id)
            logfire.info(
                "Post destroyed", post_id=str(post_id), comments_removed=removed
            )
            return removed

    async def comment_counts(self, posts: list[Post]) -> dict[PostId, int]:
        """Comment counts for a page of posts, in one query."""
        if not posts:
            return {}
        return await self.comment_repository.count_by_posts([p.id for p in posts])
