"""List posts use cases.

All three listings share one query path and differ only in the scope they
resolve for the caller.
"""

from abc import abstractmethod

import logfire
from pydantic import BaseModel, Field

from quill.application.usecase.base import BaseUseCase
from quill.domain.policy import PostScope, visible_scope
from quill.domain.service import PostService
from quill.domain.value import Identity

from .common import PostItem, PostPage


class ListPostsRequest(BaseModel):
    """List posts request."""

    identity: Identity
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListPostsResponse(PostPage):
    """List posts response."""


class ScopedListUseCase(BaseUseCase):
    """Lists the posts of a scope, newest first, with comment counts."""

    span_name = "list_posts.execute"

    def __init__(self, post_service: PostService) -> None:
        """Initialize list use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    @abstractmethod
    def resolve_scope(self, identity: Identity) -> PostScope:
        """Scope of posts listed for ``identity``."""
        raise NotImplementedError

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        with logfire.span(self.span_name, limit=request.limit, offset=request.offset):
            scope = self.resolve_scope(request.identity)
            posts, total = await self.post_service.list_posts(
                scope, limit=request.limit, offset=request.offset
            )
            counts = await self.post_service.comment_counts(posts)

            return ListPostsResponse(
                posts=[PostItem.from_post(p, counts.get(p.id, 0)) for p in posts],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )


class ListPostsUseCase(ScopedListUseCase):
    """Use case for listing every post the caller may read."""

    def resolve_scope(self, identity: Identity) -> PostScope:
        return visible_scope(identity)
