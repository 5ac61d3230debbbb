"""Get post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.policy import visible_scope
from quill.domain.service import PostService
from quill.domain.value import Identity, PostId

from .common import PostItem


class GetPostRequest(BaseModel):
    """Get post request."""

    identity: Identity
    post_id: UUID


class GetPostResponse(BaseModel):
    """Get post response."""

    post: PostItem


class GetPostUseCase(BaseUseCase):
    """Use case for reading a single post."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Read a post visible to the caller.

        Raises:
            NotFoundError: If the post is missing or outside the caller's
                visible scope
        """
        post_id = PostId(request.post_id)
        with logfire.span("get_post.execute", post_id=str(post_id)):
            post = await self.post_service.get_post_in_scope(
                post_id, visible_scope(request.identity)
            )
            counts = await self.post_service.comment_counts([post])
            return GetPostResponse(
                post=PostItem.from_post(post, counts.get(post.id, 0))
            )
