"""Get comments use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.policy import visible_scope
from quill.domain.service import CommentService, PostService
from quill.domain.value import Identity, PostId

from .common import CommentItem


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    identity: Identity
    post_id: UUID


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading the comments of a visible post, oldest first."""

    def __init__(
        self, comment_service: CommentService, post_service: PostService
    ) -> None:
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post is missing or not visible to the caller
        """
        post_id = PostId(request.post_id)
        with logfire.span("get_comments.execute", post_id=str(post_id)):
            post = await self.post_service.get_post_in_scope(
                post_id, visible_scope(request.identity)
            )
            comments = await self.comment_service.get_comments_for_post(post.id)
            return GetCommentsResponse(
                comments=[CommentItem.from_comment(c) for c in comments],
                total=len(comments),
            )
