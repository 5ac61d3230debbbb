"""Destroy comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.policy import authorize
from quill.domain.service import CommentService
from quill.domain.value import Action, CommentId, Identity, PostId

from .lookup import require_comment


class DestroyCommentRequest(BaseModel):
    """Destroy comment request."""

    identity: Identity
    post_id: UUID
    comment_id: UUID


class DestroyCommentResponse(BaseModel):
    """Destroy comment response."""

    comment_id: str


class DestroyCommentUseCase(BaseUseCase):
    """Use case for deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DestroyCommentRequest) -> DestroyCommentResponse:
        """Delete a comment owned by the caller (or any comment, for admins).

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            NotFoundError: If the comment does not exist on the post
            NotAuthorizedError: If the caller does not own the comment
        """
        comment_id = CommentId(request.comment_id)
        with logfire.span("destroy_comment.execute", comment_id=str(comment_id)):
            if request.identity.is_anonymous:
                authorize(request.identity, Action.DESTROY_COMMENT)

            comment = await require_comment(
                self.comment_service, PostId(request.post_id), comment_id
            )
            authorize(request.identity, Action.DESTROY_COMMENT, comment)

            await self.comment_service.destroy_comment(comment.id)
            return DestroyCommentResponse(comment_id=str(comment.id))
