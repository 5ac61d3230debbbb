"""Update comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.policy import authorize
from quill.domain.service import CommentService
from quill.domain.value import Action, CommentId, Identity, PostId

from .common import CommentItem
from .lookup import require_comment


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    identity: Identity
    post_id: UUID
    comment_id: UUID
    body: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment: CommentItem


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing a comment's body."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            NotFoundError: If the comment does not exist on the post
            NotAuthorizedError: If the caller does not own the comment
            ValidationError: If the body is blank
        """
        comment_id = CommentId(request.comment_id)
        with logfire.span("update_comment.execute", comment_id=str(comment_id)):
            if request.identity.is_anonymous:
                authorize(request.identity, Action.UPDATE_COMMENT)

            comment = await require_comment(
                self.comment_service, PostId(request.post_id), comment_id
            )
            authorize(request.identity, Action.UPDATE_COMMENT, comment)

            updated = await self.comment_service.update_comment(
                comment, body=request.body
            )
            return UpdateCommentResponse(comment=CommentItem.from_comment(updated))
