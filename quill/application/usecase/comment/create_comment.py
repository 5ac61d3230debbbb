"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.error import AuthenticationRequiredError
from quill.domain.policy import authorize, visible_scope
from quill.domain.service import CommentService, PostService
from quill.domain.value import Action, Identity, PostId

from .common import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    identity: Identity
    post_id: UUID
    body: str


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment: CommentItem


class CreateCommentUseCase(BaseUseCase):
    """Use case for commenting on a published post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Reject anonymous callers
        2. Load the post from the caller's visible scope
        3. Check the post accepts comments (drafts never do)
        4. Authorize and create the comment

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            NotFoundError: If the post is missing or not visible to the caller
            ValidationError: If the post is a draft or the body is blank
            NotAuthorizedError: If the caller may not comment
        """
        identity = request.identity
        post_id = PostId(request.post_id)
        with logfire.span("create_comment.execute", post_id=str(post_id)):
            if identity.user_id is None:
                raise AuthenticationRequiredError(Action.CREATE_COMMENT.value)

            post = await self.post_service.get_post_in_scope(
                post_id, visible_scope(identity)
            )
            # One more comment on a draft is always one too many
            post.assert_accepts_comments(1)
            authorize(identity, Action.CREATE_COMMENT, post)

            comment = await self.comment_service.create_comment(
                post=post, owner_id=identity.user_id, body=request.body
            )
            return CreateCommentResponse(comment=CommentItem.from_comment(comment))
