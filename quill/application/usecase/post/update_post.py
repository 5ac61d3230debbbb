"""Update post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.policy import authorize
from quill.domain.service import PostService
from quill.domain.value import Action, Identity, PostId

from .common import PostItem


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None keep their current value.
    """

    identity: Identity
    post_id: UUID
    title: str | None = None
    body: str | None = None


class UpdatePostResponse(BaseModel):
    """Update post response."""

    post: PostItem


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post's title and body."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request

        Returns:
            Updated post

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller may not edit the post
            ValidationError: If a field is blank or the post would break the
                comment admission rule
        """
        post_id = PostId(request.post_id)
        with logfire.span("update_post.execute", post_id=str(post_id)):
            if request.identity.is_anonymous:
                authorize(request.identity, Action.UPDATE_POST)

            post = await self.post_service.require_post(post_id)
            authorize(request.identity, Action.UPDATE_POST, post)

            updated = await self.post_service.update_post(
                post, title=request.title, body=request.body
            )
            counts = await self.post_service.comment_counts([updated])
            return UpdatePostResponse(
                post=PostItem.from_post(updated, counts.get(updated.id, 0))
            )
