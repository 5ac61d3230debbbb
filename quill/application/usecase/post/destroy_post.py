"""Destroy post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.policy import authorize
from quill.domain.service import PostService
from quill.domain.value import Action, Identity, PostId


class DestroyPostRequest(BaseModel):
    """Destroy post request."""

    identity: Identity
    post_id: UUID


class DestroyPostResponse(BaseModel):
    """Destroy post response."""

    post_id: str
    comments_removed: int


class DestroyPostUseCase(BaseUseCase):
    """Use case for deleting a post and its comments."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self, request: DestroyPostRequest) -> DestroyPostResponse:
        """Delete a post owned by the caller (or any post, for admins).

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller may not delete the post
        """
        post_id = PostId(request.post_id)
        with logfire.span("destroy_post.execute", post_id=str(post_id)):
            if request.identity.is_anonymous:
                authorize(request.identity, Action.DESTROY_POST)

            post = await self.post_service.require_post(post_id)
            authorize(request.identity, Action.DESTROY_POST, post)

            removed = await self.post_service.destroy_post(post.id)
            return DestroyPostResponse(post_id=str(post.id), comments_removed=removed)
