"""Publish post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.policy import authorize
from quill.domain.service import PostService, PublishService
from quill.domain.value import Action, Identity, PostId

from .common import PostItem


class PublishPostRequest(BaseModel):
    """Publish post request."""

    identity: Identity
    post_id: UUID


class PublishPostResponse(BaseModel):
    """Publish post response.

    ``newly_published`` is False when the post was already published; the
    request still succeeds.
    """

    post: PostItem
    newly_published: bool


class PublishPostUseCase(BaseUseCase):
    """Use case for publishing a draft ahead of its scheduled time."""

    def __init__(
        self, post_service: PostService, publish_service: PublishService
    ) -> None:
        """Initialize publish post use case.

        Args:
            post_service: Post domain service
            publish_service: Publish workflow domain service
        """
        self.post_service = post_service
        self.publish_service = publish_service

    async def execute(self, request: PublishPostRequest) -> PublishPostResponse:
        """Execute publish post flow.

        Args:
            request: Publish post request

        Returns:
            The post as stored after the call and whether this call published it

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller may not publish the post
        """
        post_id = PostId(request.post_id)
        with logfire.span("publish_post.execute", post_id=str(post_id)):
            if request.identity.is_anonymous:
                authorize(request.identity, Action.PUBLISH_POST)

            post = await self.post_service.require_post(post_id)
            authorize(request.identity, Action.PUBLISH_POST, post)

            newly_published = await self.publish_service.publish(post.id)

            current = await self.post_service.require_post(post.id)
            counts = await self.post_service.comment_counts([current])
            return PublishPostResponse(
                post=PostItem.from_post(current, counts.get(current.id, 0)),
                newly_published=newly_published,
            )
