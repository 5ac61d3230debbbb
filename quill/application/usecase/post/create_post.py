"""Create post use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.error import AuthenticationRequiredError
from quill.domain.policy import authorize
from quill.domain.service import PostService, PublishService
from quill.domain.value import Action, Identity

from .common import PostItem


class CreatePostRequest(BaseModel):
    """Create post request."""

    identity: Identity
    title: str
    body: str


class CreatePostResponse(BaseModel):
    """Create post response."""

    post: PostItem
    publish_at: datetime


class CreatePostUseCase(BaseUseCase):
    """Use case for writing a new draft post.

    The new post is a draft owned by the caller; its automatic publication
    is scheduled immediately after it is saved.
    """

    def __init__(
        self, post_service: PostService, publish_service: PublishService
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            publish_service: Publish workflow domain service
        """
        self.post_service = post_service
        self.publish_service = publish_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            The draft post and the time it will be published automatically

        Raises:
            AuthenticationRequiredError: If the caller is anonymous
            ValidationError: If title or body is blank
            SchedulerError: If the publish job could not be enqueued
        """
        identity = request.identity
        with logfire.span("create_post.execute"):
            if identity.user_id is None:
                raise AuthenticationRequiredError(Action.CREATE_POST.value)
            authorize(identity, Action.CREATE_POST)

            post = await self.post_service.create_post(
                owner_id=identity.user_id,
                title=request.title,
                body=request.body,
            )
            job = await self.publish_service.schedule_publish(post)

            return CreatePostResponse(
                post=PostItem.from_post(post), publish_at=job.run_at
            )
