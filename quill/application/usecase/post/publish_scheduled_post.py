"""Publish scheduled post use case.

Runs when a deferred publish job fires. There is no caller identity: the
job acts on behalf of the system.
"""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quill.application.usecase.base import BaseUseCase
from quill.domain.error import NotFoundError
from quill.domain.service import PublishService
from quill.domain.value import PostId


class PublishScheduledPostRequest(BaseModel):
    """Publish scheduled post request."""

    post_id: UUID


class PublishScheduledPostResponse(BaseModel):
    """Publish scheduled post response."""

    post_id: str
    newly_published: bool
    skipped: bool = False


class PublishScheduledPostUseCase(BaseUseCase):
    """Use case executed by the publish job."""

    def __init__(self, publish_service: PublishService) -> None:
        self.publish_service = publish_service

    async def execute(
        self, request: PublishScheduledPostRequest
    ) -> PublishScheduledPostResponse:
        """Publish the post if it is still a draft.

        A post destroyed before the job fired is skipped, not an error.
        """
        post_id = PostId(request.post_id)
        with logfire.span("publish_scheduled_post.execute", post_id=str(post_id)):
            try:
                newly_published = await self.publish_service.publish(post_id)
            except NotFoundError:
                logfire.info(
                    "Scheduled publish skipped, post no longer exists",
                    post_id=str(post_id),
                )
                return PublishScheduledPostResponse(
                    post_id=str(post_id), newly_published=False, skipped=True
                )

            return PublishScheduledPostResponse(
                post_id=str(post_id), newly_published=newly_published
            )
