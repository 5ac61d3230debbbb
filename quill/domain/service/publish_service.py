"""Publish workflow domain service.

Posts move from draft to published exactly once. The transition is
triggered either by an authorized user or by a deferred job enqueued when
the post is created; both go through ``PublishService.publish``.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from datetime import timedelta

import logfire

from quill.domain.error import NotFoundError
from quill.domain.model.post import Post
from quill.domain.repository import PostRepository
from quill.domain.value import PostId, ScheduledPublication

from .base import Service

PublishJobRunner = Callable[[PostId], Awaitable[None]]


class PublishScheduler(ABC):
    """Deferred-execution port for publish jobs.

    Implementations guarantee at-least-once execution of the job and must
    address it by post ID only: the post is re-read when the job fires.
    """

    @abstractmethod
    async def schedule(self, post_id: PostId, delay: timedelta) -> ScheduledPublication:
        """Enqueue "publish ``post_id`` after ``delay``".

        Args:
            post_id: Post to publish
            delay: Time to wait before publishing

        Returns:
            The enqueued job

        Raises:
            SchedulerError: If the job could not be enqueued
        """
        raise NotImplementedError

    @abstractmethod
    def bind(self, runner: PublishJobRunner) -> None:
        """Set the coroutine function that executes a due job."""
        raise NotImplementedError


class PublishService(Service):
    """Domain service for the draft -> published transition."""

    def __init__(
        self,
        post_repository: PostRepository,
        scheduler: PublishScheduler,
        delay: timedelta,
    ) -> None:
        """Initialize publish service.

        Args:
            post_repository: Post repository
            scheduler: Deferred-execution port
            delay: Delay between post creation and automatic publication
        """
        self.post_repository = post_repository
        self.scheduler = scheduler
        self.delay = delay

    async def publish(self, post_id: PostId) -> bool:
        """Publish a post if it is still a draft.

        Idempotent: publishing an already published post changes nothing
        and is not an error.

        Args:
            post_id: Post ID

        Returns:
            True if this call published the post, False if it was already
            published

        Raises:
            NotFoundError: If the post does not exist
        """
        with logfire.span("publish_service.publish", post_id=str(post_id)):
            updated = await self.post_repository.mark_published(post_id)
            if updated is not None:
                logfire.info("Post published", post_id=str(post_id))
                return True

            existing = await self.post_repository.find_by_id(post_id)
            if existing is None:
                logfire.warn("Post not found for publish", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))

            logfire.info("Post already published", post_id=str(post_id))
            return False

    async def schedule_publish(self, post: Post) -> ScheduledPublication:
        """Enqueue the automatic publication of a new post.

        Args:
            post: Newly created post

        Returns:
            The enqueued job

        Raises:
            SchedulerError: If the job could not be enqueued
        """
        with logfire.span(
            "publish_service.schedule_publish",
            post_id=str(post.id),
            delay_seconds=self.delay.total_seconds(),
        ):
            job = await self.scheduler.schedule(post.id, self.delay)
            logfire.info(
                "Publish scheduled",
                post_id=str(post.id),
                run_at=job.run_at.isoformat(),
            )
            return job
