"""Deferred job entry points.

Each job runs in its own request scope, so it gets a fresh session and
fresh services exactly like an HTTP request does.
"""

import logfire
from dishka import AsyncContainer

from quill.application.usecase.post import (
    PublishScheduledPostRequest,
    PublishScheduledPostUseCase,
)
from quill.domain.service import PublishJobRunner
from quill.domain.value import PostId


def make_publish_job_runner(container: AsyncContainer) -> PublishJobRunner:
    """Build the coroutine function the scheduler calls for a due post.

    Args:
        container: Application-scoped DI container

    Returns:
        Job runner taking the post ID
    """

    async def run_scheduled_publish(post_id: PostId) -> None:
        with logfire.span("job.publish_scheduled_post", post_id=str(post_id)):
            async with container() as request_container:
                use_case = await request_container.get(PublishScheduledPostUseCase)
                await use_case.execute(PublishScheduledPostRequest(post_id=post_id))

    return run_scheduled_publish
