"""Publish scheduler infrastructure providers."""

from collections.abc import AsyncIterator

from apscheduler.jobstores.sqlalchemy import SQLAlchemyJobStore
from dishka import Scope, provide

from quill.adapter.scheduler import ApschedulerPublishScheduler
from quill.config import Settings
from quill.domain.service import PublishScheduler
from quill.util.di.base import ProviderBase


class SchedulerProvider(ProviderBase):
    """Scheduler component base."""

    __mock_component__ = "scheduler"


class ProdSchedulerProvider(SchedulerProvider):
    """Production scheduler provider keeping jobs in the database."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_publish_scheduler(
        self, settings: Settings
    ) -> AsyncIterator[PublishScheduler]:
        """Provide the publish scheduler.

        The scheduler starts paused and is shut down when the container
        closes. Jobs not yet run stay in the ``apscheduler_jobs`` table.
        """
        scheduler = ApschedulerPublishScheduler(
            jobstore=SQLAlchemyJobStore(url=settings.database.sync_url),
            max_attempts=settings.publishing.max_attempts,
            retry_delay=settings.publishing.retry_delay_seconds,
        )
        scheduler.start()
        yield scheduler
        scheduler.shutdown()
