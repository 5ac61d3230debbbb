"""Publish schedulers.

Production jobs go through APScheduler with a persistent job store, so a
publish enqueued before a restart still fires afterwards. Stored jobs hold
only a reference to ``run_publish_job`` and the post ID; the runner that
does the work is bound at startup.
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

from apscheduler.jobstores.base import BaseJobStore
from apscheduler.jobstores.memory import MemoryJobStore
from apscheduler.schedulers.asyncio import AsyncIOScheduler

from quill.adapter.error import SchedulerError
from quill.domain.service.publish_service import PublishJobRunner, PublishScheduler
from quill.domain.value import PostId, ScheduledPublication

logger = logging.getLogger(__name__)

_active: "ApschedulerPublishScheduler | None" = None


async def run_publish_job(post_id: str, attempt: int = 1) -> None:
    """Entry point stored with every publish job."""
    if _active is None:
        raise SchedulerError(f"No publish scheduler bound to run job for {post_id}")
    await _active.execute(PostId(UUID(post_id)), attempt)


def job_id_for(post_id: PostId) -> str:
    return f"publish-{post_id}"


class ApschedulerPublishScheduler(PublishScheduler):
    """Runs publish jobs with an APScheduler ``AsyncIOScheduler``.

    The scheduler starts paused and resumes once a runner is bound, so jobs
    that fell due while the process was down wait for the runner instead of
    firing into nothing. Missed jobs run however late they are.
    """

    def __init__(
        self,
        jobstore: BaseJobStore | None = None,
        max_attempts: int = 3,
        retry_delay: float = 30.0,
    ) -> None:
        """Initialize the scheduler.

        Args:
            jobstore: Where jobs are kept, in memory when omitted
            max_attempts: Attempts per job before it is abandoned
            retry_delay: Seconds to wait between attempts
        """
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._runner: PublishJobRunner | None = None
        self._scheduler = AsyncIOScheduler(
            jobstores={"default": jobstore or MemoryJobStore()},
            job_defaults={"coalesce": True, "misfire_grace_time": None},
            timezone=timezone.utc,
        )

    @property
    def running(self) -> bool:
        return self._scheduler.running

    def start(self) -> None:
        """Start the scheduler paused. Must run inside the event loop."""
        self._scheduler.start(paused=True)

    def bind(self, runner: PublishJobRunner) -> None:
        """Set the runner and start processing due jobs."""
        global _active
        self._runner = runner
        _active = self
        if not self._scheduler.running:
            self._scheduler.start(paused=True)
        self._scheduler.resume()

    def pending(self) -> list[str]:
        """IDs of the posts with a job waiting."""
        return [job.args[0] for job in self._scheduler.get_jobs()]

    async def schedule(self, post_id: PostId, delay: timedelta) -> ScheduledPublication:
        if self._runner is None:
            raise SchedulerError("No publish job runner bound to the scheduler")

        run_at = datetime.now(timezone.utc) + delay
        self._enqueue(post_id, run_at, attempt=1)

        logger.debug("Publish job enqueued for %s at %s", post_id, run_at)
        return ScheduledPublication(post_id=post_id, run_at=run_at)

    def _enqueue(self, post_id: PostId, run_at: datetime, attempt: int) -> None:
        try:
            self._scheduler.add_job(
                run_publish_job,
                "date",
                run_date=run_at,
                args=[str(post_id), attempt],
                id=job_id_for(post_id),
                replace_existing=True,
            )
        except Exception as e:
            raise SchedulerError(f"Could not enqueue publish job for {post_id}: {e}") from e

    async def execute(self, post_id: PostId, attempt: int) -> None:
        """Run one attempt of a job, queueing a retry if it fails."""
        if self._runner is None:
            raise SchedulerError(f"No publish job runner bound for {post_id}")

        try:
            await self._runner(post_id)
            return
        except Exception:
            logger.exception(
                "Publish job for %s failed (attempt %d/%d)",
                post_id,
                attempt,
                self.max_attempts,
            )

        if attempt >= self.max_attempts:
            logger.error(
                "Publish job for %s abandoned after %d attempts",
                post_id,
                self.max_attempts,
            )
            return

        retry_at = datetime.now(timezone.utc) + timedelta(seconds=self.retry_delay)
        self._enqueue(post_id, retry_at, attempt + 1)

    def shutdown(self) -> None:
        """Stop the scheduler. Stored jobs stay in the job store."""
        global _active
        if self._scheduler.running:
            self._scheduler.shutdown(wait=False)
        if _active is self:
            _active = None


class MockPublishScheduler(PublishScheduler):
    """Records jobs instead of running them.

    Tests drive time explicitly with ``run_due``.
    """

    def __init__(self) -> None:
        self.jobs: list[ScheduledPublication] = []
        self._runner: PublishJobRunner | None = None

    def bind(self, runner: PublishJobRunner) -> None:
        self._runner = runner

    async def schedule(self, post_id: PostId, delay: timedelta) -> ScheduledPublication:
        job = ScheduledPublication(post_id=post_id, run_at=datetime.now() + delay)
        self.jobs.append(job)
        return job

    def due(self, now: datetime) -> list[ScheduledPublication]:
        """Jobs whose run time has been reached at ``now``."""
        return [job for job in self.jobs if job.run_at <= now]

    async def run_due(self, now: datetime) -> int:
        """Run and remove every job due at ``now``.

        Returns:
            Number of jobs run

        Raises:
            SchedulerError: If no runner is bound
        """
        if self._runner is None:
            raise SchedulerError("No publish job runner bound to the scheduler")

        due = self.due(now)
        for job in due:
            self.jobs.remove(job)
            await self._runner(job.post_id)
        return len(due)
