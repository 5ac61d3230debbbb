"""Publish scheduler adapter."""

from .scheduler import (
    ApschedulerPublishScheduler,
    MockPublishScheduler,
    PublishJobRunner,
    run_publish_job,
)

__all__ = [
    "ApschedulerPublishScheduler",
    "MockPublishScheduler",
    "PublishJobRunner",
    "run_publish_job",
]
