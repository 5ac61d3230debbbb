"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class SchedulerError(AdapterError):
    """Deferred job could not be enqueued."""

    pass
