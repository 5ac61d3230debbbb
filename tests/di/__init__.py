"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .scheduler import MockSchedulerProvider
from .container import build_test_container

__all__ = [
    "MockPersistenceProvider",
    "MockSchedulerProvider",
    "build_test_container",
]
