"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .scheduler import SchedulerProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .scheduler import ProdSchedulerProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdSchedulerProvider",
    "SchedulerProvider",
]
