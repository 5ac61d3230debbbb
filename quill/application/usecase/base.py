"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services.

    Every use case takes the caller's Identity inside its request model;
    nothing is read from process-wide state.
    """

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
