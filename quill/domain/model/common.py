"""Base model for all domain entities."""

from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )

    def revise(self, **changes: Any) -> Self:
        """Return a copy with ``changes`` applied.

        Unlike model_copy, the copy goes through validation again, so a
        revision can never break a field invariant.

        Raises:
            pydantic.ValidationError: If the revised values are invalid
        """
        return type(self).model_validate({**self.model_dump(), **changes})
