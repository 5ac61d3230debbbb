"""Authentication use cases."""

from .get_current_identity import GetCurrentIdentityRequest, GetCurrentIdentityUseCase

__all__ = ["GetCurrentIdentityRequest", "GetCurrentIdentityUseCase"]
