"""Per-request identity resolution for routes."""

from quill.application.usecase.auth import (
    GetCurrentIdentityRequest,
    GetCurrentIdentityUseCase,
)
from quill.domain.value import Identity


async def current_identity(
    use_case: GetCurrentIdentityUseCase, auth_token: str | None
) -> Identity:
    """Resolve the caller from the ``auth_token`` cookie.

    Anonymous when the cookie is missing or unusable.
    """
    return await use_case.execute(GetCurrentIdentityRequest(token=auth_token))
