"""Domain value objects for Quill."""

from quill.domain.value.identifiers import (
    CommentId,
    PostId,
    UserId,
)
from quill.domain.value.types import (
    Action,
    Identity,
    Role,
    ScheduledPublication,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    # Types
    "Action",
    "Identity",
    "Role",
    "ScheduledPublication",
]
