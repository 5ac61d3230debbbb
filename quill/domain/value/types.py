"""Domain value objects for Quill.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from datetime import datetime
from enum import Enum

from quill.domain.value.common import ValueObject
from quill.domain.value.identifiers import PostId, UserId


class Role(str, Enum):
    """Role of an authenticated user.

    Anonymous callers have no role of their own; they are represented by an
    Identity without a user ID at the ``user`` privilege level.
    """

    USER = "user"
    ADMIN = "admin"


class Action(str, Enum):
    """Operations that go through the authorization engine."""

    READ_POST = "read_post"
    CREATE_POST = "create_post"
    UPDATE_POST = "update_post"
    DESTROY_POST = "destroy_post"
    PUBLISH_POST = "publish_post"
    LIST_DRAFTS = "list_drafts"
    CREATE_COMMENT = "create_comment"
    UPDATE_COMMENT = "update_comment"
    DESTROY_COMMENT = "destroy_comment"


class Identity(ValueObject):
    """The actor making a request.

    Resolved once per request and passed explicitly into every use case.
    """

    user_id: UserId | None = None
    role: Role = Role.USER

    @classmethod
    def anonymous(cls) -> "Identity":
        """Build the identity of an unauthenticated caller."""
        return cls(user_id=None, role=Role.USER)

    @property
    def is_anonymous(self) -> bool:
        return self.user_id is None

    @property
    def is_admin(self) -> bool:
        return self.user_id is not None and self.role == Role.ADMIN


class ScheduledPublication(ValueObject):
    """A deferred publish job, addressed by post ID."""

    post_id: PostId
    run_at: datetime
