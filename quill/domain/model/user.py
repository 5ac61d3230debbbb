"""User aggregate root.

Users are created out of band (seed script, admin tooling); the API only
reads them to resolve the identity behind a token.
"""

from datetime import datetime

from pydantic import Field, field_validator

from quill.domain.model.common import DomainModel
from quill.domain.value import Role, UserId


def normalize_email(email: str) -> str:
    """Canonical form used for storage and lookup."""
    return email.strip().lower()


class User(DomainModel):
    """User aggregate root.

    Emails are stored in canonical (lowercase) form and are unique.
    """

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    role: Role = Role.USER
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("email")
    @classmethod
    def canonical_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("is not an email address")
        return normalize_email(v)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
