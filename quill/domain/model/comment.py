"""Comment entity.

Comments belong to a post and may only exist while that post is published.
"""

from datetime import datetime

from pydantic import Field, field_validator

from quill.domain.model.common import DomainModel
from quill.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity."""

    id: CommentId
    post_id: PostId
    owner_id: UserId
    body: str = Field(max_length=10000)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("body")
    @classmethod
    def validate_present(cls, v: str) -> str:
        """Reject empty and whitespace-only bodies."""
        if not v.strip():
            raise ValueError("can't be blank")
        return v
