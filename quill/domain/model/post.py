"""Post aggregate root.

Posts start as drafts and are published either manually or by the deferred
publish job. Only published posts accept comments.
"""

from datetime import datetime

from pydantic import Field, field_validator

from quill.domain.error import ValidationError
from quill.domain.model.common import DomainModel
from quill.domain.value import PostId, UserId


class Post(DomainModel):
    """Post aggregate root.

    Invariants:
    - title and body are never blank
    - an unpublished post carries no comments (see assert_accepts_comments)
    """

    id: PostId
    owner_id: UserId
    title: str = Field(max_length=300)
    body: str = Field(max_length=50000)
    published: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("title", "body")
    @classmethod
    def validate_present(cls, v: str) -> str:
        """Reject empty and whitespace-only values."""
        if not v.strip():
            raise ValueError("can't be blank")
        return v

    def assert_accepts_comments(self, comment_count: int) -> None:
        """Check the comment admission rule against a comment count.

        Shared by comment creation (existing count plus the new comment) and
        post updates (existing count).

        Args:
            comment_count: Number of comments the post would carry

        Raises:
            ValidationError: If the post is a draft and would carry comments
        """
        if not self.published and comment_count > 0:
            raise ValidationError(
                "published", "Comments can only be added to published posts"
            )
