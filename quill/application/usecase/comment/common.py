"""Shared comment response models."""

from datetime import datetime

from pydantic import BaseModel

from quill.domain.model import Comment


class CommentItem(BaseModel):
    """A comment as returned by the comment use cases."""

    comment_id: str
    post_id: str
    owner_id: str
    body: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            owner_id=str(comment.owner_id),
            body=comment.body,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
