"""Shared post response models."""

from datetime import datetime

from pydantic import BaseModel

from quill.domain.model import Post


class PostItem(BaseModel):
    """A post as returned by the post use cases."""

    post_id: str
    owner_id: str
    title: str
    body: str
    published: bool
    comment_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post, comment_count: int = 0) -> "PostItem":
        return cls(
            post_id=str(post.id),
            owner_id=str(post.owner_id),
            title=post.title,
            body=post.body,
            published=post.published,
            comment_count=comment_count,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class PostPage(BaseModel):
    """A page of posts."""

    posts: list[PostItem]
    total: int
    limit: int
    offset: int
