"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

from quill.config import AuthSettings
from quill.domain.model import Comment, Post, User
from quill.domain.service import JWTService
from quill.domain.value import CommentId, Identity, PostId, Role, UserId


def make_user(role: Role = Role.USER, email: str | None = None) -> User:
    """Build a user with a unique email."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        email=email or f"{str(user_id)[:8]}@example.com",
        role=role,
    )


def identity_of(user: User) -> Identity:
    """Identity an authenticated request by ``user`` resolves to."""
    return Identity(user_id=user.id, role=user.role)


def make_post(
    owner_id: UserId,
    published: bool = False,
    title: str = "Test Post",
    body: str = "Some body text",
    age: timedelta = timedelta(0),
) -> Post:
    """Build a post.

    Args:
        owner_id: Owning user
        published: Whether the post is already published
        title: Post title
        body: Post body
        age: How long ago the post was created

    Returns:
        Unsaved post
    """
    created = datetime.now() - age
    return Post(
        id=PostId(uuid4()),
        owner_id=owner_id,
        title=title,
        body=body,
        published=published,
        created_at=created,
        updated_at=created,
    )


def make_comment(post_id: PostId, owner_id: UserId, body: str = "Nice article") -> Comment:
    """Build a comment on a post."""
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        owner_id=owner_id,
        body=body,
    )


def token_for(user: User, settings: AuthSettings | None = None) -> str:
    """Mint an ``auth_token`` cookie value for ``user``."""
    return JWTService(settings or AuthSettings()).create_token(user.id)
