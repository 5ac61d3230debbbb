"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .post_service import PostService
from .publish_service import PublishJobRunner, PublishScheduler, PublishService
from .user_service import UserService

__all__ = [
    "CommentService",
    "JWTService",
    "PostService",
    "PublishJobRunner",
    "PublishScheduler",
    "PublishService",
    "Service",
    "UserService",
]
