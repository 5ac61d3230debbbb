"""Post use cases."""

from .common import PostItem, PostPage
from .create_post import CreatePostRequest, CreatePostResponse, CreatePostUseCase
from .destroy_post import DestroyPostRequest, DestroyPostResponse, DestroyPostUseCase
from .get_post import GetPostRequest, GetPostResponse, GetPostUseCase
from .list_drafts import ListDraftsUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .list_published_posts import ListPublishedPostsUseCase
from .publish_post import PublishPostRequest, PublishPostResponse, PublishPostUseCase
from .publish_scheduled_post import (
    PublishScheduledPostRequest,
    PublishScheduledPostResponse,
    PublishScheduledPostUseCase,
)
from .update_post import UpdatePostRequest, UpdatePostResponse, UpdatePostUseCase

__all__ = [
    "PostItem",
    "PostPage",
    "CreatePostRequest",
    "CreatePostResponse",
    "CreatePostUseCase",
    "DestroyPostRequest",
    "DestroyPostResponse",
    "DestroyPostUseCase",
    "GetPostRequest",
    "GetPostResponse",
    "GetPostUseCase",
    "ListDraftsUseCase",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "ListPublishedPostsUseCase",
    "PublishPostRequest",
    "PublishPostResponse",
    "PublishPostUseCase",
    "PublishScheduledPostRequest",
    "PublishScheduledPostResponse",
    "PublishScheduledPostUseCase",
    "UpdatePostRequest",
    "UpdatePostResponse",
    "UpdatePostUseCase",
]
