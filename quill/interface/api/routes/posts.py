"""Post routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Query, status
from pydantic import BaseModel

from quill.application.usecase.auth import GetCurrentIdentityUseCase
from quill.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DestroyPostRequest,
    DestroyPostResponse,
    DestroyPostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListDraftsUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    ListPublishedPostsUseCase,
    PublishPostRequest,
    PublishPostResponse,
    PublishPostUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)
from quill.domain.error import DomainError
from quill.interface.api.identity import current_identity
from quill.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str
    body: str


class UpdatePostAPIRequest(BaseModel):
    """API request for editing a post. Omitted fields are kept."""

    title: str | None = None
    body: str | None = None


# Listing routes are registered before /{post_id}


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List every post the caller may read, newest first.

    Anonymous callers see published posts; authenticated users also see
    their own drafts; admins see everything.
    """
    identity = await current_identity(get_identity, auth_token)
    return await list_posts_use_case.execute(
        ListPostsRequest(identity=identity, limit=limit, offset=offset)
    )


@router.get("/published", response_model=ListPostsResponse)
async def list_published_posts(
    list_published_use_case: FromDishka[ListPublishedPostsUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List published posts only, whoever asks."""
    identity = await current_identity(get_identity, auth_token)
    return await list_published_use_case.execute(
        ListPostsRequest(identity=identity, limit=limit, offset=offset)
    )


@router.get("/drafts", response_model=ListPostsResponse)
async def list_drafts(
    list_drafts_use_case: FromDishka[ListDraftsUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    limit: int = Query(default=30, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
    auth_token: str | None = Cookie(default=None),
) -> ListPostsResponse:
    """List the caller's own drafts.

    Requires authentication.
    """
    identity = await current_identity(get_identity, auth_token)
    try:
        return await list_drafts_use_case.execute(
            ListPostsRequest(identity=identity, limit=limit, offset=offset)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreatePostResponse:
    """Create a draft post.

    Requires authentication. The post is published automatically after the
    configured delay unless it is published manually first.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI
        get_identity: Identity resolution use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created post and its scheduled publication time

    Raises:
        HTTPException: 401 if anonymous, 422 if a field is blank
    """
    identity = await current_identity(get_identity, auth_token)
    try:
        return await create_post_use_case.execute(
            CreatePostRequest(identity=identity, title=request.title, body=request.body)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetPostResponse:
    """Get a single post.

    Posts the caller may not read answer 404, like missing ones.
    """
    identity = await current_identity(get_identity, auth_token)
    try:
        return await get_post_use_case.execute(
            GetPostRequest(identity=identity, post_id=post_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdatePostResponse:
    """Edit a post's title and body.

    Owner or admin only.
    """
    identity = await current_identity(get_identity, auth_token)
    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                identity=identity,
                post_id=post_id,
                title=request.title,
                body=request.body,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{post_id}", response_model=DestroyPostResponse)
async def destroy_post(
    post_id: UUID,
    destroy_post_use_case: FromDishka[DestroyPostUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DestroyPostResponse:
    """Delete a post and all of its comments.

    Owner or admin only.
    """
    identity = await current_identity(get_identity, auth_token)
    try:
        return await destroy_post_use_case.execute(
            DestroyPostRequest(identity=identity, post_id=post_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch("/{post_id}/publish", response_model=PublishPostResponse)
async def publish_post(
    post_id: UUID,
    publish_post_use_case: FromDishka[PublishPostUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> PublishPostResponse:
    """Publish a draft now.

    Owner or admin only. Publishing an already published post succeeds with
    ``newly_published`` set to false.
    """
    identity = await current_identity(get_identity, auth_token)
    try:
        return await publish_post_use_case.execute(
            PublishPostRequest(identity=identity, post_id=post_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
