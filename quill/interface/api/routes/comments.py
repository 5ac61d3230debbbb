"""Comment routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, status
from pydantic import BaseModel

from quill.application.usecase.auth import GetCurrentIdentityUseCase
from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DestroyCommentRequest,
    DestroyCommentResponse,
    DestroyCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from quill.domain.error import DomainError
from quill.interface.api.identity import current_identity
from quill.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request carrying a comment body."""

    body: str


@router.get("/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> GetCommentsResponse:
    """Get the comments of a post, oldest first."""
    identity = await current_identity(get_identity, auth_token)
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(identity=identity, post_id=post_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on a published post.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment data
        create_comment_use_case: Create comment use case from DI
        get_identity: Identity resolution use case from DI
        auth_token: JWT token from cookie

    Returns:
        Created comment

    Raises:
        HTTPException: 401 if anonymous, 404 if the post is not visible,
            422 if the post is a draft or the body is blank
    """
    identity = await current_identity(get_identity, auth_token)
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(identity=identity, post_id=post_id, body=request.body)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.patch(
    "/{post_id}/comments/{comment_id}", response_model=UpdateCommentResponse
)
async def update_comment(
    post_id: UUID,
    comment_id: UUID,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> UpdateCommentResponse:
    """Edit a comment's body. Owner or admin only."""
    identity = await current_identity(get_identity, auth_token)
    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                identity=identity,
                post_id=post_id,
                comment_id=comment_id,
                body=request.body,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete(
    "/{post_id}/comments/{comment_id}", response_model=DestroyCommentResponse
)
async def destroy_comment(
    post_id: UUID,
    comment_id: UUID,
    destroy_comment_use_case: FromDishka[DestroyCommentUseCase],
    get_identity: FromDishka[GetCurrentIdentityUseCase],
    auth_token: str | None = Cookie(default=None),
) -> DestroyCommentResponse:
    """Delete a comment. Owner or admin only."""
    identity = await current_identity(get_identity, auth_token)
    try:
        return await destroy_comment_use_case.execute(
            DestroyCommentRequest(
                identity=identity, post_id=post_id, comment_id=comment_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
