"""Unit tests for CreateCommentUseCase."""

from uuid import uuid4

import pytest

from quill.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
)
from quill.domain.error import (
    AuthenticationRequiredError,
    NotFoundError,
    ValidationError,
)
from quill.domain.repository import CommentRepository, PostRepository
from quill.domain.value import Identity, Role
from tests.conftest import identity_of, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_comment_on_published_post(self, unit_env):
        """Any authenticated user can comment on a published post."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post(make_user().id, published=True))
        reader = make_user()

        # Act
        response = await use_case.execute(
            CreateCommentRequest(
                identity=identity_of(reader), post_id=post.id, body="Nice article"
            )
        )

        # Assert
        assert response.comment.body == "Nice article"
        assert response.comment.owner_id == str(reader.id)
        assert response.comment.post_id == str(post.id)
        assert await comment_repo.count_by_post(post.id) == 1

    @pytest.mark.asyncio
    async def test_owner_cannot_comment_on_own_draft(self, unit_env):
        """Drafts reject comments even from their owner."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        writer = make_user()
        draft = await post_repo.save(make_post(writer.id))

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    identity=identity_of(writer), post_id=draft.id, body="Note"
                )
            )

        assert exc_info.value.field == "published"
        assert await comment_repo.count_by_post(draft.id) == 0

    @pytest.mark.asyncio
    async def test_admin_cannot_comment_on_draft(self, unit_env):
        """The draft rule holds for admins too."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        draft = await post_repo.save(make_post(make_user().id))

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(
                    identity=identity_of(make_user(Role.ADMIN)),
                    post_id=draft.id,
                    body="Note",
                )
            )

    @pytest.mark.asyncio
    async def test_hidden_draft_looks_missing(self, unit_env):
        """Commenting on someone else's draft reports the post as missing."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        draft = await post_repo.save(make_post(make_user().id))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    identity=identity_of(make_user()), post_id=draft.id, body="Hi"
                )
            )

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        """Anonymous callers must authenticate."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id, published=True))

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                CreateCommentRequest(
                    identity=Identity.anonymous(), post_id=post.id, body="Hi"
                )
            )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Unknown posts raise NotFoundError."""
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(
                    identity=identity_of(make_user()), post_id=uuid4(), body="Hi"
                )
            )

    @pytest.mark.asyncio
    async def test_blank_body(self, unit_env):
        """Blank comments are rejected."""
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(make_user().id, published=True))

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreateCommentRequest(
                    identity=identity_of(make_user()), post_id=post.id, body=" "
                )
            )

        assert exc_info.value.field == "body"
