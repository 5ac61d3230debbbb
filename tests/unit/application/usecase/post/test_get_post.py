"""Unit tests for GetPostUseCase."""

from uuid import uuid4

import pytest

from quill.application.usecase.post import GetPostRequest, GetPostUseCase
from quill.domain.error import NotFoundError
from quill.domain.repository import CommentRepository, PostRepository
from quill.domain.value import Identity, Role
from tests.conftest import identity_of, make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_published_post_visible_to_anyone(self, unit_env):
        """Published posts are readable anonymously, with comment counts."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        writer = make_user()
        post = await post_repo.save(make_post(writer.id, published=True))
        await comment_repo.save(make_comment(post.id, writer.id))

        # Act
        response = await use_case.execute(
            GetPostRequest(identity=Identity.anonymous(), post_id=post.id)
        )

        # Assert
        assert response.post.post_id == str(post.id)
        assert response.post.comment_count == 1

    @pytest.mark.asyncio
    async def test_draft_visible_to_owner_and_admin(self, unit_env):
        """Drafts are readable by their owner and by admins."""
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        writer = make_user()
        draft = await post_repo.save(make_post(writer.id))

        for identity in (identity_of(writer), identity_of(make_user(Role.ADMIN))):
            response = await use_case.execute(
                GetPostRequest(identity=identity, post_id=draft.id)
            )
            assert response.post.published is False

    @pytest.mark.asyncio
    async def test_draft_hidden_from_others(self, unit_env):
        """Other users' drafts are reported as missing."""
        use_case = await unit_env.get(GetPostUseCase)
        post_repo = await unit_env.get(PostRepository)
        draft = await post_repo.save(make_post(make_user().id))

        for identity in (Identity.anonymous(), identity_of(make_user())):
            with pytest.raises(NotFoundError):
                await use_case.execute(
                    GetPostRequest(identity=identity, post_id=draft.id)
                )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Unknown IDs raise NotFoundError."""
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetPostRequest(identity=Identity.anonymous(), post_id=uuid4())
            )
