"""Unit tests for CreatePostUseCase."""

from datetime import datetime

import pytest

from quill.application.usecase.post import CreatePostRequest, CreatePostUseCase
from quill.config import PublishingSettings
from quill.domain.error import AuthenticationRequiredError, ValidationError
from quill.domain.repository import PostRepository
from quill.domain.service import PublishScheduler
from quill.domain.value import Identity
from tests.conftest import identity_of, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post_schedules_publication(self, unit_env):
        """A new draft gets exactly one publish job, one delay away."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        scheduler = await unit_env.get(PublishScheduler)
        settings = await unit_env.get(PublishingSettings)
        post_repo = await unit_env.get(PostRepository)
        writer = make_user()
        before = datetime.now()

        # Act
        response = await use_case.execute(
            CreatePostRequest(identity=identity_of(writer), title="Hi", body="There")
        )

        # Assert
        assert response.post.published is False
        assert response.post.owner_id == str(writer.id)
        assert response.post.comment_count == 0
        assert response.publish_at >= before + settings.delay

        assert len(scheduler.jobs) == 1
        assert str(scheduler.jobs[0].post_id) == response.post.post_id

        stored = await post_repo.find_by_id(scheduler.jobs[0].post_id)
        assert stored.title == "Hi"

    @pytest.mark.asyncio
    async def test_create_post_anonymous(self, unit_env):
        """Anonymous callers cannot write posts."""
        use_case = await unit_env.get(CreatePostUseCase)
        scheduler = await unit_env.get(PublishScheduler)

        with pytest.raises(AuthenticationRequiredError):
            await use_case.execute(
                CreatePostRequest(identity=Identity.anonymous(), title="Hi", body="x")
            )

        assert scheduler.jobs == []

    @pytest.mark.asyncio
    async def test_create_post_blank_body(self, unit_env):
        """Blank bodies are rejected and nothing is scheduled."""
        use_case = await unit_env.get(CreatePostUseCase)
        scheduler = await unit_env.get(PublishScheduler)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(
                CreatePostRequest(
                    identity=identity_of(make_user()), title="Hi", body=""
                )
            )

        assert exc_info.value.field == "body"
        assert scheduler.jobs == []
