"""Unit tests for PostService."""

from datetime import timedelta
from uuid import uuid4

import pytest

from quill.domain.error import NotFoundError, ValidationError
from quill.domain.policy import PUBLISHED_SCOPE, visible_scope
from quill.domain.repository import CommentRepository, PostRepository
from quill.domain.service import PostService
from quill.domain.value import Identity, PostId, UserId
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreatePost:
    """Tests for PostService.create_post."""

    @pytest.mark.asyncio
    async def test_create_post_saves_draft(self, unit_env):
        """New posts are saved as drafts owned by the creator."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())

        # Act
        post = await post_service.create_post(owner_id, "Hello", "World")

        # Assert
        assert post.published is False
        assert post.owner_id == owner_id
        assert await post_repo.find_by_id(post.id) == post

    @pytest.mark.asyncio
    async def test_create_post_blank_title(self, unit_env):
        """Blank titles are rejected with a field-addressable error."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(ValidationError) as exc_info:
            await post_service.create_post(UserId(uuid4()), "  ", "World")

        assert exc_info.value.field == "title"


class TestGetPost:
    """Tests for post lookups."""

    @pytest.mark.asyncio
    async def test_get_post_in_scope_hides_drafts(self, unit_env):
        """A post outside the scope looks exactly like a missing one."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        draft = await post_repo.save(make_post(UserId(uuid4())))

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.get_post_in_scope(draft.id, PUBLISHED_SCOPE)
        with pytest.raises(NotFoundError):
            await post_service.get_post_in_scope(PostId(uuid4()), PUBLISHED_SCOPE)

    @pytest.mark.asyncio
    async def test_get_post_in_scope_owner(self, unit_env):
        """Owners find their own drafts."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        owner = Identity(user_id=UserId(uuid4()))
        draft = await post_repo.save(make_post(owner.user_id))

        found = await post_service.get_post_in_scope(draft.id, visible_scope(owner))

        assert found.id == draft.id

    @pytest.mark.asyncio
    async def test_require_post_missing(self, unit_env):
        """require_post raises for unknown IDs."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.require_post(PostId(uuid4()))


class TestListPosts:
    """Tests for PostService.list_posts."""

    @pytest.mark.asyncio
    async def test_list_posts_newest_first_with_total(self, unit_env):
        """Pages are ordered newest first; the total ignores paging."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        owner_id = UserId(uuid4())
        posts = [
            await post_repo.save(
                make_post(owner_id, published=True, age=timedelta(minutes=i))
            )
            for i in range(5)
        ]
        await post_repo.save(make_post(owner_id))

        # Act
        page, total = await post_service.list_posts(PUBLISHED_SCOPE, limit=2, offset=1)

        # Assert
        assert total == 5
        assert [p.id for p in page] == [posts[1].id, posts[2].id]


class TestUpdatePost:
    """Tests for PostService.update_post."""

    @pytest.mark.asyncio
    async def test_update_keeps_omitted_fields(self, unit_env):
        """Fields passed as None keep their value."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(UserId(uuid4()), body="Original"))

        updated = await post_service.update_post(post, title="Renamed")

        assert updated.title == "Renamed"
        assert updated.body == "Original"
        assert (await post_repo.find_by_id(post.id)).title == "Renamed"

    @pytest.mark.asyncio
    async def test_update_rejects_blank_body(self, unit_env):
        """Blanking a field fails and leaves the stored post alone."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(UserId(uuid4()), body="Original"))

        with pytest.raises(ValidationError) as exc_info:
            await post_service.update_post(post, body="")

        assert exc_info.value.field == "body"
        assert (await post_repo.find_by_id(post.id)).body == "Original"

    @pytest.mark.asyncio
    async def test_update_never_changes_published(self, unit_env):
        """Saving an edited post cannot publish or unpublish it."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(UserId(uuid4()), published=True))

        await post_service.update_post(post.revise(published=False), title="New")

        assert (await post_repo.find_by_id(post.id)).published is True

    @pytest.mark.asyncio
    async def test_update_reports_stored_publish_state(self, unit_env):
        """An update racing a publish returns the post as published."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        draft = await post_repo.save(make_post(UserId(uuid4())))
        await post_repo.mark_published(draft.id)

        updated = await post_service.update_post(draft, body="Edited")

        assert updated.published is True
        assert updated.body == "Edited"

    @pytest.mark.asyncio
    async def test_update_rejects_commented_draft(self, unit_env):
        """A draft that already carries comments cannot be saved."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        owner_id = UserId(uuid4())
        draft = await post_repo.save(make_post(owner_id, title="Original"))
        await comment_repo.save(make_comment(draft.id, owner_id))

        # Act
        with pytest.raises(ValidationError) as exc_info:
            await post_service.update_post(draft, title="x")

        # Assert
        assert exc_info.value.field == "published"
        assert await post_repo.find_by_id(draft.id) == draft

    @pytest.mark.asyncio
    async def test_update_commented_published_post(self, unit_env):
        """Comments do not block edits to a published post."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        owner_id = UserId(uuid4())
        post = await post_repo.save(make_post(owner_id, published=True))
        await comment_repo.save(make_comment(post.id, owner_id))

        updated = await post_service.update_post(post, title="x")

        assert updated.title == "x"
        assert updated.published is True


class TestDestroyPost:
    """Tests for PostService.destroy_post."""

    @pytest.mark.asyncio
    async def test_destroy_removes_comments(self, unit_env):
        """Destroying a post removes its comments and nothing else."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        owner_id = UserId(uuid4())
        post = await post_repo.save(make_post(owner_id, published=True))
        other = await post_repo.save(make_post(owner_id, published=True))
        for _ in range(3):
            await comment_repo.save(make_comment(post.id, owner_id))
        kept = await comment_repo.save(make_comment(other.id, owner_id))

        # Act
        removed = await post_service.destroy_post(post.id)

        # Assert
        assert removed == 3
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.count_by_post(post.id) == 0
        assert await comment_repo.find_by_id(kept.id) == kept

    @pytest.mark.asyncio
    async def test_comment_counts(self, unit_env):
        """Counts include posts without comments."""
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        owner_id = UserId(uuid4())
        busy = await post_repo.save(make_post(owner_id, published=True))
        quiet = await post_repo.save(make_post(owner_id, published=True))
        await comment_repo.save(make_comment(busy.id, owner_id))

        counts = await post_service.comment_counts([busy, quiet])

        assert counts == {busy.id: 1, quiet.id: 0}
        assert await post_service.comment_counts([]) == {}
