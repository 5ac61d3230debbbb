"""Unit tests for the access policy."""

from uuid import uuid4

import pytest

from quill.domain.error import AuthenticationRequiredError, NotAuthorizedError
from quill.domain.policy import (
    PUBLISHED_SCOPE,
    ScopeKind,
    authorize,
    drafts_scope,
    is_allowed,
    visible_scope,
)
from quill.domain.value import Action, Identity, Role, UserId
from tests.conftest import make_comment, make_post

OWNER = Identity(user_id=UserId(uuid4()), role=Role.USER)
STRANGER = Identity(user_id=UserId(uuid4()), role=Role.USER)
ADMIN = Identity(user_id=UserId(uuid4()), role=Role.ADMIN)
ANONYMOUS = Identity.anonymous()


class TestVisibleScope:
    """Tests for visible_scope."""

    def test_admin_sees_everything(self):
        """Admins get the unrestricted scope."""
        assert visible_scope(ADMIN).kind == ScopeKind.ALL

    def test_user_sees_published_and_own(self):
        """Authenticated users see published posts and their own drafts."""
        scope = visible_scope(OWNER)

        assert scope.kind == ScopeKind.PUBLISHED_OR_OWNED
        assert scope.owner_id == OWNER.user_id

    def test_anonymous_sees_published(self):
        """Anonymous callers see published posts only."""
        assert visible_scope(ANONYMOUS) == PUBLISHED_SCOPE

    def test_scope_matches(self):
        """Each scope admits exactly its posts."""
        own_draft = make_post(OWNER.user_id)
        own_published = make_post(OWNER.user_id, published=True)
        other_draft = make_post(STRANGER.user_id)
        other_published = make_post(STRANGER.user_id, published=True)
        posts = [own_draft, own_published, other_draft, other_published]

        def visible(identity):
            return {p.id for p in posts if visible_scope(identity).matches(p)}

        assert visible(ADMIN) == {p.id for p in posts}
        assert visible(OWNER) == {own_draft.id, own_published.id, other_published.id}
        assert visible(ANONYMOUS) == {own_published.id, other_published.id}


class TestDraftsScope:
    """Tests for drafts_scope."""

    def test_own_drafts_only(self):
        """The drafts scope admits the caller's unpublished posts only."""
        scope = drafts_scope(OWNER)

        assert scope.matches(make_post(OWNER.user_id))
        assert not scope.matches(make_post(OWNER.user_id, published=True))
        assert not scope.matches(make_post(STRANGER.user_id))

    def test_admin_gets_own_drafts(self):
        """Admins list their own drafts, not everyone's."""
        scope = drafts_scope(ADMIN)

        assert scope.kind == ScopeKind.OWN_DRAFTS
        assert not scope.matches(make_post(OWNER.user_id))

    def test_anonymous_rejected(self):
        """Anonymous callers have no drafts."""
        with pytest.raises(AuthenticationRequiredError):
            drafts_scope(ANONYMOUS)


class TestIsAllowed:
    """Tests for the authorization decision table."""

    @pytest.mark.parametrize(
        "action", [Action.UPDATE_POST, Action.DESTROY_POST, Action.PUBLISH_POST]
    )
    def test_post_owner_actions(self, action):
        """Only the owner and admins may change a post."""
        post = make_post(OWNER.user_id)

        assert is_allowed(OWNER, action, post)
        assert is_allowed(ADMIN, action, post)
        assert not is_allowed(STRANGER, action, post)
        assert not is_allowed(ANONYMOUS, action, post)

    @pytest.mark.parametrize("action", [Action.UPDATE_COMMENT, Action.DESTROY_COMMENT])
    def test_comment_owner_actions(self, action):
        """Only the comment author and admins may change a comment."""
        post = make_post(STRANGER.user_id, published=True)
        comment = make_comment(post.id, OWNER.user_id)

        assert is_allowed(OWNER, action, comment)
        assert is_allowed(ADMIN, action, comment)
        assert not is_allowed(STRANGER, action, comment)
        assert not is_allowed(ANONYMOUS, action, comment)

    def test_create_post_requires_authentication(self):
        """Any authenticated user may write a post."""
        assert is_allowed(OWNER, Action.CREATE_POST)
        assert not is_allowed(ANONYMOUS, Action.CREATE_POST)

    def test_create_comment_needs_published_post(self):
        """Comments are allowed on published posts only."""
        published = make_post(STRANGER.user_id, published=True)
        draft = make_post(OWNER.user_id)

        assert is_allowed(OWNER, Action.CREATE_COMMENT, published)
        assert not is_allowed(OWNER, Action.CREATE_COMMENT, draft)
        assert not is_allowed(ANONYMOUS, Action.CREATE_COMMENT, published)

    def test_read_follows_visible_scope(self):
        """Read permission agrees with the visibility scope."""
        draft = make_post(OWNER.user_id)

        assert is_allowed(OWNER, Action.READ_POST, draft)
        assert is_allowed(ADMIN, Action.READ_POST, draft)
        assert not is_allowed(STRANGER, Action.READ_POST, draft)
        assert not is_allowed(ANONYMOUS, Action.READ_POST, draft)

    def test_wrong_resource_type_denied(self):
        """A comment is never accepted where a post is expected."""
        comment = make_comment(make_post(OWNER.user_id).id, OWNER.user_id)

        assert not is_allowed(OWNER, Action.UPDATE_POST, comment)


class TestAuthorize:
    """Tests for authorize."""

    def test_anonymous_denial(self):
        """Denials for anonymous callers ask for authentication."""
        with pytest.raises(AuthenticationRequiredError):
            authorize(ANONYMOUS, Action.CREATE_POST)

    def test_authenticated_denial(self):
        """Denials for authenticated callers are plain authorization errors."""
        post = make_post(OWNER.user_id)

        with pytest.raises(NotAuthorizedError) as exc_info:
            authorize(STRANGER, Action.DESTROY_POST, post)

        assert not isinstance(exc_info.value, AuthenticationRequiredError)
        assert exc_info.value.resource_id == str(post.id)

    def test_allowed_returns_none(self):
        """Allowed actions pass silently."""
        assert authorize(OWNER, Action.UPDATE_POST, make_post(OWNER.user_id)) is None
