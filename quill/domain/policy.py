"""Access policy: visibility scopes and the authorization decision table.

Everything here is a pure function of (identity, action, resource). The read
rule is defined through the visibility scope, so what a caller may list and
what a caller may open directly are always the same set of posts.
"""

from enum import Enum

import logfire

from quill.domain.error import AuthenticationRequiredError, NotAuthorizedError
from quill.domain.model import Comment, Post
from quill.domain.value import Action, Identity, UserId
from quill.domain.value.common import ValueObject


class ScopeKind(str, Enum):
    """Shape of a post filter."""

    ALL = "all"
    PUBLISHED = "published"
    PUBLISHED_OR_OWNED = "published_or_owned"
    OWN_DRAFTS = "own_drafts"


class PostScope(ValueObject):
    """Filter over the post collection.

    Repositories translate ``kind`` into their own query language;
    ``matches`` is the reference predicate for a single post.
    """

    kind: ScopeKind
    owner_id: UserId | None = None

    def matches(self, post: Post) -> bool:
        if self.kind == ScopeKind.ALL:
            return True
        if self.kind == ScopeKind.PUBLISHED:
            return post.published
        if self.kind == ScopeKind.PUBLISHED_OR_OWNED:
            return post.published or post.owner_id == self.owner_id
        if self.kind == ScopeKind.OWN_DRAFTS:
            return not post.published and post.owner_id == self.owner_id
        return False


PUBLISHED_SCOPE = PostScope(kind=ScopeKind.PUBLISHED)

_OWNER_ACTIONS = {Action.UPDATE_POST, Action.DESTROY_POST, Action.PUBLISH_POST}
_COMMENT_OWNER_ACTIONS = {Action.UPDATE_COMMENT, Action.DESTROY_COMMENT}


def visible_scope(identity: Identity) -> PostScope:
    """Posts an identity may list and read.

    - admin: every post
    - authenticated: published posts plus the identity's own drafts
    - anonymous: published posts only
    """
    if identity.is_admin:
        return PostScope(kind=ScopeKind.ALL)
    if identity.user_id is not None:
        return PostScope(kind=ScopeKind.PUBLISHED_OR_OWNED, owner_id=identity.user_id)
    return PUBLISHED_SCOPE


def drafts_scope(identity: Identity) -> PostScope:
    """The identity's own drafts.

    Admins get their own drafts here as well; the admin grant covers direct
    record operations, not this personal listing.

    Raises:
        AuthenticationRequiredError: If the identity is anonymous
    """
    if identity.user_id is None:
        raise AuthenticationRequiredError(Action.LIST_DRAFTS.value)
    return PostScope(kind=ScopeKind.OWN_DRAFTS, owner_id=identity.user_id)


def is_allowed(
    identity: Identity,
    action: Action,
    resource: Post | Comment | None = None,
) -> bool:
    """Decide whether ``identity`` may perform ``action`` on ``resource``.

    First matching rule wins; anything not matched is denied. For
    CREATE_COMMENT the resource is the target post.
    """
    if identity.is_admin:
        return True

    if action == Action.READ_POST:
        return isinstance(resource, Post) and visible_scope(identity).matches(resource)

    if identity.user_id is None:
        return False

    if action in (Action.CREATE_POST, Action.LIST_DRAFTS):
        return True

    if action in _OWNER_ACTIONS:
        return isinstance(resource, Post) and resource.owner_id == identity.user_id

    if action == Action.CREATE_COMMENT:
        return isinstance(resource, Post) and resource.published

    if action in _COMMENT_OWNER_ACTIONS:
        return isinstance(resource, Comment) and resource.owner_id == identity.user_id

    return False


def authorize(
    identity: Identity,
    action: Action,
    resource: Post | Comment | None = None,
) -> None:
    """Raise unless ``identity`` may perform ``action`` on ``resource``.

    Raises:
        AuthenticationRequiredError: If denied for an anonymous identity
        NotAuthorizedError: If denied for an authenticated identity
    """
    if is_allowed(identity, action, resource):
        return

    resource_id = str(resource.id) if resource is not None else None
    logfire.warn(
        "Authorization denied",
        action=action.value,
        resource_id=resource_id,
        user_id=str(identity.user_id) if identity.user_id else None,
        role=identity.role.value,
    )
    if identity.user_id is None:
        raise AuthenticationRequiredError(action.value)
    raise NotAuthorizedError(action.value, resource_id)
