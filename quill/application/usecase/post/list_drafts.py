"""List drafts use case."""

from quill.domain.policy import PostScope, authorize, drafts_scope
from quill.domain.value import Action, Identity

from .list_posts import ScopedListUseCase


class ListDraftsUseCase(ScopedListUseCase):
    """Use case for listing the caller's own unpublished posts.

    Raises:
        AuthenticationRequiredError: If the caller is anonymous
    """

    span_name = "list_drafts.execute"

    def resolve_scope(self, identity: Identity) -> PostScope:
        authorize(identity, Action.LIST_DRAFTS)
        return drafts_scope(identity)
