"""List published posts use case."""

from quill.domain.policy import PUBLISHED_SCOPE, PostScope
from quill.domain.value import Identity

from .list_posts import ScopedListUseCase


class ListPublishedPostsUseCase(ScopedListUseCase):
    """Use case for the public feed: published posts only, for everyone."""

    span_name = "list_published_posts.execute"

    def resolve_scope(self, identity: Identity) -> PostScope:
        return PUBLISHED_SCOPE
