"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import ColumnElement, and_, desc, false, func, or_, select, true, update
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model import Post
from quill.domain.policy import PostScope, ScopeKind
from quill.domain.repository.post import PostRepository
from quill.domain.value import PostId
from quill.persistence.mappers import post_to_dict, row_to_post
from quill.persistence.tables import posts_table


def _scope_clause(scope: PostScope) -> ColumnElement[bool]:
    """Translate a visibility scope into a WHERE clause."""
    published = posts_table.c.published
    owner = posts_table.c.owner_id

    if scope.kind == ScopeKind.ALL:
        return true()
    if scope.kind == ScopeKind.PUBLISHED:
        return published.is_(True)
    if scope.kind == ScopeKind.PUBLISHED_OR_OWNED:
        return or_(published.is_(True), owner == scope.owner_id)
    if scope.kind == ScopeKind.OWN_DRAFTS:
        return and_(published.is_(False), owner == scope.owner_id)
    return false()


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            return row_to_post(row._asdict())

    async def find_all(
        self,
        scope: PostScope,
        limit: int = 30,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts inside a scope, newest first."""
        with logfire.span(
            "post_repository.find_all",
            scope=scope.kind.value,
            limit=limit,
            offset=offset,
        ):
            stmt = (
                select(posts_table)
                .where(_scope_clause(scope))
                .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )

            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(self, scope: PostScope) -> int:
        """Count posts inside a scope."""
        with logfire.span("post_repository.count", scope=scope.kind.value):
            stmt = (
                select(func.count())
                .select_from(posts_table)
                .where(_scope_clause(scope))
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, post: Post) -> Post:
        """Update the post, or insert it when no row exists.

        Returns the stored row, whose ``published`` may differ from the
        caller's copy.
        """
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)
            # published is owned by mark_published
            published = post_dict.pop("published")

            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
                .returning(posts_table)
            )
            row = (await self.session.execute(stmt)).fetchone()

            if row is None:
                stmt = (
                    posts_table.insert()
                    .values(**post_dict, published=published)
                    .returning(posts_table)
                )
                row = (await self.session.execute(stmt)).fetchone()

            await self.session.flush()
            return row_to_post(row._asdict())

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def mark_published(self, post_id: PostId) -> Optional[Post]:
        """Atomically move a draft to published."""
        with logfire.span("post_repository.mark_published", post_id=str(post_id)):
            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post_id)
                .where(posts_table.c.published.is_(False))
                .values(published=True, updated_at=func.now())
                .returning(posts_table)
            )

            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()

            if row is None:
                return None

            return row_to_post(row._asdict())
