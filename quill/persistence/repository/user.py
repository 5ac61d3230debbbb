"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from quill.domain.model.user import User
from quill.domain.repository import UserRepository
from quill.domain.value import UserId
from quill.persistence.mappers import row_to_user, user_to_dict
from quill.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        result = await self.session.execute(
            select(users_table).where(users_table.c.id == user_id)
        )
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Upsert by primary key in a single statement.

        ``created_at`` is only written on insert.
        """
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                key: stmt.excluded[key]
                for key in values
                if key not in ("id", "created_at")
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user
