"""Unit tests for PostgresPostRepository statements.

The session is scripted: each ``execute`` answers with the next row, so the
tests check what the repository sends and how it reads the answer.
"""

from uuid import uuid4

import pytest
from sqlalchemy.dialects import postgresql

from quill.domain.value import UserId
from quill.persistence.repository import PostgresPostRepository
from tests.conftest import make_post


class ScriptedRow:
    def __init__(self, **values) -> None:
        self.values = values

    def _asdict(self) -> dict:
        return dict(self.values)


class ScriptedResult:
    def __init__(self, row: ScriptedRow | None) -> None:
        self.row = row

    def fetchone(self) -> ScriptedRow | None:
        return self.row


class ScriptedSession:
    def __init__(self, *rows: ScriptedRow | None) -> None:
        self.rows = list(rows)
        self.statements = []

    async def execute(self, stmt):
        self.statements.append(stmt)
        return ScriptedResult(self.rows.pop(0))

    async def flush(self) -> None:
        pass


class TestSave:
    """Tests for PostgresPostRepository.save."""

    @pytest.mark.asyncio
    async def test_update_returns_stored_row(self):
        """A publish committed after the caller read the post is reported."""
        # Arrange
        stale = make_post(UserId(uuid4()), title="Renamed")
        stored = stale.model_copy(update={"published": True})
        session = ScriptedSession(ScriptedRow(**stored.model_dump()))
        repo = PostgresPostRepository(session)

        # Act
        saved = await repo.save(stale)

        # Assert
        assert saved.published is True
        assert saved.title == "Renamed"
        assert len(session.statements) == 1
        update_stmt = session.statements[0]
        assert update_stmt.is_update
        params = update_stmt.compile(dialect=postgresql.dialect()).params
        assert "published" not in params

    @pytest.mark.asyncio
    async def test_missing_row_is_inserted(self):
        """When the update matches nothing the post is inserted as given."""
        post = make_post(UserId(uuid4()))
        session = ScriptedSession(None, ScriptedRow(**post.model_dump()))
        repo = PostgresPostRepository(session)

        saved = await repo.save(post)

        assert saved == post
        assert [s.is_insert for s in session.statements] == [False, True]
        params = session.statements[1].compile(dialect=postgresql.dialect()).params
        assert params["published"] is False
