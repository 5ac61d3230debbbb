#!/usr/bin/env python3
"""Wipe the database and load sample data.

Creates an admin and a writer, ten published and ten draft posts owned by
the writer, and two comments on every published post. Prints an
``auth_token`` cookie value for each user.
"""

import asyncio
import sys
from datetime import datetime, timedelta
from uuid import uuid4

import logfire
from sqlalchemy import delete

from quill.config import Settings
from quill.domain.model import Comment, Post, User
from quill.domain.service import JWTService
from quill.domain.value import CommentId, PostId, Role, UserId
from quill.persistence.database import (
    create_engine,
    create_session_factory,
    session_scope,
)
from quill.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresUserRepository,
)
from quill.persistence.tables import comments_table, posts_table, users_table
from quill.util.logging import setup_logging
from quill.util.observability import configure_logfire

POSTS_PER_STATE = 10
COMMENTS_PER_POST = 2


async def seed(settings: Settings) -> dict[str, str]:
    """Load the sample data set.

    Returns:
        Mapping of user email to a freshly minted token
    """
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)

    try:
        async with session_scope(session_factory) as session:
            for table in (comments_table, posts_table, users_table):
                await session.execute(delete(table))

            users = PostgresUserRepository(session)
            posts = PostgresPostRepository(session)
            comments = PostgresCommentRepository(session)

            admin = await users.save(
                User(id=UserId(uuid4()), email="admin@quill.local", role=Role.ADMIN)
            )
            writer = await users.save(
                User(id=UserId(uuid4()), email="writer@quill.local")
            )

            # Stagger creation times so listings have a stable newest-first order
            start = datetime.now() - timedelta(days=1)
            for i in range(POSTS_PER_STATE * 2):
                published = i < POSTS_PER_STATE
                number = i % POSTS_PER_STATE + 1
                created = start + timedelta(minutes=i)
                post = await posts.save(
                    Post(
                        id=PostId(uuid4()),
                        owner_id=writer.id,
                        title=f"{'Published' if published else 'Draft'} Post {number}",
                        body=f"This is a {'published' if published else 'draft'} post",
                        published=published,
                        created_at=created,
                        updated_at=created,
                    )
                )
                if not published:
                    continue
                for j in range(COMMENTS_PER_POST):
                    await comments.save(
                        Comment(
                            id=CommentId(uuid4()),
                            post_id=post.id,
                            owner_id=admin.id if j % 2 == 0 else writer.id,
                            body="Nice article",
                        )
                    )

            logfire.info(
                "Seed data loaded",
                users=2,
                posts=POSTS_PER_STATE * 2,
                comments=POSTS_PER_STATE * COMMENTS_PER_POST,
            )
    finally:
        await engine.dispose()

    jwt_service = JWTService(settings.auth)
    return {user.email: jwt_service.create_token(user.id) for user in (admin, writer)}


def main() -> int:
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    if settings.environment == "production":
        logfire.error("Refusing to seed a production database")
        return 1

    tokens = asyncio.run(seed(settings))
    for email, token in tokens.items():
        print(f"{email}: auth_token={token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
