"""Fixtures for end-to-end API tests."""

from dataclasses import dataclass

import pytest
from fastapi.testclient import TestClient

from quill.config import AuthSettings
from quill.domain.model import Post, User
from quill.domain.repository import PostRepository, UserRepository
from quill.domain.service import PublishScheduler
from quill.domain.value import Role
from quill.interface.api.app import create_app
from quill.util.di.container import setup_di
from tests.conftest import make_post, make_user, token_for
from tests.di import build_test_container


@dataclass
class Api:
    """Test client plus direct access to the app's in-memory state."""

    client: TestClient
    container: object

    def get(self, dependency):
        return self.client.portal.call(self.container.get, dependency)

    def add_user(self, role: Role = Role.USER) -> tuple[User, dict[str, str]]:
        """Save a user; returns it with the cookies of an authenticated request."""
        user = self.client.portal.call(self.get(UserRepository).save, make_user(role))
        token = token_for(user, self.get(AuthSettings))
        return user, {"auth_token": token}

    def add_post(self, owner: User, published: bool = False, **fields) -> Post:
        post = make_post(owner.id, published=published, **fields)
        return self.client.portal.call(self.get(PostRepository).save, post)

    def run_due_jobs(self, now) -> int:
        scheduler = self.get(PublishScheduler)
        return self.client.portal.call(scheduler.run_due, now)


@pytest.fixture
def api():
    """Running app wired to the test container.

    The client is entered as a context manager so the lifespan binds the
    publish scheduler to the job runner.
    """
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)

    with TestClient(app_instance) as client:
        yield Api(client=client, container=test_container)
