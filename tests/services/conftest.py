"""Service test fixtures: UserService over an in-memory fake repository."""

import pytest

from tests.services.fake_user_repository import FakeUser, FakeUserRepository
from users_api.services.user_service import UserService


@pytest.fixture
def repo():
    return FakeUserRepository([FakeUser(id=1, name="Ann", email="a@x.com", age=30)])


@pytest.fixture
def service(repo):
    return UserService(repo)
