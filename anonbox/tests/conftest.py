from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator, Sequence
from dataclasses import replace

_TMP_DIR = tempfile.mkdtemp(prefix="anonbox-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}"
os.environ["LOG_FILE"] = os.path.join(_TMP_DIR, "app.log")
os.environ["JWT_SECRET"] = "test-secret-that-is-long-enough-for-hs256"
os.environ["APP_ENV"] = "test"

import pytest  # noqa: E402

from anonbox.domain.messages.entities import Message  # noqa: E402
from anonbox.domain.users.entities import User  # noqa: E402
from anonbox.domain.users.exceptions import (  # noqa: E402
    EmailTakenError,
    SlugTakenError,
    UsernameTakenError,
)
from anonbox.domain.users.repositories import PasswordHasher, UserRepository  # noqa: E402

TEST_SECRET = os.environ["JWT_SECRET"]


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> User | None:
        return next((u for u in self._users.values() if u.username == username), None)

    def find_by_slug(self, slug: str) -> User | None:
        return next((u for u in self._users.values() if u.slug == slug), None)

    def add(self, user: User) -> User:
        if self.find_by_username(user.username):
            raise UsernameTakenError()
        if user.email and any(u.email == user.email for u in self._users.values()):
            raise EmailTakenError()
        if self.find_by_slug(user.slug):
            raise SlugTakenError()
        stored = replace(user, id=self._seq)
        self._seq += 1
        self._users[stored.id] = stored
        return stored


class InMemoryMessageRepository:
    def __init__(self) -> None:
        self.rows: list[Message] = []
        self.list_calls = 0

    def add(self, message: Message) -> Message:
        stored = replace(message, id=len(self.rows) + 1)
        self.rows.append(stored)
        return stored

    def list_for_user(self, user_id: int) -> Sequence[Message]:
        self.list_calls += 1
        own = [m for m in self.rows if m.user_id == user_id]
        return sorted(own, key=lambda m: (m.created_at, m.id), reverse=True)


class DeterministicHasher(PasswordHasher):
    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        return hashed == f"hashed:{password}"


@pytest.fixture()
def users() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def messages() -> InMemoryMessageRepository:
    return InMemoryMessageRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def reset_database() -> Iterator[None]:
    from anonbox.infrastructure.db import ENGINE, Base
    from anonbox.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    yield
    Base.metadata.drop_all(bind=ENGINE)
