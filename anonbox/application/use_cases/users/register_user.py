# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from anonbox.domain.users.entities import User
from anonbox.domain.users.exceptions import (
    CredentialsRequiredError,
    UsernameTooLongError,
    UsernameUnusableError,
)
from anonbox.domain.users.repositories import PasswordHasher, UserRepository
from anonbox.domain.users.slug import derive_slug

USERNAME_MAX_LENGTH = 50


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str, email: str | None = None) -> User:
        if not username or not password:
            raise CredentialsRequiredError()
        if len(username) > USERNAME_MAX_LENGTH:
            raise UsernameTooLongError(USERNAME_MAX_LENGTH)

        slug = derive_slug(username)
        if not slug:
            raise UsernameUnusableError()

        user = User(
            id=0,
            username=username,
            email=email or None,
            password_hash=self._password_hasher.hash(password),
            slug=slug,
            created_at=datetime.now(UTC),
        )
        # username/email/slug uniqueness is decided atomically by the repository
        return self._users.add(user)
