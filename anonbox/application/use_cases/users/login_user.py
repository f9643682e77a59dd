# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from anonbox.domain.users.entities import User
from anonbox.domain.users.exceptions import (
    CredentialsRequiredError,
    InvalidCredentialsError,
)
from anonbox.domain.users.repositories import (
    PasswordHasher,
    SessionTokenService,
    UserRepository,
)
from anonbox.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: SessionTokenService,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def verify_credentials(self, username: str, password: str) -> User:
        if not username or not password:
            raise CredentialsRequiredError()

        user = self._users.find_by_username(username)
        if user is None:
            logger.info("auth.login: unknown username")
            raise InvalidCredentialsError()
        if not self._password_hasher.verify(password, user.password_hash):
            logger.info(f"auth.login: wrong password for user_id={user.id}")
            raise InvalidCredentialsError()
        return user

    def execute(self, username: str, password: str) -> tuple[User, str]:
        user = self.verify_credentials(username, password)
        return user, self._tokens.issue(user)
