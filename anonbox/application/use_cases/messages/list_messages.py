# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from anonbox.domain.messages.entities import Message
from anonbox.domain.messages.repositories import MessageRepository
from anonbox.domain.users.entities import PublicUser, SessionClaims
from anonbox.domain.users.exceptions import UserNotFoundError
from anonbox.domain.users.repositories import UserRepository


class ListMessagesBySlugUseCase:
    """Public page view: the recipient's public profile plus their messages."""

    def __init__(self, *, users: UserRepository, messages: MessageRepository) -> None:
        self._users = users
        self._messages = messages

    def execute(self, slug: str) -> tuple[PublicUser, Sequence[Message]]:
        user = self._users.find_by_slug(slug)
        if user is None:
            raise UserNotFoundError()
        return PublicUser.from_user(user), self._messages.list_for_user(user.id)


class ListMessagesForCallerUseCase:
    """Owner inbox. Identity comes only from verified token claims."""

    def __init__(self, *, messages: MessageRepository) -> None:
        self._messages = messages

    def execute(self, claims: SessionClaims) -> Sequence[Message]:
        return self._messages.list_for_user(claims.user_id)
