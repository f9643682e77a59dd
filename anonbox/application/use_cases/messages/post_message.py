# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import UTC, datetime

from anonbox.domain.messages.entities import Message, validate_message_text
from anonbox.domain.messages.repositories import MessageRepository
from anonbox.domain.users.exceptions import UserNotFoundError
from anonbox.domain.users.repositories import UserRepository


class PostMessageUseCase:
    def __init__(self, *, users: UserRepository, messages: MessageRepository) -> None:
        self._users = users
        self._messages = messages

    def execute(self, recipient_slug: str, text: str | None) -> Message:
        text = validate_message_text(text)

        recipient = self._users.find_by_slug(recipient_slug)
        if recipient is None:
            raise UserNotFoundError()

        return self._messages.add(
            Message(id=0, user_id=recipient.id, text=text, created_at=datetime.now(UTC))
        )
