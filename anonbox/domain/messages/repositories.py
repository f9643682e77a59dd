# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Message


class MessageRepository(Protocol):
    def add(self, message: Message) -> Message: ...

    def list_for_user(self, user_id: int) -> Sequence[Message]:
        """Newest first: ``created_at`` descending, then ``id`` descending."""
        ...
