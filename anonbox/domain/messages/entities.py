# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Anonymous messages: only the recipient is recorded, never the sender."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .exceptions import MessageTextRequiredError, MessageTooLongError

MESSAGE_MAX_LENGTH = 500


@dataclass(slots=True, frozen=True)
class Message:

    id: int
    user_id: int
    text: str
    created_at: datetime


def validate_message_text(text: str | None) -> str:
    """Return ``text`` unchanged if it may be stored, raise otherwise."""

    if text is None or not text.strip():
        raise MessageTextRequiredError()
    if len(text) > MESSAGE_MAX_LENGTH:
        raise MessageTooLongError(MESSAGE_MAX_LENGTH)
    return text
