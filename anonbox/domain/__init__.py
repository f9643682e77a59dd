# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .messages import MESSAGE_MAX_LENGTH, Message, validate_message_text
from .users import SLUG_MAX_LENGTH, PublicUser, SessionClaims, User, derive_slug

__all__ = [
    "MESSAGE_MAX_LENGTH",
    "Message",
    "PublicUser",
    "SLUG_MAX_LENGTH",
    "SessionClaims",
    "User",
    "derive_slug",
    "validate_message_text",
]
