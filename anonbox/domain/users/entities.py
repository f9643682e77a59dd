# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: int
    username: str
    email: str | None
    password_hash: str
    slug: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class PublicUser:
    """What anonymous visitors may learn about a recipient."""

    id: int
    username: str
    slug: str

    @classmethod
    def from_user(cls, user: User) -> PublicUser:
        return cls(id=user.id, username=user.username, slug=user.slug)


@dataclass(slots=True, frozen=True)
class SessionClaims:

    user_id: int
    username: str
    issued_at: datetime
    expires_at: datetime
