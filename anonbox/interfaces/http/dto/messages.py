from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from pydantic import BaseModel

from anonbox.domain.messages.entities import Message
from anonbox.domain.users.entities import PublicUser, SessionClaims


class PostMessageRequestDTO(BaseModel):
    # emptiness and length are domain rules, checked by the use case
    text: str | None = None


class CreatedMessageDTO(BaseModel):
    id: int
    user_id: int
    text: str

    @classmethod
    def from_message(cls, message: Message) -> CreatedMessageDTO:
        return cls(id=message.id, user_id=message.user_id, text=message.text)


class MessageDTO(BaseModel):
    id: int
    text: str
    created_at: datetime

    @classmethod
    def many(cls, messages: Iterable[Message]) -> list[MessageDTO]:
        return [cls(id=m.id, text=m.text, created_at=m.created_at) for m in messages]


class PublicUserDTO(BaseModel):
    id: int
    username: str
    slug: str


class OwnerDTO(BaseModel):
    id: int
    username: str


class PublicInboxDTO(BaseModel):
    user: PublicUserDTO
    messages: list[MessageDTO]

    @classmethod
    def build(cls, user: PublicUser, messages: Iterable[Message]) -> PublicInboxDTO:
        return cls(
            user=PublicUserDTO(id=user.id, username=user.username, slug=user.slug),
            messages=MessageDTO.many(messages),
        )


class OwnerInboxDTO(BaseModel):
    user: OwnerDTO
    messages: list[MessageDTO]

    @classmethod
    def build(cls, claims: SessionClaims, messages: Iterable[Message]) -> OwnerInboxDTO:
        return cls(
            user=OwnerDTO(id=claims.user_id, username=claims.username),
            messages=MessageDTO.many(messages),
        )
