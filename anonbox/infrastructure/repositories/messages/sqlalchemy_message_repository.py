# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from anonbox.domain.messages.entities import Message as DomainMessage
from anonbox.domain.messages.repositories import MessageRepository
from anonbox.infrastructure.db.models import Message
from anonbox.infrastructure.db.session import as_utc, session_scope
from anonbox.shared.errors import StorageError
from anonbox.shared.logging import logger


def _to_domain(row: Message) -> DomainMessage:
    return DomainMessage(
        id=row.id,
        user_id=row.user_id,
        text=row.text,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyMessageRepository(MessageRepository):
    def add(self, message: DomainMessage) -> DomainMessage:
        try:
            with session_scope() as session:
                row = Message(
                    user_id=message.user_id,
                    text=message.text,
                    created_at=message.created_at,
                )
                session.add(row)
                session.flush()
                logger.info(f"messages.add: stored message_id={row.id} for user_id={row.user_id}")
                return _to_domain(row)
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("messages.add: insert failed")
            raise StorageError("messages.add") from exc

    def list_for_user(self, user_id: int) -> Sequence[DomainMessage]:
        try:
            with session_scope() as session:
                rows = session.scalars(
                    select(Message)
                    .where(Message.user_id == user_id)
                    .order_by(Message.created_at.desc(), Message.id.desc())
                ).all()
                return [_to_domain(row) for row in rows]
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("messages.list_for_user: query failed")
            raise StorageError("messages.list_for_user") from exc
