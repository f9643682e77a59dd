# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from anonbox.domain.users.entities import User as DomainUser
from anonbox.domain.users.exceptions import (
    EmailTakenError,
    SlugTakenError,
    UserAlreadyExistsError,
    UsernameTakenError,
)
from anonbox.domain.users.repositories import UserRepository
from anonbox.infrastructure.db.models import User
from anonbox.infrastructure.db.session import as_utc, session_scope
from anonbox.shared.errors import StorageError
from anonbox.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        username=row.username,
        email=row.email,
        password_hash=row.password_hash,
        slug=row.slug,
        created_at=as_utc(row.created_at),
    )


class SqlAlchemyUserRepository(UserRepository):
    def _find_one(self, operation: str, *criteria) -> DomainUser | None:
        try:
            with session_scope() as session:
                row = session.scalars(select(User).where(*criteria)).first()
                return _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error(f"users.{operation}: query failed")
            raise StorageError(f"users.{operation}") from exc

    def find_by_username(self, username: str) -> DomainUser | None:
        return self._find_one("find_by_username", User.username == username)

    def find_by_slug(self, slug: str) -> DomainUser | None:
        return self._find_one("find_by_slug", User.slug == slug)

    def add(self, user: DomainUser) -> DomainUser:
        try:
            with session_scope() as session:
                # precise conflict codes; the unique constraints still decide races
                if session.scalars(select(User.id).where(User.username == user.username)).first():
                    raise UsernameTakenError()
                if user.email and session.scalars(
                    select(User.id).where(User.email == user.email)
                ).first():
                    raise EmailTakenError()
                if session.scalars(select(User.id).where(User.slug == user.slug)).first():
                    raise SlugTakenError()

                row = User(
                    username=user.username,
                    email=user.email,
                    password_hash=user.password_hash,
                    slug=user.slug,
                    created_at=user.created_at,
                )
                session.add(row)
                session.flush()
                logger.info(f"users.add: created user_id={row.id} slug={row.slug}")
                return _to_domain(row)
        except IntegrityError as exc:
            logger.warning(f"users.add: unique constraint violated for slug={user.slug}")
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            logger.opt(exception=exc).error("users.add: insert failed")
            raise StorageError("users.add") from exc
