# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Stateless bearer tokens (HS256 JWT).

Nothing is stored server side, so a token stays valid until ``exp`` and there
is no revocation.
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import jwt

from anonbox.domain.users.entities import SessionClaims, User
from anonbox.domain.users.exceptions import InvalidTokenError
from anonbox.domain.users.repositories import SessionTokenService
from anonbox.shared.logging import logger

TOKEN_TTL = timedelta(days=7)
JWT_ALGORITHM = "HS256"


class JwtSessionTokenService(SessionTokenService):
    def __init__(self, secret: str, *, ttl: timedelta = TOKEN_TTL) -> None:
        self._secret = secret
        self._ttl = ttl

    def issue(self, user: User) -> str:
        issued_at = datetime.now(UTC)
        expires_at = issued_at + self._ttl
        payload = {
            "id": user.id,
            "username": user.username,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        logger.info(f"Issued token for user={user.id} exp={expires_at.isoformat()}")
        return token

    def verify(self, token: str) -> SessionClaims:
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={"require": ["exp", "iat"]},
            )
        except jwt.ExpiredSignatureError as exc:
            logger.info("auth: expired token")
            raise InvalidTokenError("token_expired") from exc
        except jwt.PyJWTError as exc:
            logger.warning(f"auth: rejected token ({type(exc).__name__})")
            raise InvalidTokenError() from exc

        try:
            return SessionClaims(
                user_id=int(payload["id"]),
                username=str(payload["username"]),
                issued_at=datetime.fromtimestamp(int(payload["iat"]), UTC),
                expires_at=datetime.fromtimestamp(int(payload["exp"]), UTC),
            )
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("auth: token is missing identity claims")
            raise InvalidTokenError() from exc
