# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token gate for owner-only endpoints."""

from __future__ import annotations

from functools import wraps

from flask import g, request

from anonbox.domain.users.exceptions import MissingTokenError
from anonbox.domain.users.repositories import SessionTokenService
from anonbox.shared.logging import logger


def bearer_token() -> str:
    auth = request.headers.get("Authorization", "")
    scheme, _, token = auth.partition(" ")
    if scheme.lower() != "bearer":
        return ""
    return token.strip()


def auth_required(f):
    """Verify the bearer token before the view runs and pass ``claims=``.

    The wrapped view must belong to a controller exposing ``session_tokens``.
    A missing or bad token raises ``AuthError`` and the view is never called.
    """

    @wraps(f)
    def inner(self, *a, **kw):
        token = bearer_token()
        if not token:
            logger.warning(
                f"No Authorization header on {request.method} {request.path} "
                f"from {request.headers.get('X-Forwarded-For', request.remote_addr)}"
            )
            raise MissingTokenError()

        tokens: SessionTokenService = self.session_tokens
        claims = tokens.verify(token)
        g.user_id = claims.user_id
        logger.debug(f"Auth OK: user={claims.user_id} {request.method} {request.path}")
        kw["claims"] = claims
        return f(self, *a, **kw)

    return inner
