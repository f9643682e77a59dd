# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Public slug derivation for share links like ``/u/<slug>``."""

from __future__ import annotations

import re

SLUG_MAX_LENGTH = 30

_WHITESPACE = re.compile(r"\s+")
_NOT_SLUG_CHAR = re.compile(r"[^a-z0-9]")


def derive_slug(username: str) -> str:
    """Lowercase, drop whitespace and anything outside ``[a-z0-9]``, cut to 30 chars.

    Idempotent: ``derive_slug(derive_slug(x)) == derive_slug(x)``. Uniqueness is
    enforced by storage, not here.
    """

    slug = _WHITESPACE.sub("", username.lower())
    slug = _NOT_SLUG_CHAR.sub("", slug)
    return slug[:SLUG_MAX_LENGTH]
