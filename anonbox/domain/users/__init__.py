# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import PublicUser, SessionClaims, User
from .slug import SLUG_MAX_LENGTH, derive_slug

__all__ = ["PublicUser", "SessionClaims", "User", "SLUG_MAX_LENGTH", "derive_slug"]
