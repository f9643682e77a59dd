# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.messages.list_messages import (
    ListMessagesBySlugUseCase,
    ListMessagesForCallerUseCase,
)
from .use_cases.messages.post_message import PostMessageUseCase
from .use_cases.users.login_user import LoginUserUseCase
from .use_cases.users.register_user import RegisterUserUseCase

__all__ = [
    "ListMessagesBySlugUseCase",
    "ListMessagesForCallerUseCase",
    "LoginUserUseCase",
    "PostMessageUseCase",
    "RegisterUserUseCase",
]
