# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from anonbox.application.services.password_hashing import WerkzeugPasswordHasher
from anonbox.application.services.session_tokens import JwtSessionTokenService
from anonbox.application.use_cases.messages.list_messages import (
    ListMessagesBySlugUseCase,
    ListMessagesForCallerUseCase,
)
from anonbox.application.use_cases.messages.post_message import PostMessageUseCase
from anonbox.application.use_cases.users.login_user import LoginUserUseCase
from anonbox.application.use_cases.users.register_user import RegisterUserUseCase
from anonbox.infrastructure.observability import RequestMetrics
from anonbox.infrastructure.repositories.messages.sqlalchemy_message_repository import (
    SqlAlchemyMessageRepository,
)
from anonbox.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from anonbox.interfaces.http.controllers.auth_controller import AuthController
from anonbox.interfaces.http.controllers.messages_controller import MessagesController
from anonbox.interfaces.http.controllers.misc_controller import MiscController
from anonbox.shared.config import AppConfig, load_config


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        security = self.config.security
        return WerkzeugPasswordHasher(
            method=security.password_hash_method,
            salt_length=security.password_salt_length,
        )

    @cached_property
    def session_tokens(self) -> JwtSessionTokenService:
        return JwtSessionTokenService(self.config.jwt_secret)

    @cached_property
    def metrics(self) -> RequestMetrics:
        return RequestMetrics(enabled=self.config.observability.metrics_enabled)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def message_repository(self) -> SqlAlchemyMessageRepository:
        return SqlAlchemyMessageRepository()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.session_tokens,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def post_message_use_case(self) -> PostMessageUseCase:
        return PostMessageUseCase(
            users=self.user_repository, messages=self.message_repository
        )

    @cached_property
    def list_by_slug_use_case(self) -> ListMessagesBySlugUseCase:
        return ListMessagesBySlugUseCase(
            users=self.user_repository, messages=self.message_repository
        )

    @cached_property
    def list_for_caller_use_case(self) -> ListMessagesForCallerUseCase:
        return ListMessagesForCallerUseCase(messages=self.message_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def messages_controller(self) -> MessagesController:
        return MessagesController(
            post_message_use_case=self.post_message_use_case,
            list_by_slug_use_case=self.list_by_slug_use_case,
            list_for_caller_use_case=self.list_for_caller_use_case,
            session_tokens=self.session_tokens,
            metrics=self.metrics,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
