# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from anonbox.application.use_cases.users.login_user import LoginUserUseCase
from anonbox.application.use_cases.users.register_user import RegisterUserUseCase
from anonbox.interfaces.http.dto.auth import (
    LoginRequestDTO,
    LoginSuccessDTO,
    RegisteredUserDTO,
    RegisterRequestDTO,
)
from anonbox.shared.errors.validation import raise_validation_error
from anonbox.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, HTTPStatus]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.username, dto.password, dto.email)

        logger.info(f"auth.register: ok user_id={user.id} slug={user.slug}")
        return jsonify(RegisteredUserDTO.from_user(user).model_dump()), HTTPStatus.CREATED

    def login(self) -> tuple[Response, HTTPStatus]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        user, token = self._login_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.login: ok user_id={user.id}")
        return jsonify(LoginSuccessDTO.build(user, token).model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp
