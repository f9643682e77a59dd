# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from anonbox.application.use_cases.messages.list_messages import (
    ListMessagesBySlugUseCase,
    ListMessagesForCallerUseCase,
)
from anonbox.application.use_cases.messages.post_message import PostMessageUseCase
from anonbox.domain.users.entities import SessionClaims
from anonbox.domain.users.repositories import SessionTokenService
from anonbox.infrastructure.observability import RequestMetrics
from anonbox.interfaces.http.auth import auth_required
from anonbox.interfaces.http.dto.messages import (
    CreatedMessageDTO,
    OwnerInboxDTO,
    PostMessageRequestDTO,
    PublicInboxDTO,
)
from anonbox.shared.errors.validation import raise_validation_error
from anonbox.shared.logging import logger


class MessagesController:
    def __init__(
        self,
        *,
        post_message_use_case: PostMessageUseCase,
        list_by_slug_use_case: ListMessagesBySlugUseCase,
        list_for_caller_use_case: ListMessagesForCallerUseCase,
        session_tokens: SessionTokenService,
        metrics: RequestMetrics | None = None,
    ) -> None:
        self._post_message = post_message_use_case
        self._list_by_slug = list_by_slug_use_case
        self._list_for_caller = list_for_caller_use_case
        self.session_tokens = session_tokens
        self._metrics = metrics or RequestMetrics(enabled=False)

    def list_public(self, slug: str) -> tuple[Response, HTTPStatus]:
        user, messages = self._list_by_slug.execute(slug)
        return jsonify(PublicInboxDTO.build(user, messages).model_dump(mode="json")), HTTPStatus.OK

    def post(self, slug: str) -> tuple[Response, HTTPStatus]:
        try:
            dto = PostMessageRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        message = self._post_message.execute(slug, dto.text)
        self._metrics.message_posted()

        logger.info(f"messages.post: message_id={message.id} to slug={slug}")
        return jsonify(CreatedMessageDTO.from_message(message).model_dump()), HTTPStatus.CREATED

    @auth_required
    def list_mine(self, *, claims: SessionClaims) -> tuple[Response, HTTPStatus]:
        messages = self._list_for_caller.execute(claims)
        return jsonify(OwnerInboxDTO.build(claims, messages).model_dump(mode="json")), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("messages", __name__)
        bp.add_url_rule(
            "/user/<slug>/messages",
            view_func=self.list_public,
            methods=["GET"],
            endpoint="list_public",
        )
        bp.add_url_rule(
            "/user/<slug>/messages",
            view_func=self.post,
            methods=["POST"],
            endpoint="post",
        )
        bp.add_url_rule(
            "/me/messages",
            view_func=self.list_mine,
            methods=["GET"],
            endpoint="list_mine",
        )
        return bp
