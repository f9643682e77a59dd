from __future__ import annotations

import os
from datetime import UTC, datetime, timedelta
from unittest.mock import MagicMock

import jwt
import pytest
from flask import Flask

from anonbox.application.services.session_tokens import JwtSessionTokenService
from anonbox.domain.messages.entities import Message
from anonbox.domain.messages.exceptions import MessageTooLongError
from anonbox.domain.users.entities import PublicUser, User
from anonbox.domain.users.exceptions import UserNotFoundError
from anonbox.infrastructure.observability import RequestMetrics
from anonbox.interfaces.http.controllers.messages_controller import MessagesController
from anonbox.shared.middleware.error_handler import configure_error_handling

SECRET = os.environ["JWT_SECRET"]
CREATED = datetime(2025, 1, 2, 3, 4, 5, tzinfo=UTC)


def _owner() -> User:
    return User(
        id=3,
        username="domm",
        email=None,
        password_hash="hash",
        slug="domm",
        created_at=CREATED,
    )


class Harness:
    def __init__(self) -> None:
        self.post = MagicMock()
        self.by_slug = MagicMock()
        self.for_caller = MagicMock()
        self.metrics = MagicMock(spec=RequestMetrics)
        self.tokens = JwtSessionTokenService(SECRET)
        self.app = Flask(__name__)
        configure_error_handling(self.app)
        controller = MessagesController(
            post_message_use_case=self.post,
            list_by_slug_use_case=self.by_slug,
            list_for_caller_use_case=self.for_caller,
            session_tokens=self.tokens,
            metrics=self.metrics,
        )
        self.app.register_blueprint(controller.as_blueprint())


@pytest.fixture()
def harness() -> Harness:
    return Harness()


def test_public_list_shape(harness: Harness) -> None:
    harness.by_slug.execute.return_value = (
        PublicUser(id=3, username="domm", slug="domm"),
        [Message(id=9, user_id=3, text="hi", created_at=CREATED)],
    )

    response = harness.app.test_client().get("/user/domm/messages")

    assert response.status_code == 200
    body = response.get_json()
    assert body["user"] == {"id": 3, "username": "domm", "slug": "domm"}
    assert len(body["messages"]) == 1
    assert body["messages"][0]["id"] == 9
    assert body["messages"][0]["text"] == "hi"
    assert datetime.fromisoformat(body["messages"][0]["created_at"].replace("Z", "+00:00")) == CREATED
    assert "password_hash" not in response.get_data(as_text=True)
    harness.by_slug.execute.assert_called_once_with("domm")


def test_public_list_unknown_slug_is_404(harness: Harness) -> None:
    harness.by_slug.execute.side_effect = UserNotFoundError()

    response = harness.app.test_client().get("/user/ghost/messages")

    assert response.status_code == 404
    assert response.get_json()["error"] == "user_not_found"


def test_post_message_returns_201(harness: Harness) -> None:
    harness.post.execute.return_value = Message(id=5, user_id=3, text="hi", created_at=CREATED)

    response = harness.app.test_client().post("/user/domm/messages", json={"text": "hi"})

    assert response.status_code == 201
    assert response.get_json() == {"id": 5, "user_id": 3, "text": "hi"}
    harness.post.execute.assert_called_once_with("domm", "hi")
    harness.metrics.message_posted.assert_called_once_with()


def test_post_message_validation_error_is_400(harness: Harness) -> None:
    harness.post.execute.side_effect = MessageTooLongError(500)

    response = harness.app.test_client().post(
        "/user/domm/messages", json={"text": "x" * 501}
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "message_too_long"
    harness.metrics.message_posted.assert_not_called()


def test_post_message_rejects_non_string_text(harness: Harness) -> None:
    response = harness.app.test_client().post("/user/domm/messages", json={"text": 12})

    assert response.status_code == 400
    harness.post.execute.assert_not_called()


def test_inbox_with_valid_token(harness: Harness) -> None:
    harness.for_caller.execute.return_value = [
        Message(id=2, user_id=3, text="second", created_at=CREATED + timedelta(minutes=1)),
        Message(id=1, user_id=3, text="first", created_at=CREATED),
    ]
    token = harness.tokens.issue(_owner())

    response = harness.app.test_client().get(
        "/me/messages", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 200
    body = response.get_json()
    assert body["user"] == {"id": 3, "username": "domm"}
    assert [m["text"] for m in body["messages"]] == ["second", "first"]
    (claims,), _ = harness.for_caller.execute.call_args
    assert claims.user_id == 3


def _expired_token() -> str:
    return JwtSessionTokenService(SECRET, ttl=timedelta(seconds=-5)).issue(_owner())


def _foreign_token() -> str:
    now = datetime.now(UTC)
    return jwt.encode(
        {"id": 3, "username": "domm", "iat": now, "exp": now + timedelta(hours=1)},
        "someone-elses-secret-key-of-good-length",
        algorithm="HS256",
    )


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": ""},
        {"Authorization": "Bearer"},
        {"Authorization": "Bearer not-a-jwt"},
        {"Authorization": "Basic ZG9tbTpzZWNyZXQx"},
        {"Authorization": "Bearer " + _expired_token()},
        {"Authorization": "Bearer " + _foreign_token()},
    ],
)
def test_inbox_rejects_bad_tokens_before_use_case(harness: Harness, headers: dict) -> None:
    response = harness.app.test_client().get("/me/messages", headers=headers)

    assert response.status_code == 401
    assert "error" in response.get_json()
    harness.for_caller.execute.assert_not_called()
