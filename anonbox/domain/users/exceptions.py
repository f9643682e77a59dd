# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from anonbox.shared.errors.base import (
    AuthError,
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class UserAlreadyExistsError(ConflictError):
    def __init__(self, code: str = "user_already_exists") -> None:
        super().__init__(code, message="Username or email already exists")


class UsernameTakenError(UserAlreadyExistsError):
    def __init__(self) -> None:
        super().__init__("username_taken")


class EmailTakenError(UserAlreadyExistsError):
    def __init__(self) -> None:
        super().__init__("email_taken")


class SlugTakenError(UserAlreadyExistsError):
    def __init__(self) -> None:
        super().__init__("slug_taken")


class InvalidCredentialsError(DomainError):
    code = "invalid_credentials"
    status = HTTPStatus.BAD_REQUEST
    message = "Invalid username or password"


class CredentialsRequiredError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "credentials_required", message="Username and password are required"
        )


class UsernameTooLongError(ValidationError):
    def __init__(self, max_length: int) -> None:
        super().__init__(
            "username_too_long",
            context={"max_length": max_length},
            message="Username too long",
        )


class UsernameUnusableError(ValidationError):
    def __init__(self) -> None:
        super().__init__(
            "username_unusable",
            message="Username must contain at least one letter or digit",
        )


class UserNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__("user_not_found", message="User not found")


class InvalidTokenError(AuthError):
    def __init__(self, code: str = "invalid_token") -> None:
        super().__init__(code, message="Invalid or expired token")


class MissingTokenError(AuthError):
    def __init__(self) -> None:
        super().__init__("missing_token", message="No token provided")
