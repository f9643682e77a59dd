# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, cast

_GENERIC_MESSAGES: dict[HTTPStatus, str] = {
    HTTPStatus.BAD_REQUEST: "Invalid request",
    HTTPStatus.UNAUTHORIZED: "Invalid or expired token",
    HTTPStatus.NOT_FOUND: "Not found",
    HTTPStatus.CONFLICT: "Already exists",
    HTTPStatus.INTERNAL_SERVER_ERROR: "Server error",
}


@dataclass(slots=True)
class AppError(Exception):
    code: str
    status: HTTPStatus
    context: Mapping[str, Any] | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.code)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": self.code,
            "message": self.message or _GENERIC_MESSAGES.get(self.status, "Error"),
        }
        if self.context:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_status = status or cast(
            HTTPStatus, getattr(self, "status", HTTPStatus.BAD_REQUEST)
        )
        resolved_message = message or getattr(self, "message", None)
        super().__init__(
            code=resolved_code,
            status=resolved_status,
            context=context,
            message=resolved_message,
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        *,
        context: Mapping[str, Any] | None = None,
        message: str | None = None,
    ) -> None:
        super().__init__(
            code=code,
            status=HTTPStatus.BAD_REQUEST,
            context=context,
            message=message,
        )


class ConflictError(AppError):
    def __init__(self, code: str = "conflict", *, message: str | None = None) -> None:
        super().__init__(code=code, status=HTTPStatus.CONFLICT, message=message)


class NotFoundError(AppError):
    def __init__(self, code: str = "not_found", *, message: str | None = None) -> None:
        super().__init__(code=code, status=HTTPStatus.NOT_FOUND, message=message)


class AuthError(AppError):
    def __init__(self, code: str = "unauthorized", *, message: str | None = None) -> None:
        super().__init__(code=code, status=HTTPStatus.UNAUTHORIZED, message=message)


class InfrastructureError(AppError):
    def __init__(
        self,
        code: str = "infrastructure_error",
        *,
        status: HTTPStatus | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_status = status or HTTPStatus.INTERNAL_SERVER_ERROR
        super().__init__(code=code, status=resolved_status, context=context)


class StorageError(InfrastructureError):
    def __init__(self, operation: str | None = None) -> None:
        # the operation name is for server-side logs, never for the client
        super().__init__(code="storage_error")
        self.operation = operation


class InternalError(AppError):
    def __init__(self) -> None:
        super().__init__(code="internal_error", status=HTTPStatus.INTERNAL_SERVER_ERROR)
