# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""JSON error responses for the whole app.

Clients only ever see ``{"error": code, "message": text}`` (plus field
context for validation failures) and the status. Everything else, from
storage operation names to tracebacks, goes to the log.
"""

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, g, jsonify, request
from werkzeug.exceptions import HTTPException

from anonbox.shared.errors import AppError, InternalError, StorageError
from anonbox.shared.logging import logger

from .request_logger import client_ip


def _where() -> str:
    return (
        f"{request.method} {request.path} from {client_ip()}, "
        f"user={getattr(g, 'user_id', None)}"
    )


def error_response(error: AppError) -> tuple[Response, HTTPStatus]:
    return jsonify(error.to_dict()), error.status


def _on_app_error(exc: AppError) -> tuple[Response, HTTPStatus]:
    if isinstance(exc, StorageError):
        logger.error(f"Storage failure in {exc.operation or 'unknown'}: {_where()}")
    elif exc.status >= HTTPStatus.INTERNAL_SERVER_ERROR:
        logger.error(f"{exc.code}: {_where()}")
    else:
        logger.warning(f"{exc.code} ({int(exc.status)}): {_where()}")
    return error_response(exc)


def _on_http_exception(exc: HTTPException) -> tuple[Response, int]:
    code = (exc.name or "error").lower().replace(" ", "_")
    return jsonify({"error": code, "message": exc.description}), exc.code or 500


def _on_unexpected(exc: Exception) -> tuple[Response, HTTPStatus]:
    logger.opt(exception=exc).error(f"Unhandled {type(exc).__name__}: {_where()}")
    return error_response(InternalError())


def configure_error_handling(app: Flask) -> None:
    app.register_error_handler(AppError, _on_app_error)
    app.register_error_handler(HTTPException, _on_http_exception)
    app.register_error_handler(Exception, _on_unexpected)


__all__ = ["configure_error_handling", "error_response"]
