# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time
from collections.abc import Mapping

from flask import Flask, g, request

from anonbox.shared.logging import clear_correlation_id, logger, set_correlation_id

REQUEST_ID_HEADER = "X-Request-ID"

_SECRET_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
_SECRET_PARAM_MARKERS = ("password", "token", "secret", "key")


def client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For", "")
    first_hop = forwarded.split(",")[0].strip()
    return first_hop or request.remote_addr or "unknown"


def _fingerprint(value: str) -> str:
    return f"<sha256:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"


def _safe_headers(headers: Mapping[str, str]) -> dict[str, str]:
    # same header value -> same fingerprint, so repeated tokens stay correlatable
    return {
        name: _fingerprint(value) if name.lower() in _SECRET_HEADERS else value
        for name, value in headers.items()
    }


def _safe_params(params: Mapping[str, str]) -> dict[str, str]:
    return {
        name: "<redacted>"
        if any(marker in name.lower() for marker in _SECRET_PARAM_MARKERS)
        else value
        for name, value in params.items()
    }


def configure_request_logging(app: Flask, *, verbose: bool = False) -> None:
    """Tag each request with a correlation id and log its start and outcome.

    The id comes from ``X-Request-ID`` when the caller sends one and is echoed
    back on the response. ``verbose`` adds sanitized headers, query params
    and body size to the start line.
    """

    @app.before_request
    def _open_request() -> None:
        g.correlation_id = request.headers.get(REQUEST_ID_HEADER) or secrets.token_hex(6)
        g.request_started = time.perf_counter()
        set_correlation_id(g.correlation_id)

        line = f"--> {request.method} {request.path} from {client_ip()}"
        if verbose:
            line += (
                f" query={_safe_params(request.args)}"
                f" headers={_safe_headers(request.headers)}"
                f" body_size={request.content_length or 0}"
            )
        logger.info(line)

    @app.after_request
    def _close_request(response):
        elapsed = time.perf_counter() - g.get("request_started", time.perf_counter())
        line = f"<-- {request.method} {request.path} {response.status_code} in {elapsed * 1000:.1f}ms"
        if verbose:
            line += f" user={g.get('user_id')}"
        logger.info(line)
        response.headers.setdefault(REQUEST_ID_HEADER, g.get("correlation_id", "-"))
        return response

    @app.teardown_request
    def _drop_correlation_id(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(f"Request aborted by {type(exc).__name__}: {request.method} {request.path}")
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "client_ip", "configure_request_logging"]
