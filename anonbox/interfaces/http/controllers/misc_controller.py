# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify

from anonbox.infrastructure.health import probe_database
from anonbox.infrastructure.observability import render_metrics
from anonbox.shared.logging import logger


class MiscController:
    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("misc", __name__)
        bp.add_url_rule("/", view_func=self.index, methods=["GET"])
        bp.add_url_rule("/health", view_func=self.health, methods=["GET"])
        bp.add_url_rule("/metrics", view_func=self.metrics, methods=["GET"])
        return bp

    def index(self):
        return jsonify({"status": "anonbox backend running"})

    def health(self):
        probe = probe_database()
        if not probe.ok:
            return jsonify({"ok": False, "database": "error"}), HTTPStatus.SERVICE_UNAVAILABLE
        logger.debug(f"health: database ok in {probe.latency_ms:.1f}ms")
        return jsonify({"ok": True, "database": "ok"}), HTTPStatus.OK

    def metrics(self) -> Response:
        body, content_type = render_metrics()
        return Response(body, content_type=content_type)
