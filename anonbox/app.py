# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask
from flask_cors import CORS

from anonbox.infrastructure.container import Container, container
from anonbox.infrastructure.db import init_db
from anonbox.shared.config import load_config
from anonbox.shared.logging import logger, setup_logging
from anonbox.shared.middleware.error_handler import configure_error_handling
from anonbox.shared.middleware.request_logger import configure_request_logging


def create_app(app_container: Container | None = None) -> Flask:
    deps = app_container or container
    config = deps.config

    setup_logging(
        config.observability.log_level,
        log_file=config.observability.log_file,
        debug_mode=config.debug_logging,
    )
    init_db()
    if config.uses_insecure_secret():
        logger.warning("JWT_SECRET is not set; using the insecure development default")

    app = Flask(__name__)
    configure_error_handling(app)
    configure_request_logging(app, verbose=config.debug_logging)
    deps.metrics.bind(app)

    CORS(app, resources={r"/*": {"origins": config.security.allowed_origins}})

    app.register_blueprint(deps.misc_controller.as_blueprint())
    app.register_blueprint(deps.auth_controller.as_blueprint())
    app.register_blueprint(deps.messages_controller.as_blueprint())

    @app.after_request
    def _add_security_headers(resp):
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        return resp

    logger.info("Flask app initialized")
    return app


def main() -> None:
    config = load_config()
    app = create_app()
    logger.info(f"Server running on port {config.port}")
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
