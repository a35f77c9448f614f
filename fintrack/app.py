# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask, Response
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix

from fintrack.infrastructure.container import Container
from fintrack.infrastructure.db import init_db
from fintrack.shared.config import AppConfig, load_config
from fintrack.shared.logging import logger, setup_logging
from fintrack.shared.middleware.error_handler import configure_error_handling
from fintrack.shared.middleware.request_logger import configure_request_logging


def _configure_security_headers(app: Flask, config: AppConfig) -> None:
    @app.after_request
    def _add_security_headers(resp: Response) -> Response:
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers.setdefault("Referrer-Policy", "no-referrer")
        resp.headers.setdefault("X-Content-Type-Options", "nosniff")
        resp.headers.setdefault("Cross-Origin-Resource-Policy", "same-origin")
        resp.headers.setdefault("Cross-Origin-Opener-Policy", "same-origin")
        resp.headers.setdefault(
            "Permissions-Policy",
            "geolocation=(), microphone=(), camera=(), payment=(), usb=(), magnetometer=(), gyroscope=()",
        )
        resp.headers.setdefault("X-Permitted-Cross-Domain-Policies", "none")

        if config.security.enable_hsts:
            resp.headers.setdefault(
                "Strict-Transport-Security",
                "max-age=31536000; includeSubDomains; preload",
            )
        return resp


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging("DEBUG" if config.debug_logging else None)

    container = Container(config)
    # Refuse to start without a signing secret.
    container.signing_secret

    init_db()

    app = Flask(__name__)
    if config.security.trusted_proxies:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=config.security.trusted_proxies)
    app.extensions["fintrack.container"] = container
    configure_error_handling(app)
    configure_request_logging(app)

    cors_kwargs: dict[str, object] = {
        "resources": {r"/api/*": {"origins": config.security.allowed_origins}}
    }
    if any(o != "*" for o in config.security.allowed_origins):
        cors_kwargs["supports_credentials"] = True
    CORS(app, **cors_kwargs)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.ledger_controller.as_blueprint())
    app.register_blueprint(container.frontend_controller.as_blueprint())

    _configure_security_headers(app, config)

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=5000, threaded=True)
