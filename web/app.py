from __future__ import annotations

import os
from flask import Flask

from imagesig.logs import configure_logging

from .errors import register_error_handlers
from .routes.health import bp as health_bp
from .routes.settings import bp as settings_bp

DEFAULT_MAX_REQUEST_BYTES = 1 * 1024 * 1024


def create_app() -> Flask:
    configure_logging(os.environ.get("LOG_LEVEL"))
    app = Flask(__name__)

    # Settings payloads are small; anything bigger is refused before parsing
    app.config["MAX_CONTENT_LENGTH"] = int(
        os.environ.get("MAX_REQUEST_BYTES", str(DEFAULT_MAX_REQUEST_BYTES))
    )

    register_error_handlers(app)
    app.register_blueprint(health_bp, url_prefix="/api")
    app.register_blueprint(settings_bp, url_prefix="/api")
    return app
