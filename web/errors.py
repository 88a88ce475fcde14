from __future__ import annotations

import logging
import os

from flask import Flask, current_app, jsonify, request
from werkzeug.exceptions import HTTPException, RequestEntityTooLarge

from imagesig.settings import ValidationResponse

logger = logging.getLogger(__name__)


def _error_code(e: HTTPException) -> str:
    # "Not Found" -> "not_found"
    return (e.name or "http_error").lower().replace(" ", "_")


def register_error_handlers(app: Flask) -> None:
    """Return JSON errors instead of HTML pages.

    Requests to the settings blueprint get the host's validation response
    shape, so an oversized settings payload is reported as invalid settings.
    """

    @app.errorhandler(RequestEntityTooLarge)
    def handle_too_large(e: RequestEntityTooLarge):
        limit = current_app.config.get("MAX_CONTENT_LENGTH")
        message = f"Settings payload too large. MAX_REQUEST_BYTES={limit}"
        if request.blueprint == "settings":
            return jsonify(ValidationResponse(valid=False, message=message).to_dict()), 413
        return jsonify({"error": _error_code(e), "message": message}), 413

    @app.errorhandler(HTTPException)
    def handle_http_exception(e: HTTPException):
        return jsonify({
            "error": _error_code(e),
            "message": e.description,
            "path": request.path,
            "method": request.method,
        }), e.code or 500

    @app.errorhandler(Exception)
    def handle_unexpected_exception(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        debug = os.environ.get("FLASK_DEBUG", "0") == "1"
        # Do not leak traceback details to clients.
        return jsonify({
            "error": "internal_error",
            "message": str(e) if debug else "An unexpected error occurred.",
            "path": request.path,
            "method": request.method,
        }), 500
