from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from imagesig.settings import validate_raw_settings

bp = Blueprint("settings", __name__)
logger = logging.getLogger(__name__)


@bp.post("/settings/validate")
def settings_validate():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "invalid_json", "message": "JSON body must be an object"}), 400

    response = validate_raw_settings(data, logger)
    return jsonify(response.to_dict()), 200 if response.valid else 400
