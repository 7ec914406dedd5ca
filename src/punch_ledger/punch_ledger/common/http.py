from __future__ import annotations

import logging

from flask import jsonify

from ..core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def json_error(e: Exception):
    """Translate a raised exception into a JSON error response."""

    if isinstance(e, ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400
    if isinstance(e, NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404
    logger.exception("Unhandled error")
    return jsonify({"success": False, "message": "Internal server error"}), 500
