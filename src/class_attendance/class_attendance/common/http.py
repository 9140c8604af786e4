from __future__ import annotations

import logging
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import DomainError, EmptyReport, InvalidOperation, NotFound, StoreUnavailable

logger = logging.getLogger(__name__)

_STATUS = {
    NotFound: 404,
    InvalidOperation: 400,
    StoreUnavailable: 503,
    EmptyReport: 200,
}


def ok(payload: Any = None, *, status: int = 200, message: Optional[str] = None):
    body: dict[str, Any] = {"success": True, "data": payload}
    if message:
        body["message"] = message
    return jsonify(body), status


def error_response(e: DomainError):
    """Turn a domain error into a dismissible JSON notice."""
    status = next((code for cls, code in _STATUS.items() if isinstance(e, cls)), 400)
    if status >= 500:
        logger.warning("%s %s failed: %s", request.method, request.path, e)
    else:
        logger.info("%s %s rejected: %s", request.method, request.path, e)
    return jsonify({"success": False, "message": str(e)}), status


def unexpected_error(action: str):
    logger.exception("Unexpected error while %s", action)
    return jsonify({"success": False, "message": f"System error while {action}"}), 500


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidOperation("Request body must be a JSON object")
    return data
