from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from flask import Flask, jsonify, request
from werkzeug.exceptions import InternalServerError

from ..core.exceptions import (
    AuthorizationError,
    DomainError,
    DuplicateIdError,
    ExportError,
    NotFoundError,
    ValidationError,
)
from .datetime_utils import parse_iso_date

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = [
    (ValidationError, 400),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (DuplicateIdError, 409),
    (ExportError, 500),
]


def status_for(error: DomainError) -> int:
    for kind, status in _STATUS_BY_ERROR:
        if isinstance(error, kind):
            return status
    return 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"success": False, "error": type(e).__name__, "message": str(e)}), status_for(e)

    @app.errorhandler(InternalServerError)
    def handle_unexpected(e: InternalServerError):
        logger.error(
            "Unhandled error on %s %s", request.method, request.path, exc_info=getattr(e, "original_exception", None)
        )
        return jsonify({"success": False, "error": "InternalError", "message": "Internal server error"}), 500


def json_body() -> dict:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def optional_date_arg(name: str) -> Optional[date]:
    value = (request.args.get(name) or "").strip()
    return parse_iso_date(value) if value else None


def optional_str_arg(name: str) -> Optional[str]:
    value = (request.args.get(name) or "").strip()
    return value or None
