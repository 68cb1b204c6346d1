from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request

from ..common.http import json_body
from ..core.constants import ADMIN_PASSWORD_HEADER
from ..core.exceptions import AuthorizationError


def admin_required(container):
    """Route decorator: the admin password must come in the X-Admin-Password header."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            password = request.headers.get(ADMIN_PASSWORD_HEADER, "")
            if not container.backend.verify_admin_password(password):
                raise AuthorizationError("Admin password required")
            return view(*args, **kwargs)

        return wrapper

    return decorator


def register(app: Flask, container) -> None:
    @app.route("/api/admin/verify", methods=["POST"], endpoint="admin_verify")
    def admin_verify():
        data = json_body()
        ok = container.backend.verify_admin_password(data.get("password", ""))
        return jsonify({"success": True, "valid": ok})
