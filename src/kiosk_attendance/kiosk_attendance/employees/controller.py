from __future__ import annotations

from flask import Flask, jsonify, request

from ..admin.controller import admin_required
from ..common.http import json_body
from ..common.updates import UNSET
from ..core.exceptions import ValidationError


def register(app: Flask, container) -> None:
    backend = container.backend

    @app.route("/api/employees", methods=["GET"], endpoint="employees_list")
    def employees_list():
        active_only = request.args.get("active_only", "0").lower() in {"1", "true", "yes"}
        employees = backend.list_employees(active_only)
        return jsonify({"success": True, "employees": [e.to_dict() for e in employees]})

    @app.route("/api/employees", methods=["POST"], endpoint="employees_create")
    @admin_required(container)
    def employees_create():
        data = json_body()
        employee = backend.create_employee(data.get("id", ""), data.get("name", ""))
        return jsonify({"success": True, "employee": employee.to_dict()}), 201

    @app.route("/api/employees/<path:employee_id>", methods=["PATCH"], endpoint="employees_update")
    @admin_required(container)
    def employees_update(employee_id: str):
        data = json_body()
        active = data.get("active", UNSET)
        if "active" in data and not isinstance(active, bool):
            raise ValidationError("'active' must be true or false")

        employee = backend.update_employee(employee_id, name=data.get("name", UNSET), active=active)
        return jsonify({"success": True, "employee": employee.to_dict()})

    @app.route("/api/employees/<path:employee_id>", methods=["DELETE"], endpoint="employees_delete")
    @admin_required(container)
    def employees_delete(employee_id: str):
        backend.delete_employee(employee_id)
        return jsonify({"success": True})
