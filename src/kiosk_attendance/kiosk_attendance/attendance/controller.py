from __future__ import annotations

from flask import Flask, jsonify, request

from ..admin.controller import admin_required
from ..common.datetime_utils import parse_timestamp
from ..common.http import json_body, optional_date_arg, optional_str_arg
from ..common.updates import UNSET


def register(app: Flask, container) -> None:
    backend = container.backend

    def _kiosk_event(record_event):
        data = json_body()
        record = record_event(data.get("employee_id", ""), data.get("employee_name"))
        return jsonify({"success": True, "record": record.to_dict()}), 201

    def _filter_args() -> dict:
        return {
            "start_date": optional_date_arg("start_date"),
            "end_date": optional_date_arg("end_date"),
            "employee_id": optional_str_arg("employee_id"),
            "type": optional_str_arg("type"),
        }

    @app.route("/api/kiosk/check-in", methods=["POST"], endpoint="kiosk_check_in")
    def kiosk_check_in():
        return _kiosk_event(backend.check_in)

    @app.route("/api/kiosk/check-out", methods=["POST"], endpoint="kiosk_check_out")
    def kiosk_check_out():
        return _kiosk_event(backend.check_out)

    @app.route("/api/stats/daily", methods=["GET"], endpoint="stats_daily")
    def stats_daily():
        return jsonify({"success": True, "stats": backend.get_daily_stats().to_dict()})

    @app.route("/api/records", methods=["GET"], endpoint="records_list")
    def records_list():
        newest_first = request.args.get("order", "asc").lower() == "desc"
        records = backend.get_records(**_filter_args(), newest_first=newest_first)
        return jsonify({"success": True, "records": [r.to_dict() for r in records]})

    @app.route("/api/records/<int:record_id>", methods=["PATCH"], endpoint="records_update")
    @admin_required(container)
    def records_update(record_id: int):
        data = json_body()
        timestamp = parse_timestamp(data["timestamp"]) if "timestamp" in data else UNSET
        record = backend.update_record(
            record_id,
            timestamp=timestamp,
            type=data.get("type", UNSET),
            notes=data.get("notes", UNSET),
        )
        return jsonify({"success": True, "record": record.to_dict()})

    @app.route("/api/records/<int:record_id>", methods=["DELETE"], endpoint="records_delete")
    @admin_required(container)
    def records_delete(record_id: int):
        backend.delete_record(record_id)
        return jsonify({"success": True})

    @app.route("/api/records/export", methods=["GET"], endpoint="records_export")
    @admin_required(container)
    def records_export():
        path = backend.export_to_excel(**_filter_args())
        return jsonify({"success": True, "path": path})
