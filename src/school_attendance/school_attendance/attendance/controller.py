from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import domain_error_response, error, identity_required
from ..container import Container
from ..core.constants import STORAGE_FAILURE_MESSAGE
from ..users.model import Identity


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_submit")
    @identity_required
    def attendance_submit(identity: Identity):
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return error("Missing required fields", 400)

        try:
            record = container.attendance_service.submit(
                identity,
                school_id=body.get("school_id"),
                section=body.get("section"),
                date=body.get("date"),
                boys_present=body.get("boys_present"),
                girls_present=body.get("girls_present"),
            )
        except Exception as e:
            return domain_error_response(app, e, failure_message=STORAGE_FAILURE_MESSAGE)

        return jsonify({"success": True, "data": record.to_dict()})

    @app.route("/api/attendance/bulk", methods=["POST"], endpoint="attendance_bulk")
    @identity_required
    def attendance_bulk(identity: Identity):
        body = request.get_json(silent=True)
        if not isinstance(body, dict) or not isinstance(body.get("records"), list) or not body.get("date"):
            return error("Missing required fields or invalid format", 400)

        try:
            count = container.attendance_service.submit_batch(
                identity,
                school_id=body.get("school_id"),
                records=body["records"],
                date=body["date"],
            )
        except Exception as e:
            return domain_error_response(app, e, failure_message="Failed to save bulk attendance")

        return jsonify({"success": True, "count": count})

    @app.route("/api/attendance-data", methods=["GET"], endpoint="attendance_data")
    @identity_required
    def attendance_data(identity: Identity):
        try:
            rows = container.attendance_service.list_records(
                identity,
                date_from=request.args.get("startDate"),
                date_to=request.args.get("endDate"),
                school_id=request.args.get("schoolId") or None,
            )
        except Exception as e:
            return domain_error_response(app, e, failure_message="Failed to fetch attendance data")

        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})
