from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import domain_error_response, identity_required
from ..container import Container
from ..users.model import Identity


def register(app: Flask, container: Container) -> None:
    def _filters() -> dict:
        return {
            "date_from": request.args.get("startDate"),
            "date_to": request.args.get("endDate"),
            "school_id": request.args.get("schoolId") or None,
        }

    @app.route("/api/reports/summary", methods=["GET"], endpoint="report_summary")
    @identity_required
    def report_summary(identity: Identity):
        try:
            data = container.report_service.build_report(identity, **_filters())
        except Exception as e:
            return domain_error_response(app, e, failure_message="Failed to build report")

        return jsonify({"success": True, "data": data.summary.to_dict()})

    @app.route("/api/reports/export.csv", methods=["GET"], endpoint="report_export")
    @identity_required
    def report_export(identity: Identity):
        try:
            export = container.report_service.export_csv(identity, **_filters())
        except Exception as e:
            return domain_error_response(app, e, failure_message="Failed to export report")

        return app.response_class(
            export.content.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={export.filename}"},
        )
