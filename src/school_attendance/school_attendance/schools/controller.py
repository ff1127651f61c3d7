from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import domain_error_response
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/schools", methods=["GET"], endpoint="schools_list")
    def schools_list():
        try:
            schools = container.school_service.list_schools()
        except Exception as e:
            return domain_error_response(app, e, failure_message="Failed to fetch schools")

        return jsonify({"success": True, "data": [{"id": s.id, "name": s.name} for s in schools]})
