from __future__ import annotations

from flask import Flask, jsonify, request, session

from ..common.http import current_identity, domain_error_response, error, remember_identity
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            return error("Missing required fields", 400)
        username = body.get("username")
        password = body.get("password")
        role_s = body.get("role")

        if not username or not password or not role_s:
            return error("Missing required fields", 400)

        try:
            role = Role(role_s)
        except ValueError:
            return error("Invalid role", 400)

        try:
            identity = container.auth_service.authenticate(username, password, role)
        except AuthenticationError as e:
            app.logger.info("Login failed for %r (%s)", str(username).strip(), role.value)
            return domain_error_response(app, e, failure_message="Login failed")
        except Exception as e:
            return domain_error_response(app, e, failure_message="Login failed")

        remember_identity(identity, permanent=bool(body.get("remember_me")))
        return jsonify({"success": True, "user": identity.to_dict()})

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/api/me", methods=["GET"], endpoint="me")
    def me():
        identity = current_identity()
        if identity is None:
            return error("Not signed in", 401)
        return jsonify({"success": True, "user": identity.to_dict()})
