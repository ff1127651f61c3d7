from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import Flask, jsonify, session

from ..core.exceptions import AuthenticationError, AuthorizationError, StorageError, ValidationError
from ..users.model import Identity

SESSION_KEY = "identity"


def current_identity() -> Optional[Identity]:
    data = session.get(SESSION_KEY)
    if not data:
        return None
    try:
        return Identity.from_dict(data)
    except (KeyError, TypeError, ValueError):
        session.pop(SESSION_KEY, None)
        return None


def remember_identity(identity: Identity, *, permanent: bool) -> None:
    session.clear()
    session.permanent = permanent
    session[SESSION_KEY] = identity.to_dict()


def error(message: str, status: int):
    return jsonify({"success": False, "error": message}), status


def identity_required(view):
    """Pass the signed-in Identity to the view as its first argument."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        identity = current_identity()
        if identity is None:
            return error("Not signed in", 401)
        return view(identity, *args, **kwargs)

    return wrapper


def domain_error_response(app: Flask, e: Exception, *, failure_message: str):
    """Map a service exception to a short JSON error; details go to the log only."""

    if isinstance(e, ValidationError):
        return error(str(e), 400)
    if isinstance(e, AuthenticationError):
        return error(str(e), 401)
    if isinstance(e, AuthorizationError):
        return error(str(e), 403)
    if isinstance(e, StorageError):
        app.logger.error("Storage error: %s", e, exc_info=e.__cause__ or e)
        return error(failure_message, 500)

    app.logger.exception("Unhandled error: %s", e)
    return error("Internal server error", 500)
