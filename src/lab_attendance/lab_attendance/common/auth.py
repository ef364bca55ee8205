"""Session role checks for the JSON API.

Login itself lives outside this service; it stores ``role`` in the Flask
session and these decorators only read it.
"""
from __future__ import annotations

from functools import wraps

from flask import jsonify, session

from ..core.enums import Role


def current_role():
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if current_role() is None:
            return jsonify({"message": "Authentication required"}), 401
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        role = current_role()
        if role is None:
            return jsonify({"message": "Authentication required"}), 401
        if role != Role.ADMIN:
            return jsonify({"message": "Admin access required"}), 403
        return view(*args, **kwargs)

    return wrapper


def recorded_by() -> str:
    return str(session.get("name") or session.get("email") or session.get("user_id") or "admin")
