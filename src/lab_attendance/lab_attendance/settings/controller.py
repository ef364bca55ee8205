from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import admin_required, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff-settings/attendance", methods=["GET"], endpoint="attendance_settings_get")
    @login_required
    def attendance_settings_get():
        return jsonify(container.settings_store.get().to_dict())

    @app.route("/api/staff-settings/attendance", methods=["PUT"], endpoint="attendance_settings_save")
    @admin_required
    def attendance_settings_save():
        body = request.get_json(silent=True) or {}
        saved = container.settings_store.save(body)
        return jsonify(saved.to_dict())
