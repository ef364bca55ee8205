from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import admin_required, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff/<int:staff_id>/leaves", methods=["GET"], endpoint="staff_leaves_list")
    @login_required
    def staff_leaves_list(staff_id: int):
        rows = container.leave_service.list_for_staff(staff_id)
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/staff/<int:staff_id>/leaves", methods=["POST"], endpoint="staff_leaves_add")
    @admin_required
    def staff_leaves_add(staff_id: int):
        body = request.get_json(silent=True) or {}
        created = container.leave_service.add(
            staff_id,
            day=body.get("date"),
            days=body.get("days"),
            leave_type=body.get("type") or "",
            reason=body.get("reason") or "",
        )
        return jsonify(created.to_dict()), 201

    @app.route("/api/staff/<int:staff_id>/leaves/<int:leave_id>", methods=["DELETE"], endpoint="staff_leaves_delete")
    @admin_required
    def staff_leaves_delete(staff_id: int, leave_id: int):
        container.leave_service.delete(staff_id, leave_id)
        return jsonify({"success": True})
