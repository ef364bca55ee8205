from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import admin_required, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff/<int:staff_id>/deductions", methods=["GET"], endpoint="staff_deductions_list")
    @login_required
    def staff_deductions_list(staff_id: int):
        rows = container.deduction_service.list_for_staff(staff_id)
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/staff/<int:staff_id>/deductions", methods=["POST"], endpoint="staff_deductions_add")
    @admin_required
    def staff_deductions_add(staff_id: int):
        body = request.get_json(silent=True) or {}
        created = container.deduction_service.add(
            staff_id,
            amount=body.get("amount"),
            reason=body.get("reason") or "",
            day=body.get("date"),
        )
        return jsonify(created.to_dict()), 201

    @app.route(
        "/api/staff/<int:staff_id>/deductions/<int:deduction_id>",
        methods=["DELETE"],
        endpoint="staff_deductions_delete",
    )
    @admin_required
    def staff_deductions_delete(staff_id: int, deduction_id: int):
        container.deduction_service.delete(staff_id, deduction_id)
        return jsonify({"success": True})
