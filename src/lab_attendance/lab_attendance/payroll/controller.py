from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import admin_required, login_required, recorded_by
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/staff/<int:staff_id>/payroll", methods=["GET"], endpoint="staff_payroll_report")
    @login_required
    def staff_payroll_report(staff_id: int):
        report = container.payroll_report_service.monthly_report(staff_id, request.args.get("month", ""))
        return jsonify(report.to_dict())

    @app.route("/api/staff/<int:staff_id>/salaries", methods=["GET"], endpoint="staff_salaries_list")
    @login_required
    def staff_salaries_list(staff_id: int):
        rows = container.salary_service.list_for_staff(staff_id)
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/staff/<int:staff_id>/salaries", methods=["POST"], endpoint="staff_salaries_add")
    @admin_required
    def staff_salaries_add(staff_id: int):
        body = request.get_json(silent=True) or {}
        created = container.salary_service.add(
            staff_id,
            month=body.get("month", ""),
            amount=body.get("amount"),
            bonus=body.get("bonus"),
            status=body.get("status"),
            recorded_by=recorded_by(),
        )
        return jsonify(created.to_dict()), 201

    @app.route("/api/staff/<int:staff_id>/salaries/<int:salary_id>", methods=["PUT"], endpoint="staff_salaries_update")
    @admin_required
    def staff_salaries_update(staff_id: int, salary_id: int):
        body = request.get_json(silent=True) or {}
        updated = container.salary_service.update(
            staff_id,
            salary_id,
            amount=body.get("amount"),
            bonus=body.get("bonus"),
            status=body.get("status"),
            recorded_by=recorded_by(),
        )
        return jsonify(updated.to_dict())

    @app.route(
        "/api/staff/<int:staff_id>/salaries/<int:salary_id>",
        methods=["DELETE"],
        endpoint="staff_salaries_delete",
    )
    @admin_required
    def staff_salaries_delete(staff_id: int, salary_id: int):
        container.salary_service.delete(staff_id, salary_id)
        return jsonify({"success": True})
