from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.auth import admin_required, login_required
from ..common.datetime_utils import format_hhmm, now_local
from ..common.validators import require_id
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/server-time", methods=["GET"], endpoint="attendance_server_time")
    @login_required
    def attendance_server_time():
        now = now_local()
        return jsonify({"iso": now.isoformat(timespec="seconds"), "date": now.strftime("%Y-%m-%d"), "time": format_hhmm(now)})

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_daily")
    @login_required
    def attendance_daily():
        rows = container.attendance_recorder.get_daily(request.args.get("date"))
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/attendance", methods=["POST"], endpoint="attendance_manual_add")
    @admin_required
    def attendance_manual_add():
        body = request.get_json(silent=True) or {}
        staff_id = require_id(body.get("staffId"), "staffId")
        record = container.attendance_recorder.manual_add(
            staff_id,
            day=body.get("date"),
            status=body.get("status"),
            check_in=body.get("checkIn"),
            check_out=body.get("checkOut"),
            notes=body.get("notes"),
        )
        return jsonify(record.to_dict()), 201

    # Only staffId is read from the body; the time always comes from the server clock.
    @app.route("/api/attendance/check-in", methods=["POST"], endpoint="attendance_check_in")
    @admin_required
    def attendance_check_in():
        body = request.get_json(silent=True) or {}
        staff_id = require_id(body.get("staffId"), "staffId")
        record = container.attendance_recorder.check_in(staff_id)
        return jsonify(record.to_dict())

    @app.route("/api/attendance/check-out", methods=["POST"], endpoint="attendance_check_out")
    @admin_required
    def attendance_check_out():
        body = request.get_json(silent=True) or {}
        staff_id = require_id(body.get("staffId"), "staffId")
        record = container.attendance_recorder.check_out(staff_id)
        return jsonify(record.to_dict())

    @app.route("/api/attendance/monthly", methods=["GET"], endpoint="attendance_monthly")
    @login_required
    def attendance_monthly():
        staff_id = require_id(request.args.get("staffId"), "staffId")
        report = container.payroll_report_service.monthly_calendar(staff_id, request.args.get("month", ""))
        return jsonify(report.to_dict())

    @app.route("/api/attendance/monthly.csv", methods=["GET"], endpoint="attendance_monthly_csv")
    @login_required
    def attendance_monthly_csv():
        staff_id = require_id(request.args.get("staffId"), "staffId")
        month = request.args.get("month", "")
        body = container.payroll_report_service.export_monthly_csv(staff_id, month)
        return app.response_class(
            body.encode("utf-8-sig"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename=attendance_{staff_id}_{month}.csv"},
        )
