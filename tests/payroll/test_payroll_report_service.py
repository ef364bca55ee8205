from datetime import date, datetime

import pytest

from lab_attendance.core.enums import AttendanceStatus
from lab_attendance.core.exceptions import NotFoundError, ValidationError

TODAY = date(2024, 3, 13)


@pytest.fixture
def march(container):
    """Ayesha's first two working weeks of March 2024."""
    container.settings_store.save(
        {
            "officialDaysOff": [0, 6],
            "paidAbsentDays": 2,
            "absentDeduction": 500,
            "lateReliefMinutes": 15,
            "lateDeduction": 100,
        }
    )
    recorder = container.attendance_recorder
    for day in (1, 4, 5, 7, 8, 11):
        recorder.manual_add(1, day=date(2024, 3, day), status="present", check_in="08:55", check_out="17:30")
    recorder.manual_add(1, day="2024-03-06", status="absent")
    container.leave_service.add(1, day="2024-03-12", leave_type="Casual")
    recorder.check_in(1, now=datetime(2024, 3, 13, 9, 30))
    container.deduction_service.add(1, amount=250, reason="Broken glassware", day="2024-03-07")
    return container


def test_monthly_report_summarises_reconciled_calendar(march):
    report = march.payroll_report_service.monthly_report(1, "2024-03", today=TODAY)
    summary = report.summary

    assert report.month == "2024-03"
    assert len(report.calendar) == 13
    assert summary.present == 7
    assert summary.late == 1
    assert summary.leave == 1
    assert summary.absent == 1
    assert summary.official_off == 4
    assert summary.paid_leaves_used == 1
    assert summary.unpaid_absents == 0
    assert summary.late_deduction_amount == 100
    assert summary.absent_deduction_amount == 0
    assert summary.manual_deductions == 250
    assert summary.net_salary == 30000 - 350


def test_monthly_calendar_has_no_summary(march):
    report = march.payroll_report_service.monthly_calendar(1, "2024-03", today=TODAY)

    assert report.summary is None
    assert report.calendar[11].status == AttendanceStatus.LEAVE
    assert report.calendar[12].status == AttendanceStatus.LATE
    assert report.to_dict()["days"][0] == {
        "date": "2024-03-01",
        "status": "present",
        "checkIn": "08:55",
        "checkOut": "17:30",
    }


def test_month_before_join_is_empty(container):
    report = container.payroll_report_service.monthly_report(2, "2024-02", today=TODAY)

    assert report.before_join is True
    assert report.calendar == []
    assert report.summary.days_in_period == 0
    assert report.summary.net_salary == 25000


def test_join_month_itself_is_reconciled_from_day_one(container):
    report = container.payroll_report_service.monthly_calendar(2, "2024-03", today=date(2024, 3, 5))

    assert report.before_join is False
    assert len(report.calendar) == 5


def test_csv_export(container):
    container.attendance_recorder.manual_add(1, day="2024-03-01", status="late", check_in="09:40", check_out="18:00")

    body = container.payroll_report_service.export_monthly_csv(1, "2024-03", today=date(2024, 3, 3))

    assert body.splitlines() == [
        "Date,Check In,Check Out,Status",
        "2024-03-01,09:40,18:00,late",
        "2024-03-02,,,absent",
        "2024-03-03,,,absent",
    ]


def test_bad_month_and_unknown_staff(container):
    with pytest.raises(ValidationError):
        container.payroll_report_service.monthly_report(1, "2024-13")
    with pytest.raises(ValidationError):
        container.payroll_report_service.monthly_report(1, "March")
    with pytest.raises(NotFoundError):
        container.payroll_report_service.monthly_report(42, "2024-03")
