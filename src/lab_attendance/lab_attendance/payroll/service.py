from __future__ import annotations

import csv
import io
from datetime import date
from typing import Optional

from ..attendance.reconciler import reconcile_month
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import month_bounds, month_key, now_local, parse_month
from ..core.exceptions import NotFoundError
from ..deductions.repository import DeductionRepository
from ..leaves.repository import LeaveRepository
from ..settings.service import AttendanceSettingsStore
from ..staff.model import StaffMember
from ..staff.repository import StaffRepository
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import MonthlyReport


class PayrollReportService:
    """Monthly reporting: reconciled calendar, payroll summary and CSV export."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        leaves: LeaveRepository,
        deductions: DeductionRepository,
        staff: StaffRepository,
        settings: AttendanceSettingsStore,
        *,
        calculator: Optional[PayrollCalculator] = None,
    ):
        self._attendance = attendance
        self._leaves = leaves
        self._deductions = deductions
        self._staff = staff
        self._settings = settings
        self._calculator = calculator or StandardPayrollCalculator()

    def monthly_calendar(self, staff_id: int, month: str, *, today: Optional[date] = None) -> MonthlyReport:
        year, mon = parse_month(month)
        staff = self._require_staff(staff_id)
        return self._build(staff, year, mon, today=today, with_summary=False)

    def monthly_report(self, staff_id: int, month: str, *, today: Optional[date] = None) -> MonthlyReport:
        year, mon = parse_month(month)
        staff = self._require_staff(staff_id)
        return self._build(staff, year, mon, today=today, with_summary=True)

    def export_monthly_csv(self, staff_id: int, month: str, *, today: Optional[date] = None) -> str:
        report = self.monthly_calendar(staff_id, month, today=today)

        out = io.StringIO()
        writer = csv.writer(out, lineterminator="\n")
        writer.writerow(["Date", "Check In", "Check Out", "Status"])
        for day in report.calendar:
            writer.writerow([day.date_key, day.check_in, day.check_out, day.status.value])
        return out.getvalue()

    def _build(self, staff: StaffMember, year: int, mon: int, *, today: Optional[date], with_summary: bool) -> MonthlyReport:
        today = today or now_local().date()
        settings = self._settings.get()
        start, end = month_bounds(year, mon)

        before_join = bool(staff.join_date and (year, mon) < (staff.join_date.year, staff.join_date.month))
        calendar = []
        if not before_join:
            calendar = reconcile_month(
                year=year,
                month=mon,
                attendance=self._attendance.list_for_staff_between(staff.staff_id, start, end),
                leaves=self._leaves.list_for_staff(staff.staff_id, start=start, end=end),
                settings=settings,
                today=today,
                staff_id=staff.staff_id,
            )

        summary = None
        if with_summary:
            summary = self._calculator.compute(
                year=year,
                month=mon,
                calendar=calendar,
                deductions=self._deductions.list_for_staff(staff.staff_id, start=start, end=end),
                settings=settings,
                base_salary=staff.salary,
            )

        return MonthlyReport(
            staff=staff,
            month=month_key(year, mon),
            calendar=calendar,
            summary=summary,
            before_join=before_join,
        )

    def _require_staff(self, staff_id: int) -> StaffMember:
        staff = self._staff.get_by_id(int(staff_id))
        if not staff:
            raise NotFoundError("Staff not found")
        return staff
