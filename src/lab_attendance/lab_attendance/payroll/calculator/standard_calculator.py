from __future__ import annotations

from typing import Iterable, Sequence

from ...attendance.model import CalendarDay
from ...core.constants import AMOUNT_EPSILON
from ...core.enums import AttendanceStatus
from ...deductions.model import DeductionRecord
from ...settings.model import AttendanceSettings
from ..model import PayrollSummary
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: base salary minus manual, late and unpaid-absence deductions, not below 0.

    Ledger rows are preferred over settings-derived figures so nothing is
    counted twice. The absent ledger total is only trusted when it matches
    ``absentDeduction * unpaidAbsents``; a mismatch means the rows were
    written under older settings.
    """

    def compute(
        self,
        *,
        year: int,
        month: int,
        calendar: Sequence[CalendarDay],
        deductions: Iterable[DeductionRecord],
        settings: AttendanceSettings,
        base_salary: float,
    ) -> PayrollSummary:
        statuses = [d.status for d in calendar]
        present = sum(1 for s in statuses if s in (AttendanceStatus.PRESENT, AttendanceStatus.LATE))
        late = statuses.count(AttendanceStatus.LATE)
        leave = statuses.count(AttendanceStatus.LEAVE)
        official_off = statuses.count(AttendanceStatus.OFFICIAL_OFF)
        absent = statuses.count(AttendanceStatus.ABSENT)

        paid_leaves_used = min(settings.paid_absent_days, absent)
        unpaid_absents = max(0, absent - settings.paid_absent_days)

        ledger_late = ledger_absent = manual = 0.0
        for row in deductions:
            if (row.deduction_date.year, row.deduction_date.month) != (year, month):
                continue
            if row.is_late:
                ledger_late += row.amount
            elif row.is_absent:
                ledger_absent += row.amount
            else:
                manual += row.amount

        late_amount = ledger_late if ledger_late > 0 else settings.late_deduction * late

        absent_amount = 0.0
        if unpaid_absents > 0:
            expected = settings.absent_deduction * unpaid_absents
            if ledger_absent > 0 and abs(ledger_absent - expected) < AMOUNT_EPSILON:
                absent_amount = ledger_absent
            else:
                absent_amount = expected

        total = manual + late_amount + absent_amount
        base = float(base_salary or 0)
        return PayrollSummary(
            base_salary=base,
            days_in_period=len(calendar),
            present=present,
            late=late,
            leave=leave,
            absent=absent,
            official_off=official_off,
            paid_leaves_used=paid_leaves_used,
            unpaid_absents=unpaid_absents,
            late_deduction_amount=late_amount,
            absent_deduction_amount=absent_amount,
            manual_deductions=manual,
            total_deductions=total,
            net_salary=max(0.0, base - total),
        )
