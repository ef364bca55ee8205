from datetime import date

from lab_attendance.attendance.model import CalendarDay
from lab_attendance.core.constants import ABSENT_DEDUCTION_REASON, LATE_DEDUCTION_REASON
from lab_attendance.core.enums import AttendanceStatus
from lab_attendance.deductions.model import DeductionRecord
from lab_attendance.payroll.calculator.standard_calculator import StandardPayrollCalculator
from lab_attendance.settings.model import AttendanceSettings

P = AttendanceStatus.PRESENT
L = AttendanceStatus.LATE
A = AttendanceStatus.ABSENT
LV = AttendanceStatus.LEAVE
OFF = AttendanceStatus.OFFICIAL_OFF


def _calendar(*statuses):
    return [CalendarDay(work_date=date(2024, 3, i + 1), status=s) for i, s in enumerate(statuses)]


def _deduction(deduction_id: int, day: int, amount: float, reason: str, *, month: int = 3) -> DeductionRecord:
    return DeductionRecord(deduction_id, 1, date(2024, month, day), amount, reason)


SETTINGS = AttendanceSettings.from_mapping(
    {"paidAbsentDays": 1, "absentDeduction": 500, "lateDeduction": 100, "officialDaysOff": [0, 6]}
)


def test_counts_and_net_salary():
    summary = StandardPayrollCalculator().compute(
        year=2024,
        month=3,
        calendar=_calendar(P, OFF, OFF, L, A, A, LV),
        deductions=[
            _deduction(1, 4, 100, LATE_DEDUCTION_REASON),
            _deduction(2, 6, 500, ABSENT_DEDUCTION_REASON),
            _deduction(3, 5, 250, "Broken pipette"),
        ],
        settings=SETTINGS,
        base_salary=30000,
    )

    assert summary.days_in_period == 7
    assert summary.present == 2
    assert summary.late == 1
    assert summary.absent == 2
    assert summary.leave == 1
    assert summary.official_off == 2
    assert summary.paid_leaves_used == 1
    assert summary.unpaid_absents == 1
    assert summary.late_deduction_amount == 100
    assert summary.absent_deduction_amount == 500
    assert summary.manual_deductions == 250
    assert summary.total_deductions == 850
    assert summary.net_salary == 29150


def test_late_amount_falls_back_to_settings_without_ledger_rows():
    summary = StandardPayrollCalculator().compute(
        year=2024,
        month=3,
        calendar=_calendar(L, L, P),
        deductions=[],
        settings=SETTINGS,
        base_salary=10000,
    )

    assert summary.late_deduction_amount == 200


def test_stale_absent_ledger_is_replaced_by_settings_amount():
    summary = StandardPayrollCalculator().compute(
        year=2024,
        month=3,
        calendar=_calendar(A, A, A),
        deductions=[
            _deduction(1, 2, 300, ABSENT_DEDUCTION_REASON),
            _deduction(2, 3, 300, ABSENT_DEDUCTION_REASON),
        ],
        settings=SETTINGS,
        base_salary=10000,
    )

    assert summary.unpaid_absents == 2
    assert summary.absent_deduction_amount == 1000


def test_absent_ledger_within_tolerance_is_used():
    summary = StandardPayrollCalculator().compute(
        year=2024,
        month=3,
        calendar=_calendar(A, A),
        deductions=[_deduction(1, 2, 500.004, ABSENT_DEDUCTION_REASON)],
        settings=SETTINGS,
        base_salary=10000,
    )

    assert summary.absent_deduction_amount == 500.004


def test_no_unpaid_absence_means_no_absent_amount():
    summary = StandardPayrollCalculator().compute(
        year=2024,
        month=3,
        calendar=_calendar(A, P),
        deductions=[_deduction(1, 1, 500, ABSENT_DEDUCTION_REASON)],
        settings=SETTINGS,
        base_salary=10000,
    )

    assert summary.absent_deduction_amount == 0
    assert summary.net_salary == 10000


def test_deductions_outside_month_are_ignored():
    summary = StandardPayrollCalculator().compute(
        year=2024,
        month=3,
        calendar=_calendar(P),
        deductions=[_deduction(1, 28, 999, "Uniform", month=2)],
        settings=SETTINGS,
        base_salary=10000,
    )

    assert summary.manual_deductions == 0


def test_net_salary_never_negative():
    summary = StandardPayrollCalculator().compute(
        year=2024,
        month=3,
        calendar=_calendar(P),
        deductions=[_deduction(1, 1, 5000, "Damaged analyser")],
        settings=SETTINGS,
        base_salary=1000,
    )

    assert summary.total_deductions == 5000
    assert summary.net_salary == 0
