from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..attendance.model import CalendarDay
from ..core.enums import SalaryStatus
from ..staff.model import StaffMember


@dataclass(frozen=True)
class PayrollSummary:
    base_salary: float
    days_in_period: int
    present: int
    late: int
    leave: int
    absent: int
    official_off: int
    paid_leaves_used: int
    unpaid_absents: int
    late_deduction_amount: float
    absent_deduction_amount: float
    manual_deductions: float
    total_deductions: float
    net_salary: float

    def to_dict(self) -> dict:
        return {
            "baseSalary": self.base_salary,
            "daysInPeriod": self.days_in_period,
            "present": self.present,
            "late": self.late,
            "leave": self.leave,
            "absent": self.absent,
            "officialOff": self.official_off,
            "paidLeavesUsed": self.paid_leaves_used,
            "unpaidAbsents": self.unpaid_absents,
            "lateDeduction": self.late_deduction_amount,
            "absentDeduction": self.absent_deduction_amount,
            "manualDeductions": self.manual_deductions,
            "totalDeductions": self.total_deductions,
            "netSalary": self.net_salary,
        }


@dataclass(frozen=True)
class MonthlyReport:
    staff: StaffMember
    month: str
    calendar: list[CalendarDay] = field(default_factory=list)
    summary: Optional[PayrollSummary] = None
    before_join: bool = False

    def to_dict(self) -> dict:
        return {
            "staffId": self.staff.staff_id,
            "staffName": self.staff.name,
            "month": self.month,
            "beforeJoinMonth": self.before_join,
            "days": [d.to_dict() for d in self.calendar],
            "summary": self.summary.to_dict() if self.summary else None,
        }


@dataclass(frozen=True)
class SalaryRecord:
    salary_id: int
    staff_id: int
    month: str
    amount: float
    bonus: float = 0.0
    status: SalaryStatus = SalaryStatus.PENDING

    @property
    def total(self) -> float:
        return self.amount + self.bonus

    def to_dict(self) -> dict:
        return {
            "id": self.salary_id,
            "staffId": self.staff_id,
            "month": self.month,
            "amount": self.amount,
            "bonus": self.bonus,
            "status": self.status.value,
        }
