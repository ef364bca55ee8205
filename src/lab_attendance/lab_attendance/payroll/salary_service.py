from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import month_key, parse_month
from ..common.validators import require_amount
from ..core.constants import DEFAULT_FINANCE_DEPARTMENT, EXPENSE_TYPE, SALARY_EXPENSE_CATEGORY
from ..core.enums import SalaryStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..finance.model import FinanceEntry, salary_reference
from ..finance.repository import FinanceLedger
from ..staff.model import StaffMember
from ..staff.repository import StaffRepository
from .model import SalaryRecord
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


def parse_salary_status(value: Optional[str]) -> SalaryStatus:
    text = str(value or "").strip().lower()
    if not text:
        return SalaryStatus.PENDING
    try:
        return SalaryStatus(text)
    except ValueError:
        raise ValidationError("status must be 'pending' or 'paid'")


class SalaryService:
    """Salary records per (staff, month), mirrored into the finance ledger."""

    def __init__(
        self,
        salaries: SalaryRepository,
        staff: StaffRepository,
        finance: FinanceLedger,
        *,
        department: str = DEFAULT_FINANCE_DEPARTMENT,
    ):
        self._salaries = salaries
        self._staff = staff
        self._finance = finance
        self._department = department

    def add(
        self,
        staff_id: int,
        *,
        month: str,
        amount: Any,
        bonus: Any = None,
        status: Optional[str] = None,
        recorded_by: str = "admin",
    ) -> SalaryRecord:
        year, mon = parse_month(month)
        value = require_amount(amount, "amount")
        bonus_value = require_amount(bonus, "bonus", default=0)
        salary_status = parse_salary_status(status)
        staff = self._require_staff(staff_id)

        record = self._salaries.upsert(
            staff_id=staff.staff_id,
            month=month_key(year, mon),
            amount=value,
            bonus=bonus_value,
            status=salary_status,
        )
        self._mirror_to_finance(staff, record, recorded_by=recorded_by)
        return record

    def update(
        self,
        staff_id: int,
        salary_id: int,
        *,
        amount: Any = None,
        bonus: Any = None,
        status: Optional[str] = None,
        recorded_by: str = "admin",
    ) -> SalaryRecord:
        current = self._salaries.get(staff_id=int(staff_id), salary_id=int(salary_id))
        if not current:
            raise NotFoundError("Salary record not found")

        new_amount = require_amount(amount, "amount") if amount is not None else current.amount
        new_bonus = require_amount(bonus, "bonus") if bonus is not None else current.bonus
        new_status = parse_salary_status(status) if status is not None else current.status

        record = self._salaries.update(
            staff_id=int(staff_id),
            salary_id=int(salary_id),
            amount=new_amount,
            bonus=new_bonus,
            status=new_status,
        )
        if not record:
            raise NotFoundError("Salary record not found")

        staff = self._staff.get_by_id(int(staff_id))
        if staff:
            self._mirror_to_finance(staff, record, recorded_by=recorded_by)
        return record

    def delete(self, staff_id: int, salary_id: int) -> None:
        if not self._salaries.delete(staff_id=int(staff_id), salary_id=int(salary_id)):
            raise NotFoundError("Salary record not found")

    def list_for_staff(self, staff_id: int) -> Sequence[SalaryRecord]:
        self._require_staff(staff_id)
        return self._salaries.list_for_staff(int(staff_id))

    def _mirror_to_finance(self, staff: StaffMember, record: SalaryRecord, *, recorded_by: str) -> None:
        """Best-effort: the salary write stands even if the ledger write fails."""
        year, mon = parse_month(record.month)
        entry = FinanceEntry(
            reference=salary_reference(staff.staff_id, record.month),
            record_date=date(year, mon, 1),
            amount=record.total,
            category=SALARY_EXPENSE_CATEGORY,
            description=f"Salary for {staff.label or 'staff'} ({record.month})",
            department=self._department,
            record_type=EXPENSE_TYPE,
            recorded_by=recorded_by,
        )
        try:
            self._finance.upsert_by_reference(entry)
        except Exception:
            logger.exception("Failed to record salary finance expense %s", entry.reference)

    def _require_staff(self, staff_id: int) -> StaffMember:
        staff = self._staff.get_by_id(int(staff_id))
        if not staff:
            raise NotFoundError("Staff not found")
        return staff
