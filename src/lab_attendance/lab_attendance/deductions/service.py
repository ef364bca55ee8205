from __future__ import annotations

from datetime import date
from typing import Any, Sequence, Union

from ..common.datetime_utils import now_local, to_date
from ..common.validators import require_amount
from ..core.exceptions import NotFoundError, ValidationError
from ..staff.repository import StaffRepository
from .model import DeductionKey, DeductionRecord, is_managed_reason
from .repository import DeductionRepository


class DeductionService:
    """Manual deductions authored by a payroll operator."""

    def __init__(self, deductions: DeductionRepository, staff: StaffRepository):
        self._deductions = deductions
        self._staff = staff

    def add(
        self,
        staff_id: int,
        *,
        amount: Any,
        reason: str = "",
        day: Union[str, date, None] = None,
    ) -> DeductionRecord:
        self._require_staff(staff_id)
        value = require_amount(amount, "amount")
        reason = (reason or "").strip()
        if is_managed_reason(reason):
            raise ValidationError(f"'{reason}' is managed by attendance and cannot be added manually")
        deduction_date = to_date(day) if day else now_local().date()

        # Same (staff, date, reason) updates the existing entry.
        return self._deductions.upsert(
            DeductionKey(staff_id=int(staff_id), deduction_date=deduction_date, reason=reason),
            amount=value,
        )

    def list_for_staff(self, staff_id: int) -> Sequence[DeductionRecord]:
        self._require_staff(staff_id)
        return self._deductions.list_for_staff(int(staff_id))

    def delete(self, staff_id: int, deduction_id: int) -> None:
        if not self._deductions.delete(staff_id=int(staff_id), deduction_id=int(deduction_id)):
            raise NotFoundError("Deduction not found")

    def _require_staff(self, staff_id: int) -> None:
        if not self._staff.get_by_id(int(staff_id)):
            raise NotFoundError("Staff not found")
