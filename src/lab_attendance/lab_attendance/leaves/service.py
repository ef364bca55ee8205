from __future__ import annotations

from datetime import date
from typing import Any, Sequence, Union

from ..common.datetime_utils import now_local, to_date
from ..common.validators import require_amount
from ..core.exceptions import NotFoundError
from ..staff.repository import StaffRepository
from .model import LeaveRecord
from .repository import LeaveRepository


class LeaveService:
    def __init__(self, leaves: LeaveRepository, staff: StaffRepository):
        self._leaves = leaves
        self._staff = staff

    def add(
        self,
        staff_id: int,
        *,
        day: Union[str, date, None] = None,
        days: Any = None,
        leave_type: str = "",
        reason: str = "",
    ) -> LeaveRecord:
        leave_date = to_date(day) if day else now_local().date()
        day_count = require_amount(days, "days", default=1)
        if not self._staff.get_by_id(int(staff_id)):
            raise NotFoundError("Staff not found")

        return self._leaves.create(
            staff_id=int(staff_id),
            leave_date=leave_date,
            days=day_count,
            leave_type=str(leave_type or "").strip(),
            reason=str(reason or "").strip(),
        )

    def list_for_staff(self, staff_id: int) -> Sequence[LeaveRecord]:
        if not self._staff.get_by_id(int(staff_id)):
            raise NotFoundError("Staff not found")
        return self._leaves.list_for_staff(int(staff_id))

    def delete(self, staff_id: int, leave_id: int) -> None:
        if not self._leaves.delete(staff_id=int(staff_id), leave_id=int(leave_id)):
            raise NotFoundError("Leave not found")
