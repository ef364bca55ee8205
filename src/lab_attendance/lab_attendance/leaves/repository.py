from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import LeaveRecord


class LeaveRepository(Protocol):
    def create(self, *, staff_id: int, leave_date: date, days: float, leave_type: str, reason: str) -> LeaveRecord:
        raise NotImplementedError

    def delete(self, *, staff_id: int, leave_id: int) -> bool:
        raise NotImplementedError

    def list_for_staff(
        self,
        staff_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[LeaveRecord]:
        """Newest first, optionally restricted to ``start <= date <= end``."""

        raise NotImplementedError
