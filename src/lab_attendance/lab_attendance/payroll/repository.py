from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import SalaryStatus
from .model import SalaryRecord


class SalaryRepository(Protocol):
    """Salary rows, unique per (staff_id, month)."""

    def upsert(
        self,
        *,
        staff_id: int,
        month: str,
        amount: float,
        bonus: float,
        status: SalaryStatus,
    ) -> SalaryRecord:
        raise NotImplementedError

    def get(self, *, staff_id: int, salary_id: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def update(
        self,
        *,
        staff_id: int,
        salary_id: int,
        amount: float,
        bonus: float,
        status: SalaryStatus,
    ) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def delete(self, *, staff_id: int, salary_id: int) -> bool:
        raise NotImplementedError

    def list_for_staff(self, staff_id: int) -> Sequence[SalaryRecord]:
        """Newest month first."""

        raise NotImplementedError
