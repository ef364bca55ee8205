from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import DeductionKey, DeductionRecord


class DeductionRepository(Protocol):
    """Deduction rows, unique per (staff_id, deduction_date, reason)."""

    def upsert(self, key: DeductionKey, *, amount: float) -> DeductionRecord:
        """Create the row for ``key`` or overwrite its amount (atomic)."""

        raise NotImplementedError

    def delete_by_key(self, key: DeductionKey) -> bool:
        raise NotImplementedError

    def delete(self, *, staff_id: int, deduction_id: int) -> bool:
        raise NotImplementedError

    def list_for_staff(
        self,
        staff_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[DeductionRecord]:
        """Newest first, optionally restricted to ``start <= date <= end``."""

        raise NotImplementedError
