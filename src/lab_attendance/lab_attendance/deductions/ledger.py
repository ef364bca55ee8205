from __future__ import annotations

import logging
from datetime import date

from ..core.constants import ABSENT_DEDUCTION_REASON, LATE_DEDUCTION_REASON, MANAGED_DEDUCTION_REASONS
from .model import DeductionKey, DeductionRecord
from .repository import DeductionRepository

logger = logging.getLogger(__name__)


class DeductionLedger:
    """Idempotent writes of the machine-managed deduction entries.

    Only ``"Late deduction"`` and ``"Absent deduction"`` go through here;
    entries with any other reason belong to the payroll operator and are
    never touched.
    """

    def __init__(self, deductions: DeductionRepository):
        self._deductions = deductions

    def apply(self, staff_id: int, day: date, reason: str, *, amount: float) -> DeductionRecord:
        key = self._key(staff_id, day, reason)
        record = self._deductions.upsert(key, amount=float(amount))
        logger.info("Deduction applied: staff=%s date=%s reason=%r amount=%s", staff_id, day, reason, amount)
        return record

    def clear(self, staff_id: int, day: date, reason: str) -> bool:
        removed = self._deductions.delete_by_key(self._key(staff_id, day, reason))
        if removed:
            logger.info("Deduction cleared: staff=%s date=%s reason=%r", staff_id, day, reason)
        return removed

    def apply_late(self, staff_id: int, day: date, *, amount: float) -> DeductionRecord:
        return self.apply(staff_id, day, LATE_DEDUCTION_REASON, amount=amount)

    def apply_absent(self, staff_id: int, day: date, *, amount: float) -> DeductionRecord:
        return self.apply(staff_id, day, ABSENT_DEDUCTION_REASON, amount=amount)

    def clear_absent(self, staff_id: int, day: date) -> bool:
        return self.clear(staff_id, day, ABSENT_DEDUCTION_REASON)

    @staticmethod
    def _key(staff_id: int, day: date, reason: str) -> DeductionKey:
        if reason not in MANAGED_DEDUCTION_REASONS:
            raise ValueError(f"Not a managed deduction reason: {reason!r}")
        return DeductionKey(staff_id=int(staff_id), deduction_date=day, reason=reason)
