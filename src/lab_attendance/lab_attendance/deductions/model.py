from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.constants import ABSENT_DEDUCTION_REASON, LATE_DEDUCTION_REASON, MANAGED_DEDUCTION_REASONS


def normalize_reason(reason: str) -> str:
    return (reason or "").strip().lower()


def is_managed_reason(reason: str) -> bool:
    return normalize_reason(reason) in {r.lower() for r in MANAGED_DEDUCTION_REASONS}


@dataclass(frozen=True)
class DeductionKey:
    """Idempotency key of a ledger entry."""

    staff_id: int
    deduction_date: date
    reason: str


@dataclass(frozen=True)
class DeductionRecord:
    deduction_id: int
    staff_id: int
    deduction_date: date
    amount: float
    reason: str = ""

    @property
    def is_late(self) -> bool:
        return normalize_reason(self.reason) == LATE_DEDUCTION_REASON.lower()

    @property
    def is_absent(self) -> bool:
        return normalize_reason(self.reason) == ABSENT_DEDUCTION_REASON.lower()

    def to_dict(self) -> dict:
        return {
            "id": self.deduction_id,
            "staffId": self.staff_id,
            "date": self.deduction_date.strftime("%Y-%m-%d"),
            "amount": self.amount,
            "reason": self.reason,
        }
