from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FinanceEntry:
    """A finance ledger line; ``reference`` is its stable idempotency key."""

    reference: str
    record_date: date
    amount: float
    category: str
    description: str
    department: str
    record_type: str
    recorded_by: str = ""


def salary_reference(staff_id: int, month: str) -> str:
    return f"SALARY:{staff_id}:{month}"
