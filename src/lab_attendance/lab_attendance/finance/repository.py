from __future__ import annotations

from typing import Protocol

from .model import FinanceEntry


class FinanceLedger(Protocol):
    """External finance ledger; writes are idempotent per reference."""

    def upsert_by_reference(self, entry: FinanceEntry) -> None:
        raise NotImplementedError
