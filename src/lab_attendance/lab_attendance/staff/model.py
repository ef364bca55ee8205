from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class StaffMember:
    """Read-only view of a staff member (owned by staff administration)."""

    staff_id: int
    name: str
    position: str = ""
    salary: float = 0.0
    join_date: Optional[date] = None
    status: str = "active"
    staff_code: Optional[str] = None

    @property
    def label(self) -> str:
        if self.staff_code:
            return f"{self.staff_code} - {self.name}"
        return self.name
