from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class LeaveRecord:
    leave_id: int
    staff_id: int
    leave_date: date
    days: float = 1.0
    leave_type: str = ""
    reason: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.leave_id,
            "staffId": self.staff_id,
            "date": self.leave_date.strftime("%Y-%m-%d"),
            "days": self.days,
            "type": self.leave_type,
            "reason": self.reason,
        }
