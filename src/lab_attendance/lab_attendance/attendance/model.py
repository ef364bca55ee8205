from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One staff member's attendance for one calendar day.

    ``check_in`` / ``check_out`` are ``HH:MM`` strings, ``""`` when unset.
    """

    attendance_id: int
    staff_id: int
    work_date: date
    status: AttendanceStatus
    check_in: str = ""
    check_out: str = ""
    notes: str = ""

    @property
    def date_key(self) -> str:
        return self.work_date.strftime("%Y-%m-%d")

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "staffId": self.staff_id,
            "date": self.date_key,
            "status": self.status.value,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class DailyAttendanceRow:
    """Read-model for the daily sheet (record joined with staff name)."""

    record: AttendanceRecord
    staff_name: str
    staff_position: str = ""

    def to_dict(self) -> dict:
        out = self.record.to_dict()
        out["staffName"] = self.staff_name
        out["staffPosition"] = self.staff_position
        return out


@dataclass(frozen=True)
class CalendarDay:
    """One reconciled day of a monthly calendar."""

    work_date: date
    status: AttendanceStatus
    check_in: str = ""
    check_out: str = ""

    @property
    def date_key(self) -> str:
        return self.work_date.strftime("%Y-%m-%d")

    def to_dict(self) -> dict:
        return {
            "date": self.date_key,
            "status": self.status.value,
            "checkIn": self.check_in,
            "checkOut": self.check_out,
        }
