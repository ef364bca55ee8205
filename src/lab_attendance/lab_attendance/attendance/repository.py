from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, DailyAttendanceRow


class AttendanceRepository(Protocol):
    """Attendance rows, unique per (staff_id, work_date).

    Every ``upsert_*`` must be a single atomic find-and-upsert on that key.
    """

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def list_for_staff_between(self, staff_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        """Rows with ``start <= work_date <= end``, ascending by date."""

        raise NotImplementedError

    def list_for_date(self, work_date: date) -> Sequence[DailyAttendanceRow]:
        raise NotImplementedError

    def upsert_check_in(
        self,
        *,
        staff_id: int,
        work_date: date,
        check_in: str,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        """Set check-in and status; a new row starts with empty check-out and notes."""

        raise NotImplementedError

    def upsert_check_out(self, *, staff_id: int, work_date: date, check_out: str) -> AttendanceRecord:
        """Set check-out only; a new row starts as ``present`` with no check-in."""

        raise NotImplementedError

    def upsert_record(
        self,
        *,
        staff_id: int,
        work_date: date,
        status: AttendanceStatus,
        check_in: str,
        check_out: str,
        notes: str,
    ) -> AttendanceRecord:
        """Overwrite every field of the day's row."""

        raise NotImplementedError
