"""Monthly calendar reconstruction.

Turns the sparse attendance rows of one staff member into a complete
day-by-day calendar. This is the single implementation shared by the monthly
view, the CSV export and payroll.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import days_in_month
from ..core.enums import AttendanceStatus
from ..leaves.model import LeaveRecord
from ..settings.model import AttendanceSettings
from .model import AttendanceRecord, CalendarDay


def last_reconciled_day(year: int, month: int, today: date) -> int:
    """Day-of-month to reconcile up to; future days are left out.

    Returns 0 for a month that lies entirely in the future.
    """
    total = days_in_month(year, month)
    if (year, month) == (today.year, today.month):
        return min(total, today.day)
    if (year, month) > (today.year, today.month):
        return 0
    return total


def reconcile_month(
    *,
    year: int,
    month: int,
    attendance: Iterable[AttendanceRecord],
    leaves: Iterable[LeaveRecord],
    settings: AttendanceSettings,
    today: date,
    staff_id: Optional[int] = None,
) -> list[CalendarDay]:
    """Gap-filled calendar for ``year-month``, ascending by date.

    Stored rows win. A stored ``absent`` on an official off day is reported
    as ``official_off`` (storage is not touched). Missing days become
    ``leave`` when a leave record exists for them, else ``official_off`` on
    off weekdays, else ``absent``.
    """
    by_day: dict[date, AttendanceRecord] = {}
    for r in attendance:
        if staff_id is not None and r.staff_id != staff_id:
            continue
        if (r.work_date.year, r.work_date.month) == (year, month):
            by_day[r.work_date] = r

    leave_days = {
        lv.leave_date
        for lv in leaves
        if (lv.leave_date.year, lv.leave_date.month) == (year, month)
        and (staff_id is None or lv.staff_id == staff_id)
    }

    out: list[CalendarDay] = []
    for d in range(1, last_reconciled_day(year, month, today) + 1):
        day = date(year, month, d)
        is_official_off = settings.is_official_off(day)
        row = by_day.get(day)

        if row is not None:
            status = row.status
            if status == AttendanceStatus.ABSENT and is_official_off:
                status = AttendanceStatus.OFFICIAL_OFF
            out.append(CalendarDay(work_date=day, status=status, check_in=row.check_in, check_out=row.check_out))
            continue

        if day in leave_days:
            status = AttendanceStatus.LEAVE
        elif is_official_off:
            status = AttendanceStatus.OFFICIAL_OFF
        else:
            status = AttendanceStatus.ABSENT
        out.append(CalendarDay(work_date=day, status=status))

    return out
