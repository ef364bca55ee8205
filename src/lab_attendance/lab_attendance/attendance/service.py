from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence, Union

from ..common.datetime_utils import format_hhmm, minutes_of, month_bounds, now_local, to_date, to_time_key
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..deductions.ledger import DeductionLedger
from ..settings.model import AttendanceSettings
from ..settings.service import AttendanceSettingsStore
from ..staff.repository import StaffRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, DailyAttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def parse_status(value: Optional[str]) -> AttendanceStatus:
    """Case-insensitive status; blank means ``present``."""
    text = str(value or "").strip().lower()
    if not text:
        return AttendanceStatus.PRESENT
    try:
        return AttendanceStatus(text)
    except ValueError:
        allowed = ", ".join(s.value for s in AttendanceStatus)
        raise ValidationError(f"Invalid status. Expected one of: {allowed}")


def parse_optional_time(value: Optional[str], field_name: str) -> str:
    if value is None or str(value).strip() == "":
        return ""
    key = to_time_key(value)
    if not key:
        raise ValidationError(f"Invalid {field_name} time. Expected HH:MM (24-hour).")
    return key


class AttendanceRecorder:
    """Check-in, check-out and manual day entries, with deduction side effects.

    Check-in/check-out always take the time from the server clock; callers
    never pass their own time. Deduction syncing is best-effort: a failure is
    logged and the attendance write stands.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        staff: StaffRepository,
        settings: AttendanceSettingsStore,
        ledger: DeductionLedger,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._staff = staff
        self._settings = settings
        self._ledger = ledger
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def check_in(self, staff_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        self._require_staff(staff_id)
        now = now or now_local()
        today = now.date()
        time_key = format_hhmm(now)

        settings = self._settings.get()
        official_in = minutes_of(settings.clock_in_time)
        actual_in = minutes_of(time_key)
        late_minutes = 0
        if official_in is not None and actual_in is not None:
            late_minutes = max(0, actual_in - official_in)

        existing = self._attendance.get_for_staff_and_date(staff_id, today)
        strategy = self._factory.for_checkin(late_minutes=late_minutes, settings=settings, existing=existing)
        decision = strategy.decide_checkin(late_minutes=late_minutes, settings=settings, existing=existing)

        record = self._attendance.upsert_check_in(
            staff_id=staff_id,
            work_date=today,
            check_in=time_key,
            status=decision.status,
        )
        logger.info("Check-in staff=%s date=%s time=%s status=%s", staff_id, today, time_key, decision.status.value)

        if decision.computed and decision.status == AttendanceStatus.LATE and settings.late_deduction > 0:
            try:
                self._ledger.apply_late(staff_id, today, amount=settings.late_deduction)
            except Exception:
                logger.exception("Failed to record late deduction for staff=%s date=%s", staff_id, today)

        return record

    def check_out(self, staff_id: int, *, now: datetime | None = None) -> AttendanceRecord:
        self._require_staff(staff_id)
        now = now or now_local()
        today = now.date()
        time_key = format_hhmm(now)

        record = self._attendance.upsert_check_out(staff_id=staff_id, work_date=today, check_out=time_key)
        logger.info("Check-out staff=%s date=%s time=%s", staff_id, today, time_key)
        return record

    def manual_add(
        self,
        staff_id: int,
        *,
        day: Union[str, date, None] = None,
        status: Optional[str] = None,
        check_in: Optional[str] = None,
        check_out: Optional[str] = None,
        notes: Optional[str] = None,
        today: date | None = None,
    ) -> AttendanceRecord:
        work_date = to_date(day) if day else (today or now_local().date())
        check_in_key = parse_optional_time(check_in, "checkIn")
        check_out_key = parse_optional_time(check_out, "checkOut")
        requested = parse_status(status)
        self._require_staff(staff_id)

        settings = self._settings.get()
        is_official_off = settings.is_official_off(work_date)
        final_status = requested
        if is_official_off and requested == AttendanceStatus.ABSENT:
            final_status = AttendanceStatus.OFFICIAL_OFF

        record = self._attendance.upsert_record(
            staff_id=staff_id,
            work_date=work_date,
            status=final_status,
            check_in=check_in_key,
            check_out=check_out_key,
            notes=notes if isinstance(notes, str) else "",
        )
        logger.info("Manual attendance staff=%s date=%s status=%s", staff_id, work_date, final_status.value)

        try:
            self._sync_absent_deduction(staff_id, work_date, final_status, settings)
        except Exception:
            logger.exception("Failed to sync absent deduction for staff=%s date=%s", staff_id, work_date)

        return record

    def get_daily(self, day: Union[str, date, None] = None) -> Sequence[DailyAttendanceRow]:
        work_date = to_date(day) if day else now_local().date()
        return self._attendance.list_for_date(work_date)

    def _sync_absent_deduction(
        self,
        staff_id: int,
        work_date: date,
        status: AttendanceStatus,
        settings: AttendanceSettings,
    ) -> None:
        """Re-derive the day's absent deduction from what is stored now."""
        if settings.is_official_off(work_date):
            self._ledger.clear_absent(staff_id, work_date)
            return

        if status != AttendanceStatus.ABSENT or settings.absent_deduction <= 0:
            self._ledger.clear_absent(staff_id, work_date)
            return

        month_start, month_end = month_bounds(work_date.year, work_date.month)
        rows = self._attendance.list_for_staff_between(staff_id, month_start, month_end)
        absences = sum(
            1
            for r in rows
            if r.status == AttendanceStatus.ABSENT and not settings.is_official_off(r.work_date)
        )

        if absences > settings.paid_absent_days:
            self._ledger.apply_absent(staff_id, work_date, amount=settings.absent_deduction)
        else:
            self._ledger.clear_absent(staff_id, work_date)

    def _require_staff(self, staff_id: int) -> None:
        if not self._staff.get_by_id(int(staff_id)):
            raise NotFoundError("Staff not found")
