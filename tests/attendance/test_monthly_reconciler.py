from datetime import date

from lab_attendance.attendance.model import AttendanceRecord
from lab_attendance.attendance.reconciler import last_reconciled_day, reconcile_month
from lab_attendance.core.enums import AttendanceStatus
from lab_attendance.leaves.model import LeaveRecord
from lab_attendance.settings.model import AttendanceSettings

WEEKENDS_OFF = AttendanceSettings.from_mapping({"officialDaysOff": [0, 6]})


def _row(day: int, status: AttendanceStatus, *, staff_id: int = 1, check_in: str = "") -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=day,
        staff_id=staff_id,
        work_date=date(2024, 3, day),
        status=status,
        check_in=check_in,
    )


def _by_day(calendar):
    return {d.work_date.day: d for d in calendar}


def test_last_reconciled_day():
    today = date(2024, 3, 13)

    assert last_reconciled_day(2024, 3, today) == 13
    assert last_reconciled_day(2024, 2, today) == 29
    assert last_reconciled_day(2024, 4, today) == 0


def test_current_month_stops_at_today():
    calendar = reconcile_month(
        year=2024, month=3, attendance=[], leaves=[], settings=WEEKENDS_OFF, today=date(2024, 3, 13)
    )

    assert [d.work_date.day for d in calendar] == list(range(1, 14))


def test_future_month_is_empty():
    calendar = reconcile_month(
        year=2024, month=5, attendance=[], leaves=[], settings=WEEKENDS_OFF, today=date(2024, 3, 13)
    )

    assert calendar == []


def test_gaps_are_filled_by_weekday_rules():
    calendar = reconcile_month(
        year=2024,
        month=3,
        attendance=[_row(1, AttendanceStatus.PRESENT, check_in="08:58")],
        leaves=[],
        settings=WEEKENDS_OFF,
        today=date(2024, 3, 5),
    )

    days = _by_day(calendar)
    assert days[1].status == AttendanceStatus.PRESENT
    assert days[1].check_in == "08:58"
    assert days[2].status == AttendanceStatus.OFFICIAL_OFF
    assert days[3].status == AttendanceStatus.OFFICIAL_OFF
    assert days[4].status == AttendanceStatus.ABSENT
    assert days[4].check_in == ""


def test_leave_record_beats_absent():
    leave = LeaveRecord(leave_id=1, staff_id=1, leave_date=date(2024, 3, 4), days=1, leave_type="Sick")

    calendar = reconcile_month(
        year=2024, month=3, attendance=[], leaves=[leave], settings=WEEKENDS_OFF, today=date(2024, 3, 5)
    )

    assert _by_day(calendar)[4].status == AttendanceStatus.LEAVE
    assert _by_day(calendar)[5].status == AttendanceStatus.ABSENT


def test_stored_row_wins_over_leave():
    leave = LeaveRecord(leave_id=1, staff_id=1, leave_date=date(2024, 3, 4))

    calendar = reconcile_month(
        year=2024,
        month=3,
        attendance=[_row(4, AttendanceStatus.PRESENT)],
        leaves=[leave],
        settings=WEEKENDS_OFF,
        today=date(2024, 3, 5),
    )

    assert _by_day(calendar)[4].status == AttendanceStatus.PRESENT


def test_stored_absent_on_off_day_reads_as_official_off():
    calendar = reconcile_month(
        year=2024,
        month=3,
        attendance=[_row(2, AttendanceStatus.ABSENT)],
        leaves=[],
        settings=WEEKENDS_OFF,
        today=date(2024, 3, 5),
    )

    assert _by_day(calendar)[2].status == AttendanceStatus.OFFICIAL_OFF


def test_other_staff_and_other_months_are_ignored():
    other_month = AttendanceRecord(
        attendance_id=50, staff_id=1, work_date=date(2024, 2, 29), status=AttendanceStatus.PRESENT
    )

    calendar = reconcile_month(
        year=2024,
        month=3,
        attendance=[_row(1, AttendanceStatus.PRESENT, staff_id=2), other_month],
        leaves=[],
        settings=AttendanceSettings.defaults(),
        today=date(2024, 3, 1),
        staff_id=1,
    )

    assert [d.status for d in calendar] == [AttendanceStatus.ABSENT]


def test_no_days_off_configured_means_every_gap_is_absent():
    calendar = reconcile_month(
        year=2024,
        month=2,
        attendance=[],
        leaves=[],
        settings=AttendanceSettings.defaults(),
        today=date(2024, 3, 13),
    )

    assert len(calendar) == 29
    assert {d.status for d in calendar} == {AttendanceStatus.ABSENT}
