from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import AttendanceRecord, DailyAttendanceRow
from .repository import AttendanceRepository

_COLUMNS = "attendance_id, staff_id, work_date, status, check_in, check_out, notes"


def _to_record(r: Dict[str, Any]) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["attendance_id"]),
        staff_id=int(r["staff_id"]),
        work_date=normalize_mysql_date(r["work_date"]),
        status=AttendanceStatus(str(r["status"]).strip().lower()),
        check_in=r.get("check_in") or "",
        check_out=r.get("check_out") or "",
        notes=r.get("notes") or "",
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_one(cur, staff_id, work_date)

    def list_for_staff_between(self, staff_id: int, start: date, end: date) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE staff_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (int(staff_id), start, end),
            )
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_date(self, work_date: date) -> Sequence[DailyAttendanceRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    ar.attendance_id, ar.staff_id, ar.work_date, ar.status,
                    ar.check_in, ar.check_out, ar.notes,
                    s.name AS staff_name, s.position AS staff_position
                FROM attendance_records ar
                JOIN staff s ON s.staff_id = ar.staff_id
                WHERE ar.work_date=%s
                ORDER BY ar.created_at DESC, ar.attendance_id DESC
                """,
                (work_date,),
            )
            return [
                DailyAttendanceRow(
                    record=_to_record(r),
                    staff_name=r.get("staff_name") or "",
                    staff_position=r.get("staff_position") or "",
                )
                for r in fetchall(cur)
            ]

    def upsert_check_in(
        self,
        *,
        staff_id: int,
        work_date: date,
        check_in: str,
        status: AttendanceStatus,
    ) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(staff_id, work_date, status, check_in, check_out, notes)
                VALUES(%s,%s,%s,%s,'','')
                ON DUPLICATE KEY UPDATE check_in=VALUES(check_in), status=VALUES(status)
                """,
                (int(staff_id), work_date, status.value, check_in),
            )
            return self._select_one(cur, staff_id, work_date)

    def upsert_check_out(self, *, staff_id: int, work_date: date, check_out: str) -> AttendanceRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(staff_id, work_date, status, check_in, check_out, notes)
                VALUES(%s,%s,%s,'',%s,'')
                ON DUPLICATE KEY UPDATE check_out=VALUES(check_out)
                """,
                (int(staff_id), work_date, AttendanceStatus.PRESENT.value, check_out),
            )
            return self._select_one(cur, staff_id, work_date)

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
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(staff_id, work_date, status, check_in, check_out, notes)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    status=VALUES(status), check_in=VALUES(check_in),
                    check_out=VALUES(check_out), notes=VALUES(notes)
                """,
                (int(staff_id), work_date, status.value, check_in, check_out, notes),
            )
            return self._select_one(cur, staff_id, work_date)

    @staticmethod
    def _select_one(cur, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        cur.execute(
            f"""
            SELECT {_COLUMNS}
            FROM attendance_records
            WHERE staff_id=%s AND work_date=%s
            """,
            (int(staff_id), work_date),
        )
        r = fetchone(cur)
        return _to_record(r) if r else None
