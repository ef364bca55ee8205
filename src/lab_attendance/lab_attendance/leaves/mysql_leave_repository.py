from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, normalize_mysql_date
from .model import LeaveRecord
from .repository import LeaveRepository


def _to_record(r: Dict[str, Any]) -> LeaveRecord:
    return LeaveRecord(
        leave_id=int(r["leave_id"]),
        staff_id=int(r["staff_id"]),
        leave_date=normalize_mysql_date(r["leave_date"]),
        days=as_float(r.get("days")),
        leave_type=r.get("leave_type") or "",
        reason=r.get("reason") or "",
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, staff_id: int, leave_date: date, days: float, leave_type: str, reason: str) -> LeaveRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff_leaves(staff_id, leave_date, days, leave_type, reason)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (int(staff_id), leave_date, float(days), leave_type, reason),
            )
            return LeaveRecord(
                leave_id=int(cur.lastrowid),
                staff_id=int(staff_id),
                leave_date=leave_date,
                days=float(days),
                leave_type=leave_type,
                reason=reason,
            )

    def delete(self, *, staff_id: int, leave_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM staff_leaves WHERE leave_id=%s AND staff_id=%s",
                (int(leave_id), int(staff_id)),
            )
            return cur.rowcount > 0

    def list_for_staff(
        self,
        staff_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[LeaveRecord]:
        clauses = ["staff_id=%s"]
        params: list[object] = [int(staff_id)]
        if start is not None:
            clauses.append("leave_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("leave_date <= %s")
            params.append(end)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT leave_id, staff_id, leave_date, days, leave_type, reason
                FROM staff_leaves
                WHERE {where}
                ORDER BY leave_date DESC, leave_id DESC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]
