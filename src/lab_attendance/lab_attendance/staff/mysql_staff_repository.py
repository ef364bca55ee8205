from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchone, normalize_mysql_date
from .model import StaffMember
from .repository import StaffRepository


class MySQLStaffRepository(StaffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT staff_id, staff_code, name, position, salary, join_date, status
                FROM staff
                WHERE staff_id=%s
                """,
                (int(staff_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return StaffMember(
                staff_id=int(r["staff_id"]),
                name=r["name"],
                position=r.get("position") or "",
                salary=as_float(r.get("salary")),
                join_date=normalize_mysql_date(r["join_date"]) if r.get("join_date") else None,
                status=r.get("status") or "active",
                staff_code=r.get("staff_code"),
            )
