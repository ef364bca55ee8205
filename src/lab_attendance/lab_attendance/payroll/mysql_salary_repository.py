from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..core.enums import SalaryStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone
from .model import SalaryRecord
from .repository import SalaryRepository

_COLUMNS = "salary_id, staff_id, salary_month, amount, bonus, status"


def _to_record(r: Dict[str, Any]) -> SalaryRecord:
    return SalaryRecord(
        salary_id=int(r["salary_id"]),
        staff_id=int(r["staff_id"]),
        month=str(r["salary_month"]),
        amount=as_float(r["amount"]),
        bonus=as_float(r.get("bonus")),
        status=SalaryStatus(r.get("status") or SalaryStatus.PENDING.value),
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(
        self,
        *,
        staff_id: int,
        month: str,
        amount: float,
        bonus: float,
        status: SalaryStatus,
    ) -> SalaryRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff_salaries(staff_id, salary_month, amount, bonus, status)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE amount=VALUES(amount), bonus=VALUES(bonus), status=VALUES(status)
                """,
                (int(staff_id), month, float(amount), float(bonus), status.value),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM staff_salaries WHERE staff_id=%s AND salary_month=%s",
                (int(staff_id), month),
            )
            return _to_record(fetchone(cur))

    def get(self, *, staff_id: int, salary_id: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM staff_salaries WHERE salary_id=%s AND staff_id=%s",
                (int(salary_id), int(staff_id)),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def update(
        self,
        *,
        staff_id: int,
        salary_id: int,
        amount: float,
        bonus: float,
        status: SalaryStatus,
    ) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE staff_salaries
                SET amount=%s, bonus=%s, status=%s
                WHERE salary_id=%s AND staff_id=%s
                """,
                (float(amount), float(bonus), status.value, int(salary_id), int(staff_id)),
            )
            cur.execute(
                f"SELECT {_COLUMNS} FROM staff_salaries WHERE salary_id=%s AND staff_id=%s",
                (int(salary_id), int(staff_id)),
            )
            r = fetchone(cur)
            return _to_record(r) if r else None

    def delete(self, *, staff_id: int, salary_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM staff_salaries WHERE salary_id=%s AND staff_id=%s",
                (int(salary_id), int(staff_id)),
            )
            return cur.rowcount > 0

    def list_for_staff(self, staff_id: int) -> Sequence[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM staff_salaries
                WHERE staff_id=%s
                ORDER BY salary_month DESC
                """,
                (int(staff_id),),
            )
            return [_to_record(r) for r in fetchall(cur)]
