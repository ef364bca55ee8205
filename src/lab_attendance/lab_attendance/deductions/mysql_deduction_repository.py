from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_float, db_cursor, fetchall, fetchone, normalize_mysql_date
from .model import DeductionKey, DeductionRecord
from .repository import DeductionRepository


def _to_record(r: Dict[str, Any]) -> DeductionRecord:
    return DeductionRecord(
        deduction_id=int(r["deduction_id"]),
        staff_id=int(r["staff_id"]),
        deduction_date=normalize_mysql_date(r["deduction_date"]),
        amount=as_float(r["amount"]),
        reason=r.get("reason") or "",
    )


class MySQLDeductionRepository(DeductionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert(self, key: DeductionKey, *, amount: float) -> DeductionRecord:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO staff_deductions(staff_id, deduction_date, reason, amount)
                VALUES(%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE amount=VALUES(amount)
                """,
                (int(key.staff_id), key.deduction_date, key.reason, float(amount)),
            )
            return self._select_by_key(cur, key)

    def delete_by_key(self, key: DeductionKey) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM staff_deductions WHERE staff_id=%s AND deduction_date=%s AND reason=%s",
                (int(key.staff_id), key.deduction_date, key.reason),
            )
            return cur.rowcount > 0

    def delete(self, *, staff_id: int, deduction_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM staff_deductions WHERE deduction_id=%s AND staff_id=%s",
                (int(deduction_id), int(staff_id)),
            )
            return cur.rowcount > 0

    def list_for_staff(
        self,
        staff_id: int,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> Sequence[DeductionRecord]:
        clauses = ["staff_id=%s"]
        params: list[object] = [int(staff_id)]
        if start is not None:
            clauses.append("deduction_date >= %s")
            params.append(start)
        if end is not None:
            clauses.append("deduction_date <= %s")
            params.append(end)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT deduction_id, staff_id, deduction_date, amount, reason
                FROM staff_deductions
                WHERE {where}
                ORDER BY deduction_date DESC, deduction_id DESC
                """,
                tuple(params),
            )
            return [_to_record(r) for r in fetchall(cur)]

    @staticmethod
    def _select_by_key(cur, key: DeductionKey) -> Optional[DeductionRecord]:
        cur.execute(
            """
            SELECT deduction_id, staff_id, deduction_date, amount, reason
            FROM staff_deductions
            WHERE staff_id=%s AND deduction_date=%s AND reason=%s
            """,
            (int(key.staff_id), key.deduction_date, key.reason),
        )
        r = fetchone(cur)
        return _to_record(r) if r else None
