from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor
from .model import FinanceEntry
from .repository import FinanceLedger


class MySQLFinanceLedger(FinanceLedger):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def upsert_by_reference(self, entry: FinanceEntry) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO finance_records(
                    record_date, amount, category, description, department, record_type, recorded_by, reference
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    record_date=VALUES(record_date), amount=VALUES(amount),
                    description=VALUES(description), recorded_by=VALUES(recorded_by)
                """,
                (
                    entry.record_date,
                    float(entry.amount),
                    entry.category,
                    entry.description,
                    entry.department,
                    entry.record_type,
                    entry.recorded_by,
                    entry.reference,
                ),
            )
