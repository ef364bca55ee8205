from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime
from types import SimpleNamespace
from typing import Optional

import pytest

from lab_attendance.attendance.model import AttendanceRecord, DailyAttendanceRow
from lab_attendance.container import assemble
from lab_attendance.core.enums import AttendanceStatus
from lab_attendance.deductions.model import DeductionKey, DeductionRecord
from lab_attendance.finance.model import FinanceEntry
from lab_attendance.leaves.model import LeaveRecord
from lab_attendance.payroll.model import SalaryRecord
from lab_attendance.staff.model import StaffMember


class InMemoryStaff:
    def __init__(self, *members: StaffMember):
        self.by_id = {m.staff_id: m for m in members}

    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        return self.by_id.get(staff_id)


class InMemorySettings:
    def __init__(self, initial: Optional[dict] = None):
        self.docs: dict[str, dict] = {}
        if initial is not None:
            self.docs["attendance"] = dict(initial)

    def get_value(self, key: str) -> Optional[dict]:
        return self.docs.get(key)

    def save_value(self, key: str, value: dict) -> None:
        self.docs[key] = dict(value)


class InMemoryAttendance:
    def __init__(self, staff: InMemoryStaff):
        self._staff = staff
        self.by_key: dict[tuple[int, date], AttendanceRecord] = {}
        self._id = 0

    def get_for_staff_and_date(self, staff_id: int, work_date: date) -> Optional[AttendanceRecord]:
        return self.by_key.get((staff_id, work_date))

    def list_for_staff_between(self, staff_id: int, start: date, end: date):
        rows = [r for (sid, d), r in self.by_key.items() if sid == staff_id and start <= d <= end]
        return sorted(rows, key=lambda r: r.work_date)

    def list_for_date(self, work_date: date):
        rows = [r for (_, d), r in self.by_key.items() if d == work_date]
        rows.sort(key=lambda r: r.attendance_id, reverse=True)
        out = []
        for r in rows:
            member = self._staff.get_by_id(r.staff_id)
            out.append(DailyAttendanceRow(record=r, staff_name=member.name, staff_position=member.position))
        return out

    def _upsert(self, staff_id: int, work_date: date, *, on_insert: dict, on_update: dict) -> AttendanceRecord:
        current = self.by_key.get((staff_id, work_date))
        if current is None:
            self._id += 1
            current = AttendanceRecord(
                attendance_id=self._id,
                staff_id=staff_id,
                work_date=work_date,
                status=AttendanceStatus.PRESENT,
            )
            current = replace(current, **on_insert)
        rec = replace(current, **on_update)
        self.by_key[(staff_id, work_date)] = rec
        return rec

    def upsert_check_in(self, *, staff_id, work_date, check_in, status):
        return self._upsert(staff_id, work_date, on_insert={}, on_update={"check_in": check_in, "status": status})

    def upsert_check_out(self, *, staff_id, work_date, check_out):
        return self._upsert(staff_id, work_date, on_insert={"status": AttendanceStatus.PRESENT}, on_update={"check_out": check_out})

    def upsert_record(self, *, staff_id, work_date, status, check_in, check_out, notes):
        return self._upsert(
            staff_id,
            work_date,
            on_insert={},
            on_update={"status": status, "check_in": check_in, "check_out": check_out, "notes": notes},
        )


class InMemoryLeaves:
    def __init__(self):
        self.rows: dict[int, LeaveRecord] = {}
        self._id = 0

    def create(self, *, staff_id, leave_date, days, leave_type, reason) -> LeaveRecord:
        self._id += 1
        rec = LeaveRecord(self._id, staff_id, leave_date, days, leave_type, reason)
        self.rows[self._id] = rec
        return rec

    def delete(self, *, staff_id, leave_id) -> bool:
        rec = self.rows.get(leave_id)
        if not rec or rec.staff_id != staff_id:
            return False
        del self.rows[leave_id]
        return True

    def list_for_staff(self, staff_id, *, start=None, end=None):
        rows = [
            r
            for r in self.rows.values()
            if r.staff_id == staff_id
            and (start is None or r.leave_date >= start)
            and (end is None or r.leave_date <= end)
        ]
        return sorted(rows, key=lambda r: (r.leave_date, r.leave_id), reverse=True)


class InMemoryDeductions:
    def __init__(self):
        self.by_key: dict[DeductionKey, DeductionRecord] = {}
        self._id = 0

    def upsert(self, key: DeductionKey, *, amount: float) -> DeductionRecord:
        current = self.by_key.get(key)
        if current is None:
            self._id += 1
            current = DeductionRecord(self._id, key.staff_id, key.deduction_date, amount, key.reason)
        rec = replace(current, amount=amount)
        self.by_key[key] = rec
        return rec

    def delete_by_key(self, key: DeductionKey) -> bool:
        return self.by_key.pop(key, None) is not None

    def delete(self, *, staff_id, deduction_id) -> bool:
        for key, rec in list(self.by_key.items()):
            if rec.deduction_id == deduction_id and rec.staff_id == staff_id:
                del self.by_key[key]
                return True
        return False

    def list_for_staff(self, staff_id, *, start=None, end=None):
        rows = [
            r
            for r in self.by_key.values()
            if r.staff_id == staff_id
            and (start is None or r.deduction_date >= start)
            and (end is None or r.deduction_date <= end)
        ]
        return sorted(rows, key=lambda r: (r.deduction_date, r.deduction_id), reverse=True)

    def with_reason(self, reason: str):
        return [r for r in self.by_key.values() if r.reason == reason]


class InMemorySalaries:
    def __init__(self):
        self.rows: dict[int, SalaryRecord] = {}
        self._id = 0

    def upsert(self, *, staff_id, month, amount, bonus, status) -> SalaryRecord:
        for rec in self.rows.values():
            if rec.staff_id == staff_id and rec.month == month:
                updated = replace(rec, amount=amount, bonus=bonus, status=status)
                self.rows[rec.salary_id] = updated
                return updated
        self._id += 1
        rec = SalaryRecord(self._id, staff_id, month, amount, bonus, status)
        self.rows[self._id] = rec
        return rec

    def get(self, *, staff_id, salary_id):
        rec = self.rows.get(salary_id)
        return rec if rec and rec.staff_id == staff_id else None

    def update(self, *, staff_id, salary_id, amount, bonus, status):
        rec = self.get(staff_id=staff_id, salary_id=salary_id)
        if not rec:
            return None
        updated = replace(rec, amount=amount, bonus=bonus, status=status)
        self.rows[salary_id] = updated
        return updated

    def delete(self, *, staff_id, salary_id) -> bool:
        if not self.get(staff_id=staff_id, salary_id=salary_id):
            return False
        del self.rows[salary_id]
        return True

    def list_for_staff(self, staff_id):
        return sorted((r for r in self.rows.values() if r.staff_id == staff_id), key=lambda r: r.month, reverse=True)


class InMemoryFinance:
    def __init__(self):
        self.by_reference: dict[str, FinanceEntry] = {}

    def upsert_by_reference(self, entry: FinanceEntry) -> None:
        self.by_reference[entry.reference] = entry


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday 13 March 2024
    return datetime(2024, 3, 13, 8, 55, 0)


@pytest.fixture
def staff_member() -> StaffMember:
    return StaffMember(
        staff_id=1,
        name="Ayesha Khan",
        position="Lab Technician",
        salary=30000.0,
        join_date=date(2023, 6, 12),
        staff_code="LS1",
    )


@pytest.fixture
def repos(staff_member):
    staff = InMemoryStaff(
        staff_member,
        StaffMember(staff_id=2, name="Bilal Ahmed", position="Phlebotomist", salary=25000.0, join_date=date(2024, 3, 4)),
    )
    return SimpleNamespace(
        staff=staff,
        settings=InMemorySettings(),
        attendance=InMemoryAttendance(staff),
        leaves=InMemoryLeaves(),
        deductions=InMemoryDeductions(),
        salaries=InMemorySalaries(),
        finance=InMemoryFinance(),
    )


@pytest.fixture
def container(repos):
    return assemble(
        staff_repo=repos.staff,
        settings_repo=repos.settings,
        attendance_repo=repos.attendance,
        leaves_repo=repos.leaves,
        deductions_repo=repos.deductions,
        salaries_repo=repos.salaries,
        finance_ledger=repos.finance,
    )
