from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.factory import AttendanceStrategyFactory
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceRecorder
from .core.constants import DEFAULT_FINANCE_DEPARTMENT
from .database.connection import DBConfig, DatabaseConnection
from .deductions.ledger import DeductionLedger
from .deductions.mysql_deduction_repository import MySQLDeductionRepository
from .deductions.repository import DeductionRepository
from .deductions.service import DeductionService
from .finance.mysql_finance_repository import MySQLFinanceLedger
from .finance.repository import FinanceLedger
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .payroll.mysql_salary_repository import MySQLSalaryRepository
from .payroll.repository import SalaryRepository
from .payroll.salary_service import SalaryService
from .payroll.service import PayrollReportService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import AttendanceSettingsStore
from .staff.mysql_staff_repository import MySQLStaffRepository
from .staff.repository import StaffRepository


@dataclass(frozen=True)
class Container:
    staff_repo: StaffRepository
    settings_repo: SettingsRepository
    attendance_repo: AttendanceRepository
    leaves_repo: LeaveRepository
    deductions_repo: DeductionRepository
    salaries_repo: SalaryRepository
    finance_ledger: FinanceLedger

    settings_store: AttendanceSettingsStore
    deduction_ledger: DeductionLedger
    attendance_recorder: AttendanceRecorder
    leave_service: LeaveService
    deduction_service: DeductionService
    salary_service: SalaryService
    payroll_report_service: PayrollReportService

    conn: Optional[DatabaseConnection] = None


def assemble(
    *,
    staff_repo: StaffRepository,
    settings_repo: SettingsRepository,
    attendance_repo: AttendanceRepository,
    leaves_repo: LeaveRepository,
    deductions_repo: DeductionRepository,
    salaries_repo: SalaryRepository,
    finance_ledger: FinanceLedger,
    finance_department: str = DEFAULT_FINANCE_DEPARTMENT,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services on top of any repository implementations."""

    settings_store = AttendanceSettingsStore(settings_repo)
    deduction_ledger = DeductionLedger(deductions_repo)
    attendance_recorder = AttendanceRecorder(
        attendance_repo,
        staff_repo,
        settings_store,
        deduction_ledger,
        strategy_factory=AttendanceStrategyFactory(),
    )
    payroll_report_service = PayrollReportService(
        attendance_repo,
        leaves_repo,
        deductions_repo,
        staff_repo,
        settings_store,
    )

    return Container(
        staff_repo=staff_repo,
        settings_repo=settings_repo,
        attendance_repo=attendance_repo,
        leaves_repo=leaves_repo,
        deductions_repo=deductions_repo,
        salaries_repo=salaries_repo,
        finance_ledger=finance_ledger,
        settings_store=settings_store,
        deduction_ledger=deduction_ledger,
        attendance_recorder=attendance_recorder,
        leave_service=LeaveService(leaves_repo, staff_repo),
        deduction_service=DeductionService(deductions_repo, staff_repo),
        salary_service=SalaryService(salaries_repo, staff_repo, finance_ledger, department=finance_department),
        payroll_report_service=payroll_report_service,
        conn=conn,
    )


def build_container(*, db_config: dict, finance_department: str = DEFAULT_FINANCE_DEPARTMENT) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    return assemble(
        staff_repo=MySQLStaffRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        deductions_repo=MySQLDeductionRepository(conn),
        salaries_repo=MySQLSalaryRepository(conn),
        finance_ledger=MySQLFinanceLedger(conn),
        finance_department=finance_department,
        conn=conn,
    )
