from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Sequence

from ...attendance.model import CalendarDay
from ...deductions.model import DeductionRecord
from ...settings.model import AttendanceSettings
from ..model import PayrollSummary


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(
        self,
        *,
        year: int,
        month: int,
        calendar: Sequence[CalendarDay],
        deductions: Iterable[DeductionRecord],
        settings: AttendanceSettings,
        base_salary: float,
    ) -> PayrollSummary:
        raise NotImplementedError
