from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import AttendanceStatus
from ..settings.model import AttendanceSettings
from .model import AttendanceRecord
from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.leave_strategy import LeaveStrategy
from .strategies.normal_strategy import NormalStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(
        self,
        *,
        late_minutes: int,
        settings: AttendanceSettings,
        existing: Optional[AttendanceRecord],
    ) -> AttendanceStrategy:
        if existing and existing.status == AttendanceStatus.LEAVE:
            return LeaveStrategy()
        if late_minutes > settings.late_relief_minutes:
            return LateStrategy()
        return NormalStrategy()
