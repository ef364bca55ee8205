from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...settings.model import AttendanceSettings
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class LeaveStrategy(AttendanceStrategy):
    """Day already marked as leave: record the time, keep the status."""

    def decide_checkin(
        self,
        *,
        late_minutes: int,
        settings: AttendanceSettings,
        existing: Optional[AttendanceRecord],
    ) -> StatusDecision:
        status = existing.status if existing else AttendanceStatus.LEAVE
        return StatusDecision(status=status, late_minutes=late_minutes, computed=False)
