from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...settings.model import AttendanceSettings
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(
        self,
        *,
        late_minutes: int,
        settings: AttendanceSettings,
        existing: Optional[AttendanceRecord],
    ) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE, late_minutes=late_minutes)
