from __future__ import annotations

from typing import Optional

from ...core.enums import AttendanceStatus
from ...settings.model import AttendanceSettings
from ..model import AttendanceRecord
from .base import AttendanceStrategy, StatusDecision


class NormalStrategy(AttendanceStrategy):
    """On-time check-in (inside the grace period)."""

    def decide_checkin(
        self,
        *,
        late_minutes: int,
        settings: AttendanceSettings,
        existing: Optional[AttendanceRecord],
    ) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT, late_minutes=late_minutes)
