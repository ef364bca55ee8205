from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...core.enums import AttendanceStatus
from ...settings.model import AttendanceSettings
from ..model import AttendanceRecord


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    late_minutes: int = 0
    # False when an existing status (e.g. leave) was kept as-is.
    computed: bool = True


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide a check-in status."""

    @abstractmethod
    def decide_checkin(
        self,
        *,
        late_minutes: int,
        settings: AttendanceSettings,
        existing: Optional[AttendanceRecord],
    ) -> StatusDecision:
        raise NotImplementedError
