from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..core.constants import ATTENDANCE_SETTINGS_KEY
from .model import AttendanceSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class AttendanceSettingsStore:
    """Get/save the single attendance configuration document."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> AttendanceSettings:
        """Stored settings, sanitized. Falls back to defaults and never raises."""
        try:
            stored = self._settings.get_value(ATTENDANCE_SETTINGS_KEY)
        except Exception:
            logger.exception("Failed to load attendance settings; using defaults")
            return AttendanceSettings.defaults()
        if stored is None:
            return AttendanceSettings.defaults()
        return AttendanceSettings.from_mapping(stored)

    def save(self, raw: Optional[Mapping[str, Any]]) -> AttendanceSettings:
        settings = AttendanceSettings.from_mapping(raw)
        self._settings.save_value(ATTENDANCE_SETTINGS_KEY, settings.to_dict())
        logger.info(
            "Attendance settings saved (off days=%s, grace=%s min)",
            settings.official_days_off_names,
            settings.late_relief_minutes,
        )
        return settings
