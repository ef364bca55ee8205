from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import to_time_key, weekday_of
from ..common.validators import coerce_non_negative
from ..core.constants import DEFAULT_CLOCK_IN_TIME, DEFAULT_CLOCK_OUT_TIME, WEEKDAY_NAMES


def sanitize_days_off(value: Any) -> tuple[int, ...]:
    """Weekday indices (Sunday=0) filtered to [0, 6], de-duplicated and sorted."""
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        return ()
    out: set[int] = set()
    for item in value:
        if item is None or isinstance(item, bool):
            continue
        try:
            number = float(item)
        except (TypeError, ValueError):
            continue
        if number.is_integer() and 0 <= number <= 6:
            out.add(int(number))
    return tuple(sorted(out))


@dataclass(frozen=True)
class AttendanceSettings:
    """Process-wide attendance configuration.

    Always built through :meth:`from_mapping`, so every field is already
    clamped: numbers are non-negative, off days are valid weekday indices and
    clock times are strict ``HH:MM``.
    """

    paid_absent_days: int = 0
    absent_deduction: float = 0.0
    official_days_off: tuple[int, ...] = ()
    late_relief_minutes: int = 0
    late_deduction: float = 0.0
    early_out_deduction: float = 0.0
    clock_in_time: str = DEFAULT_CLOCK_IN_TIME
    clock_out_time: str = DEFAULT_CLOCK_OUT_TIME

    @classmethod
    def defaults(cls) -> "AttendanceSettings":
        return cls()

    @classmethod
    def from_mapping(cls, raw: Optional[Mapping[str, Any]]) -> "AttendanceSettings":
        """Sanitize a wire/stored mapping (camelCase keys). Never raises."""
        v = raw if isinstance(raw, Mapping) else {}
        return cls(
            paid_absent_days=int(coerce_non_negative(v.get("paidAbsentDays"))),
            absent_deduction=coerce_non_negative(v.get("absentDeduction")),
            official_days_off=sanitize_days_off(v.get("officialDaysOff")),
            late_relief_minutes=int(coerce_non_negative(v.get("lateReliefMinutes"))),
            late_deduction=coerce_non_negative(v.get("lateDeduction")),
            early_out_deduction=coerce_non_negative(v.get("earlyOutDeduction")),
            clock_in_time=to_time_key(v.get("clockInTime")) or DEFAULT_CLOCK_IN_TIME,
            clock_out_time=to_time_key(v.get("clockOutTime")) or DEFAULT_CLOCK_OUT_TIME,
        )

    @property
    def official_days_off_names(self) -> list[str]:
        return [WEEKDAY_NAMES[d] for d in self.official_days_off]

    def is_official_off(self, day: date) -> bool:
        return weekday_of(day) in self.official_days_off

    def to_dict(self) -> dict:
        return {
            "paidAbsentDays": self.paid_absent_days,
            "absentDeduction": self.absent_deduction,
            "officialDaysOff": list(self.official_days_off),
            "officialDaysOffNames": self.official_days_off_names,
            "lateReliefMinutes": self.late_relief_minutes,
            "lateDeduction": self.late_deduction,
            "earlyOutDeduction": self.early_out_deduction,
            "clockInTime": self.clock_in_time,
            "clockOutTime": self.clock_out_time,
        }
