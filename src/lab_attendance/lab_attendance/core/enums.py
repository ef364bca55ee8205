from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles placed into the session by the upstream login layer."""

    ADMIN = "admin"
    STAFF = "staff"


class AttendanceStatus(str, Enum):
    """Per-day attendance status as stored and reported."""

    PRESENT = "present"
    LATE = "late"
    ABSENT = "absent"
    LEAVE = "leave"
    OFFICIAL_OFF = "official_off"


class SalaryStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
