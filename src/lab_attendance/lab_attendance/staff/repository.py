from __future__ import annotations

from typing import Optional, Protocol

from .model import StaffMember


class StaffRepository(Protocol):
    def get_by_id(self, staff_id: int) -> Optional[StaffMember]:
        raise NotImplementedError
