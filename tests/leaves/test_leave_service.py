from datetime import date

import pytest

from lab_attendance.core.exceptions import NotFoundError, ValidationError


def test_add_leave_defaults_to_one_day(container):
    leave = container.leave_service.add(1, day="2024-03-12", leave_type=" Sick ", reason="fever")

    assert leave.leave_date == date(2024, 3, 12)
    assert leave.days == 1
    assert leave.to_dict()["type"] == "Sick"


def test_add_leave_validates(container):
    with pytest.raises(ValidationError):
        container.leave_service.add(1, day="2024-03-12", days=-2)
    with pytest.raises(ValidationError):
        container.leave_service.add(1, day="yesterday")
    with pytest.raises(NotFoundError):
        container.leave_service.add(5, day="2024-03-12")


def test_list_and_delete(container):
    first = container.leave_service.add(1, day="2024-03-04")
    second = container.leave_service.add(1, day="2024-03-12", days=2)
    container.leave_service.add(2, day="2024-03-12")

    assert [lv.leave_id for lv in container.leave_service.list_for_staff(1)] == [second.leave_id, first.leave_id]

    container.leave_service.delete(1, first.leave_id)

    assert [lv.leave_id for lv in container.leave_service.list_for_staff(1)] == [second.leave_id]
    with pytest.raises(NotFoundError):
        container.leave_service.delete(2, second.leave_id)
