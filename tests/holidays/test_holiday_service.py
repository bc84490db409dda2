from datetime import date

import pytest

from conftest import InMemoryHolidays, InMemoryWorkers
from src.workshop_payroll.workshop_payroll.core.enums import HolidayScope
from src.workshop_payroll.workshop_payroll.core.exceptions import NotFoundError, ValidationError
from src.workshop_payroll.workshop_payroll.holidays.model import Holiday
from src.workshop_payroll.workshop_payroll.holidays.service import HolidayService
from src.workshop_payroll.workshop_payroll.workers.model import Worker, WorkerSummary


def service():
    workers = InMemoryWorkers({1: Worker(worker_id=1, name="Ravi"), 2: Worker(worker_id=2, name="Asha")})
    return HolidayService(InMemoryHolidays(), workers)


def test_create_all_holiday_drops_employee_list():
    svc = service()
    created = svc.create_holiday(
        Holiday(name=" Pongal ", holiday_date=date(2025, 1, 14), applies_to="all", employees=(1,))
    )

    assert created.holiday_id == 1
    assert created.name == "Pongal"
    assert created.applies_to == HolidayScope.ALL
    assert created.employees == ()
    assert svc.list_for_month(year=2025, month=1) == [created]


def test_create_specific_holiday_normalises_refs():
    created = service().create_holiday(
        Holiday(name="Leave", holiday_date=date(2025, 1, 20), applies_to="specific", employees=(WorkerSummary(2, "Asha"),))
    )
    assert created.employees == (2,)


@pytest.mark.parametrize(
    "holiday",
    [
        Holiday(name="", holiday_date=date(2025, 1, 1), applies_to="all"),
        Holiday(name="No date", holiday_date=None, applies_to="all"),
        Holiday(name="No scope", holiday_date=date(2025, 1, 1), applies_to=""),
        Holiday(name="Bad scope", holiday_date=date(2025, 1, 1), applies_to="some"),
        Holiday(name="Nobody", holiday_date=date(2025, 1, 1), applies_to="specific"),
        Holiday(name="Ghost", holiday_date=date(2025, 1, 1), applies_to="specific", employees=(1, 77)),
    ],
)
def test_create_rejects_invalid_holidays(holiday):
    with pytest.raises(ValidationError):
        service().create_holiday(holiday)


def test_delete_unknown_holiday():
    with pytest.raises(NotFoundError):
        service().delete_holiday(5)
