from datetime import date
from decimal import Decimal

import pytest

from src.workforce_erp.workforce_erp.container import build_container
from src.workforce_erp.workforce_erp.core.enums import EmploymentType, Role
from src.workforce_erp.workforce_erp.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def svc(staffed_store):
    return build_container(store=staffed_store).employee_service


def test_hire_creates_first_rate_on_start_date(svc, staffed_store):
    employee = svc.hire(
        name="  Maria  ",
        email="maria@example.com",
        employment_type=EmploymentType.BY_TIME,
        hourly_rate="11.25",
        start_date=date(2024, 7, 1),
    )

    assert employee.name == "Maria"
    assert employee.role == Role.EMPLOYEE
    assert len(employee.hourly_rates) == 1
    assert employee.hourly_rates[0].effective_date == date(2024, 7, 1)
    assert staffed_store.employees[employee.employee_id] == employee


def test_hire_validates_input(svc):
    with pytest.raises(ValidationError):
        svc.hire(name="", email="x@example.com", employment_type=EmploymentType.BY_TIME, hourly_rate="10", start_date=date(2024, 1, 1))
    with pytest.raises(ValidationError):
        svc.hire(name="X", email="x@example.com", employment_type=EmploymentType.BY_TIME, hourly_rate="abc", start_date=date(2024, 1, 1))
    with pytest.raises(ValidationError):
        svc.hire(name="X", email="x@example.com", employment_type=EmploymentType.BY_TIME, hourly_rate="-2", start_date=date(2024, 1, 1))


def test_list_employees_by_role(svc):
    assert [e.employee_id for e in svc.list_employees()] == ["admin", "ana", "joao"]
    assert [e.employee_id for e in svc.list_employees(role=Role.EMPLOYEE)] == ["ana", "joao"]


def test_future_rate_only_applies_from_its_date(svc):
    svc.schedule_rate(employee_id="joao", rate="18.00", effective_date=date(2030, 1, 1))

    assert svc.current_rate("joao", on=date(2029, 12, 31)) == Decimal("15.00")
    assert svc.current_rate("joao", on=date(2030, 1, 1)) == Decimal("18.00")


def test_schedule_rate_replaces_same_date(svc):
    svc.schedule_rate(employee_id="ana", rate="16.00", effective_date=date(2024, 6, 1))
    employee = svc.schedule_rate(employee_id="ana", rate="17.00", effective_date=date(2024, 6, 1))

    assert len(employee.hourly_rates) == 2
    assert svc.current_rate("ana", on=date(2024, 6, 2)) == Decimal("17.00")


def test_unknown_employee(svc):
    with pytest.raises(NotFoundError):
        svc.get("ghost")
    with pytest.raises(NotFoundError):
        svc.schedule_rate(employee_id="ghost", rate="1", effective_date=date(2024, 1, 1))
