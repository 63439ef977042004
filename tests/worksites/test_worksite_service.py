from datetime import date

import pytest

from src.workforce_erp.workforce_erp.container import build_container
from src.workforce_erp.workforce_erp.core.enums import WorksiteKind
from src.workforce_erp.workforce_erp.core.exceptions import NotFoundError, ValidationError

DAY = date(2024, 6, 10)


@pytest.fixture
def svc(staffed_store):
    return build_container(store=staffed_store).worksite_service


@pytest.fixture
def hotel(svc):
    return svc.add(name="Hotel Helios", address="Main Street 1", kind=WorksiteKind.HOTEL)


def test_add_worksite(svc, hotel):
    assert hotel.is_active
    assert svc.list_worksites() == [hotel]

    with pytest.raises(ValidationError):
        svc.add(name="X", address="Main Street 1", kind=WorksiteKind.OTHER)


def test_rename_keeps_planning(svc, hotel):
    svc.assign(work_date=DAY, employee_id="ana", worksite_id=hotel.worksite_id)

    renamed = svc.update(worksite_id=hotel.worksite_id, name="Hotel Aurora")

    assert renamed.name == "Hotel Aurora"
    assert [e.worksite_id for e in svc.planning(start=DAY, end=DAY)] == [hotel.worksite_id]


def test_deactivate_drops_planning_for_that_site(svc, hotel):
    other = svc.add(name="Building Site", address="Harbour Road 9", kind=WorksiteKind.CONSTRUCTION)
    svc.assign(work_date=DAY, employee_id="ana", worksite_id=hotel.worksite_id)
    svc.assign(work_date=DAY, employee_id="joao", worksite_id=other.worksite_id)

    svc.set_active(worksite_id=hotel.worksite_id, active=False)

    assert [e.employee_id for e in svc.planning(start=DAY, end=DAY)] == ["joao"]
    assert svc.list_worksites(active_only=True) == [other]
    with pytest.raises(ValidationError):
        svc.assign(work_date=DAY, employee_id="ana", worksite_id=hotel.worksite_id)


def test_only_employees_can_be_planned(svc, hotel):
    with pytest.raises(ValidationError):
        svc.assign(work_date=DAY, employee_id="admin", worksite_id=hotel.worksite_id)
    with pytest.raises(NotFoundError):
        svc.assign(work_date=DAY, employee_id="ghost", worksite_id=hotel.worksite_id)
    with pytest.raises(NotFoundError):
        svc.assign(work_date=DAY, employee_id="ana", worksite_id=99)


def test_day_off_and_reassignment(svc, hotel):
    svc.assign(work_date=DAY, employee_id="ana", worksite_id=hotel.worksite_id)
    entry = svc.assign(work_date=DAY, employee_id="ana", worksite_id=None)

    assert entry.is_day_off
    assert svc.planning(start=DAY, end=DAY) == [entry]
    assert svc.unassign(work_date=DAY, employee_id="ana")
    assert not svc.unassign(work_date=DAY, employee_id="ana")


def test_planning_range_is_ordered(svc, hotel):
    svc.assign(work_date=date(2024, 6, 12), employee_id="ana", worksite_id=hotel.worksite_id)
    svc.assign(work_date=DAY, employee_id="joao", worksite_id=hotel.worksite_id)
    svc.assign(work_date=DAY, employee_id="ana", worksite_id=None)
    svc.assign(work_date=date(2024, 6, 20), employee_id="ana", worksite_id=None)

    rows = svc.planning(start=DAY, end=date(2024, 6, 12))

    assert [(e.work_date.day, e.employee_id) for e in rows] == [(10, "ana"), (10, "joao"), (12, "ana")]
    with pytest.raises(ValidationError):
        svc.planning(start=DAY, end=date(2024, 6, 9))
