from datetime import date

import pytest

from src.workforce_erp.workforce_erp.container import build_container
from src.workforce_erp.workforce_erp.core.enums import ApprovalStatus
from src.workforce_erp.workforce_erp.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def svc(staffed_store):
    return build_container(store=staffed_store).leave_service


def test_create_counts_business_days(svc, staffed_store):
    # Friday to Tuesday
    request_id = svc.create(employee_id="ana", start_date=date(2024, 6, 7), end_date=date(2024, 6, 11), reason="Trip")

    req = staffed_store.leave_requests[request_id]
    assert req.days_requested == 3
    assert req.status == ApprovalStatus.PENDING


def test_create_validates(svc):
    with pytest.raises(NotFoundError):
        svc.create(employee_id="ghost", start_date=date(2024, 6, 7), end_date=date(2024, 6, 7), reason="x")
    with pytest.raises(ValidationError):
        svc.create(employee_id="ana", start_date=date(2024, 6, 8), end_date=date(2024, 6, 7), reason="x")
    with pytest.raises(ValidationError):
        svc.create(employee_id="ana", start_date=date(2024, 6, 7), end_date=date(2024, 6, 7), reason="  ")


def test_approve_then_cannot_decide_again(svc):
    request_id = svc.create(employee_id="ana", start_date=date(2024, 6, 7), end_date=date(2024, 6, 7), reason="Doctor")

    assert svc.approve(request_id=request_id).status == ApprovalStatus.APPROVED
    with pytest.raises(ValidationError):
        svc.reject(request_id=request_id)


def test_reject_unknown(svc):
    with pytest.raises(NotFoundError):
        svc.reject(request_id=42)


def test_list_filters(svc):
    a = svc.create(employee_id="ana", start_date=date(2024, 6, 7), end_date=date(2024, 6, 7), reason="A")
    svc.create(employee_id="joao", start_date=date(2024, 6, 7), end_date=date(2024, 6, 7), reason="B")
    svc.reject(request_id=a)

    assert [r.employee_id for r in svc.list(status=ApprovalStatus.PENDING)] == ["joao"]
    assert [r.request_id for r in svc.list(employee_id="ana")] == [a]
    assert len(svc.list()) == 2
