from datetime import date, time

import pytest

from src.workforce_erp.workforce_erp.container import build_container
from src.workforce_erp.workforce_erp.core.enums import ApprovalStatus
from src.workforce_erp.workforce_erp.core.exceptions import NotFoundError, ValidationError
from src.workforce_erp.workforce_erp.worklogs.model import OutputDetail, TimeDetail


@pytest.fixture
def svc(staffed_store):
    return build_container(store=staffed_store).work_log_service


def test_submit_time_based_log_is_pending(svc, staffed_store):
    entry = svc.submit(employee_id="ana", work_date=date(2024, 6, 10), detail=TimeDetail(time(9, 0), time(17, 0)))

    assert entry.status == ApprovalStatus.PENDING
    assert entry.total_minutes == 450
    assert staffed_store.work_logs[entry.log_id] == entry


def test_submit_output_based_log(svc):
    entry = svc.submit(employee_id="joao", work_date=date(2024, 6, 10), detail=OutputDetail(departures=2, stayovers=1))

    assert entry.total_minutes == 80


def test_submit_rejects_mismatched_detail(svc):
    with pytest.raises(ValidationError):
        svc.submit(employee_id="ana", work_date=date(2024, 6, 10), detail=OutputDetail(departures=2))


def test_submit_rejects_negative_counters(svc):
    with pytest.raises(ValidationError):
        svc.submit(employee_id="joao", work_date=date(2024, 6, 10), detail=OutputDetail(departures=-1))


def test_submit_unknown_employee(svc):
    with pytest.raises(NotFoundError):
        svc.submit(employee_id="ghost", work_date=date(2024, 6, 10), detail=TimeDetail(time(9, 0), time(10, 0)))


def test_edit_recomputes_minutes(svc):
    entry = svc.edit(log_id=2, detail=TimeDetail(time(10, 0), time(12, 0)))

    assert entry.total_minutes == 120
    assert entry.work_date == date(2024, 6, 9)


def test_edit_only_pending(svc):
    with pytest.raises(ValidationError):
        svc.edit(log_id=1, detail=TimeDetail(time(10, 0), time(12, 0)))


def test_approve_and_reject(svc):
    assert svc.approve(log_id=2).status == ApprovalStatus.APPROVED

    with pytest.raises(ValidationError):
        svc.reject(log_id=2)

    assert svc.reject(log_id=2, override=True).status == ApprovalStatus.REJECTED


def test_decide_unknown_log(svc):
    with pytest.raises(NotFoundError):
        svc.approve(log_id=999)


def test_approval_changes_formal_report(staffed_store):
    c = build_container(store=staffed_store)
    before = c.payroll_report_service.period_report(start=date(2024, 6, 1), end=date(2024, 6, 30))

    c.work_log_service.approve(log_id=2)
    after = c.payroll_report_service.period_report(start=date(2024, 6, 1), end=date(2024, 6, 30))

    assert after.total_minutes - before.total_minutes == 240
    assert after.total_bonus > before.total_bonus


def test_list_for_employee_newest_first(svc):
    rows = svc.list_for_employee("ana")

    assert [r.log_id for r in rows] == [2, 1]
    assert [r.log_id for r in svc.list_for_employee("ana", start=date(2024, 6, 5))] == [2]
