from datetime import date, timedelta

from src.workforce_erp.workforce_erp.core.constants import APPROVED_ONLY
from src.workforce_erp.workforce_erp.core.enums import ApprovalStatus
from src.workforce_erp.workforce_erp.payroll.aggregator import WorkTotals, aggregate_work_logs


def test_empty_collection_gives_zero_totals():
    assert aggregate_work_logs([], "e1", date(2024, 1, 1), date(2024, 1, 31)) == WorkTotals(0, 0)


def test_filters_by_employee_and_inclusive_range(log_factory):
    logs = [
        log_factory(1, "e1", date(2024, 1, 1), 60),
        log_factory(2, "e1", date(2024, 1, 31), 120),
        log_factory(3, "e1", date(2024, 2, 1), 500),
        log_factory(4, "e2", date(2024, 1, 10), 700),
    ]

    totals = aggregate_work_logs(logs, "e1", date(2024, 1, 1), date(2024, 1, 31))

    assert totals.total_minutes == 180


def test_sunday_minutes_are_a_subset_of_total(log_factory):
    logs = [
        log_factory(1, "e1", date(2024, 1, 6), 300),  # Saturday
        log_factory(2, "e1", date(2024, 1, 7), 480),  # Sunday
        log_factory(3, "e1", date(2024, 1, 8), 240),  # Monday
    ]

    totals = aggregate_work_logs(logs, "e1", date(2024, 1, 1), date(2024, 1, 31))

    assert totals == WorkTotals(total_minutes=1020, bonus_minutes=480)
    assert totals.bonus_minutes <= totals.total_minutes


def test_status_policy_is_configurable(log_factory):
    logs = [
        log_factory(1, "e1", date(2024, 1, 2), 100, ApprovalStatus.APPROVED),
        log_factory(2, "e1", date(2024, 1, 3), 200, ApprovalStatus.PENDING),
        log_factory(3, "e1", date(2024, 1, 4), 400, ApprovalStatus.REJECTED),
    ]

    every = aggregate_work_logs(logs, "e1", date(2024, 1, 1), date(2024, 1, 31))
    approved = aggregate_work_logs(logs, "e1", date(2024, 1, 1), date(2024, 1, 31), statuses=APPROVED_ONLY)
    open_work = aggregate_work_logs(
        logs,
        "e1",
        date(2024, 1, 1),
        date(2024, 1, 31),
        statuses={ApprovalStatus.APPROVED, ApprovalStatus.PENDING},
    )

    assert every.total_minutes == 700
    assert approved.total_minutes == 100
    assert open_work.total_minutes == 300


def test_split_ranges_add_up(log_factory):
    start = date(2024, 3, 1)
    logs = [log_factory(i, "e1", start + timedelta(days=i), 30 + i) for i in range(31)]
    mid = date(2024, 3, 15)

    first = aggregate_work_logs(logs, "e1", start, mid)
    second = aggregate_work_logs(logs, "e1", mid + timedelta(days=1), date(2024, 3, 31))
    whole = aggregate_work_logs(logs, "e1", start, date(2024, 3, 31))

    assert first.total_minutes + second.total_minutes == whole.total_minutes
    assert first.bonus_minutes + second.bonus_minutes == whole.bonus_minutes


def test_string_dates_are_plain_calendar_dates(log_factory):
    logs = [log_factory(1, "e1", "2024-01-07", 480)]  # Sunday

    totals = aggregate_work_logs(logs, "e1", "2024-01-01", "2024-01-31")

    assert totals == WorkTotals(total_minutes=480, bonus_minutes=480)


def test_unparseable_dates_are_skipped(log_factory):
    logs = [log_factory(1, "e1", "07/01/2024", 480), log_factory(2, "e1", date(2024, 1, 2), 60)]

    totals = aggregate_work_logs(logs, "e1", date(2024, 1, 1), date(2024, 1, 31))

    assert totals.total_minutes == 60


def test_bad_range_gives_zero(log_factory):
    logs = [log_factory(1, "e1", date(2024, 1, 2), 60)]

    assert aggregate_work_logs(logs, "e1", "garbage", date(2024, 1, 31)) == WorkTotals()
