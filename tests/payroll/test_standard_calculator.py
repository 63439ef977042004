from datetime import date
from decimal import Decimal

from src.workforce_erp.workforce_erp.core.constants import APPROVED_ONLY
from src.workforce_erp.workforce_erp.core.enums import ApprovalStatus
from src.workforce_erp.workforce_erp.payroll.calculator.standard_calculator import (
    StandardPayrollCalculator,
    compute_payroll,
)
from src.workforce_erp.workforce_erp.payroll.model import PayrollAdjustments


def test_sunday_work_is_paid_double(employee_factory, log_factory):
    employee = employee_factory("e1", ("10.00", date(2024, 1, 1)))
    logs = [log_factory(1, "e1", date(2024, 1, 7), 480)]  # Sunday

    result = compute_payroll(employee, logs, date(2024, 1, 1), date(2024, 1, 31))

    assert result.total_minutes == 480
    assert result.bonus_minutes == 480
    assert result.base_amount == Decimal("80.00")
    assert result.bonus_amount == Decimal("80.00")
    assert result.total_amount == Decimal("160.00")


def test_no_logs_gives_zero_amounts(employee_factory):
    employee = employee_factory("e1", ("25.00", date(2024, 1, 1)))

    result = compute_payroll(employee, [], date(2024, 1, 1), date(2024, 1, 31))

    assert (result.base_amount, result.bonus_amount, result.total_amount) == (0, 0, 0)


def test_no_rate_history_gives_zero_amounts(employee_factory, log_factory):
    employee = employee_factory("e1")
    logs = [log_factory(1, "e1", date(2024, 1, 2), 480)]

    result = compute_payroll(employee, logs, date(2024, 1, 1), date(2024, 1, 31))

    assert result.total_minutes == 480
    assert result.total_amount == 0


def test_period_before_raise_uses_old_rate(employee_factory, log_factory):
    employee = employee_factory("e1", ("12.50", date(2023, 1, 1)), ("15.00", date(2024, 6, 1)))
    logs = [log_factory(1, "e1", date(2024, 5, 2), 120)]

    result = compute_payroll(employee, logs, date(2024, 5, 1), date(2024, 5, 31))

    assert result.hourly_rate == Decimal("12.50")
    assert result.total_amount == Decimal("25.00")


def test_period_after_raise_uses_new_rate(employee_factory, log_factory):
    employee = employee_factory("e1", ("12.50", date(2023, 1, 1)), ("15.00", date(2024, 6, 1)))
    logs = [log_factory(1, "e1", date(2024, 6, 4), 120)]

    result = compute_payroll(employee, logs, date(2024, 6, 1), date(2024, 6, 30))

    assert result.hourly_rate == Decimal("15.00")
    assert result.total_amount == Decimal("30.00")


def test_mid_period_raise_applies_to_whole_period(employee_factory, log_factory):
    employee = employee_factory("e1", ("12.00", date(2023, 1, 1)), ("18.00", date(2024, 6, 15)))
    logs = [log_factory(1, "e1", date(2024, 6, 3), 60), log_factory(2, "e1", date(2024, 6, 20), 60)]

    result = compute_payroll(employee, logs, date(2024, 6, 1), date(2024, 6, 30))

    assert result.hourly_rate == Decimal("18.00")
    assert result.base_amount == Decimal("36.00")


def test_adjustments_add_extra_and_subtract_discount(employee_factory, log_factory):
    employee = employee_factory("e1", ("10.00", date(2024, 1, 1)))
    logs = [log_factory(1, "e1", date(2024, 1, 2), 600)]

    result = compute_payroll(
        employee,
        logs,
        date(2024, 1, 1),
        date(2024, 1, 31),
        PayrollAdjustments(extra=Decimal("50"), discount=Decimal("20")),
    )

    assert result.base_amount == Decimal("100")
    assert result.total_amount == Decimal("130")
    assert result.extra == Decimal("50")
    assert result.discount == Decimal("20")


def test_status_filter_is_forwarded(employee_factory, log_factory):
    employee = employee_factory("e1", ("10.00", date(2024, 1, 1)))
    logs = [
        log_factory(1, "e1", date(2024, 1, 2), 60),
        log_factory(2, "e1", date(2024, 1, 3), 60, ApprovalStatus.PENDING),
    ]

    calc = StandardPayrollCalculator()
    every = calc.compute(employee, logs, date(2024, 1, 1), date(2024, 1, 31))
    approved = calc.compute(employee, logs, date(2024, 1, 1), date(2024, 1, 31), statuses=APPROVED_ONLY)

    assert every.total_amount == Decimal("20")
    assert approved.total_amount == Decimal("10")


def test_inputs_are_not_mutated(employee_factory, log_factory):
    employee = employee_factory("e1", ("10.00", date(2024, 1, 1)))
    logs = [log_factory(2, "e1", date(2024, 1, 9), 60), log_factory(1, "e1", date(2024, 1, 2), 60)]
    snapshot = list(logs)

    first = compute_payroll(employee, logs, date(2024, 1, 1), date(2024, 1, 31))
    second = compute_payroll(employee, logs, date(2024, 1, 1), date(2024, 1, 31))

    assert logs == snapshot
    assert first == second
