from datetime import time

import pytest

from src.workforce_erp.workforce_erp.core.enums import EmploymentType
from src.workforce_erp.workforce_erp.core.exceptions import ValidationError
from src.workforce_erp.workforce_erp.worklogs.factory import MinutesStrategyFactory
from src.workforce_erp.workforce_erp.worklogs.model import OutputDetail, TimeDetail
from src.workforce_erp.workforce_erp.worklogs.strategies.output_strategy import OutputBasedStrategy
from src.workforce_erp.workforce_erp.worklogs.strategies.time_strategy import TimeBasedStrategy


def test_factory_picks_strategy_by_employment_type():
    f = MinutesStrategyFactory()

    assert isinstance(f.for_employment(EmploymentType.BY_TIME), TimeBasedStrategy)
    assert isinstance(f.for_employment(EmploymentType.BY_PRODUCTION), OutputBasedStrategy)


@pytest.mark.parametrize(
    "start,end,expected",
    [
        (time(9, 0), time(15, 0), 360),
        (time(9, 0), time(17, 0), 450),
        (time(8, 15), time(12, 45), 270),
        (time(17, 0), time(9, 0), 0),
        (time(9, 0), time(9, 0), 0),
    ],
)
def test_time_based_minutes(start, end, expected):
    assert TimeBasedStrategy().total_minutes(TimeDetail(start=start, end=end)) == expected


def test_output_based_minutes():
    detail = OutputDetail(departures=4, stayovers=3, extra_beds=2, extra_minutes=15)

    assert OutputBasedStrategy().total_minutes(detail) == 4 * 30 + 3 * 20 + 2 * 5 + 15


def test_strategies_reject_the_other_detail_kind():
    with pytest.raises(ValidationError):
        TimeBasedStrategy().total_minutes(OutputDetail(departures=1))
    with pytest.raises(ValidationError):
        OutputBasedStrategy().total_minutes(TimeDetail(start=time(9, 0), end=time(10, 0)))
