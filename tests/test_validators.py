from decimal import Decimal

import pytest

from src.workforce_erp.workforce_erp.common.validators import (
    require_min_length,
    require_non_negative_int,
    to_decimal,
)
from src.workforce_erp.workforce_erp.core.exceptions import ValidationError


@pytest.mark.parametrize("value,expected", [(None, 0), ("", 0), (3, 3), ("4", 4), (2.0, 2), (Decimal("5"), 5)])
def test_whole_numbers_accepted(value, expected):
    assert require_non_negative_int(value, "departures") == expected


@pytest.mark.parametrize("value", [2.7, Decimal("1.5"), "2.7", True, False, "abc", float("nan"), -1])
def test_non_whole_or_negative_rejected(value):
    with pytest.raises(ValidationError):
        require_non_negative_int(value, "departures")


def test_to_decimal_rejects_non_finite():
    with pytest.raises(ValidationError):
        to_decimal("NaN", "Amount")
    with pytest.raises(ValidationError):
        to_decimal(None, "Amount")
    assert to_decimal(12.5, "Amount") == Decimal("12.5")


def test_min_length():
    assert require_min_length("  Casa  ", 2, "Name") == "Casa"
    with pytest.raises(ValidationError):
        require_min_length("A", 2, "Name")
    with pytest.raises(ValidationError):
        require_min_length(None, 2, "Name")
