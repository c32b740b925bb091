import pytest
from django.core.exceptions import ValidationError

from labor.exceptions import ComplianceError
from labor.services.wage_rules import (
    effective_floor, check_minimum_wage, validate_comprehensive_details, paid_separately,
)


def test_effective_floor():
    assert effective_floor(10360, True) == 12432
    assert effective_floor(10360, False) == 10360


def test_check_minimum_wage_ok():
    assert check_minimum_wage(10360, False) == 10360
    assert check_minimum_wage(12432, True) == 12432


def test_check_minimum_wage_below_floor():
    with pytest.raises(ComplianceError):
        check_minimum_wage(11000, True)
    with pytest.raises(ComplianceError):
        check_minimum_wage(10030, False)


def test_compliance_error_is_validation_error():
    with pytest.raises(ValidationError):
        check_minimum_wage(9000, False)


def test_comprehensive_details_subset():
    out = validate_comprehensive_details({"overtime_per_hour": 15540, "holiday_per_day": None})
    assert out == {"overtime_per_hour": 15540}
    assert paid_separately(out) == ["night_allowance", "holiday_per_day", "annual_leave_per_day"]


@pytest.mark.parametrize("details", [
    {"bonus": 1},
    {"night_allowance": -1},
    {"night_allowance": "x"},
    {"night_allowance": True},
    ["overtime_per_hour"],
])
def test_comprehensive_details_invalid(details):
    with pytest.raises(ValidationError):
        validate_comprehensive_details(details)
