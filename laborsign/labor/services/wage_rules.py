# -*- coding: utf-8 -*-
"""
Wage rules:
- effective minimum-wage floor (weekly holiday pay bundled into the hourly rate or not)
- comprehensive wage bundle: structural validation only, no computation
"""
from __future__ import annotations
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.core.exceptions import ValidationError

from labor.exceptions import ComplianceError
from labor.models import COMPREHENSIVE_DETAIL_KEYS
from labor.services.allowance_service import round_half_up, to_decimal


def base_minimum_wage() -> int:
    return int(getattr(settings, "MINIMUM_WAGE", 10360))


def weekly_holiday_multiplier() -> Decimal:
    return Decimal(str(getattr(settings, "WEEKLY_HOLIDAY_MULTIPLIER", "1.2")))


def effective_floor(base: Any, include_weekly_holiday_pay: bool) -> int:
    """effective_floor(10360, True) == 12432; effective_floor(10360, False) == 10360."""
    if not include_weekly_holiday_pay:
        return round_half_up(base)
    return round_half_up(to_decimal(base, "base_minimum_wage") * weekly_holiday_multiplier())


def check_minimum_wage(hourly_wage: Any, include_weekly_holiday_pay: bool, base: Optional[Any] = None) -> int:
    floor = effective_floor(base_minimum_wage() if base is None else base, include_weekly_holiday_pay)
    if to_decimal(hourly_wage, "hourly_wage") < floor:
        suffix = " (주휴수당 포함 기준)" if include_weekly_holiday_pay else ""
        raise ComplianceError(
            {"hourly_wage": f"시급은 최저임금 {floor:,}원 이상이어야 합니다{suffix}."}
        )
    return floor


# ====== Comprehensive wage bundle ======
def validate_comprehensive_details(details: Any) -> Dict[str, Any]:
    """
    Known keys only, each value a non-negative number. None values are dropped:
    a missing key means that allowance is paid separately, not waived.
    """
    if not isinstance(details, dict):
        raise ValidationError({"comprehensive_wage_details": "Must be an object."})
    unknown = sorted(set(details) - set(COMPREHENSIVE_DETAIL_KEYS))
    if unknown:
        raise ValidationError({"comprehensive_wage_details": f"Unknown keys: {', '.join(unknown)}"})
    out: Dict[str, Any] = {}
    for key in COMPREHENSIVE_DETAIL_KEYS:
        raw = details.get(key)
        if raw is None:
            continue
        if isinstance(raw, bool):
            raise ValidationError({"comprehensive_wage_details": f"{key} must be a number."})
        val = to_decimal(raw, key)
        if val < 0:
            raise ValidationError({"comprehensive_wage_details": f"{key} must be >= 0."})
        out[key] = int(val) if val == val.to_integral_value() else float(val)
    return out


def paid_separately(details: Optional[Dict[str, Any]]) -> List[str]:
    covered = {k for k, v in (details or {}).items() if v is not None}
    return [k for k in COMPREHENSIVE_DETAIL_KEYS if k not in covered]
