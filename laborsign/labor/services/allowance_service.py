# -*- coding: utf-8 -*-
"""
Allowance calculator (pure, no DB, no settings writes).

Formulas (won, rounded half-up to an integer):
- overtime:      hourly_wage × 1.5 × overtime hours
- holiday:       hourly_wage × 1.5 × holiday hours
- annual_leave:  hourly_wage × daily work hours × unused annual-leave days

The calculator never persists anything; callers write the amount into a contract.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Optional

from django.conf import settings
from django.core.exceptions import ValidationError

OVERTIME = "overtime"
HOLIDAY = "holiday"
ANNUAL_LEAVE = "annual_leave"
ALLOWANCE_TYPES = (OVERTIME, HOLIDAY, ANNUAL_LEAVE)

PREMIUM_RATE = Decimal("1.5")

TITLES = {
    OVERTIME: "연장근로수당",
    HOLIDAY: "휴일근로수당",
    ANNUAL_LEAVE: "연차유급휴가 수당",
}


@dataclass(frozen=True)
class AllowanceResult:
    allowance_type: str
    amount: int
    formula_description: str

    def as_dict(self) -> dict:
        return {
            "allowance_type": self.allowance_type,
            "title": TITLES[self.allowance_type],
            "amount": self.amount,
            "formula_description": self.formula_description,
        }


def annual_leave_cap() -> int:
    return int(getattr(settings, "ANNUAL_LEAVE_DAYS_CAP", 26))


def round_half_up(value: Any) -> int:
    return int(to_decimal(value, "value").quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_decimal(value: Any, field: str) -> Decimal:
    try:
        d = Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError({field: f"{field} must be a number."})
    if not d.is_finite():
        raise ValidationError({field: f"{field} must be a finite number."})
    return d


def _won(value: Decimal) -> str:
    return f"{round_half_up(value):,}원" if value == value.to_integral_value() else f"{value:,}원"


def _num(value: Decimal) -> str:
    return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP).normalize():f}"


def compute(
    allowance_type: str,
    *,
    hourly_wage: Any,
    hours: Any = None,
    days: Any = None,
    daily_work_hours: Any = None,
) -> AllowanceResult:
    if allowance_type not in ALLOWANCE_TYPES:
        raise ValidationError({"allowance_type": f"Unknown allowance type: {allowance_type}"})

    wage = to_decimal(hourly_wage, "hourly_wage")
    if wage <= 0:
        raise ValidationError({"hourly_wage": "hourly_wage must be > 0."})

    if allowance_type in (OVERTIME, HOLIDAY):
        h = to_decimal(0 if hours is None else hours, "hours")
        if h < 0:
            raise ValidationError({"hours": "hours must be >= 0."})
        amount = round_half_up(wage * PREMIUM_RATE * h)
        label = "월 연장시간" if allowance_type == OVERTIME else "월 휴일근로시간"
        formula = f"시급({_won(wage)}) × 1.5 × {label} {_num(h)}시간 = {amount:,}원"
        return AllowanceResult(allowance_type, amount, formula)

    # annual_leave
    d = to_decimal(0 if days is None else days, "days")
    cap = annual_leave_cap()
    if d < 0:
        raise ValidationError({"days": "days must be >= 0."})
    if d > cap:
        raise ValidationError({"days": f"Unused annual leave cannot exceed {cap} days."})
    if daily_work_hours is None:
        raise ValidationError({"daily_work_hours": "daily_work_hours is required for annual leave."})
    dh = to_decimal(daily_work_hours, "daily_work_hours")
    if dh <= 0:
        raise ValidationError({"daily_work_hours": "daily_work_hours must be > 0."})
    amount = round_half_up(wage * dh * d)
    formula = f"시급({_won(wage)}) × {_num(dh)}시간 × 미사용 연차 {_num(d)}일 = {amount:,}원"
    return AllowanceResult(allowance_type, amount, formula)


def compute_for_contract(contract, allowance_type: str, *, hours: Optional[Any] = None, days: Optional[Any] = None) -> AllowanceResult:
    """Same as compute(), wage and daily hours read from the contract."""
    return compute(
        allowance_type,
        hourly_wage=contract.hourly_wage,
        hours=hours,
        days=days,
        daily_work_hours=contract.daily_work_hours,
    )
