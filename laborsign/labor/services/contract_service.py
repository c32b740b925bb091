# -*- coding: utf-8 -*-
"""
Service for Contract:
- All business rules live here: contract shape validation, minimum-wage compliance,
  forward-only status transitions, signature writes.
- Validation runs on the merged (current + patch) state BEFORE any repository call,
  so an invalid contract never reaches the DB.
- DB access goes through the repository (pure DB).
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError

from labor.exceptions import NotFoundError, StoreError
from labor.models import Contract, WORK_DAYS
from labor.repositories import contract_repository as repo
from labor.services import wage_rules
from labor.services.allowance_service import to_decimal

logger = logging.getLogger(__name__)

# Fields a caller may write through create/update (status, signatures, folder have own flows)
EDITABLE_FIELDS = {
    "employer_id", "worker_id", "employer_name", "worker_name",
    "wage_type", "hourly_wage", "monthly_wage", "include_weekly_holiday_pay",
    "start_date", "end_date", "no_end_date",
    "work_days", "work_days_per_week", "work_start_time", "work_end_time", "break_minutes",
    "work_location", "business_name", "job_description",
    "payment_day", "payment_month", "payment_end_of_month",
    "is_comprehensive_wage", "business_size", "comprehensive_wage_details",
}

REQUIRED_FIELDS = (
    "employer_name", "worker_name", "hourly_wage", "start_date",
    "work_start_time", "work_end_time", "work_location",
)

# draft -> pending -> (signed ->) completed; nothing moves backward
ALLOWED_TRANSITIONS = {
    Contract.Status.DRAFT: {Contract.Status.PENDING},
    Contract.Status.PENDING: {Contract.Status.SIGNED, Contract.Status.COMPLETED},
    Contract.Status.SIGNED: {Contract.Status.COMPLETED},
    Contract.Status.COMPLETED: set(),
}

SIGNATURE_FIELDS = {
    "employer": "employer_signature",
    "worker": "worker_signature",
}


# ====== Pure validation ======
def normalize_work_days(days: Iterable[str] | None) -> List[str]:
    """Deduplicate and sort into display order (월 → 일)."""
    picked = set(days or [])
    unknown = sorted(picked - set(WORK_DAYS))
    if unknown:
        raise ValidationError({"work_days": f"Unknown work day(s): {', '.join(unknown)}"})
    return [d for d in WORK_DAYS if d in picked]


def validate_contract_terms(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate the full contract state and return a normalised copy.
    Raises ValidationError for shape problems, then ComplianceError for the wage floor.
    """
    out = dict(data)
    errors: Dict[str, str] = {}

    for f in REQUIRED_FIELDS:
        val = out.get(f)
        if val is None or (isinstance(val, str) and not val.strip()):
            errors[f] = "This field is required."

    wage_type = out.get("wage_type") or Contract.WageType.HOURLY
    out["wage_type"] = wage_type
    if wage_type not in Contract.WageType.values:
        errors["wage_type"] = f"Invalid wage type: {wage_type}"

    if out.get("hourly_wage") is not None and to_decimal(out["hourly_wage"], "hourly_wage") <= 0:
        errors["hourly_wage"] = "hourly_wage must be > 0."

    monthly = out.get("monthly_wage")
    if wage_type == Contract.WageType.MONTHLY and monthly is None:
        errors["monthly_wage"] = "월급제 계약은 월급 금액이 필요합니다."
    elif monthly is not None and to_decimal(monthly, "monthly_wage") <= 0:
        errors["monthly_wage"] = "monthly_wage must be > 0."

    # comprehensive wage: flat bundle vs. monthly calculation must not be ambiguous
    details = out.get("comprehensive_wage_details")
    if out.get("is_comprehensive_wage"):
        size = out.get("business_size")
        if not size:
            errors["business_size"] = "포괄임금계약은 사업장 규모가 필요합니다."
        elif size not in Contract.BusinessSize.values:
            errors["business_size"] = f"Invalid business size: {size}"
        if details is None:
            errors["comprehensive_wage_details"] = "포괄임금계약은 수당 세부 내역이 필요합니다."
        else:
            try:
                out["comprehensive_wage_details"] = wage_rules.validate_comprehensive_details(details)
            except ValidationError as e:
                errors["comprehensive_wage_details"] = "; ".join(e.messages)
    elif details:
        errors["comprehensive_wage_details"] = "Only allowed on comprehensive wage contracts."
    else:
        out["comprehensive_wage_details"] = None

    # period
    if out.get("no_end_date"):
        out["end_date"] = None
    elif out.get("end_date") and out.get("start_date") and out["end_date"] < out["start_date"]:
        errors["end_date"] = "end_date must be >= start_date."

    try:
        out["work_days"] = normalize_work_days(out.get("work_days"))
    except ValidationError as e:
        errors["work_days"] = "; ".join(e.messages)

    per_week = out.get("work_days_per_week")
    if per_week is not None and not (1 <= int(per_week) <= 7):
        errors["work_days_per_week"] = "work_days_per_week must be between 1 and 7."

    brk = out.get("break_minutes")
    if brk is not None and int(brk) < 0:
        errors["break_minutes"] = "break_minutes must be >= 0."

    pay_day = out.get("payment_day")
    if pay_day is not None and not (1 <= int(pay_day) <= 31):
        errors["payment_day"] = "payment_day must be between 1 and 31."
    pay_month = out.get("payment_month") or ""
    out["payment_month"] = pay_month
    if pay_month and pay_month not in Contract.PaymentMonth.values:
        errors["payment_month"] = f"Invalid payment month: {pay_month}"

    if errors:
        raise ValidationError(errors)

    wage_rules.check_minimum_wage(out["hourly_wage"], bool(out.get("include_weekly_holiday_pay")))
    return out


def _contract_state(obj: Contract) -> Dict[str, Any]:
    return {f: getattr(obj, f) for f in EDITABLE_FIELDS}


# ====== Queries ======
def get_contract(contract_id: int) -> Contract:
    obj = repo.get_or_none(contract_id)
    if obj is None:
        raise NotFoundError(f"Contract #{contract_id} not found.")
    return obj


# ====== Business services ======
def create_contract(data: Dict[str, Any]) -> Contract:
    payload = {k: v for k, v in data.items() if k in EDITABLE_FIELDS}
    payload = validate_contract_terms(payload)
    payload["status"] = Contract.Status.DRAFT
    try:
        obj = repo.create(payload)
    except DatabaseError as ex:
        logger.exception("[contract] create failed: %s", ex)
        raise StoreError() from ex
    logger.info("[contract] created id=%s mode=%s", obj.id, obj.contract_mode)
    return obj


def update_contract(*, contract_id: int, changes: Dict[str, Any]) -> Contract:
    obj = get_contract(contract_id)
    patch = {k: v for k, v in changes.items() if k in EDITABLE_FIELDS}
    # turning the bundle off drops its stored details with it
    if patch.get("is_comprehensive_wage") is False and "comprehensive_wage_details" not in patch:
        patch["comprehensive_wage_details"] = None
    merged = validate_contract_terms({**_contract_state(obj), **patch})
    # write back every field the validation touched, not just the raw patch
    to_write = {k: v for k, v in merged.items() if k in patch or getattr(obj, k) != v}
    try:
        obj = repo.save_fields(obj, to_write, allowed=EDITABLE_FIELDS)
    except DatabaseError as ex:
        logger.exception("[contract] update failed id=%s: %s", contract_id, ex)
        raise StoreError() from ex
    return obj


def transition_status(*, contract_id: int, to_status: str) -> Contract:
    obj = get_contract(contract_id)
    if to_status not in Contract.Status.values:
        raise ValidationError({"status": f"Invalid status: {to_status}"})
    if obj.status == to_status:
        return obj
    if to_status not in ALLOWED_TRANSITIONS[obj.status]:
        raise ValidationError({"status": f"Cannot move contract from {obj.status} to {to_status}."})
    try:
        obj = repo.save_fields(obj, {"status": to_status})
    except DatabaseError as ex:
        logger.exception("[contract] transition failed id=%s: %s", contract_id, ex)
        raise StoreError() from ex
    logger.info("[contract] id=%s status -> %s", obj.id, to_status)
    return obj


def record_signature(*, contract_id: int, party: str, signature: str) -> Contract:
    field = SIGNATURE_FIELDS.get(party)
    if field is None:
        raise ValidationError({"party": f"Invalid party: {party}"})
    if not (signature or "").strip():
        raise ValidationError({"signature": "Signature is required."})
    obj = get_contract(contract_id)
    if obj.status == Contract.Status.COMPLETED:
        raise ValidationError({"status": "Completed contracts cannot be re-signed."})
    try:
        return repo.save_fields(obj, {field: signature})
    except DatabaseError as ex:
        logger.exception("[contract] signature write failed id=%s: %s", contract_id, ex)
        raise StoreError() from ex
