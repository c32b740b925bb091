# -*- coding: utf-8 -*-
"""
Legal advice for a contract draft:
- build_contract_summary(): plain-text field/value lines fed to the AI gateway
- request_legal_advice(): one outbound call with a fixed system instruction
"""
from __future__ import annotations
from decimal import Decimal
import logging

from labor.clients.ai_gateway_client import AIGatewayClient
from labor.models import Contract

logger = logging.getLogger(__name__)

FALLBACK_ADVICE = "조언을 생성할 수 없습니다."

SYSTEM_INSTRUCTION = (
    "당신은 대한민국 노동법 전문 법률 자문가입니다. 사용자가 작성한 근로계약서를 분석하고 "
    "다음 관점에서 조언을 제공해주세요:\n\n"
    "1. **법적 적합성**: 근로기준법에 맞게 작성되었는지 확인\n"
    "2. **필수 기재사항**: 누락된 중요 항목이 있는지 체크\n"
    "3. **근로자 보호**: 근로자의 권리가 충분히 보장되는지 검토\n"
    "4. **개선 제안**: 더 명확하거나 공정하게 수정할 부분 제안\n\n"
    "응답은 친절하고 이해하기 쉬운 한국어로 작성해주세요.\n"
    "중요한 법적 문제가 있다면 ⚠️ 표시와 함께 강조해주세요.\n"
    "좋은 점이 있다면 ✅ 표시와 함께 칭찬해주세요."
)


def _money(value) -> str:
    if value is None:
        return "미정"
    d = Decimal(str(value))
    return f"{int(d):,}원" if d == d.to_integral_value() else f"{d:,}원"


def _hhmm(value) -> str:
    if value is None:
        return "미정"
    return value.strftime("%H:%M") if hasattr(value, "strftime") else str(value)


def build_contract_summary(contract) -> str:
    """
    Line order: employer, worker, wage (+ weekly holiday flag), period, hours,
    days/week, location, payment day/month, job description.
    """
    wage = _money(contract.hourly_wage)
    if contract.include_weekly_holiday_pay:
        wage += " (주휴수당 포함)"
    if contract.wage_type == Contract.WageType.MONTHLY:
        wage = f"월 {_money(contract.monthly_wage)} / 시급 {wage}"

    if contract.no_end_date:
        end = "(종료일 없음)"
    else:
        end = str(contract.end_date) if contract.end_date else "미정"

    per_week = f"주 {contract.work_days_per_week}일" if contract.work_days_per_week else "미정"
    pay_month = "당월" if contract.payment_month == Contract.PaymentMonth.CURRENT else "익월"
    if contract.payment_end_of_month:
        pay_day = "말일"
    else:
        pay_day = f"{contract.payment_day}일" if contract.payment_day else "미정"

    lines = [
        "근로계약서 정보:",
        f"- 사업주: {contract.employer_name}",
        f"- 근로자: {contract.worker_name}",
        f"- 시급: {wage}",
        f"- 근무 기간: {contract.start_date} ~ {end}",
        f"- 근무 시간: {_hhmm(contract.work_start_time)} ~ {_hhmm(contract.work_end_time)}",
        f"- 주당 근무일수: {per_week}",
        f"- 근무 장소: {contract.work_location}",
        f"- 임금 지급일: {pay_month} {pay_day}",
        f"- 업무 내용: {contract.job_description or '미기재'}",
    ]
    return "\n".join(lines)


def request_legal_advice(contract) -> str:
    summary = build_contract_summary(contract)
    messages = [
        {"role": "system", "content": SYSTEM_INSTRUCTION},
        {"role": "user", "content": f"다음 근로계약서를 분석하고 법적 조언을 해주세요:\n{summary}"},
    ]
    advice = AIGatewayClient.complete(messages)
    logger.info("[advice] contract=%s answered=%s", getattr(contract, "pk", None), bool(advice))
    return advice or FALLBACK_ADVICE
