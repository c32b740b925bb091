import pytest
from datetime import date, time
from decimal import Decimal
from unittest.mock import MagicMock, patch

import requests
from django.test import override_settings

from labor.exceptions import LegalAdviceError
from labor.models import Contract
from labor.services.legal_advice_service import (
    FALLBACK_ADVICE, build_contract_summary, request_legal_advice,
)


def _contract(**kw):
    data = dict(
        employer_name="정민재", worker_name="박지훈",
        hourly_wage=Decimal("12432"), include_weekly_holiday_pay=True,
        start_date=date(2026, 1, 20), no_end_date=True,
        work_start_time=time(18, 0), work_end_time=time(23, 0),
        work_days_per_week=3, work_location="서울시 송파구",
        payment_month="next", payment_end_of_month=True,
    )
    data.update(kw)
    return Contract(**data)


def _response(status_code=200, payload=None):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.json.return_value = payload or {}
    resp.text = ""
    return resp


def test_summary_lines_in_order():
    lines = build_contract_summary(_contract()).splitlines()
    assert lines[0] == "근로계약서 정보:"
    assert lines[1] == "- 사업주: 정민재"
    assert lines[2] == "- 근로자: 박지훈"
    assert lines[3] == "- 시급: 12,432원 (주휴수당 포함)"
    assert lines[4] == "- 근무 기간: 2026-01-20 ~ (종료일 없음)"
    assert lines[5] == "- 근무 시간: 18:00 ~ 23:00"
    assert lines[6] == "- 주당 근무일수: 주 3일"
    assert lines[7] == "- 근무 장소: 서울시 송파구"
    assert lines[8] == "- 임금 지급일: 익월 말일"
    assert lines[9] == "- 업무 내용: 미기재"


def test_summary_monthly_wage_and_fixed_day():
    text = build_contract_summary(_contract(
        wage_type="monthly", monthly_wage=Decimal("2600000"), include_weekly_holiday_pay=False,
        no_end_date=False, end_date=date(2026, 12, 31),
        payment_month="current", payment_end_of_month=False, payment_day=10,
    ))
    assert "- 시급: 월 2,600,000원 / 시급 12,432원" in text
    assert "~ 2026-12-31" in text
    assert "- 임금 지급일: 당월 10일" in text


@override_settings(AI_GATEWAY_API_KEY="test-key", AI_GATEWAY_URL="https://gateway.test/v1/chat/completions")
def test_advice_returns_first_choice():
    payload = {"choices": [{"message": {"content": "✅ 필수 기재사항이 모두 포함되어 있습니다."}}]}
    with patch("labor.clients.ai_gateway_client.requests.post", return_value=_response(200, payload)) as post:
        advice = request_legal_advice(_contract())
    assert advice.startswith("✅")
    sent = post.call_args.kwargs["json"]
    assert sent["stream"] is False
    assert sent["messages"][0]["role"] == "system"
    assert "근로계약서 정보:" in sent["messages"][1]["content"]
    assert post.call_args.kwargs["headers"]["Authorization"] == "Bearer test-key"


@override_settings(AI_GATEWAY_API_KEY="test-key")
def test_advice_empty_answer_falls_back():
    with patch("labor.clients.ai_gateway_client.requests.post", return_value=_response(200, {"choices": []})):
        assert request_legal_advice(_contract()) == FALLBACK_ADVICE


@override_settings(AI_GATEWAY_API_KEY="test-key")
@pytest.mark.parametrize("code,expected", [(429, 429), (402, 402), (500, 500), (503, 500)])
def test_advice_gateway_errors(code, expected):
    with patch("labor.clients.ai_gateway_client.requests.post", return_value=_response(code)):
        with pytest.raises(LegalAdviceError) as ei:
            request_legal_advice(_contract())
    assert ei.value.status_code == expected


@override_settings(AI_GATEWAY_API_KEY="test-key")
def test_advice_gateway_unreachable():
    with patch("labor.clients.ai_gateway_client.requests.post", side_effect=requests.ConnectionError("down")):
        with pytest.raises(LegalAdviceError) as ei:
            request_legal_advice(_contract())
    assert ei.value.message == "AI 분석에 실패했습니다."


@override_settings(AI_GATEWAY_API_KEY="")
def test_advice_without_key_never_calls_out():
    with patch("labor.clients.ai_gateway_client.requests.post") as post:
        with pytest.raises(LegalAdviceError):
            request_legal_advice(_contract())
    post.assert_not_called()
