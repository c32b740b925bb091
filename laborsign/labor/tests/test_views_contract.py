import pytest
from unittest.mock import patch
from django.test import override_settings
from rest_framework.test import APIClient

from labor.models import Contract


def _payload(**kw):
    data = {
        "employer_id": 1, "worker_id": 2,
        "employer_name": "정민재", "worker_name": "박지훈",
        "hourly_wage": "11000", "start_date": "2026-01-20",
        "work_days": ["토", "화", "목"], "work_days_per_week": 3,
        "work_start_time": "18:00", "work_end_time": "23:00", "break_minutes": 30,
        "work_location": "서울시 송파구 잠실동 178-3",
        "payment_day": 25, "payment_month": "current",
    }
    data.update(kw)
    return data


@pytest.mark.django_db
def test_create_and_retrieve_contract():
    client = APIClient()
    r = client.post("/api/contracts/", _payload(), format="json")
    assert r.status_code == 201, r.content
    body = r.json()
    assert body["status"] == "draft"
    assert body["work_days"] == ["화", "목", "토"]
    assert body["contract_mode"] == "hourly"

    r2 = client.get(f"/api/contracts/{body['id']}/")
    assert r2.status_code == 200
    assert r2.json()["worker_name"] == "박지훈"


@pytest.mark.django_db
def test_create_below_floor_returns_compliance_error():
    client = APIClient()
    r = client.post("/api/contracts/", _payload(include_weekly_holiday_pay=True), format="json")
    assert r.status_code == 400, r.content
    assert r.json()["code"] == "compliance"
    assert "12,432원" in r.json()["errors"]["hourly_wage"][0]
    assert Contract.objects.count() == 0


@pytest.mark.django_db
def test_partial_update_and_transition():
    client = APIClient()
    cid = client.post("/api/contracts/", _payload(), format="json").json()["id"]

    r = client.patch(f"/api/contracts/{cid}/", {"job_description": "야간 마감"}, format="json")
    assert r.status_code == 200, r.content
    assert r.json()["job_description"] == "야간 마감"

    r = client.post(f"/api/contracts/{cid}/transition/", {"status": "completed"}, format="json")
    assert r.status_code == 400
    r = client.post(f"/api/contracts/{cid}/transition/", {"status": "pending"}, format="json")
    assert r.status_code == 200
    assert r.json()["status"] == "pending"

    r = client.post(f"/api/contracts/{cid}/sign/", {"party": "worker", "signature": "sig"}, format="json")
    assert r.status_code == 200
    assert r.json()["has_worker_signature"] is True


@pytest.mark.django_db
def test_retrieve_missing_contract():
    r = APIClient().get("/api/contracts/999999/")
    assert r.status_code == 404


@pytest.mark.django_db
def test_list_filters(dashboard_data):
    client = APIClient()
    r = client.get("/api/contracts/?status=pending")
    assert r.status_code == 200
    assert r.json()["count"] == 2
    r = client.get("/api/contracts/?status=completed&worker_id=2&folder_id=none")
    assert [c["id"] for c in r.json()["results"]] == [dashboard_data["unfiled"].id]


@pytest.mark.django_db
def test_dashboard_endpoint(dashboard_data):
    folder = dashboard_data["folder"]
    client = APIClient()
    r = client.get(f"/api/contracts/dashboard/?worker_id=2&folder_id={folder.id}")
    assert r.status_code == 200, r.content
    body = r.json()
    assert body["pending"] == []
    assert sorted(body["selectable_ids"]) == sorted(c.id for c in dashboard_data["in_folder"])


@pytest.mark.django_db
def test_bulk_move_and_delete_endpoints(dashboard_data):
    client = APIClient()
    ids = [c.id for c in dashboard_data["in_folder"]]

    r = client.post("/api/contracts/bulk-move/", {"ids": ids, "folder_id": None}, format="json")
    assert r.status_code == 200, r.content
    assert r.json()["moved"] == 2
    assert r.json()["message"] == "2개의 계약서를 '전체'(으)로 이동했습니다."

    r = client.post("/api/contracts/bulk-delete/", {"ids": ids + [dashboard_data["pending"][0].id]}, format="json")
    assert r.status_code == 400
    r = client.post("/api/contracts/bulk-delete/", {"ids": ids + [999999]}, format="json")
    assert r.status_code == 404
    r = client.post("/api/contracts/bulk-delete/", {"ids": ids}, format="json")
    assert r.status_code == 200
    assert r.json()["deleted"] == 2


@pytest.mark.django_db
@override_settings(AI_GATEWAY_API_KEY="test-key")
def test_legal_advice_rate_limited(make_contract):
    obj = make_contract(status=Contract.Status.DRAFT)
    with patch("labor.clients.ai_gateway_client.requests.post") as post:
        post.return_value.status_code = 429
        r = APIClient().post(f"/api/contracts/{obj.id}/legal-advice/", format="json")
    assert r.status_code == 429
    assert r.json()["detail"] == "요청이 너무 많습니다. 잠시 후 다시 시도해주세요."


@pytest.mark.django_db
def test_comprehensive_contract_lists_separately_paid_allowances():
    r = APIClient().post("/api/contracts/", _payload(
        is_comprehensive_wage=True, business_size="under5",
        comprehensive_wage_details={"overtime_per_hour": "16500", "holiday_per_day": "132000"},
    ), format="json")
    assert r.status_code == 201, r.content
    body = r.json()
    assert body["contract_mode"] == "hourly_comprehensive"
    assert body["comprehensive_wage_details"] == {"overtime_per_hour": 16500, "holiday_per_day": 132000}
    assert body["paid_separately"] == ["night_allowance", "annual_leave_per_day"]


@pytest.mark.django_db
def test_unknown_comprehensive_key_rejected():
    r = APIClient().post("/api/contracts/", _payload(
        is_comprehensive_wage=True, business_size="over5",
        comprehensive_wage_details={"overtime_per_hour": "100", "bogus_key": "5"},
    ), format="json")
    assert r.status_code == 400, r.content
    assert "bogus_key" in r.json()["comprehensive_wage_details"]
    assert Contract.objects.count() == 0


@pytest.mark.django_db
def test_daily_hours_shown_with_two_decimals():
    r = APIClient().post("/api/contracts/", _payload(work_start_time="09:00", work_end_time="17:20", break_minutes=0), format="json")
    assert r.status_code == 201, r.content
    assert r.json()["daily_work_hours"] == "8.33"
