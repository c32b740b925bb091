import pytest
from datetime import date, time
from decimal import Decimal
from labor.models import Contract, ContractFolder


@pytest.fixture
def contract_data():
    # 2026 minimum wage, no weekly holiday pay bundled
    return {
        "employer_id": 1,
        "worker_id": 2,
        "employer_name": "정민재",
        "worker_name": "박지훈",
        "wage_type": "hourly",
        "hourly_wage": Decimal("11000"),
        "start_date": date(2026, 1, 20),
        "work_days": ["토", "화", "목"],
        "work_days_per_week": 3,
        "work_start_time": time(18, 0),
        "work_end_time": time(23, 0),
        "break_minutes": 30,
        "work_location": "서울시 송파구 잠실동 178-3",
        "business_name": "GS25 잠실역점",
        "job_description": "계산 및 상품 진열, 재고 관리",
        "payment_day": 25,
        "payment_month": "current",
    }


@pytest.fixture
def make_contract(db):
    def _make(**overrides):
        data = {
            "employer_name": "이현수",
            "worker_name": "최유진",
            "hourly_wage": Decimal("12432"),
            "include_weekly_holiday_pay": True,
            "start_date": date(2026, 1, 6),
            "work_days": ["월", "화", "수", "목", "금"],
            "work_start_time": time(11, 0),
            "work_end_time": time(15, 0),
            "work_location": "서울시 강남구 역삼동 823-21",
            "status": Contract.Status.COMPLETED,
        }
        data.update(overrides)
        return Contract.objects.create(**data)
    return _make


@pytest.fixture
def folder(db):
    return ContractFolder.objects.create(owner_id=2, name="Signed", color="blue")


@pytest.fixture
def dashboard_data(make_contract, folder):
    # worker 2: two completed in folder, one completed unfiled, one pending tagged with the folder
    c1 = make_contract(worker_id=2, folder=folder)
    c2 = make_contract(worker_id=2, folder=folder)
    c3 = make_contract(worker_id=2)
    p1 = make_contract(worker_id=2, folder=folder, status=Contract.Status.PENDING)
    p2 = make_contract(worker_id=9, status=Contract.Status.PENDING)
    other = make_contract(worker_id=9)
    return {"folder": folder, "in_folder": [c1, c2], "unfiled": c3, "pending": [p1, p2], "other": other}
