import pytest
from unittest.mock import patch
from django.core.exceptions import ValidationError
from django.db import DatabaseError

from labor.exceptions import NotFoundError, StoreError
from labor.models import Contract
from labor.services import dashboard_service as svc
from labor.services.folder_service import create_folder


def _ids(items):
    return {c.id for c in items}


@pytest.mark.django_db
def test_unfiled_view(dashboard_data):
    d = dashboard_data
    board = svc.build_dashboard(worker_id=2)
    # pending from anyone, even when tagged with a folder
    assert _ids(board["pending"]) == _ids(d["pending"])
    assert _ids(board["completed"]) == {d["unfiled"].id}
    assert board["selectable_ids"] == [d["unfiled"].id]


@pytest.mark.django_db
def test_folder_view(dashboard_data):
    d = dashboard_data
    board = svc.build_dashboard(worker_id=2, folder_id=d["folder"].id)
    assert board["pending"] == []
    assert _ids(board["completed"]) == _ids(d["in_folder"])


@pytest.mark.django_db
def test_dashboard_has_no_duplicates(dashboard_data):
    board = svc.build_dashboard(worker_id=2)
    ids = [c.id for c in board["pending"] + board["completed"]]
    assert len(ids) == len(set(ids))


@pytest.mark.django_db
def test_dashboard_store_failure(db):
    with patch("labor.services.dashboard_service.repo.list_by_status", side_effect=DatabaseError("boom")):
        with pytest.raises(StoreError):
            svc.build_dashboard(worker_id=2)


@pytest.mark.django_db
def test_bulk_move_to_folder(dashboard_data):
    target = create_folder(owner_id=2, name="보관")
    ids = [c.id for c in dashboard_data["in_folder"]]
    res = svc.bulk_move(ids, target.id, owner_id=2)
    assert res["moved"] == 2
    assert res["folder_name"] == "보관"
    assert res["message"] == "2개의 계약서를 '보관'(으)로 이동했습니다."
    assert res["selection"] == []
    assert Contract.objects.filter(folder=target).count() == 2


@pytest.mark.django_db
def test_bulk_move_to_unfiled(dashboard_data):
    ids = [c.id for c in dashboard_data["in_folder"]]
    res = svc.bulk_move(ids, None)
    assert res["folder_name"] == "전체"
    assert Contract.objects.filter(id__in=ids, folder__isnull=True).count() == 2


@pytest.mark.django_db
def test_bulk_move_to_foreign_folder(dashboard_data):
    foreign = create_folder(owner_id=9, name="X")
    with pytest.raises(PermissionError):
        svc.bulk_move([dashboard_data["unfiled"].id], foreign.id, owner_id=2)


@pytest.mark.django_db
def test_bulk_delete(dashboard_data):
    ids = [c.id for c in dashboard_data["in_folder"]]
    res = svc.bulk_delete(ids)
    assert res["deleted"] == 2
    assert res["message"] == "2개의 계약서가 삭제되었습니다."
    assert Contract.objects.count() == 4


@pytest.mark.django_db
def test_bulk_delete_rejects_pending(dashboard_data):
    ids = [dashboard_data["unfiled"].id, dashboard_data["pending"][0].id]
    with pytest.raises(ValidationError):
        svc.bulk_delete(ids)
    assert Contract.objects.count() == 6


@pytest.mark.django_db
def test_bulk_delete_missing_id_deletes_nothing(dashboard_data):
    with pytest.raises(NotFoundError):
        svc.bulk_delete([dashboard_data["unfiled"].id, 987654])
    assert Contract.objects.count() == 6


@pytest.mark.django_db
def test_empty_selection_rejected(db):
    with pytest.raises(ValidationError):
        svc.bulk_delete([])
