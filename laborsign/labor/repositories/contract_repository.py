# -*- coding: utf-8 -*-
"""
Repository layer for Contract (pure DB):
- insert / update fields / query by status, worker, folder
- bulk delete and bulk folder update by id set
- NO business rules (status checks, wage validation...); the service decides.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional
from django.db import transaction
from django.db.models import QuerySet

from labor.models import Contract


# ============================
# Base queries
# ============================
def base_qs() -> QuerySet[Contract]:
    return Contract.objects.all()

def get_or_none(contract_id: int) -> Optional[Contract]:
    return base_qs().filter(id=contract_id).first()

def list_by_status(status: str) -> QuerySet[Contract]:
    return base_qs().filter(status=status).order_by("-created_at")

def list_by_worker(worker_id: int) -> QuerySet[Contract]:
    return base_qs().filter(worker_id=worker_id).order_by("-created_at")

def list_by_ids(ids: Iterable[int]) -> QuerySet[Contract]:
    return base_qs().filter(id__in=list(ids))

def filter_contracts(filters: Dict[str, Any]) -> QuerySet[Contract]:
    qs = base_qs()
    if (statuses := filters.get("status")):
        qs = qs.filter(status__in=statuses)
    if (worker_id := filters.get("worker_id")) is not None:
        qs = qs.filter(worker_id=worker_id)
    if (employer_id := filters.get("employer_id")) is not None:
        qs = qs.filter(employer_id=employer_id)
    if "folder_id" in filters:
        fid = filters["folder_id"]
        qs = qs.filter(folder__isnull=True) if fid is None else qs.filter(folder_id=fid)
    return qs.order_by("-created_at")


# ============================
# Mutations (pure DB)
# ============================
@transaction.atomic
def create(data: Dict[str, Any]) -> Contract:
    return Contract.objects.create(**data)

@transaction.atomic
def save_fields(obj: Contract, patch: Dict[str, Any], allowed: Optional[Iterable[str]] = None) -> Contract:
    fields: List[str] = []
    for k, v in patch.items():
        if (allowed is None) or (k in allowed):
            setattr(obj, k, v)
            fields.append(k)
    if fields:
        fields.append("updated_at")
        obj.save(update_fields=fields)
    return obj

@transaction.atomic
def bulk_delete(ids: Iterable[int]) -> int:
    deleted, _ = Contract.objects.filter(id__in=list(ids)).delete()
    return deleted

@transaction.atomic
def bulk_set_folder(ids: Iterable[int], folder_id: Optional[int]) -> int:
    return Contract.objects.filter(id__in=list(ids)).update(folder_id=folder_id)

def detach_folder(folder_id: int) -> int:
    """Clear folder for every contract pointing at folder_id. Caller holds the transaction."""
    return Contract.objects.filter(folder_id=folder_id).update(folder=None)
