# -*- coding: utf-8 -*-
"""
Repository layer for ContractFolder (pure DB).
"""
from __future__ import annotations
from typing import Optional, Dict, Any, List
from django.db import transaction
from django.db.models import QuerySet

from labor.models import ContractFolder
from labor.repositories import contract_repository


# ============== Queries ==============
def get_or_none(folder_id: int) -> Optional[ContractFolder]:
    return ContractFolder.objects.filter(id=folder_id).first()

def list_by_owner(owner_id: int) -> QuerySet[ContractFolder]:
    return ContractFolder.objects.filter(owner_id=owner_id).order_by("created_at")


# ============== Mutations ==============
@transaction.atomic
def create(data: Dict[str, Any]) -> ContractFolder:
    return ContractFolder.objects.create(**data)

@transaction.atomic
def save_fields(obj: ContractFolder, patch: Dict[str, Any], allowed: Optional[set] = None) -> ContractFolder:
    fields: List[str] = []
    for k, v in patch.items():
        if (allowed is None) or (k in allowed):
            setattr(obj, k, v); fields.append(k)
    if fields:
        obj.save(update_fields=fields + ["updated_at"])
    return obj

@transaction.atomic
def delete_with_detach(obj: ContractFolder) -> int:
    """Detach contracts first, then drop the folder. Returns detached count."""
    detached = contract_repository.detach_folder(obj.id)
    obj.delete()
    return detached
