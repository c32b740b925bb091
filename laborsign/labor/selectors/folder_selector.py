# -*- coding: utf-8 -*-
"""
Selector layer for ContractFolder: delegates to the repo.
"""
from __future__ import annotations
from django.db.models import QuerySet

from labor.models import ContractFolder
from labor.repositories import folder_repository as repo

def list_folders_for_owner(owner_id: int) -> QuerySet[ContractFolder]:
    return repo.list_by_owner(owner_id)
