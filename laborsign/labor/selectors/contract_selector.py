# -*- coding: utf-8 -*-
"""
Selector for Contract:
- Normalise query-string input (string -> list/int/None)
- Delegate to the repository
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
from django.db.models import QuerySet

from labor.models import Contract
from labor.repositories import contract_repository as repo

NULL_TOKENS = {"", "none", "null"}


def _as_str_list(v: Any) -> List[str]:
    if v is None:
        return []
    raw = v if isinstance(v, (list, tuple, set)) else [v]
    out = []
    for x in raw:
        out.extend(s.strip() for s in str(x).split(",") if s.strip())
    return out

def as_int_or_none(v: Any) -> Optional[int]:
    if v is None:
        return None
    s = str(v).strip()
    if s.lower() in NULL_TOKENS or not s.lstrip("-").isdigit():
        return None
    return int(s)

def filter_contracts(params: Dict[str, Any]) -> QuerySet[Contract]:
    norm: Dict[str, Any] = {
        "status": [s for s in _as_str_list(params.get("status")) if s in Contract.Status.values],
        "worker_id": as_int_or_none(params.get("worker_id")),
        "employer_id": as_int_or_none(params.get("employer_id")),
    }
    # folder=none -> unfiled only; absent -> no folder filter
    if "folder_id" in params:
        norm["folder_id"] = as_int_or_none(params.get("folder_id"))
    return repo.filter_contracts(norm)
