# -*- coding: utf-8 -*-
"""
Worker dashboard rules.

Pure part (works on any object exposing .id / .status / .folder_id):
- visibility: unfiled view vs. folder view (status overrides placement)
- dedupe of overlapping query results (first occurrence wins)
- selection helpers: only completed contracts are selectable; selection is
  caller-owned state, every helper returns a new set

DB part:
- build_dashboard: pending ∪ assigned-to-worker, deduped, filtered for the view
- bulk_delete / bulk_move: validated up front, one transaction each
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Set
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError

from labor.exceptions import NotFoundError, StoreError
from labor.models import Contract
from labor.repositories import contract_repository as repo
from labor.services import folder_service

logger = logging.getLogger(__name__)

PENDING = Contract.Status.PENDING
COMPLETED = Contract.Status.COMPLETED


# ====== Visibility ======
def is_visible_unfiled(contract) -> bool:
    return contract.status == PENDING or contract.folder_id is None

def is_visible_in_folder(contract, folder_id) -> bool:
    return contract.folder_id == folder_id and contract.status == COMPLETED

def filter_for_view(contracts: Iterable[Any], folder_id=None) -> List[Any]:
    if folder_id is None:
        return [c for c in contracts if is_visible_unfiled(c)]
    return [c for c in contracts if is_visible_in_folder(c, folder_id)]

def dedupe_by_id(*sources: Iterable[Any]) -> List[Any]:
    seen: Set[Any] = set()
    out: List[Any] = []
    for src in sources:
        for c in src:
            if c.id in seen:
                continue
            seen.add(c.id)
            out.append(c)
    return out


# ====== Selection (caller-owned state) ======
def selectable_ids(contracts: Iterable[Any]) -> Set[Any]:
    return {c.id for c in contracts if c.status == COMPLETED}

def select(selection: Set[Any], contract) -> Set[Any]:
    if contract.status != COMPLETED:
        return set(selection)
    return set(selection) | {contract.id}

def toggle(selection: Set[Any], contract) -> Set[Any]:
    if contract.id in selection:
        return set(selection) - {contract.id}
    return select(selection, contract)

def toggle_select_all(selection: Set[Any], contracts: Iterable[Any]) -> Set[Any]:
    selectable = selectable_ids(contracts)
    if selectable and selectable <= set(selection):
        return set()
    return selectable


# ====== Dashboard query ======
def build_dashboard(*, worker_id: Optional[int] = None, folder_id: Optional[int] = None) -> Dict[str, Any]:
    try:
        pending = list(repo.list_by_status(PENDING))
        assigned = list(repo.list_by_worker(worker_id)) if worker_id is not None else []
    except DatabaseError as ex:
        logger.exception("[dashboard] load failed worker=%s: %s", worker_id, ex)
        raise StoreError() from ex

    visible = filter_for_view(dedupe_by_id(pending, assigned), folder_id)
    return {
        "folder_id": folder_id,
        "pending": [c for c in visible if c.status == PENDING],
        "completed": [c for c in visible if c.status == COMPLETED],
        "selectable_ids": sorted(selectable_ids(visible)),
    }


# ====== Bulk mutations ======
def _load_selection(ids: Iterable[int]) -> List[Contract]:
    wanted = list(dict.fromkeys(ids or []))
    if not wanted:
        raise ValidationError({"ids": "No contracts selected."})
    found = {c.id: c for c in repo.list_by_ids(wanted)}
    missing = [i for i in wanted if i not in found]
    if missing:
        raise NotFoundError(f"Contract(s) not found: {', '.join(map(str, missing))}")
    not_completed = [i for i in wanted if found[i].status != COMPLETED]
    if not_completed:
        raise ValidationError({"ids": f"Only completed contracts can be managed: {', '.join(map(str, not_completed))}"})
    return [found[i] for i in wanted]


def bulk_delete(ids: Iterable[int]) -> Dict[str, Any]:
    contracts = _load_selection(ids)
    try:
        removed = repo.bulk_delete([c.id for c in contracts])
    except DatabaseError as ex:
        logger.exception("[dashboard] bulk delete failed ids=%s: %s", [c.id for c in contracts], ex)
        raise StoreError() from ex
    logger.info("[dashboard] bulk delete removed=%s", removed)
    return {
        "deleted": removed,
        "message": f"{removed}개의 계약서가 삭제되었습니다.",
        "selection": [],
    }


def bulk_move(ids: Iterable[int], folder_id: Optional[int], *, owner_id: Optional[int] = None) -> Dict[str, Any]:
    contracts = _load_selection(ids)
    if folder_id is None:
        folder_name = folder_service.UNFILED_NAME
    else:
        folder_name = folder_service.get_folder(folder_id, owner_id).name
    try:
        moved = repo.bulk_set_folder([c.id for c in contracts], folder_id)
    except DatabaseError as ex:
        logger.exception("[dashboard] bulk move failed folder=%s: %s", folder_id, ex)
        raise StoreError() from ex
    logger.info("[dashboard] bulk move moved=%s folder=%s", moved, folder_id)
    return {
        "moved": moved,
        "folder_id": folder_id,
        "folder_name": folder_name,
        "message": f"{moved}개의 계약서를 '{folder_name}'(으)로 이동했습니다.",
        "selection": [],
    }
