# -*- coding: utf-8 -*-
"""
Service for ContractFolder.
- Name / color validation, owner check on rename/recolor/delete.
- Delete detaches contracts (folder_id -> NULL) in the same transaction and
  resets the caller's view context when the deleted folder was the one open.
"""
from __future__ import annotations
from typing import Any, Dict, Optional
import logging

from django.core.exceptions import ValidationError
from django.db import DatabaseError

from labor.exceptions import NotFoundError, StoreError
from labor.models import ContractFolder
from labor.repositories import folder_repository as repo

logger = logging.getLogger(__name__)

UNFILED_NAME = "전체"


def _clean_name(name: Any) -> str:
    name = (name or "").strip()
    if not name:
        raise ValidationError({"name": "Folder name must not be empty."})
    return name


def _clean_color(color: Any) -> str:
    color = color or ContractFolder.Color.GRAY
    if color not in ContractFolder.Color.values:
        raise ValidationError({"color": f"Invalid folder color: {color}"})
    return color


def get_folder(folder_id: int, owner_id: Optional[int] = None) -> ContractFolder:
    obj = repo.get_or_none(folder_id)
    if obj is None:
        raise NotFoundError(f"Folder #{folder_id} not found.")
    if owner_id is not None and obj.owner_id != owner_id:
        raise PermissionError("Folder belongs to another user.")
    return obj



def create_folder(*, owner_id: int, name: str, color: Optional[str] = None) -> ContractFolder:
    data = {"owner_id": owner_id, "name": _clean_name(name), "color": _clean_color(color)}
    try:
        obj = repo.create(data)
    except DatabaseError as ex:
        logger.exception("[folder] create failed owner=%s: %s", owner_id, ex)
        raise StoreError() from ex
    logger.info("[folder] created id=%s owner=%s", obj.id, owner_id)
    return obj


def update_folder(*, folder_id: int, owner_id: Optional[int] = None, **changes: Any) -> ContractFolder:
    obj = get_folder(folder_id, owner_id)
    patch: Dict[str, Any] = {}
    if "name" in changes:
        patch["name"] = _clean_name(changes["name"])
    if "color" in changes:
        patch["color"] = _clean_color(changes["color"])
    try:
        return repo.save_fields(obj, patch, allowed={"name", "color"})
    except DatabaseError as ex:
        logger.exception("[folder] update failed id=%s: %s", folder_id, ex)
        raise StoreError() from ex


def delete_folder(*, folder_id: int, owner_id: Optional[int] = None,
                  current_folder_id: Optional[int] = None) -> Dict[str, Any]:
    obj = get_folder(folder_id, owner_id)
    try:
        detached = repo.delete_with_detach(obj)
    except DatabaseError as ex:
        logger.exception("[folder] delete failed id=%s: %s", folder_id, ex)
        raise StoreError() from ex
    logger.info("[folder] deleted id=%s detached=%s", folder_id, detached)
    return {
        "deleted_folder_id": folder_id,
        "detached": detached,
        # viewing the folder we just removed -> back to the unfiled view
        "current_folder_id": None if current_folder_id == folder_id else current_folder_id,
    }
