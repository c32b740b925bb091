# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import viewsets, status, permissions
from rest_framework.response import Response

from labor.serializers.folder_serializer import (
    FolderReadSerializer,
    FolderCreateSerializer,
    FolderUpdateSerializer,
    FolderDeleteResultSerializer,
)
from labor.services.folder_service import (
    create_folder as svc_create_folder,
    update_folder as svc_update_folder,
    delete_folder as svc_delete_folder,
)
from labor.selectors.folder_selector import list_folders_for_owner
from labor.selectors.contract_selector import as_int_or_none

from .utils import (
    extend_schema, extend_schema_view, path_int, q_int, std_errors,
    service_error_response, SERVICE_ERRORS,
)


@extend_schema_view(
    list=extend_schema(
        tags=["Folder"],
        summary="List folders of an owner",
        parameters=[q_int("owner_id", "Owner user id", required=True)],
        responses={200: FolderReadSerializer(many=True), **std_errors()},
    ),
    create=extend_schema(
        tags=["Folder"],
        summary="Create a folder",
        request=FolderCreateSerializer,
        responses={201: FolderReadSerializer, **std_errors()},
    ),
    partial_update=extend_schema(
        tags=["Folder"],
        summary="Rename / recolor a folder",
        parameters=[path_int("pk", "Folder ID")],
        request=FolderUpdateSerializer,
        responses={200: FolderReadSerializer, **std_errors()},
    ),
    destroy=extend_schema(
        tags=["Folder"],
        summary="Delete a folder (its contracts are detached, not deleted)",
        description="Pass `current_folder_id` (the folder being viewed) to get the reset view context back.",
        parameters=[
            path_int("pk", "Folder ID"),
            q_int("owner_id", "Owner user id"),
            q_int("current_folder_id", "Folder currently open in the client"),
        ],
        responses={200: FolderDeleteResultSerializer, **std_errors()},
    ),
)
class FolderViewSet(viewsets.GenericViewSet):
    serializer_class = FolderReadSerializer
    permission_classes = [permissions.AllowAny]
    lookup_value_regex = r"\d+"

    def list(self, request):
        owner_id = as_int_or_none(request.query_params.get("owner_id"))
        if owner_id is None:
            return Response({"detail": "Missing/invalid owner_id"}, status=status.HTTP_400_BAD_REQUEST)
        return Response(FolderReadSerializer(list_folders_for_owner(owner_id), many=True).data)

    def create(self, request):
        ser = FolderCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            obj = svc_create_folder(**ser.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(FolderReadSerializer(obj).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        ser = FolderUpdateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            obj = svc_update_folder(folder_id=int(pk), **ser.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(FolderReadSerializer(obj).data)

    def destroy(self, request, pk=None):
        try:
            result = svc_delete_folder(
                folder_id=int(pk),
                owner_id=as_int_or_none(request.query_params.get("owner_id")),
                current_folder_id=as_int_or_none(request.query_params.get("current_folder_id")),
            )
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(FolderDeleteResultSerializer(result).data)
