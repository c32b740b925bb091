# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import viewsets, status, permissions, serializers
from rest_framework.decorators import action
from rest_framework.response import Response

from labor.serializers.contract_serializer import (
    ContractReadSerializer,
    ContractWriteSerializer,
    ContractTransitionSerializer,
    ContractSignSerializer,
    BulkDeleteSerializer,
    BulkMoveSerializer,
    DashboardSerializer,
)
from labor.services.contract_service import (
    create_contract as svc_create_contract,
    update_contract as svc_update_contract,
    transition_status as svc_transition_status,
    record_signature as svc_record_signature,
    get_contract as svc_get_contract,
)
from labor.services.dashboard_service import (
    build_dashboard as svc_build_dashboard,
    bulk_delete as svc_bulk_delete,
    bulk_move as svc_bulk_move,
)
from labor.services.legal_advice_service import request_legal_advice
from labor.selectors.contract_selector import filter_contracts, as_int_or_none
from labor.utils.pagination import ContractPagination

from .utils import (
    extend_schema, extend_schema_view, OpenApiResponse, inline_serializer,
    path_int, q_int, q_str, std_errors, service_error_response, SERVICE_ERRORS,
)

BulkResultSerializer = inline_serializer(
    name="ContractBulkResult",
    fields={
        "deleted": serializers.IntegerField(required=False),
        "moved": serializers.IntegerField(required=False),
        "folder_id": serializers.IntegerField(required=False, allow_null=True),
        "folder_name": serializers.CharField(required=False),
        "message": serializers.CharField(),
        "selection": serializers.ListField(child=serializers.IntegerField()),
    },
)

AdviceSerializer = inline_serializer(name="LegalAdvice", fields={"advice": serializers.CharField()})


@extend_schema_view(
    list=extend_schema(
        tags=["Contract"],
        summary="List contracts (filter by status / worker / employer / folder)",
        parameters=[
            q_str("status", "Comma separated: draft,pending,signed,completed"),
            q_int("worker_id", "Worker user id"),
            q_int("employer_id", "Employer user id"),
            q_str("folder_id", "Folder id, or `none` for unfiled"),
        ],
        responses={200: ContractReadSerializer(many=True)},
    ),
    retrieve=extend_schema(
        tags=["Contract"],
        summary="Get contract details",
        parameters=[path_int("pk", "Contract ID")],
        responses={200: ContractReadSerializer, **std_errors()},
    ),
    create=extend_schema(
        tags=["Contract"],
        summary="Create a contract (status=draft)",
        description="Shape and minimum-wage compliance are validated before anything is written.",
        request=ContractWriteSerializer,
        responses={201: ContractReadSerializer, **std_errors()},
    ),
    partial_update=extend_schema(
        tags=["Contract"],
        summary="Update contract terms (partial)",
        parameters=[path_int("pk", "Contract ID")],
        request=ContractWriteSerializer,
        responses={200: ContractReadSerializer, **std_errors()},
    ),
)
class ContractViewSet(viewsets.GenericViewSet):
    serializer_class = ContractReadSerializer
    permission_classes = [permissions.AllowAny]
    pagination_class = ContractPagination
    lookup_value_regex = r"\d+"

    def get_queryset(self):
        return filter_contracts(self.request.query_params)

    def list(self, request):
        qs = self.get_queryset()
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(ContractReadSerializer(page, many=True).data)
        return Response(ContractReadSerializer(qs, many=True).data)

    def retrieve(self, request, pk=None):
        try:
            obj = svc_get_contract(int(pk))
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(ContractReadSerializer(obj).data)

    def create(self, request):
        ser = ContractWriteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            obj = svc_create_contract(ser.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(ContractReadSerializer(obj).data, status=status.HTTP_201_CREATED)

    def partial_update(self, request, pk=None):
        ser = ContractWriteSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        try:
            obj = svc_update_contract(contract_id=int(pk), changes=ser.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(ContractReadSerializer(obj).data)

    # ---------- dashboard ----------
    @extend_schema(
        tags=["Dashboard"],
        summary="Worker dashboard: pending + completed contracts for the current view",
        description=(
            "Pending contracts (anyone) ∪ contracts assigned to `worker_id`, deduplicated. "
            "Without `folder_id` the unfiled view is returned (pending always shows here); "
            "with `folder_id` only completed contracts in that folder."
        ),
        parameters=[q_int("worker_id", "Worker user id"), q_int("folder_id", "Folder being viewed")],
        responses={200: DashboardSerializer, **std_errors()},
    )
    @action(detail=False, methods=["get"], url_path="dashboard")
    def dashboard(self, request):
        try:
            data = svc_build_dashboard(
                worker_id=as_int_or_none(request.query_params.get("worker_id")),
                folder_id=as_int_or_none(request.query_params.get("folder_id")),
            )
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(DashboardSerializer(data).data)

    @extend_schema(
        tags=["Dashboard"],
        summary="Delete selected (completed) contracts",
        request=BulkDeleteSerializer,
        responses={200: BulkResultSerializer, **std_errors()},
    )
    @action(detail=False, methods=["post"], url_path="bulk-delete")
    def bulk_delete(self, request):
        ser = BulkDeleteSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            result = svc_bulk_delete(ser.validated_data["ids"])
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(result)

    @extend_schema(
        tags=["Dashboard"],
        summary="Move selected (completed) contracts to a folder (`folder_id=null` = no folder)",
        request=BulkMoveSerializer,
        responses={200: BulkResultSerializer, **std_errors()},
    )
    @action(detail=False, methods=["post"], url_path="bulk-move")
    def bulk_move(self, request):
        ser = BulkMoveSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            result = svc_bulk_move(
                ser.validated_data["ids"],
                ser.validated_data["folder_id"],
                owner_id=ser.validated_data.get("owner_id"),
            )
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(result)

    # ---------- lifecycle ----------
    @extend_schema(
        tags=["Contract"],
        summary="Move contract status forward (draft → pending → signed → completed)",
        parameters=[path_int("pk", "Contract ID")],
        request=ContractTransitionSerializer,
        responses={200: ContractReadSerializer, **std_errors()},
    )
    @action(detail=True, methods=["post"], url_path="transition")
    def transition(self, request, pk=None):
        ser = ContractTransitionSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            obj = svc_transition_status(contract_id=int(pk), to_status=ser.validated_data["status"])
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(ContractReadSerializer(obj).data)

    @extend_schema(
        tags=["Contract"],
        summary="Store employer / worker signature",
        parameters=[path_int("pk", "Contract ID")],
        request=ContractSignSerializer,
        responses={200: ContractReadSerializer, **std_errors()},
    )
    @action(detail=True, methods=["post"], url_path="sign")
    def sign(self, request, pk=None):
        ser = ContractSignSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            obj = svc_record_signature(contract_id=int(pk), **ser.validated_data)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response(ContractReadSerializer(obj).data)

    @extend_schema(
        tags=["Contract"],
        summary="AI legal advice for this contract",
        parameters=[path_int("pk", "Contract ID")],
        request=None,
        responses={
            200: AdviceSerializer,
            402: OpenApiResponse(description="AI quota exhausted"),
            429: OpenApiResponse(description="Rate limited"),
            **std_errors(),
        },
    )
    @action(detail=True, methods=["post"], url_path="legal-advice")
    def legal_advice(self, request, pk=None):
        try:
            obj = svc_get_contract(int(pk))
            advice = request_legal_advice(obj)
        except SERVICE_ERRORS as e:
            return service_error_response(e)
        return Response({"advice": advice})
