# views/utils.py
"""
Shared tooling for the labor views:
- drf-spectacular helpers (error schema, path/query params, std_errors)
- service_error_response(): maps service exceptions to HTTP responses
"""
from django.core.exceptions import ValidationError
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiResponse, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers, status
from rest_framework.response import Response

from labor.exceptions import ComplianceError, LegalAdviceError, NotFoundError, StoreError

# ---- Reusable error schema
ErrorSerializer = inline_serializer(
    name="Error",
    fields={"detail": serializers.CharField()}
)

# ---- Param helpers

def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)

def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=required, description=description)

def q_str(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description)

def q_bool(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.BOOL, OpenApiParameter.QUERY, required=required, description=description)


def std_errors(extra: dict | None = None):
    """Standard error response mapping you can merge into responses=..."""
    errs = {
        400: OpenApiResponse(ErrorSerializer, description="Bad Request / compliance error"),
        403: OpenApiResponse(ErrorSerializer, description="Forbidden"),
        404: OpenApiResponse(ErrorSerializer, description="Not Found"),
        503: OpenApiResponse(ErrorSerializer, description="Store failure"),
    }
    if extra:
        errs.update(extra)
    return errs


# ---- Exception -> Response

def service_error_response(exc: Exception) -> Response:
    if isinstance(exc, ValidationError):
        body = {"detail": "; ".join(exc.messages)}
        if hasattr(exc, "error_dict"):
            body["errors"] = exc.message_dict
        if isinstance(exc, ComplianceError):
            body["code"] = "compliance"
        return Response(body, status=status.HTTP_400_BAD_REQUEST)
    if isinstance(exc, PermissionError):
        return Response({"detail": str(exc)}, status=status.HTTP_403_FORBIDDEN)
    if isinstance(exc, NotFoundError):
        return Response({"detail": str(exc)}, status=status.HTTP_404_NOT_FOUND)
    if isinstance(exc, LegalAdviceError):
        return Response({"detail": exc.message}, status=exc.status_code)
    if isinstance(exc, StoreError):
        return Response({"detail": exc.message}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
    raise exc


SERVICE_ERRORS = (ValidationError, PermissionError, NotFoundError, LegalAdviceError, StoreError)

__all__ = [
    "extend_schema", "extend_schema_view", "OpenApiParameter",
    "OpenApiResponse", "OpenApiTypes", "inline_serializer", "ErrorSerializer",
    "path_int", "q_int", "q_str", "q_bool", "std_errors",
    "service_error_response", "SERVICE_ERRORS",
]
