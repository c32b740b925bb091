# -*- coding: utf-8 -*-
"""
Error taxonomy for the labor app.
- ValidationError: bad input / contract shape (Django's own class)
- ComplianceError: wage below the statutory floor
- NotFoundError: folder/contract id missing at mutation time
- StoreError: wrapped DB failure, store codes are not interpreted
- LegalAdviceError: outbound AI advice call failed
"""
from __future__ import annotations

from django.core.exceptions import ObjectDoesNotExist, ValidationError


class ComplianceError(ValidationError):
    """Hourly wage below the statutory effective floor."""


class NotFoundError(ObjectDoesNotExist):
    pass


class StoreError(Exception):
    def __init__(self, message: str = "operation failed"):
        super().__init__(message)
        self.message = message


class LegalAdviceError(Exception):
    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


__all__ = [
    "ValidationError",
    "ComplianceError",
    "NotFoundError",
    "StoreError",
    "LegalAdviceError",
]
