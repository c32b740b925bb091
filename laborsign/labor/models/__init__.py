# Load all models into the labor.models namespace
from .mixins import TimeStampedModel

from .folder import ContractFolder
from .contract import Contract, WORK_DAYS, COMPREHENSIVE_DETAIL_KEYS

__all__ = [
    "TimeStampedModel",
    "ContractFolder",
    "Contract", "WORK_DAYS", "COMPREHENSIVE_DETAIL_KEYS",
]
