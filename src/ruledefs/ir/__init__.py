"""Rule types, parameter types and compiled records."""

from ruledefs.ir.param_type import RuleParamType
from ruledefs.ir.records import ParamRecord, RepositoryRecord, RuleRecord
from ruledefs.ir.types import RuleStatus, Severity

__all__ = [
    "RuleParamType",
    "ParamRecord",
    "RepositoryRecord",
    "RuleRecord",
    "RuleStatus",
    "Severity",
]
