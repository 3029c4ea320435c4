"""Unified entrypoint for check annotations, loading and rule records."""

from __future__ import annotations

from ruledefs.check.annotations import (
    Cardinality,
    Priority,
    RuleAnnotation,
    RuleProperty,
    rule,
)
from ruledefs.config import LoaderConfig
from ruledefs.definitions import NewParam, NewRepository, NewRule, RulesDefinitionContext
from ruledefs.ir.param_type import RuleParamType
from ruledefs.ir.records import ParamRecord, RepositoryRecord, RuleRecord
from ruledefs.ir.types import RuleStatus, Severity
from ruledefs.loader.annotation_loader import AnnotationRuleLoader, guess_type
from ruledefs.loader.schema_provider import (
    FieldDescriptor,
    ReflectionSchemaProvider,
    SchemaProvider,
)

__all__ = [
    "Cardinality",
    "Priority",
    "RuleAnnotation",
    "RuleProperty",
    "rule",
    "LoaderConfig",
    "NewParam",
    "NewRepository",
    "NewRule",
    "RulesDefinitionContext",
    "RuleParamType",
    "ParamRecord",
    "RepositoryRecord",
    "RuleRecord",
    "RuleStatus",
    "Severity",
    "AnnotationRuleLoader",
    "guess_type",
    "FieldDescriptor",
    "ReflectionSchemaProvider",
    "SchemaProvider",
]
