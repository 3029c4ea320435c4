"""Annotations used by analyzer checks to declare rules."""

from ruledefs.check.annotations import (
    Cardinality,
    Priority,
    RuleAnnotation,
    RuleProperty,
    rule,
    rule_annotation,
)

__all__ = [
    "Cardinality",
    "Priority",
    "RuleAnnotation",
    "RuleProperty",
    "rule",
    "rule_annotation",
]
