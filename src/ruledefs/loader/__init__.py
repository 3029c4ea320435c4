"""Annotation loading: schema provider seam and rule compiler."""

from ruledefs.loader.annotation_loader import (
    AnnotationRuleLoader,
    TYPE_FOR_CLASS,
    fully_qualified_name,
    guess_type,
)
from ruledefs.loader.schema_provider import (
    FieldDescriptor,
    ReflectionSchemaProvider,
    SchemaProvider,
)

__all__ = [
    "AnnotationRuleLoader",
    "TYPE_FOR_CLASS",
    "fully_qualified_name",
    "guess_type",
    "FieldDescriptor",
    "ReflectionSchemaProvider",
    "SchemaProvider",
]
