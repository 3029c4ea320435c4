"""Custom exceptions for rule definition loading."""

from __future__ import annotations


class RuleDefinitionError(Exception):
    """Base exception for rule-definition failures."""


class SchemaError(RuleDefinitionError):
    """Raised when a record or type definition is invalid."""


class ParamTypeError(SchemaError, ValueError):
    """Raised when a rule parameter type descriptor cannot be parsed."""


class AnnotationError(RuleDefinitionError):
    """Raised when check annotations are malformed."""


class InvalidRuleStatusError(AnnotationError):
    """Raised when a rule annotation carries an unknown status."""


class InvalidPropertyTypeError(AnnotationError):
    """Raised when a rule property declares an unparsable type."""


class MissingRuleAnnotationError(AnnotationError):
    """Raised when a class has no rule annotation and the policy is 'error'."""


class RepositoryError(RuleDefinitionError):
    """Raised when repository builder operations fail."""
