"""Core enumerations shared by annotations, builders and records."""

from __future__ import annotations

from enum import Enum

from ruledefs.errors import SchemaError


class RuleStatus(str, Enum):
    """Lifecycle status of a rule in a repository."""

    READY = "READY"
    BETA = "BETA"
    DEPRECATED = "DEPRECATED"
    REMOVED = "REMOVED"

    @classmethod
    def parse(cls, value: str) -> "RuleStatus":
        """Resolve a status by its exact name (case-sensitive)."""

        if not isinstance(value, str):
            raise SchemaError(f"Rule status must be a string, got {type(value).__name__}.")
        try:
            return cls[value]
        except KeyError as exc:
            allowed = ", ".join(member.name for member in cls)
            raise SchemaError(f"Unknown rule status {value!r}; expected one of: {allowed}.") from exc


class Severity:
    """Severity names accepted as rule default severities."""

    INFO = "INFO"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"
    BLOCKER = "BLOCKER"
