"""Declarative annotations for analyzer check classes.

A check declares its rule with the :func:`rule` class decorator and its
configurable parameters with :class:`RuleProperty`, either as the field value
or as ``Annotated`` metadata::

    @rule(key="S100", priority=Priority.MINOR)
    class MethodNameCheck:
        format: str = RuleProperty(default_value="^[a-z][a-zA-Z0-9]*$")
        max_length: Annotated[int, RuleProperty(key="max")] = 40
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from ruledefs.errors import AnnotationError


RULE_ANNOTATION_ATTR = "__rule_annotation__"

_C = TypeVar("_C", bound=type)


class Priority(Enum):
    """Default severity of a rule, lowest first."""

    INFO = "INFO"
    MINOR = "MINOR"
    MAJOR = "MAJOR"
    CRITICAL = "CRITICAL"
    BLOCKER = "BLOCKER"


class Cardinality(Enum):
    """MULTIPLE marks a template rule that users instantiate several times."""

    SINGLE = "SINGLE"
    MULTIPLE = "MULTIPLE"


@dataclass(frozen=True)
class RuleAnnotation:
    """Rule-level metadata attached to a check class."""

    key: str = ""
    name: str = ""
    description: str = ""
    priority: Priority = Priority.MAJOR
    cardinality: Cardinality = Cardinality.SINGLE
    status: str = "READY"

    def __post_init__(self) -> None:
        if not isinstance(self.priority, Priority):
            raise AnnotationError(f"Rule priority must be a Priority, got {self.priority!r}.")
        if not isinstance(self.cardinality, Cardinality):
            raise AnnotationError(f"Rule cardinality must be a Cardinality, got {self.cardinality!r}.")


def rule(
    key: str = "",
    name: str = "",
    description: str = "",
    priority: Priority = Priority.MAJOR,
    cardinality: Cardinality = Cardinality.SINGLE,
    status: str = "READY",
) -> Callable[[_C], _C]:
    """Class decorator attaching a :class:`RuleAnnotation`."""

    annotation = RuleAnnotation(
        key=key,
        name=name,
        description=description,
        priority=priority,
        cardinality=cardinality,
        status=status,
    )

    def decorate(cls: _C) -> _C:
        if not isinstance(cls, type):
            raise AnnotationError("@rule can only decorate classes.")
        setattr(cls, RULE_ANNOTATION_ATTR, annotation)
        return cls

    return decorate


def rule_annotation(cls: type) -> Optional[RuleAnnotation]:
    """Return the closest rule annotation along the MRO, if any."""

    for klass in cls.__mro__:
        found = klass.__dict__.get(RULE_ANNOTATION_ATTR)
        if isinstance(found, RuleAnnotation):
            return found
    return None


class RuleProperty:
    """Parameter-level metadata for a check field.

    Used as a class attribute it also acts as a descriptor: instances read the
    value assigned to them, or ``default_value`` until one is assigned.
    """

    def __init__(
        self,
        *,
        key: str = "",
        description: str = "",
        default_value: str = "",
        type: str = "",
    ) -> None:
        self.key = key
        self.description = description
        self.default_value = default_value
        self.type = type
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        self.name = name

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        if self.name is None:
            raise AttributeError("RuleProperty not initialized.")
        return instance.__dict__.get(self.name, self.default_value or None)

    def __set__(self, instance: Any, value: Any) -> None:
        if self.name is None:
            raise AttributeError("RuleProperty not initialized.")
        instance.__dict__[self.name] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleProperty):
            return NotImplemented
        return (self.key, self.description, self.default_value, self.type) == (
            other.key,
            other.description,
            other.default_value,
            other.type,
        )

    def __hash__(self) -> int:
        return hash((self.key, self.description, self.default_value, self.type))

    def __repr__(self) -> str:
        return (
            f"RuleProperty(key={self.key!r}, description={self.description!r}, "
            f"default_value={self.default_value!r}, type={self.type!r})"
        )
