"""Introspection seam between check classes and the rule loader."""

from __future__ import annotations

from dataclasses import dataclass
import inspect
import sys
import typing
from typing import Any, Annotated, Optional

from ruledefs.check.annotations import RuleAnnotation, RuleProperty, rule_annotation


@dataclass(frozen=True)
class FieldDescriptor:
    """A field declared on a check class or one of its bases.

    Attributes:
        name: Attribute name.
        declared_type: Resolved type hint, or ``object`` when none is declared.
        owner: Class that declares the field.
        metadata: ``Annotated`` extras followed by the declared value, if any.
    """

    name: str
    declared_type: Any
    owner: type
    metadata: tuple[Any, ...] = ()


class SchemaProvider:
    """Abstract source of rule and parameter annotations."""

    def rule_annotation_of(self, cls: type) -> Optional[RuleAnnotation]:  # pragma: no cover - interface
        raise NotImplementedError

    def fields_of(self, cls: type) -> list[FieldDescriptor]:  # pragma: no cover - interface
        raise NotImplementedError

    def parameter_annotation_of(self, field: FieldDescriptor) -> Optional[RuleProperty]:  # pragma: no cover - interface
        raise NotImplementedError


class ReflectionSchemaProvider(SchemaProvider):
    """Reads annotations attached by ``@rule`` and ``RuleProperty``.

    Fields are collected base classes first. A name declared again in a
    subclass replaces the inherited declaration and keeps its first position.
    Re-assigning a field without a new annotation keeps the inherited type.
    String annotations are resolved one by one; a name that cannot be
    resolved stays a string.
    """

    def rule_annotation_of(self, cls: type) -> Optional[RuleAnnotation]:
        return rule_annotation(cls)

    def fields_of(self, cls: type) -> list[FieldDescriptor]:
        fields: dict[str, FieldDescriptor] = {}
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            own = klass.__dict__
            declared = _own_annotations(klass)
            names = list(declared)
            names.extend(
                name for name, value in own.items()
                if isinstance(value, RuleProperty) and name not in declared
            )
            for name in names:
                if name in declared:
                    declared_type, extras = _split_annotated(declared[name])
                elif name in fields:
                    declared_type, extras = fields[name].declared_type, ()
                else:
                    declared_type, extras = object, ()
                metadata = list(extras)
                if name in own:
                    metadata.append(own[name])
                fields[name] = FieldDescriptor(
                    name=name,
                    declared_type=declared_type,
                    owner=klass,
                    metadata=tuple(metadata),
                )
        return list(fields.values())

    def parameter_annotation_of(self, field: FieldDescriptor) -> Optional[RuleProperty]:
        for item in field.metadata:
            if isinstance(item, RuleProperty):
                return item
        return None


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        raw = inspect.get_annotations(klass)
    except NameError:
        import annotationlib  # lazily evaluated annotations, Python 3.14+

        raw = annotationlib.get_annotations(klass, format=annotationlib.Format.STRING)
    module = sys.modules.get(klass.__module__)
    globalns = dict(getattr(module, "__dict__", {}))
    localns = dict(vars(klass))
    resolved: dict[str, Any] = {}
    for name, hint in raw.items():
        if isinstance(hint, str):
            try:
                hint = eval(hint, globalns, localns)
            except (NameError, SyntaxError, TypeError, AttributeError):
                pass
        resolved[name] = hint
    return resolved


def _split_annotated(hint: Any) -> tuple[Any, tuple[Any, ...]]:
    if typing.get_origin(hint) is Annotated:
        base, *extras = typing.get_args(hint)
        return base, tuple(extras)
    return hint, ()
