"""Compile annotated check classes into repository rules."""

from __future__ import annotations

import logging
from types import MappingProxyType, NoneType, UnionType
import typing
from typing import TYPE_CHECKING, Any, Annotated, Iterable, Mapping, Optional, Union

from ruledefs.check.annotations import Cardinality, RuleAnnotation
from ruledefs.config import LoaderConfig
from ruledefs.errors import (
    AnnotationError,
    InvalidPropertyTypeError,
    InvalidRuleStatusError,
    MissingRuleAnnotationError,
    ParamTypeError,
    SchemaError,
)
from ruledefs.ir.param_type import RuleParamType
from ruledefs.ir.records import ParamRecord, RuleRecord
from ruledefs.ir.types import RuleStatus
from ruledefs.loader.schema_provider import (
    FieldDescriptor,
    ReflectionSchemaProvider,
    SchemaProvider,
)

if TYPE_CHECKING:  # pragma: no cover
    from ruledefs.definitions import NewRepository


logger = logging.getLogger(__name__)


TYPE_FOR_CLASS: Mapping[Any, RuleParamType] = MappingProxyType(
    {
        int: RuleParamType.INTEGER,
        "int": RuleParamType.INTEGER,
        float: RuleParamType.FLOAT,
        "float": RuleParamType.FLOAT,
        bool: RuleParamType.BOOLEAN,
        "bool": RuleParamType.BOOLEAN,
    }
)
DEFAULT_PARAM_TYPE = RuleParamType.STRING


def guess_type(field_type: Any) -> RuleParamType:
    """Infer a parameter type from a declared field type.

    ``Optional[X]`` and ``Annotated[X, ...]`` resolve like ``X``. Anything not
    in :data:`TYPE_FOR_CLASS` is a STRING.
    """

    key = _unwrap(field_type)
    try:
        return TYPE_FOR_CLASS.get(key, DEFAULT_PARAM_TYPE)
    except TypeError:  # unhashable annotation objects
        return DEFAULT_PARAM_TYPE


def _unwrap(field_type: Any) -> Any:
    origin = typing.get_origin(field_type)
    if origin is Annotated:
        return _unwrap(typing.get_args(field_type)[0])
    if origin is Union or origin is UnionType:
        members = [arg for arg in typing.get_args(field_type) if arg is not NoneType]
        if len(members) == 1:
            return _unwrap(members[0])
    if isinstance(field_type, str):
        return field_type.strip()
    return field_type


def fully_qualified_name(cls: type) -> str:
    return f"{cls.__module__}.{cls.__qualname__}"


def _blank_to_none(value: Any) -> Optional[str]:
    if value is None or not str(value).strip():
        return None
    return str(value)


class AnnotationRuleLoader:
    """Reads ``@rule``/``RuleProperty`` annotations into a repository.

    Each class is compiled in full before anything reaches the repository, so
    a class that fails leaves no partial rule behind. Classes registered
    earlier in the same call are kept. Not thread-safe: concurrent loads into
    one repository need external locking.
    """

    def __init__(
        self,
        provider: SchemaProvider | None = None,
        config: LoaderConfig | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        self.provider = provider or ReflectionSchemaProvider()
        self.config = config or LoaderConfig()
        self.log = log or logger

    def load_rules(self, repository: "NewRepository", classes: Iterable[type]) -> None:
        for cls in classes:
            self.load_rule(repository, cls)

    def load_rule(self, repository: "NewRepository", cls: type) -> bool:
        """Compile one class; returns False when it was skipped."""

        annotation = self.provider.rule_annotation_of(cls)
        if annotation is None:
            self._missing_annotation(cls)
            return False
        compiled = self.compile_rule(cls, annotation)
        self._register(repository, compiled)
        return True

    def compile_rule(self, cls: type, annotation: RuleAnnotation) -> RuleRecord:
        key = _blank_to_none(annotation.key) or fully_qualified_name(cls)
        try:
            status = RuleStatus.parse(annotation.status)
        except SchemaError as exc:
            raise InvalidRuleStatusError(
                f"Invalid status [{annotation.status}] on rule class {fully_qualified_name(cls)}"
            ) from exc
        params = tuple(
            param
            for param in (self.compile_param(field) for field in self.provider.fields_of(cls))
            if param is not None
        )
        seen: set[str] = set()
        for param in params:
            if param.key in seen:
                raise AnnotationError(f"The parameter '{param.key}' is declared several times on the rule {key}")
            seen.add(param.key)
        return RuleRecord(
            key=key,
            name=_blank_to_none(annotation.name),
            html_description=_blank_to_none(annotation.description),
            default_severity=annotation.priority.name,
            template=annotation.cardinality is Cardinality.MULTIPLE,
            status=status,
            params=params,
        )

    def compile_param(self, field: FieldDescriptor) -> Optional[ParamRecord]:
        prop = self.provider.parameter_annotation_of(field)
        if prop is None:
            return None
        raw_type = _blank_to_none(prop.type)
        if raw_type is not None:
            try:
                param_type = RuleParamType.parse(raw_type.strip())
            except ParamTypeError as exc:
                raise InvalidPropertyTypeError(
                    f"Invalid property type [{prop.type}] on field "
                    f"{field.owner.__qualname__}.{field.name}: {exc}"
                ) from exc
        else:
            param_type = guess_type(field.declared_type)
        return ParamRecord(
            key=_blank_to_none(prop.key) or field.name,
            description=_blank_to_none(prop.description),
            default_value=_blank_to_none(prop.default_value),
            type=param_type,
        )

    def _register(self, repository: "NewRepository", compiled: RuleRecord) -> None:
        new_rule = repository.new_rule(compiled.key)
        new_rule.set_name(compiled.name).set_html_description(compiled.html_description)
        new_rule.set_default_severity(compiled.default_severity)
        new_rule.set_template(compiled.template)
        new_rule.set_status(compiled.status)
        self.log.debug("Loaded rule %s", compiled.key)
        for param in compiled.params:
            (
                new_rule.new_param(param.key)
                .set_description(param.description)
                .set_default_value(param.default_value)
                .set_type(param.type)
            )
            self.log.debug("Loaded parameter %s (%s) of rule %s", param.key, param.type, compiled.key)

    def _missing_annotation(self, cls: type) -> None:
        policy = self.config.missing_annotation_policy
        if policy == "error":
            raise MissingRuleAnnotationError(
                f"The class {fully_qualified_name(cls)} should be annotated with {RuleAnnotation.__qualname__}"
            )
        if policy == "warn":
            self.log.warning(
                "The class %s should be annotated with %s",
                fully_qualified_name(cls),
                RuleAnnotation.__qualname__,
            )
