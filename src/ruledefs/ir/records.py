"""Immutable records produced by the repository builders."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from ruledefs.ir.param_type import RuleParamType
from ruledefs.ir.types import RuleStatus


class ParamRecord(BaseModel):
    """Compiled rule parameter."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    key: str = Field(min_length=1)
    description: Optional[str] = None
    default_value: Optional[str] = None
    type: RuleParamType = RuleParamType.STRING

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: object) -> object:
        if isinstance(value, str):
            return RuleParamType.parse(value)
        return value

    @field_serializer("type")
    def _serialize_type(self, value: RuleParamType) -> str:
        return str(value)


class RuleRecord(BaseModel):
    """Compiled rule with its parameters."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    name: Optional[str] = None
    html_description: Optional[str] = None
    default_severity: str
    template: bool = False
    status: RuleStatus = RuleStatus.READY
    params: tuple[ParamRecord, ...] = ()

    def param(self, key: str) -> Optional[ParamRecord]:
        for item in self.params:
            if item.key == key:
                return item
        return None


class RepositoryRecord(BaseModel):
    """Finished repository of rules for one language."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    language: str = Field(min_length=1)
    name: Optional[str] = None
    rules: tuple[RuleRecord, ...] = ()

    def rule(self, key: str) -> Optional[RuleRecord]:
        for item in self.rules:
            if item.key == key:
                return item
        return None
