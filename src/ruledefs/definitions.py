"""Rule repository builders fed by plugins and the annotation loader."""

from __future__ import annotations

from typing import Optional

from ruledefs.errors import RepositoryError
from ruledefs.ir.param_type import RuleParamType
from ruledefs.ir.records import ParamRecord, RepositoryRecord, RuleRecord
from ruledefs.ir.types import RuleStatus, Severity


class NewParam:
    """Builder for one rule parameter."""

    def __init__(self, key: str) -> None:
        self.key = key
        self._description: Optional[str] = None
        self._default_value: Optional[str] = None
        self._type = RuleParamType.STRING

    def set_description(self, description: Optional[str]) -> "NewParam":
        self._description = description
        return self

    def set_default_value(self, default_value: Optional[str]) -> "NewParam":
        self._default_value = default_value
        return self

    def set_type(self, param_type: RuleParamType) -> "NewParam":
        if not isinstance(param_type, RuleParamType):
            raise RepositoryError(f"Type of parameter {self.key} must be a RuleParamType.")
        self._type = param_type
        return self

    def build(self) -> ParamRecord:
        return ParamRecord(
            key=self.key,
            description=self._description,
            default_value=self._default_value,
            type=self._type,
        )


class NewRule:
    """Builder for one rule; parameters are kept in declaration order."""

    def __init__(self, repo_key: str, key: str) -> None:
        self.repo_key = repo_key
        self.key = key
        self._name: Optional[str] = None
        self._html_description: Optional[str] = None
        self._default_severity = Severity.MAJOR
        self._template = False
        self._status = RuleStatus.READY
        self._params: dict[str, NewParam] = {}

    def set_name(self, name: Optional[str]) -> "NewRule":
        self._name = name
        return self

    def set_html_description(self, html_description: Optional[str]) -> "NewRule":
        self._html_description = html_description
        return self

    def set_default_severity(self, severity: str) -> "NewRule":
        self._default_severity = severity
        return self

    def set_template(self, template: bool) -> "NewRule":
        self._template = bool(template)
        return self

    def set_status(self, status: RuleStatus) -> "NewRule":
        if not isinstance(status, RuleStatus):
            raise RepositoryError(f"Status of rule {self.key} must be a RuleStatus.")
        self._status = status
        return self

    def new_param(self, key: str) -> NewParam:
        if not key:
            raise RepositoryError(f"Parameter key of rule {self.key} must be non-empty.")
        if key in self._params:
            raise RepositoryError(f"The parameter '{key}' is declared several times on the rule {self.key}")
        param = NewParam(key)
        self._params[key] = param
        return param

    def param(self, key: str) -> Optional[NewParam]:
        return self._params.get(key)

    def params(self) -> list[NewParam]:
        return list(self._params.values())

    def build(self) -> RuleRecord:
        return RuleRecord(
            key=self.key,
            name=self._name,
            html_description=self._html_description,
            default_severity=self._default_severity,
            template=self._template,
            status=self._status,
            params=tuple(param.build() for param in self._params.values()),
        )


class NewRepository:
    """Append-only builder for the rules of one repository."""

    def __init__(self, context: "RulesDefinitionContext", key: str, language: str) -> None:
        if not key or not language:
            raise RepositoryError("Repository key and language must be non-empty.")
        self._context = context
        self.key = key
        self.language = language
        self.name: Optional[str] = None
        self._rules: dict[str, NewRule] = {}

    def set_name(self, name: Optional[str]) -> "NewRepository":
        self.name = name
        return self

    def new_rule(self, key: str) -> NewRule:
        if not key:
            raise RepositoryError(f"Rule key in repository {self.key} must be non-empty.")
        if key in self._rules:
            raise RepositoryError(f"The rule '{key}' of repository '{self.key}' is declared several times")
        new_rule = NewRule(self.key, key)
        self._rules[key] = new_rule
        return new_rule

    def rule(self, key: str) -> Optional[NewRule]:
        return self._rules.get(key)

    def rules(self) -> list[NewRule]:
        return list(self._rules.values())

    def load_annotated_classes(self, *classes: type) -> "NewRepository":
        from ruledefs.loader.annotation_loader import AnnotationRuleLoader

        AnnotationRuleLoader().load_rules(self, classes)
        return self

    def build(self) -> RepositoryRecord:
        return RepositoryRecord(
            key=self.key,
            language=self.language,
            name=self.name,
            rules=tuple(rule.build() for rule in self._rules.values()),
        )

    def done(self) -> RepositoryRecord:
        record = self.build()
        self._context._register(record)
        return record


class RulesDefinitionContext:
    """Collects the repositories declared by plugins."""

    def __init__(self) -> None:
        self._repositories: dict[str, RepositoryRecord] = {}

    def create_repository(self, key: str, language: str) -> NewRepository:
        return NewRepository(self, key, language)

    def repository(self, key: str) -> Optional[RepositoryRecord]:
        return self._repositories.get(key)

    def repositories(self) -> list[RepositoryRecord]:
        return list(self._repositories.values())

    def _register(self, record: RepositoryRecord) -> None:
        if record.key in self._repositories:
            raise RepositoryError(f"The rule repository '{record.key}' is defined several times")
        self._repositories[record.key] = record
