"""Rule parameter types and their textual descriptor grammar.

A descriptor is either a bare type name (``INTEGER``) or a type name followed
by comma-separated options, e.g.::

    SINGLE_SELECT_LIST,multiple=true,values="alpha,beta,gamma"

Options are split on commas that sit outside double quotes. A handful of
legacy short forms (``i``, ``s``, ``b``, ``r``, ``s[a,b]``) are still
accepted and mapped to their modern equivalent.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import ClassVar

from ruledefs.errors import ParamTypeError


_STRING = "STRING"
_TEXT = "TEXT"
_BOOLEAN = "BOOLEAN"
_INTEGER = "INTEGER"
_FLOAT = "FLOAT"
_SINGLE_SELECT_LIST = "SINGLE_SELECT_LIST"

_KNOWN_TYPES = (_STRING, _TEXT, _BOOLEAN, _INTEGER, _FLOAT, _SINGLE_SELECT_LIST)
_OPTION_SPLIT = re.compile(r',(?=(?:[^"]*"[^"]*")*[^"]*$)')
_VALUES_OPTION = "values"
_MULTIPLE_OPTION = "multiple"


@dataclass(frozen=True)
class RuleParamType:
    """Data kind of a rule parameter value.

    Attributes:
        type: One of STRING, TEXT, BOOLEAN, INTEGER, FLOAT, SINGLE_SELECT_LIST.
        values: Allowed values; only for SINGLE_SELECT_LIST.
        multiple: Whether several values may be selected at once.
    """

    type: str
    values: tuple[str, ...] = ()
    multiple: bool = False

    STRING: ClassVar["RuleParamType"]
    TEXT: ClassVar["RuleParamType"]
    BOOLEAN: ClassVar["RuleParamType"]
    INTEGER: ClassVar["RuleParamType"]
    FLOAT: ClassVar["RuleParamType"]

    def __post_init__(self) -> None:
        if self.type not in _KNOWN_TYPES:
            raise ParamTypeError(
                f"Unknown parameter type {self.type!r}; expected one of: {', '.join(_KNOWN_TYPES)}."
            )
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))
        if self.type == _SINGLE_SELECT_LIST:
            if not self.values:
                raise ParamTypeError("SINGLE_SELECT_LIST requires at least one value.")
            for value in self.values:
                if not value or "," in value or '"' in value:
                    raise ParamTypeError(
                        f"List value {value!r} must be non-empty and contain no comma or double quote."
                    )
        elif self.values or self.multiple:
            raise ParamTypeError(f"Type {self.type} does not accept values or multiple options.")

    @property
    def is_list(self) -> bool:
        return self.type == _SINGLE_SELECT_LIST

    def __str__(self) -> str:
        parts = [self.type]
        if self.multiple:
            parts.append(f"{_MULTIPLE_OPTION}=true")
        if self.values:
            parts.append(f'{_VALUES_OPTION}="{",".join(self.values)}"')
        return ",".join(parts)

    @staticmethod
    def single_list_of_values(*values: str) -> "RuleParamType":
        return RuleParamType(_SINGLE_SELECT_LIST, values=tuple(values), multiple=False)

    @staticmethod
    def multiple_list_of_values(*values: str) -> "RuleParamType":
        return RuleParamType(_SINGLE_SELECT_LIST, values=tuple(values), multiple=True)

    @staticmethod
    def parse(text: str) -> "RuleParamType":
        """Parse a type descriptor into a RuleParamType."""

        if not isinstance(text, str) or not text.strip():
            raise ParamTypeError("Parameter type descriptor must be a non-empty string.")
        text = text.strip()

        legacy = _LEGACY_FORMS.get(text)
        if legacy is not None:
            return legacy
        if text.startswith("s[") and text.endswith("]"):
            return RuleParamType.multiple_list_of_values(*_split_values(text[2:-1]))

        options = _OPTION_SPLIT.split(text)
        type_name = options[0].strip()
        values: tuple[str, ...] = ()
        multiple = False
        for option in options[1:]:
            name, sep, raw = option.partition("=")
            name = name.strip()
            if not sep:
                raise ParamTypeError(f"Malformed option {option!r}: expected name=value.")
            if name == _VALUES_OPTION:
                values = _split_values(_unquote(raw.strip()))
            elif name == _MULTIPLE_OPTION:
                flag = raw.strip().lower()
                if flag not in ("true", "false"):
                    raise ParamTypeError(f"Option 'multiple' must be true or false, got {raw.strip()!r}.")
                multiple = flag == "true"
            else:
                raise ParamTypeError(f"Unknown option {name!r} in parameter type.")
        return RuleParamType(type_name, values=values, multiple=multiple)


def _unquote(raw: str) -> str:
    if len(raw) >= 2 and raw.startswith('"') and raw.endswith('"'):
        return raw[1:-1]
    if '"' in raw:
        raise ParamTypeError(f"Unbalanced quotes in values {raw!r}.")
    return raw


def _split_values(raw: str) -> tuple[str, ...]:
    return tuple(item.strip() for item in raw.split(",") if item.strip())


RuleParamType.STRING = RuleParamType(_STRING)
RuleParamType.TEXT = RuleParamType(_TEXT)
RuleParamType.BOOLEAN = RuleParamType(_BOOLEAN)
RuleParamType.INTEGER = RuleParamType(_INTEGER)
RuleParamType.FLOAT = RuleParamType(_FLOAT)

_LEGACY_FORMS: dict[str, RuleParamType] = {
    "i": RuleParamType.INTEGER,
    "i{}": RuleParamType.INTEGER,
    "s": RuleParamType.STRING,
    "s{}": RuleParamType.STRING,
    "r": RuleParamType.STRING,
    "REGULAR_EXPRESSION": RuleParamType.STRING,
    "b": RuleParamType.BOOLEAN,
}
