"""Loader configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from ruledefs.errors import SchemaError


MissingAnnotationPolicy = Literal["warn", "ignore", "error"]


@dataclass(frozen=True)
class LoaderConfig:
    """How the annotation loader treats classes without a rule annotation."""

    missing_annotation_policy: MissingAnnotationPolicy = "warn"

    def __post_init__(self) -> None:
        if self.missing_annotation_policy not in ("warn", "ignore", "error"):
            raise SchemaError("missing_annotation_policy must be one of: warn, ignore, error.")
