"""Configuration record for a generated kind error type."""

from __future__ import annotations

import keyword
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

CONFIG_KEYS = (
    "source",
    "source_fn",
    "name",
    "type_vis",
    "new_vis",
    "kind_fn_vis",
    "display",
    "default_kind",
)


class Visibility(str, Enum):
    """Access-scope tokens placed on generated declarations.

    The generator never interprets them; they are recorded on the generated
    class so the host can enforce or document them.
    """

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"


def is_identifier(value: str) -> bool:
    return value.isidentifier() and not keyword.iskeyword(value)


class Configuration(BaseModel):
    """Options attached to a kind enum declaration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    source: str | None = None
    source_fn: bool = False
    name: str | None = None
    type_vis: Visibility = Visibility.PRIVATE
    new_vis: Visibility = Visibility.PRIVATE
    kind_fn_vis: Visibility = Visibility.PRIVATE
    display: str | None = None
    default_kind: str | None = None

    @field_validator("source")
    @classmethod
    def _check_type_reference(cls, value: str | None) -> str | None:
        if value is None:
            return value
        if not all(is_identifier(part) for part in value.split(".")):
            raise ValueError(f"'{value}' is not a dotted type reference")
        return value

    @field_validator("source_fn", mode="before")
    @classmethod
    def _check_bool_literal(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return value
        if value in ("true", "false"):
            return value == "true"
        raise ValueError(f"expected 'true' or 'false', got {value!r}")

    @field_validator("name", "default_kind")
    @classmethod
    def _check_identifier(cls, value: str | None) -> str | None:
        if value is not None and not is_identifier(value):
            raise ValueError(f"'{value}' is not a valid identifier")
        return value

    @property
    def source_configured(self) -> bool:
        return self.source is not None
