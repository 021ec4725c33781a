"""Diagnostics raised while generating a kind error type."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class DiagnosticKind(str, Enum):
    """Stable diagnostic kinds for the invoking build step."""

    DUPLICATE_KEY = "duplicate_key"
    UNKNOWN_KEY = "unknown_key"
    INVALID_VALUE = "invalid_value"
    DUPLICATE_VARIANT = "duplicate_variant"
    MISSING_SOURCE = "missing_source"
    MISSING_DEFAULT_KIND = "missing_default_kind"
    UNKNOWN_VARIANT = "unknown_variant"
    MISSING_DISPLAY = "missing_display"
    UNKNOWN_PLACEHOLDER = "unknown_placeholder"
    UNCONFIGURED_PLACEHOLDER = "unconfigured_placeholder"
    MALFORMED_PLACEHOLDER = "malformed_placeholder"
    NAME_COLLISION = "name_collision"


@dataclass
class KindErrorDiagnostic(Exception):
    """Base diagnostic for kinderror.

    Attributes:
        kind: Stable, actionable diagnostic kind.
        message: Human-readable description.
        subject: Offending key, variant or template token, when there is one.
        cause: Original exception for debugging.
    """

    kind: DiagnosticKind
    message: str
    subject: str | None = None
    cause: Exception | None = None

    def __str__(self) -> str:
        return f"[{self.kind.value}] {self.message}"

    def with_cause(self, cause: Exception) -> KindErrorDiagnostic:
        return replace(self, cause=cause)


@dataclass
class ConfigError(KindErrorDiagnostic):
    """Malformed, unknown or duplicated configuration token."""


@dataclass
class ValidationError(KindErrorDiagnostic):
    """Individually well-formed configuration that is inconsistent as a whole."""


@dataclass
class FormatError(ValidationError):
    """Malformed or illegally placed display template placeholder."""
