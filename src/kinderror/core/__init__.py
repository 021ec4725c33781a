"""Core primitives for kinderror."""

from kinderror.core.declarations import KindEnumDecl
from kinderror.core.errors import ConfigError, DiagnosticKind, FormatError, KindErrorDiagnostic, ValidationError
from kinderror.core.telemetry import instrument_kinderror, span

__all__ = [
    "ConfigError",
    "DiagnosticKind",
    "FormatError",
    "KindEnumDecl",
    "KindErrorDiagnostic",
    "ValidationError",
    "instrument_kinderror",
    "span",
]
