"""kinderror public API."""

from kinderror.__about__ import __version__
from kinderror.config import Configuration, Visibility, load_project_defaults, parse_config, validate_config
from kinderror.core import (
    ConfigError,
    DiagnosticKind,
    FormatError,
    KindEnumDecl,
    KindErrorDiagnostic,
    ValidationError,
    instrument_kinderror,
)
from kinderror.derive import derive_kind_error, kind_error
from kinderror.expansion import GeneratedDeclarations, expand
from kinderror.synthesis import compile_template, render_source

__all__ = [
    "ConfigError",
    "Configuration",
    "DiagnosticKind",
    "FormatError",
    "GeneratedDeclarations",
    "KindEnumDecl",
    "KindErrorDiagnostic",
    "ValidationError",
    "Visibility",
    "__version__",
    "compile_template",
    "derive_kind_error",
    "expand",
    "instrument_kinderror",
    "kind_error",
    "load_project_defaults",
    "parse_config",
    "render_source",
    "validate_config",
]
