"""Cross-check a Configuration against the kind enum it is attached to."""

from __future__ import annotations

from kinderror.config.models import Configuration
from kinderror.core.declarations import KindEnumDecl
from kinderror.core.errors import DiagnosticKind, ValidationError
from kinderror.synthesis.template import CompiledTemplate, compile_template


def default_type_name(enum_name: str) -> str:
    """Derive the generated type name from the kind enum name.

    ``ErrorKind`` becomes ``Error``, ``Kind`` becomes ``Error`` and anything
    without a ``Kind`` suffix gets ``Error`` appended.
    """
    if enum_name.endswith("Kind"):
        return enum_name[: -len("Kind")] or "Error"
    return f"{enum_name}Error"


def _ensure_unique_variants(variants: tuple[str, ...]) -> None:
    seen: set[str] = set()
    for variant in variants:
        if variant in seen:
            raise ValidationError(
                DiagnosticKind.DUPLICATE_VARIANT,
                f"Duplicate kind variant: {variant}",
                subject=variant,
            )
        seen.add(variant)


def _check_source(config: Configuration, decl: KindEnumDecl) -> None:
    if config.source_fn and not config.source_configured:
        raise ValidationError(
            DiagnosticKind.MISSING_SOURCE,
            "source_fn = true requires a source type.",
            subject="source_fn",
        )
    if config.source_fn and config.default_kind is None:
        raise ValidationError(
            DiagnosticKind.MISSING_DEFAULT_KIND,
            "source_fn = true requires default_kind to name the kind assigned by from_source().",
            subject="default_kind",
        )
    if config.default_kind is not None and config.default_kind not in decl.variants:
        raise ValidationError(
            DiagnosticKind.UNKNOWN_VARIANT,
            f"default_kind '{config.default_kind}' is not a variant of {decl.name}.",
            subject=config.default_kind,
        )


def validate_config(config: Configuration, decl: KindEnumDecl) -> Configuration:
    """Validate ``config`` for ``decl`` and return it with ``name`` resolved."""
    resolved, _ = check_config(config, decl)
    return resolved


def check_config(config: Configuration, decl: KindEnumDecl) -> tuple[Configuration, CompiledTemplate]:
    """Validate ``config`` for ``decl`` and keep the compiled display template.

    Checks run in a fixed order and the first failure is raised: variant
    uniqueness, source consistency, display presence, placeholder legality,
    then the name collision check.

    Raises:
        ValidationError: see ``DiagnosticKind`` for the possible kinds.
        FormatError: for illegal placeholders in ``display``.
    """
    _ensure_unique_variants(decl.variants)
    _check_source(config, decl)

    if config.display is None:
        raise ValidationError(
            DiagnosticKind.MISSING_DISPLAY,
            "A display template is required.",
            subject="display",
        )
    template = compile_template(config.display, source_configured=config.source_configured)

    name = config.name or default_type_name(decl.name)
    if name == decl.name:
        raise ValidationError(
            DiagnosticKind.NAME_COLLISION,
            f"Generated type name '{name}' would shadow the kind enum.",
            subject=name,
        )
    return config.model_copy(update={"name": name}), template
