"""The generation pipeline as a single pure function."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from kinderror.config.models import Configuration
from kinderror.config.parser import Token, parse_config
from kinderror.config.validator import check_config
from kinderror.core.declarations import KindEnumDecl
from kinderror.core.telemetry import span
from kinderror.synthesis.behaviors import TraitImpls, build_trait_impls
from kinderror.synthesis.layout import TypeLayout, synthesize_layout
from kinderror.synthesis.source import render_source
from kinderror.synthesis.template import CompiledTemplate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedDeclarations:
    """Everything generated for one kind enum declaration."""

    decl: KindEnumDecl
    config: Configuration
    layout: TypeLayout
    template: CompiledTemplate
    impls: TraitImpls
    source: str

    @property
    def name(self) -> str:
        return self.layout.name


def expand(decl: KindEnumDecl, tokens: Iterable[Token]) -> GeneratedDeclarations:
    """Generate the error type declarations for ``decl``.

    Args:
        decl: Structural description of the kind enum.
        tokens: Configuration ``(key, value)`` pairs attached to it.

    Returns:
        GeneratedDeclarations: layout, compiled template, behaviours and source.

    Raises:
        ConfigError: If a token is duplicated, unknown or has a bad value.
        ValidationError: If the configuration is inconsistent with ``decl``.
        FormatError: If the display template is malformed.
    """
    with span("kinderror.expand", kind_enum=decl.name):
        config, template = check_config(parse_config(tokens), decl)
        layout = synthesize_layout(config, decl)
        impls = build_trait_impls(layout, template, decl)
        source = render_source(layout, impls)

    logger.debug(
        "Expanded %s into %s fields=%s methods=%s",
        decl.name,
        layout.name,
        layout.field_names(),
        [method.name for method in layout.methods],
    )
    return GeneratedDeclarations(
        decl=decl,
        config=config,
        layout=layout,
        template=template,
        impls=impls,
        source=source,
    )
