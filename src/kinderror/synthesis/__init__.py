"""Synthesis of generated kind error declarations."""

from kinderror.synthesis.behaviors import CauseImpl, DisplayImpl, TraitImpls, build_trait_impls, render_segments
from kinderror.synthesis.layout import FieldSpec, MethodSpec, Parameter, TypeLayout, synthesize_layout
from kinderror.synthesis.source import render_source
from kinderror.synthesis.template import (
    CompiledTemplate,
    Literal,
    Placeholder,
    PlaceholderField,
    RenderStyle,
    compile_template,
)

__all__ = [
    "CauseImpl",
    "CompiledTemplate",
    "DisplayImpl",
    "FieldSpec",
    "Literal",
    "MethodSpec",
    "Parameter",
    "Placeholder",
    "PlaceholderField",
    "RenderStyle",
    "TraitImpls",
    "TypeLayout",
    "build_trait_impls",
    "compile_template",
    "render_segments",
    "render_source",
    "synthesize_layout",
]
