"""Rendering, cause and structural behaviours of a generated type."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from kinderror.core.declarations import KindEnumDecl
from kinderror.synthesis.layout import TypeLayout
from kinderror.synthesis.template import CompiledTemplate, Literal, PlaceholderField, RenderStyle, Segment

_EXPRESSIONS = {
    (PlaceholderField.KIND, RenderStyle.DISPLAY): "format(self._kind)",
    (PlaceholderField.KIND, RenderStyle.DEBUG): "self._kind.name",
    (PlaceholderField.SOURCE, RenderStyle.DISPLAY): "str(self._source)",
}


@dataclass(frozen=True)
class DisplayImpl:
    """``__str__`` of the generated type, one part per template segment."""

    segments: tuple[Segment, ...]

    def parts(self) -> tuple[str, ...]:
        """Python expressions that concatenate to the rendered text."""
        parts: list[str] = []
        for segment in self.segments:
            if isinstance(segment, Literal):
                parts.append(repr(segment.text))
            else:
                parts.append(_EXPRESSIONS[(segment.field, segment.style)])
        return tuple(parts)


@dataclass(frozen=True)
class CauseImpl:
    """Which stored field answers "what caused this error"."""

    field: str | None = None


@dataclass(frozen=True)
class TraitImpls:
    display: DisplayImpl
    cause: CauseImpl
    repr_fields: tuple[str, ...]
    eq_fields: tuple[str, ...] = ()

    @property
    def has_eq(self) -> bool:
        return bool(self.eq_fields)


def build_trait_impls(layout: TypeLayout, template: CompiledTemplate, decl: KindEnumDecl) -> TraitImpls:
    fields = layout.field_names()
    return TraitImpls(
        display=DisplayImpl(template.segments),
        cause=CauseImpl("source" if layout.has_source else None),
        repr_fields=fields,
        eq_fields=fields if decl.derives_eq() else (),
    )


def render_kind(kind: Any, style: RenderStyle) -> str:
    if style is RenderStyle.DEBUG:
        return kind.name if isinstance(kind, Enum) else repr(kind)
    return format(kind)


def render_segments(template: CompiledTemplate, kind: Any, source: Any = None) -> str:
    """Render ``template`` in-process, the same way the generated ``__str__`` does."""
    chunks: list[str] = []
    for segment in template.segments:
        if isinstance(segment, Literal):
            chunks.append(segment.text)
        elif segment.field is PlaceholderField.KIND:
            chunks.append(render_kind(kind, segment.style))
        else:
            chunks.append(str(source))
    return "".join(chunks)
