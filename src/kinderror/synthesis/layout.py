"""Field and constructor layout of a generated kind error type."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from kinderror.config.models import Configuration, Visibility
from kinderror.core.declarations import KindEnumDecl

MethodKind = Literal["constructor", "accessor", "conversion", "context"]


@dataclass(frozen=True)
class FieldSpec:
    name: str
    annotation: str
    optional: bool = False


@dataclass(frozen=True)
class Parameter:
    name: str
    annotation: str
    default: str | None = None


@dataclass(frozen=True)
class MethodSpec:
    """Signature of one generated method."""

    name: str
    kind: MethodKind
    visibility: Visibility
    parameters: tuple[Parameter, ...]
    returns: str
    field: str | None = None

    @property
    def arity(self) -> int:
        return len(self.parameters)


@dataclass(frozen=True)
class TypeLayout:
    """Everything the emitter needs to declare the generated type."""

    name: str
    visibility: Visibility
    kind_type: str
    source_type: str | None
    fields: tuple[FieldSpec, ...]
    methods: tuple[MethodSpec, ...]
    default_kind: str | None = None

    @property
    def has_source(self) -> bool:
        return self.source_type is not None

    def field_names(self) -> tuple[str, ...]:
        return tuple(item.name for item in self.fields)

    def method(self, name: str) -> MethodSpec | None:
        for item in self.methods:
            if item.name == name:
                return item
        return None


def synthesize_layout(config: Configuration, decl: KindEnumDecl) -> TypeLayout:
    """Build the layout for a validated configuration.

    ``config.name`` must already be resolved by ``validate_config``.
    """
    if config.name is None:
        raise ValueError("Configuration name must be resolved before synthesis.")

    name = config.name
    kind_type = decl.name
    source_type = config.source
    fields = [FieldSpec("kind", kind_type)]
    new_params = [Parameter("kind", kind_type)]
    methods: list[MethodSpec] = []

    if source_type is not None:
        optional_source = f"{source_type} | None"
        fields.append(FieldSpec("source", optional_source, optional=True))
        new_params.append(Parameter("source", optional_source, default="None"))

    methods.append(MethodSpec("new", "constructor", config.new_vis, tuple(new_params), name))
    methods.append(MethodSpec("kind", "accessor", config.kind_fn_vis, (), kind_type, field="kind"))

    if source_type is not None:
        methods.append(MethodSpec("source", "accessor", Visibility.PUBLIC, (), f"{source_type} | None", field="source"))

    if config.source_fn and source_type is not None:
        methods.append(
            MethodSpec("from_source", "conversion", Visibility.PUBLIC, (Parameter("source", source_type),), name)
        )
        methods.append(MethodSpec("converting", "context", Visibility.PUBLIC, (), "Iterator[None]"))

    return TypeLayout(
        name=name,
        visibility=config.type_vis,
        kind_type=kind_type,
        source_type=source_type,
        fields=tuple(fields),
        methods=tuple(methods),
        default_kind=config.default_kind if config.source_fn else None,
    )
