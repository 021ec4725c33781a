"""Emit Python source for a generated kind error type."""

from __future__ import annotations

from jinja2 import Environment

from kinderror.__about__ import __version__
from kinderror.synthesis.behaviors import TraitImpls
from kinderror.synthesis.layout import MethodSpec, TypeLayout

# Module-level name the source type is bound to before the generated class
# can shadow it.
SOURCE_ALIAS = "_KINDERROR_SOURCE"

MODULE_TEMPLATE = '''\
# Generated by kinderror {{ version }} from {{ layout.kind_type }}. Do not edit.
from __future__ import annotations
{% if layout.method("converting") %}

from collections.abc import Iterator
from contextlib import contextmanager

{{ source_alias }} = {{ layout.source_type }}
{% endif %}


class {{ layout.name }}(Exception):
    """{{ doc }}"""

    __kind_error_visibility__ = {
{% for member, visibility in visibilities %}
        {{ member|py }}: {{ visibility|py }},
{% endfor %}
    }

    def __init__(self, {{ init|signature }}) -> None:
        if not isinstance(kind, {{ layout.kind_type }}):
            raise TypeError(f"kind must be a member of {{ layout.kind_type }}, got {kind!r}")
{% if layout.has_source %}
        super().__init__(kind, source)
        self._kind = kind
        self._source = source
        if isinstance(source, BaseException):
            self.__cause__ = source
{% else %}
        super().__init__(kind)
        self._kind = kind
{% endif %}
{% for method in layout.methods %}

{% if method.kind == "constructor" %}
    @classmethod
    def {{ method.name }}(cls, {{ method|signature }}) -> {{ method.returns }}:
        return cls({{ method|arguments }})
{% elif method.kind == "accessor" %}
    def {{ method.name }}(self) -> {{ method.returns }}:
        return self._{{ method.field }}
{% elif method.kind == "conversion" %}
    @classmethod
    def {{ method.name }}(cls, {{ method|signature }}) -> {{ method.returns }}:
        return cls({{ layout.kind_type }}.{{ layout.default_kind }}, source)
{% elif method.kind == "context" %}
    @classmethod
    @contextmanager
    def {{ method.name }}(cls) -> {{ method.returns }}:
        try:
            yield
        except {{ source_alias }} as exc:
            raise cls.from_source(exc) from exc
{% endif %}
{% endfor %}

    def __str__(self) -> str:
        return {{ display }}

    def __repr__(self) -> str:
        return f"{{ layout.name }}({{ repr_body }})"
{% if impls.has_eq %}

    def __eq__(self, other: object) -> bool:
        if other.__class__ is not self.__class__:
            return NotImplemented
        return {{ eq_fields("self") }} == {{ eq_fields("other") }}

    __hash__ = None
{% endif %}
'''


def _signature(method: MethodSpec) -> str:
    params = []
    for param in method.parameters:
        text = f"{param.name}: {param.annotation}"
        if param.default is not None:
            text = f"{text} = {param.default}"
        params.append(text)
    return ", ".join(params)


def _arguments(method: MethodSpec) -> str:
    return ", ".join(param.name for param in method.parameters)


def _environment() -> Environment:
    env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True, keep_trailing_newline=True)
    env.filters["py"] = repr
    env.filters["signature"] = _signature
    env.filters["arguments"] = _arguments
    return env


_TEMPLATE = _environment().from_string(MODULE_TEMPLATE)


def _display_expression(impls: TraitImpls) -> str:
    parts = impls.display.parts()
    if not parts:
        return "''"
    if len(parts) == 1:
        return parts[0]
    return f"''.join(({', '.join(parts)}))"


def _doc(layout: TypeLayout) -> str:
    if layout.source_type is None:
        return f"Error tagged with a ``{layout.kind_type}`` kind."
    return f"Error tagged with a ``{layout.kind_type}`` kind and an optional ``{layout.source_type}`` cause."


def render_source(layout: TypeLayout, impls: TraitImpls) -> str:
    """Render the declaration of the generated type as Python source."""
    init = layout.method("new")
    if init is None:
        raise ValueError(f"Layout for {layout.name} has no constructor.")

    visibilities = [(layout.name, layout.visibility.value)]
    visibilities.extend((method.name, method.visibility.value) for method in layout.methods)
    repr_body = ", ".join(f"{name}={{self._{name}!r}}" for name in impls.repr_fields)

    def eq_fields(owner: str) -> str:
        values = ", ".join(f"{owner}._{name}" for name in impls.eq_fields)
        return f"({values},)" if len(impls.eq_fields) == 1 else f"({values})"

    return _TEMPLATE.render(
        version=__version__,
        source_alias=SOURCE_ALIAS,
        layout=layout,
        impls=impls,
        init=init,
        doc=_doc(layout),
        visibilities=visibilities,
        display=_display_expression(impls),
        repr_body=repr_body,
        eq_fields=eq_fields,
    )
