"""Compile display templates into literal and placeholder segments.

A template is plain text with ``{kind}`` and ``{source}`` placeholders.
``{kind:?}`` asks for the debug rendering of the kind, and ``{{`` / ``}}``
are literal braces.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from kinderror.core.errors import DiagnosticKind, FormatError


class PlaceholderField(str, Enum):
    KIND = "kind"
    SOURCE = "source"


class RenderStyle(str, Enum):
    DISPLAY = "display"
    DEBUG = "debug"


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Placeholder:
    field: PlaceholderField
    style: RenderStyle = RenderStyle.DISPLAY


Segment = Literal | Placeholder

_MODIFIERS = {"": RenderStyle.DISPLAY, "?": RenderStyle.DEBUG}


@dataclass(frozen=True)
class CompiledTemplate:
    """Ordered segments of a display template."""

    segments: tuple[Segment, ...]

    @property
    def placeholders(self) -> tuple[Placeholder, ...]:
        return tuple(segment for segment in self.segments if isinstance(segment, Placeholder))

    @property
    def uses_source(self) -> bool:
        return any(item.field is PlaceholderField.SOURCE for item in self.placeholders)


def _malformed(message: str, token: str) -> FormatError:
    return FormatError(DiagnosticKind.MALFORMED_PLACEHOLDER, message, subject=token)


def _classify(token: str, *, source_configured: bool) -> Placeholder:
    if not token:
        raise _malformed("Empty placeholder '{}' in display template.", token)
    name, _, modifier = token.partition(":")
    try:
        field = PlaceholderField(name)
    except ValueError:
        raise FormatError(
            DiagnosticKind.UNKNOWN_PLACEHOLDER,
            f"Unknown placeholder '{{{token}}}': only {{kind}} and {{source}} are available.",
            subject=name,
        ) from None
    if field is PlaceholderField.SOURCE and not source_configured:
        raise FormatError(
            DiagnosticKind.UNCONFIGURED_PLACEHOLDER,
            "Display template uses {source} but no source type is configured.",
            subject="source",
        )
    style = _MODIFIERS.get(modifier)
    if style is None:
        raise _malformed(f"Unsupported modifier '{modifier}' in placeholder '{{{token}}}'.", token)
    if field is PlaceholderField.SOURCE and style is RenderStyle.DEBUG:
        raise _malformed("The source placeholder only supports display rendering.", token)
    return Placeholder(field, style)


def compile_template(template: str, *, source_configured: bool) -> CompiledTemplate:
    """Scan ``template`` left to right and return its segments.

    Raises:
        FormatError: ``MALFORMED_PLACEHOLDER``, ``UNKNOWN_PLACEHOLDER`` or
            ``UNCONFIGURED_PLACEHOLDER``.
    """
    segments: list[Segment] = []
    literal: list[str] = []
    index = 0
    length = len(template)

    while index < length:
        char = template[index]
        if char == "{":
            if template.startswith("{{", index):
                literal.append("{")
                index += 2
                continue
            end = template.find("}", index + 1)
            if end == -1:
                raise _malformed("Unclosed '{' in display template.", template[index:])
            token = template[index + 1 : end]
            if "{" in token:
                raise _malformed("Nested '{' inside a placeholder.", token)
            if literal:
                segments.append(Literal("".join(literal)))
                literal = []
            segments.append(_classify(token, source_configured=source_configured))
            index = end + 1
        elif char == "}":
            if template.startswith("}}", index):
                literal.append("}")
                index += 2
                continue
            raise _malformed("Unmatched '}' in display template.", "}")
        else:
            literal.append(char)
            index += 1

    if literal:
        segments.append(Literal("".join(literal)))
    return CompiledTemplate(tuple(segments))
