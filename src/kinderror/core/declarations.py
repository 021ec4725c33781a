"""Structural description of a kind enum declaration."""

from __future__ import annotations

from dataclasses import dataclass, field

SUPPORTED_DERIVES = ("eq",)


@dataclass(frozen=True)
class KindEnumDecl:
    """A payload-less enum as seen by the generator.

    Attributes:
        name: Identifier of the enum in its enclosing scope.
        variants: Variant names in declaration order.
        derives: Structural behaviours the host asks the generated type to forward.
    """

    name: str
    variants: tuple[str, ...]
    derives: tuple[str, ...] = field(default=())

    def derives_eq(self) -> bool:
        return "eq" in self.derives
