from __future__ import annotations

from enum import Enum, auto

import pytest

from kinderror import KindEnumDecl

E2E_DISPLAY = "hey, error kind: {kind:?}, source: {source}"


class ErrorKind(Enum):
    First = auto()
    Second = auto()


@pytest.fixture
def kind_enum() -> type[ErrorKind]:
    return ErrorKind


@pytest.fixture
def decl() -> KindEnumDecl:
    return KindEnumDecl("ErrorKind", ("First", "Second"))


@pytest.fixture
def e2e_tokens() -> list[tuple[str, str]]:
    return [
        ("source", "OSError"),
        ("name", "Error"),
        ("type_vis", "public"),
        ("display", E2E_DISPLAY),
    ]
