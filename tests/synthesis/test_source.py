from __future__ import annotations

from kinderror import KindEnumDecl, expand
from kinderror.__about__ import __version__


def test_source_declares_the_type(decl: KindEnumDecl, e2e_tokens: list[tuple[str, str]]) -> None:
    source = expand(decl, e2e_tokens).source

    assert source.startswith(f"# Generated by kinderror {__version__} from ErrorKind. Do not edit.\n")
    assert "class Error(Exception):\n" in source
    assert "    def __init__(self, kind: ErrorKind, source: OSError | None = None) -> None:\n" in source
    assert "    def new(cls, kind: ErrorKind, source: OSError | None = None) -> Error:\n" in source
    assert "        return cls(kind, source)\n" in source
    assert "    def kind(self) -> ErrorKind:\n        return self._kind\n" in source
    assert "    def source(self) -> OSError | None:\n        return self._source\n" in source
    assert "            self.__cause__ = source\n" in source
    assert "''.join(('hey, error kind: ', self._kind.name, ', source: ', str(self._source)))" in source
    assert 'return f"Error(kind={self._kind!r}, source={self._source!r})"' in source
    assert "from_source" not in source
    assert "contextmanager" not in source
    assert "__eq__" not in source


def test_source_records_visibility(decl: KindEnumDecl, e2e_tokens: list[tuple[str, str]]) -> None:
    source = expand(decl, e2e_tokens).source

    assert "        'Error': 'public',\n" in source
    assert "        'new': 'private',\n" in source
    assert "        'kind': 'private',\n" in source
    assert "        'source': 'public',\n" in source


def test_source_without_cause(decl: KindEnumDecl) -> None:
    source = expand(decl, [("display", "{kind}")]).source

    assert "    def __init__(self, kind: ErrorKind) -> None:\n" in source
    assert "        super().__init__(kind)\n" in source
    assert "_source" not in source
    assert "        return format(self._kind)\n" in source


def test_source_with_conversion_helpers(decl: KindEnumDecl) -> None:
    tokens = [
        ("source", "OSError"),
        ("source_fn", "true"),
        ("default_kind", "Second"),
        ("display", "{source}"),
    ]
    source = expand(decl, tokens).source

    assert "from contextlib import contextmanager\n" in source
    assert "    def from_source(cls, source: OSError) -> Error:\n" in source
    assert "        return cls(ErrorKind.Second, source)\n" in source
    assert "\n_KINDERROR_SOURCE = OSError\n\n\nclass Error(Exception):\n" in source
    assert "        except _KINDERROR_SOURCE as exc:\n            raise cls.from_source(exc) from exc\n" in source


def test_source_with_eq() -> None:
    decl = KindEnumDecl("ErrorKind", ("First",), derives=("eq",))
    source = expand(decl, [("display", "{kind}")]).source

    assert "        return (self._kind,) == (other._kind,)\n" in source
    assert "    __hash__ = None\n" in source


def test_empty_display_renders_empty_string(decl: KindEnumDecl) -> None:
    source = expand(decl, [("display", "")]).source
    assert "    def __str__(self) -> str:\n        return ''\n" in source


def test_source_compiles(decl: KindEnumDecl) -> None:
    tokens = [
        ("source", "json.JSONDecodeError"),
        ("source_fn", "true"),
        ("default_kind", "First"),
        ("display", "{kind:?} {{literal}} {source}"),
    ]
    source = expand(KindEnumDecl(decl.name, decl.variants, derives=("eq",)), tokens).source
    compile(source, "<test>", "exec")
