"""Derive a kind error type from an Enum and splice it next to the enum."""

from __future__ import annotations

import builtins
import importlib
import logging
import sys
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from types import ModuleType
from typing import Any, TypeVar

from kinderror.config.loaders import merge_tokens
from kinderror.config.models import Visibility
from kinderror.config.parser import tokens_from_options
from kinderror.core.declarations import SUPPORTED_DERIVES, KindEnumDecl
from kinderror.core.errors import ConfigError, DiagnosticKind
from kinderror.core.telemetry import span
from kinderror.expansion import GeneratedDeclarations, expand
from kinderror.synthesis.source import SOURCE_ALIAS

logger = logging.getLogger(__name__)

EnumT = TypeVar("EnumT", bound=type[Enum])


def declaration_for(enum_cls: type[Enum], *, derive: Sequence[str] = ()) -> KindEnumDecl:
    """Describe ``enum_cls`` structurally."""
    if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
        raise TypeError(f"kind_error only supports Enum classes, got {enum_cls!r}")
    for name in derive:
        if name not in SUPPORTED_DERIVES:
            raise ConfigError(
                DiagnosticKind.INVALID_VALUE,
                f"Unsupported derive '{name}'. Supported: {', '.join(SUPPORTED_DERIVES)}.",
                subject="derive",
            )
    return KindEnumDecl(
        name=enum_cls.__name__,
        variants=tuple(member.name for member in enum_cls),
        derives=tuple(derive),
    )


def _unresolved(reference: str, cause: Exception | None = None) -> ConfigError:
    error = ConfigError(
        DiagnosticKind.INVALID_VALUE,
        f"Cannot resolve source type '{reference}'.",
        subject="source",
    )
    return error.with_cause(cause) if cause is not None else error


def resolve_reference(reference: str, namespace: Mapping[str, Any]) -> tuple[str, Any]:
    """Resolve a dotted type reference and return the binding its first name needs.

    The first name is looked up in ``namespace``, then in builtins, then
    imported as a module. For ``package.module.Type`` the longest importable
    module prefix is imported so attribute access succeeds.
    """
    parts = reference.split(".")
    root = parts[0]
    if root in namespace:
        target = namespace[root]
    elif hasattr(builtins, root):
        target = getattr(builtins, root)
    else:
        try:
            target = importlib.import_module(root)
        except ImportError as exc:
            raise _unresolved(reference, exc) from exc

    if isinstance(target, ModuleType):
        for end in range(len(parts) - 1, 1, -1):
            try:
                importlib.import_module(".".join(parts[:end]))
            except ImportError:
                continue
            break

    resolved: Any = target
    for part in parts[1:]:
        try:
            resolved = getattr(resolved, part)
        except AttributeError as exc:
            raise _unresolved(reference, exc) from exc
    if not isinstance(resolved, type):
        raise _unresolved(reference)
    return root, target


def _ensure_catchable(reference: str, source_cls: Any) -> None:
    if not (isinstance(source_cls, type) and issubclass(source_cls, BaseException)):
        raise ConfigError(
            DiagnosticKind.INVALID_VALUE,
            f"Source type '{reference}' must be an exception class to use source_fn.",
            subject="source",
        )


def materialize(
    generated: GeneratedDeclarations,
    enum_cls: type[Enum],
    *,
    source_type: type | None = None,
) -> type[Exception]:
    """Execute the generated source and return the resulting class."""
    module_name = enum_cls.__module__
    module = sys.modules.get(module_name)
    module_globals: Mapping[str, Any] = vars(module) if module is not None else {}

    namespace: dict[str, Any] = {"__name__": module_name, generated.decl.name: enum_cls}
    reference = generated.layout.source_type
    if reference is not None:
        if source_type is not None:
            namespace[reference] = source_type
        else:
            root, binding = resolve_reference(reference, module_globals)
            namespace[root] = binding

    code = compile(generated.source, f"<kinderror {module_name}.{generated.name}>", "exec")
    exec(code, namespace)
    if generated.layout.method("converting") is not None:
        _ensure_catchable(reference, namespace[SOURCE_ALIAS])
    cls = namespace[generated.name]
    cls.__module__ = module_name
    cls.__kind_error_declarations__ = generated
    return cls


def derive_kind_error(
    enum_cls: type[Enum],
    *,
    derive: Sequence[str] = (),
    defaults: Mapping[str, str] | None = None,
    **options: Any,
) -> type[Exception]:
    """Generate the kind error type for ``enum_cls`` without touching its module.

    Options are the configuration keys (``source``, ``display``, ...). Values
    may be tokens or Python values: booleans, classes, enum members and
    ``Visibility`` are converted with ``to_token``.
    """
    decl = declaration_for(enum_cls, derive=derive)
    source_option = options.get("source")
    source_type = source_option if isinstance(source_option, type) else None
    tokens = merge_tokens(defaults, tokens_from_options(options))

    with span("kinderror.derive", kind_enum=decl.name):
        generated = expand(decl, tokens)
        cls = materialize(generated, enum_cls, source_type=source_type)

    logger.debug("Derived %s.%s from %s", cls.__module__, cls.__name__, decl.name)
    return cls


def _splice(enum_cls: type[Enum], cls: type[Exception]) -> None:
    if "<locals>" in enum_cls.__qualname__:
        return
    module = sys.modules.get(enum_cls.__module__)
    if module is None:
        return
    setattr(module, cls.__name__, cls)
    exported = getattr(module, "__all__", None)
    layout = cls.__kind_error_declarations__.layout
    if layout.visibility is Visibility.PUBLIC and isinstance(exported, list) and cls.__name__ not in exported:
        exported.append(cls.__name__)


def kind_error(
    enum_cls: EnumT | None = None,
    *,
    derive: Sequence[str] = (),
    defaults: Mapping[str, str] | None = None,
    **options: Any,
) -> EnumT | Callable[[EnumT], EnumT]:
    """Class decorator that generates a kind error type next to the enum.

    The generated class is stored on the enum as ``__kind_error__`` and, for
    enums defined at module level, bound in the enum's module under its name. The enum itself is returned
    unchanged.
    """

    def _apply(cls: EnumT) -> EnumT:
        generated = derive_kind_error(cls, derive=derive, defaults=defaults, **options)
        _splice(cls, generated)
        cls.__kind_error__ = generated
        return cls

    if enum_cls is None:
        return _apply
    return _apply(enum_cls)
