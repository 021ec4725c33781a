"""Observability helpers for kinderror."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager, nullcontext
from typing import Any

try:  # pragma: no cover - optional dependency
    import logfire  # type: ignore[import-not-found]
except ImportError:  # pragma: no cover - optional dependency
    logfire = None

from kinderror.core.errors import ConfigError, DiagnosticKind, KindErrorDiagnostic

_INSTRUMENTED = False


@contextmanager
def _diagnosed_span(name: str, attributes: dict[str, Any]) -> Iterator[Any]:
    with logfire.span(name, **attributes) as current:
        try:
            yield current
        except KindErrorDiagnostic as exc:
            current.set_attribute("kinderror.diagnostic", exc.kind.value)
            if exc.subject is not None:
                current.set_attribute("kinderror.subject", exc.subject)
            raise


def span(name: str, **attributes: Any):
    """Open a Logfire span that records the diagnostic kind of a failed expansion."""
    if not _INSTRUMENTED or logfire is None:
        return nullcontext()
    return _diagnosed_span(name, attributes)


def instrument_kinderror() -> None:
    """Enable kinderror's Logfire spans after users configure Logfire themselves."""
    if logfire is None:
        raise ConfigError(
            DiagnosticKind.INVALID_VALUE,
            "Logfire is not installed. Install with 'kinderror[observability]' to enable tracing.",
            subject="observability",
        )
    global _INSTRUMENTED
    _INSTRUMENTED = True
