"""Turn raw key/value tokens into a Configuration record."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from kinderror.config.models import CONFIG_KEYS, Configuration, Visibility
from kinderror.core.errors import ConfigError, DiagnosticKind

Token = tuple[str, str]


def parse_config(tokens: Iterable[Token]) -> Configuration:
    """Parse configuration tokens.

    Keys are checked in token order before any value is looked at, so a
    duplicated or unknown key is reported even when its value is also bad.

    Raises:
        ConfigError: ``DUPLICATE_KEY``, ``UNKNOWN_KEY`` or ``INVALID_VALUE``.
    """
    values: dict[str, str] = {}
    for key, value in tokens:
        if key in values:
            raise ConfigError(DiagnosticKind.DUPLICATE_KEY, f"Duplicate configuration key: {key}", subject=key)
        if key not in CONFIG_KEYS:
            raise ConfigError(DiagnosticKind.UNKNOWN_KEY, f"Unknown configuration key: {key}", subject=key)
        values[key] = value

    try:
        return Configuration.model_validate(values)
    except PydanticValidationError as exc:
        error = exc.errors()[0]
        key = str(error["loc"][0]) if error["loc"] else "configuration"
        raise ConfigError(
            DiagnosticKind.INVALID_VALUE,
            f"Invalid value for '{key}': {error['msg']}",
            subject=key,
            cause=exc,
        ) from exc


def to_token(value: Any) -> str:
    """Render a Python value the way it would be written as a configuration token."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Visibility):
        return value.value
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, type):
        return value.__name__
    if isinstance(value, str):
        return value
    raise TypeError(f"Unsupported configuration value: {value!r}")


def tokens_from_options(options: Mapping[str, Any]) -> list[Token]:
    """Convert keyword options into configuration tokens, keeping their order."""
    tokens: list[Token] = []
    for key, value in options.items():
        try:
            tokens.append((key, to_token(value)))
        except TypeError as exc:
            raise ConfigError(
                DiagnosticKind.INVALID_VALUE,
                f"Invalid value for '{key}': {exc}",
                subject=key,
                cause=exc,
            ) from exc
    return tokens
