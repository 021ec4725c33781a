"""Project-wide defaults read from ``pyproject.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from kinderror.config.parser import Token, to_token
from kinderror.core.errors import ConfigError, DiagnosticKind

SECTION = "tool.kinderror"


def load_project_defaults(path: str | Path) -> dict[str, str]:
    """Read ``[tool.kinderror]`` from a pyproject file.

    Keys are not checked here; unknown keys surface from ``parse_config`` once
    the defaults are merged into a declaration's tokens.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ConfigError: If the file is not valid TOML or the section is not a table.
    """
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Project file not found: {file_path}")

    try:
        data = tomllib.loads(file_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(
            DiagnosticKind.INVALID_VALUE,
            f"Failed to parse {file_path}: {exc}",
            subject=SECTION,
            cause=exc,
        ) from exc

    tool: Any = data.get("tool", {})
    section: Any = tool.get("kinderror", {}) if isinstance(tool, dict) else None
    if not isinstance(section, dict):
        raise ConfigError(DiagnosticKind.INVALID_VALUE, f"[{SECTION}] must be a table.", subject=SECTION)

    defaults: dict[str, str] = {}
    for key, value in section.items():
        try:
            defaults[key] = to_token(value)
        except TypeError as exc:
            raise ConfigError(
                DiagnosticKind.INVALID_VALUE,
                f"Invalid value for '{key}' in [{SECTION}]: {exc}",
                subject=key,
                cause=exc,
            ) from exc
    return defaults


def merge_tokens(defaults: Mapping[str, str] | None, tokens: Iterable[Token]) -> list[Token]:
    """Put defaults in front of explicit tokens, dropping defaults they override."""
    explicit = list(tokens)
    if not defaults:
        return explicit
    overridden = {key for key, _ in explicit}
    merged = [(key, value) for key, value in defaults.items() if key not in overridden]
    merged.extend(explicit)
    return merged
