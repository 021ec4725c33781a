from __future__ import annotations

from enum import Enum

import pytest
from pydantic import ValidationError as PydanticValidationError

from kinderror import ConfigError, DiagnosticKind, KindErrorDiagnostic, Visibility, parse_config
from kinderror.config import tokens_from_options, to_token


class Color(Enum):
    RED = 1


def test_parse_config_defaults() -> None:
    config = parse_config([("display", "{kind}")])

    assert config.source is None
    assert config.source_fn is False
    assert config.name is None
    assert config.type_vis is Visibility.PRIVATE
    assert config.new_vis is Visibility.PRIVATE
    assert config.kind_fn_vis is Visibility.PRIVATE
    assert config.default_kind is None
    assert config.source_configured is False


def test_parse_config_all_keys() -> None:
    config = parse_config(
        [
            ("source", "io.UnsupportedOperation"),
            ("source_fn", "true"),
            ("name", "Error"),
            ("type_vis", "public"),
            ("new_vis", "protected"),
            ("kind_fn_vis", "public"),
            ("display", "{kind:?}: {source}"),
            ("default_kind", "First"),
        ]
    )

    assert config.source == "io.UnsupportedOperation"
    assert config.source_fn is True
    assert config.name == "Error"
    assert config.type_vis is Visibility.PUBLIC
    assert config.new_vis is Visibility.PROTECTED
    assert config.kind_fn_vis is Visibility.PUBLIC
    assert config.display == "{kind:?}: {source}"
    assert config.default_kind == "First"
    assert config.source_configured is True


def test_parse_config_is_deterministic() -> None:
    tokens = [("source", "OSError"), ("display", "{source}")]
    assert parse_config(tokens) == parse_config(tokens)


def test_duplicate_key() -> None:
    with pytest.raises(ConfigError) as exc_info:
        parse_config([("name", "Error"), ("display", "{kind}"), ("name", "Other")])
    assert exc_info.value.kind == DiagnosticKind.DUPLICATE_KEY
    assert exc_info.value.subject == "name"


def test_duplicate_key_reported_before_bad_value() -> None:
    with pytest.raises(ConfigError) as exc_info:
        parse_config([("source_fn", "maybe"), ("source_fn", "true")])
    assert exc_info.value.kind == DiagnosticKind.DUPLICATE_KEY


def test_unknown_key() -> None:
    with pytest.raises(ConfigError) as exc_info:
        parse_config([("display", "{kind}"), ("origin_fn_vis", "public")])
    assert exc_info.value.kind == DiagnosticKind.UNKNOWN_KEY
    assert exc_info.value.subject == "origin_fn_vis"
    assert "origin_fn_vis" in str(exc_info.value)


@pytest.mark.parametrize(
    ("key", "value"),
    [
        ("source_fn", "yes"),
        ("source_fn", "True"),
        ("type_vis", "pub"),
        ("new_vis", "pub(crate)"),
        ("kind_fn_vis", ""),
        ("name", "not valid"),
        ("name", "class"),
        ("source", "io..Error"),
        ("source", "std::io::Error"),
        ("default_kind", "9lives"),
    ],
)
def test_invalid_value(key: str, value: str) -> None:
    with pytest.raises(ConfigError) as exc_info:
        parse_config([(key, value)])
    error = exc_info.value
    assert error.kind == DiagnosticKind.INVALID_VALUE
    assert error.subject == key
    assert isinstance(error.cause, PydanticValidationError)
    assert isinstance(error.__cause__, PydanticValidationError)


def test_config_error_is_a_diagnostic() -> None:
    with pytest.raises(KindErrorDiagnostic):
        parse_config([("bogus", "1")])


def test_configuration_is_frozen() -> None:
    config = parse_config([("display", "{kind}")])
    with pytest.raises(PydanticValidationError):
        config.name = "Other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, "true"),
        (False, "false"),
        (Visibility.PUBLIC, "public"),
        (Color.RED, "RED"),
        (OSError, "OSError"),
        ("{kind}", "{kind}"),
    ],
)
def test_to_token(value: object, expected: str) -> None:
    assert to_token(value) == expected


def test_tokens_from_options_keeps_order() -> None:
    tokens = tokens_from_options({"source": OSError, "source_fn": True, "display": "{kind}"})
    assert tokens == [("source", "OSError"), ("source_fn", "true"), ("display", "{kind}")]


def test_tokens_from_options_rejects_unsupported_values() -> None:
    with pytest.raises(ConfigError) as exc_info:
        tokens_from_options({"name": 3})
    assert exc_info.value.kind == DiagnosticKind.INVALID_VALUE
    assert exc_info.value.subject == "name"
    assert isinstance(exc_info.value.cause, TypeError)
