"""Configuration parsing and validation for kinderror."""

from kinderror.config.models import CONFIG_KEYS, Configuration, Visibility
from kinderror.config.parser import parse_config, to_token, tokens_from_options
from kinderror.config.validator import check_config, default_type_name, validate_config
from kinderror.config.loaders import load_project_defaults, merge_tokens

__all__ = [
    "CONFIG_KEYS",
    "Configuration",
    "Visibility",
    "check_config",
    "default_type_name",
    "load_project_defaults",
    "merge_tokens",
    "parse_config",
    "to_token",
    "tokens_from_options",
    "validate_config",
]
