# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the PropTypeGen configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".proptypegen.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass
class ConversionConfig:
    """Project-level defaults for the CLI.

    Attributes:
        namespace_alias: Local name of the React import in the converted sources.
        type_names: Type groups to convert when a request selects none.
        strict: Whether omitted properties make a conversion fail.
    """

    namespace_alias: str | None = None
    type_names: list[str] = field(default_factory=list)
    strict: bool = False


def load_config(path: Path) -> ConversionConfig:
    """Load and parse a PropTypeGen configuration file.

    Args:
        path: Path to the `.proptypegen.yaml` file.

    Returns:
        A ConversionConfig instance populated from the file.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> ConversionConfig:
    """Parse configuration YAML text into a ConversionConfig.

    An empty document yields the defaults.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong type.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ConversionConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    namespace_alias: str | None = None
    if "namespace-alias" in data:
        namespace_alias = data["namespace-alias"]
        if not isinstance(namespace_alias, str) or not namespace_alias:
            raise ConfigError(f"{source_label}: 'namespace-alias' must be a non-empty string")

    type_names: list[str] = []
    if "type-names" in data:
        raw_names = data["type-names"]
        if not isinstance(raw_names, list) or not all(isinstance(n, str) for n in raw_names):
            raise ConfigError(f"{source_label}: 'type-names' must be a list of strings")
        type_names = list(raw_names)

    strict = data.get("strict", False)
    if not isinstance(strict, bool):
        raise ConfigError(f"{source_label}: 'strict' must be a boolean")

    return ConversionConfig(namespace_alias=namespace_alias, type_names=type_names, strict=strict)
