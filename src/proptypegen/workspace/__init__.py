# Copyright 2026 PropTypeGen Contributors
# SPDX-License-Identifier: Apache-2.0

"""Project configuration for PropTypeGen."""

from proptypegen.workspace.config import (
    CONFIG_FILE_NAME,
    ConfigError,
    ConversionConfig,
    load_config,
    parse_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ConversionConfig",
    "load_config",
    "parse_config",
]
