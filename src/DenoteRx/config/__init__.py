from __future__ import annotations

"""Public configuration API for DenoteRx."""

from DenoteRx.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from DenoteRx.config.file_types import FileTypesConfig
from DenoteRx.config.naming import NamingConfig
from DenoteRx.config.runtime import RuntimeConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "NamingConfig",
    "FileTypesConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
