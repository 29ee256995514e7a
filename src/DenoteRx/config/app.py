from __future__ import annotations

"""Application config orchestration and YAML loading entrypoints."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from DenoteRx.compiler.environment import KEYWORD_SORT_KEYS, CompileEnvironment
from DenoteRx.config.file_types import FileTypesConfig, check_file_types, load_file_types
from DenoteRx.config.naming import NamingConfig, check_naming, load_naming
from DenoteRx.config.runtime import RuntimeConfig, check_runtime, load_runtime
from DenoteRx.filetypes.registry import FileTypeRegistry

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yml")


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application root configuration."""

    runtime: RuntimeConfig
    naming: NamingConfig
    file_types: FileTypesConfig

    def environment(self) -> CompileEnvironment:
        """Build the compilation environment described by this config."""
        return CompileEnvironment(
            file_types=FileTypeRegistry(self.file_types.extensions),
            component_order=self.naming.component_order,
            sort_keywords=self.naming.sort_keywords,
            keyword_sort_key=KEYWORD_SORT_KEYS[self.naming.keyword_comparator],
        )


def parse_config_dict(raw: Mapping[str, Any]) -> AppConfig:
    """Parse normalized mapping into AppConfig."""
    runtime = load_runtime(raw)
    naming = load_naming(raw)
    file_types = load_file_types(raw)

    check_runtime(runtime)
    check_naming(naming)
    check_file_types(file_types)

    return AppConfig(runtime=runtime, naming=naming, file_types=file_types)


def load_config(path: Path) -> AppConfig:
    """Load YAML config file without default merge."""
    return load_config_with_defaults(path, default_path=path)


def load_config_with_defaults(
    config_path: Path | None = None, default_path: Path = DEFAULT_CONFIG_PATH
) -> AppConfig:
    """Load config by merging defaults and optional override."""
    base = parse_yaml(default_path.read_text(encoding="utf-8"))
    if config_path is None or config_path == default_path:
        return parse_config_dict(base)
    override = parse_yaml(config_path.read_text(encoding="utf-8"))
    return parse_config_dict(merge_config_dicts(base, override))


def parse_yaml(text: str) -> dict[str, Any]:
    """Parse raw YAML text into a mapping."""
    data = yaml.safe_load(text) or {}
    if not isinstance(data, Mapping):
        raise ValueError("Config root must be a mapping/object")
    return dict(data)


def merge_config_dicts(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Deep-merge two config mappings."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], Mapping) and isinstance(value, Mapping):
            merged[key] = merge_config_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
