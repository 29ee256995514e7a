"""File type domain configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DenoteRx.config.common import expect_str_mapping, get_section


@dataclass(frozen=True, slots=True)
class FileTypesConfig:
    """Store validated file type tag -> extension table."""

    extensions: Mapping[str, str]


def load_file_types(raw: Mapping[str, Any]) -> FileTypesConfig:
    """Load the `file_types` section.

    Raises:
        TypeError: If the section is not a string mapping.
        ValueError: If the section is missing.
    """
    section = get_section(raw, "file_types", required=True)
    return FileTypesConfig(extensions=expect_str_mapping(section, "file_types"))


def check_file_types(config: FileTypesConfig) -> None:
    """Validate file type constraints.

    Raises:
        ValueError: If the table is empty or has blank tags or extensions.
    """
    if not config.extensions:
        raise ValueError("file_types must include at least one file type")
    for tag, extension in config.extensions.items():
        if not tag.strip():
            raise ValueError("file_types tags must not be empty")
        if not extension.strip():
            raise ValueError(f"file_types.{tag} must not be empty")
