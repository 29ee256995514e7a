"""File type registry: symbolic tag -> file name extension."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from DenoteRx.core.errors import UnresolvedFileTypeError

DEFAULT_FILE_TYPES: Mapping[str, str] = MappingProxyType(
    {
        "org": ".org",
        "markdown-yaml": ".md",
        "markdown-toml": ".md",
        "text": ".txt",
    }
)


@dataclass(frozen=True, slots=True)
class FileTypeRegistry:
    """Read-only lookup table of known file types.

    Attributes:
        extensions: Mapping of tag to extension, including the leading dot.
    """

    extensions: Mapping[str, str] = field(default_factory=lambda: DEFAULT_FILE_TYPES)

    def __post_init__(self) -> None:
        # Copy so later changes to the caller's dict cannot leak in.
        object.__setattr__(self, "extensions", MappingProxyType(dict(self.extensions)))

    def resolve(self, tag: str) -> str:
        """Return the extension registered for `tag`.

        Args:
            tag: Symbolic file type, with or without a leading `:`.

        Returns:
            Extension string such as ".org".

        Raises:
            UnresolvedFileTypeError: If the tag is not registered.
        """
        key = str(tag).strip().lstrip(":")
        extension = self.extensions.get(key)
        if extension is None:
            raise UnresolvedFileTypeError(key)
        return extension

    def names(self) -> tuple[str, ...]:
        """Return registered tags in registration order."""
        return tuple(self.extensions.keys())
