"""Error types raised while compiling file name patterns.

All errors derive from `PatternError` (a `ValueError`), so callers can catch
one type. The two families callers usually need to tell apart are
`MalformedInputError` (the request itself is wrong) and
`UnresolvedFileTypeError` (the request refers to something unknown).
"""

from __future__ import annotations


class PatternError(ValueError):
    """Base class for file name pattern compilation failures."""


class MalformedInputError(PatternError):
    """Field arguments cannot be interpreted."""


class UnknownFieldError(MalformedInputError):
    """A field name outside the supported set was supplied."""


class UnsupportedFieldError(MalformedInputError):
    """A documented field that has no translation rule was supplied."""


class KeywordSpecError(MalformedInputError):
    """A keyword expression is empty or has an invalid shape."""


class UnresolvedFileTypeError(PatternError, LookupError):
    """A file type tag is missing from the registry."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Unknown file type: {tag}")
        self.tag = tag
