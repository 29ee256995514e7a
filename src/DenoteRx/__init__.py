"""DenoteRx: match Denote-style note file names by their metadata."""

from __future__ import annotations

from DenoteRx.api import (
    compile_regexp,
    file_name_form,
    file_name_pattern,
    file_name_regexp,
    pattern_from_pairs,
)
from DenoteRx.compiler.environment import CompileEnvironment
from DenoteRx.core.errors import (
    KeywordSpecError,
    MalformedInputError,
    PatternError,
    UnknownFieldError,
    UnresolvedFileTypeError,
    UnsupportedFieldError,
)
from DenoteRx.core.fields import AllOf, AnyOf, FieldName, Keyword

__all__ = [
    "AllOf",
    "AnyOf",
    "CompileEnvironment",
    "FieldName",
    "Keyword",
    "KeywordSpecError",
    "MalformedInputError",
    "PatternError",
    "UnknownFieldError",
    "UnresolvedFileTypeError",
    "UnsupportedFieldError",
    "compile_regexp",
    "file_name_form",
    "file_name_pattern",
    "file_name_regexp",
    "pattern_from_pairs",
]
