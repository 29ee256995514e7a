"""File name fields and keyword expressions.

A Denote-style file name is a sequence of prefix-tagged segments:

    20240105T093012==sig--some-title__kw1_kw2.org

Callers describe the names they want with any subset of the fields below.
Keyword constraints are nested AND/OR expressions over single keywords.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Union

from DenoteRx.core.errors import KeywordSpecError, UnknownFieldError

IDENTIFIER_WIDTH = 15


class FieldName(str, Enum):
    """Fields a file name pattern can constrain."""

    IDENTIFIER = "identifier"
    SIGNATURE = "signature"
    TITLE = "title"
    KEYWORDS = "keywords"
    FILE_TYPE = "file-type"
    # Documented, but no translation rule exists for it yet.
    DIRECTORY = "directory"

    @classmethod
    def parse(cls, key: Any) -> FieldName:
        """Resolve a field key written as enum, name, `:name` or `snake_name`.

        Raises:
            UnknownFieldError: If the key names no known field.
        """
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            raise UnknownFieldError(f"Field name must be a string: {key!r}")
        name = key.strip().lstrip(":").replace("_", "-").lower()
        try:
            return cls(name)
        except ValueError:
            raise UnknownFieldError(f"Unknown field: {key}") from None


# Fields that may appear in a component order.
ORDERABLE_FIELDS = (
    FieldName.IDENTIFIER,
    FieldName.SIGNATURE,
    FieldName.TITLE,
    FieldName.KEYWORDS,
)


@dataclass(frozen=True, slots=True)
class Keyword:
    """A single keyword that must appear as a whole word."""

    text: str


@dataclass(frozen=True, slots=True)
class AnyOf:
    """At least one child expression must match."""

    children: tuple[KeywordSpec, ...]


@dataclass(frozen=True, slots=True)
class AllOf:
    """Every child expression must match."""

    children: tuple[KeywordSpec, ...]


KeywordSpec = Union[Keyword, AnyOf, AllOf]

_HEADS = {"or": AnyOf, "and": AllOf}


def parse_keyword_spec(value: Any) -> KeywordSpec:
    """Turn a raw keyword value into a `KeywordSpec`.

    Accepted shapes:
    - `"kw"`                        -> `Keyword("kw")`
    - `["a", "b"]`                  -> `AllOf` (implicit AND)
    - `["or", "a", ["and", "b", "c"]]` -> explicit head, nested freely
    - an existing `Keyword` / `AnyOf` / `AllOf`, returned unchanged

    Args:
        value: Raw keyword value.

    Returns:
        Parsed keyword expression.

    Raises:
        KeywordSpecError: On empty lists, heads without children or
            non-string leaves.
    """
    if isinstance(value, (Keyword, AnyOf, AllOf)):
        _check_spec(value)
        return value
    if isinstance(value, str):
        if not value.strip():
            raise KeywordSpecError("Keyword must not be empty")
        return Keyword(value)
    if isinstance(value, (list, tuple)):
        return _parse_list(value)
    raise KeywordSpecError(f"Keyword expression must be a string or list: {value!r}")


def _parse_list(items: Sequence[Any]) -> KeywordSpec:
    if not items:
        raise KeywordSpecError("Keyword expression list must not be empty")
    node_type = AllOf
    children = items
    head = items[0]
    if isinstance(head, str) and head.strip().lower() in _HEADS:
        node_type = _HEADS[head.strip().lower()]
        children = items[1:]
        if not children:
            raise KeywordSpecError(f"Keyword expression '{head}' has no operands")
    return node_type(tuple(parse_keyword_spec(child) for child in children))


def _check_spec(spec: Any) -> None:
    if not isinstance(spec, (Keyword, AnyOf, AllOf)):
        raise KeywordSpecError(f"Invalid keyword expression node: {spec!r}")
    if isinstance(spec, Keyword):
        if not isinstance(spec.text, str) or not spec.text.strip():
            raise KeywordSpecError("Keyword must be a non-empty string")
        return
    if not spec.children:
        raise KeywordSpecError(f"{type(spec).__name__} must have at least one child")
    for child in spec.children:
        _check_spec(child)
