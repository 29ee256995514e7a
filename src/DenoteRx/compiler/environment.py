"""Collaborators and settings shared by one compilation call."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from DenoteRx.core.errors import MalformedInputError
from DenoteRx.core.fields import ORDERABLE_FIELDS, FieldName
from DenoteRx.filetypes.registry import FileTypeRegistry
from DenoteRx.text.slug import sluggify

Normalizer = Callable[[FieldName, str], str]
SortKey = Callable[[str], Any]

DEFAULT_COMPONENT_ORDER: tuple[FieldName, ...] = ORDERABLE_FIELDS


def _length_key(text: str) -> tuple[int, str]:
    return (len(text), text)


KEYWORD_SORT_KEYS: dict[str, SortKey] = {
    "lexicographic": str,
    "casefold": str.casefold,
    "length": _length_key,
}


@dataclass(frozen=True, slots=True)
class CompileEnvironment:
    """Immutable view of everything a compilation reads besides its input.

    Attributes:
        normalize: Text normalizer for signature, title and keyword values.
        file_types: Registry resolving `file-type` tags.
        component_order: Order of file name segments. Decides visit order and
            whether the identifier gets its `@@` prefix.
        sort_keywords: Reorder all-literal AND groups before compiling them.
        keyword_sort_key: Key function used when `sort_keywords` is on.
    """

    normalize: Normalizer = sluggify
    file_types: FileTypeRegistry = field(default_factory=FileTypeRegistry)
    component_order: tuple[FieldName, ...] = DEFAULT_COMPONENT_ORDER
    sort_keywords: bool = True
    keyword_sort_key: SortKey = str

    def __post_init__(self) -> None:
        object.__setattr__(self, "component_order", parse_component_order(self.component_order))

    def with_options(self, **changes: Any) -> CompileEnvironment:
        """Return a copy with some settings replaced."""
        return replace(self, **changes)


def parse_component_order(order: Sequence[Any]) -> tuple[FieldName, ...]:
    """Validate a component order.

    `file-type` is dropped because the assembler always visits it last.

    Raises:
        MalformedInputError: On unknown, unsupported, duplicate or missing
            entries. All of identifier, signature, title and keywords must
            appear exactly once.
    """
    if isinstance(order, str):
        raise MalformedInputError("component order must be a sequence of field names")
    out: list[FieldName] = []
    for item in order:
        name = FieldName.parse(item)
        if name is FieldName.FILE_TYPE:
            continue
        if name not in ORDERABLE_FIELDS:
            raise MalformedInputError(f"component order cannot contain: {name.value}")
        if name in out:
            raise MalformedInputError(f"component order repeats: {name.value}")
        out.append(name)
    missing = [name.value for name in ORDERABLE_FIELDS if name not in out]
    if missing:
        raise MalformedInputError(f"component order is missing: {', '.join(missing)}")
    return tuple(out)


def default_environment() -> CompileEnvironment:
    return CompileEnvironment()
