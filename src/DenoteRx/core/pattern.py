"""Abstract pattern algebra for file name matching.

The compiler never produces regular expression text directly. It builds a
small immutable tree out of the nodes below, which a renderer later turns
into a concrete pattern string.

Node kinds
- `Lit`       literal text
- `Seq`       parts matched one after another (AND)
- `Alt`       any one of the options (OR)
- `AnyRepeat` any character, either exactly `count` times or zero-or-more
- `Anchor`    word-start / word-end / end-of-input
- `FileNameForm` deferred file name constraints, expanded at render time
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Union


class Anchor(Enum):
    """Zero-width assertions."""

    WORD_START = "word-start"
    WORD_END = "word-end"
    END_OF_INPUT = "end-of-input"


@dataclass(frozen=True, slots=True)
class Lit:
    """Literal text matched verbatim."""

    text: str


@dataclass(frozen=True, slots=True)
class AnyRepeat:
    """Any character repeated.

    Attributes:
        count: Exact repetition count, or None for zero-or-more.
    """

    count: int | None = None

    def __post_init__(self) -> None:
        if self.count is not None and self.count < 0:
            raise ValueError(f"AnyRepeat count must not be negative: {self.count}")


@dataclass(frozen=True, slots=True)
class Seq:
    """Parts matched in order. An empty sequence matches everything."""

    parts: tuple[PatternFragment, ...] = ()


@dataclass(frozen=True, slots=True)
class Alt:
    """Any one of the options. An empty alternation matches nothing."""

    options: tuple[PatternFragment, ...] = ()


@dataclass(frozen=True, slots=True)
class FileNameForm:
    """File name constraints whose compilation is deferred to render time.

    The renderer expands the form with its own environment, giving the same
    tree as calling the structured entry point with `fields` directly.
    """

    fields: tuple[tuple[str, Any], ...]

    def as_mapping(self) -> Mapping[str, Any]:
        return dict(self.fields)


PatternFragment = Union[Lit, AnyRepeat, Seq, Alt, Anchor, FileNameForm]


def lit(text: str) -> Lit:
    return Lit(text)


def seq(*parts: PatternFragment) -> Seq:
    return Seq(tuple(parts))


def alt(*options: PatternFragment) -> Alt:
    return Alt(tuple(options))


def any_chars() -> AnyRepeat:
    """Zero or more arbitrary characters (the wildcard separator)."""
    return AnyRepeat()


def any_exactly(count: int) -> AnyRepeat:
    return AnyRepeat(count)


def interleave(fragments: list[PatternFragment] | tuple[PatternFragment, ...]) -> Seq:
    """Join fragments with a wildcard strictly between neighbours.

    Args:
        fragments: Fragments in match order.

    Returns:
        `Seq` of the fragments separated by `any_chars()`; an empty `Seq`
        when no fragments are given.
    """
    parts: list[PatternFragment] = []
    for idx, fragment in enumerate(fragments):
        if idx:
            parts.append(any_chars())
        parts.append(fragment)
    return Seq(tuple(parts))
