"""Command implementations for the DenoteRx CLI.

Kept apart from click so they can be exercised without a terminal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Sequence

import yaml

from DenoteRx.compiler.assembler import assemble, pairs_to_field_input
from DenoteRx.compiler.environment import CompileEnvironment
from DenoteRx.core.errors import MalformedInputError
from DenoteRx.renderers.regex import RegexRenderer
from DenoteRx.utils.log import log


def parse_cli_value(text: str) -> Any:
    """Parse one VALUE argument.

    Values written in YAML flow-list syntax (`[or, a, [b, c]]`) become nested
    lists. Every scalar is kept as written (`yes`, `010`, `null` stay
    strings), and non-list values are returned unchanged so identifiers
    like `2024` are not turned into numbers.

    Raises:
        MalformedInputError: If a list value is not valid YAML.
    """
    stripped = text.strip()
    if not stripped.startswith("["):
        return text
    try:
        value = yaml.load(stripped, Loader=yaml.BaseLoader)
    except yaml.YAMLError as exc:
        raise MalformedInputError(f"Invalid list value: {text}") from exc
    return value


def parse_cli_pairs(arguments: Sequence[str]) -> list[Any]:
    """Turn raw KEY VALUE arguments into a flat pair list with parsed values."""
    out: list[Any] = []
    for idx, argument in enumerate(arguments):
        out.append(argument if idx % 2 == 0 else parse_cli_value(argument))
    return out


@dataclass(slots=True)
class RegexpCommand:
    """Compile field arguments into a rendered pattern."""

    env: CompileEnvironment
    arguments: Sequence[str]

    def execute(self) -> str:
        fields = pairs_to_field_input(parse_cli_pairs(self.arguments))
        log.debug("Fields: %s", {name.value: value for name, value in fields.items()})
        pattern = RegexRenderer(self.env).render(assemble(fields, self.env))
        log.debug("Pattern: %s", pattern)
        return pattern


@dataclass(slots=True)
class MatchCommand:
    """Report which of the given file names satisfy the field arguments."""

    env: CompileEnvironment
    arguments: Sequence[str]
    names: Sequence[str]

    def execute(self) -> list[str]:
        pattern = re.compile(RegexpCommand(self.env, self.arguments).execute())
        matched = [name for name in self.names if pattern.search(name)]
        log.info("Matched %d of %d names", len(matched), len(self.names))
        return matched
