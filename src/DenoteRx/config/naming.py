"""Naming domain configuration: segment order and keyword sorting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from DenoteRx.compiler.environment import KEYWORD_SORT_KEYS, parse_component_order
from DenoteRx.config.common import (
    expect_bool,
    expect_str,
    expect_str_list,
    get_required_value,
    get_section,
)
from DenoteRx.core.errors import PatternError
from DenoteRx.core.fields import FieldName


@dataclass(frozen=True, slots=True)
class NamingConfig:
    """Store validated file name layout settings."""

    component_order: tuple[FieldName, ...]
    sort_keywords: bool
    keyword_comparator: str


def load_naming(raw: Mapping[str, Any]) -> NamingConfig:
    """Load naming configuration from the `naming` and `keywords` sections.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed naming configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing or the order is invalid.
    """
    naming = get_section(raw, "naming", required=True)
    keywords = get_section(raw, "keywords", required=True)

    order_raw = expect_str_list(
        get_required_value(naming, "component_order", "naming.component_order"),
        "naming.component_order",
    )
    try:
        order = parse_component_order(order_raw)
    except PatternError as exc:
        raise ValueError(f"naming.component_order is invalid: {exc}") from exc

    return NamingConfig(
        component_order=order,
        sort_keywords=expect_bool(get_required_value(keywords, "sort", "keywords.sort"), "keywords.sort"),
        keyword_comparator=expect_str(
            get_required_value(keywords, "comparator", "keywords.comparator"),
            "keywords.comparator",
        ).strip().lower(),
    )


def check_naming(config: NamingConfig) -> None:
    """Validate naming domain constraints.

    Raises:
        ValueError: If the comparator is unknown.
    """
    if config.keyword_comparator not in KEYWORD_SORT_KEYS:
        raise ValueError(f"keywords.comparator must be one of {sorted(KEYWORD_SORT_KEYS)}")
