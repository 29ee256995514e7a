"""Keyword expression compiler.

Rules
- Keyword(s)  -> word-start, normalized s, word-end
- AnyOf(...)  -> alternation of the compiled children
- AllOf(...)  -> compiled children with a wildcard between neighbours;
                 all-literal groups are sorted first when the environment
                 asks for it, so equal keyword sets give equal patterns
"""

from __future__ import annotations

from typing import Any

from DenoteRx.compiler.environment import CompileEnvironment
from DenoteRx.core.errors import KeywordSpecError
from DenoteRx.core.fields import AllOf, AnyOf, FieldName, Keyword, KeywordSpec, parse_keyword_spec
from DenoteRx.core.pattern import Anchor, PatternFragment, alt, interleave, lit, seq
from DenoteRx.utils.log import log


def compile_keywords(value: Any, env: CompileEnvironment) -> PatternFragment:
    """Compile a raw keyword value or `KeywordSpec` into a fragment.

    Args:
        value: String, nested list or parsed keyword expression.
        env: Compilation environment.

    Returns:
        Fragment matching file names that satisfy the expression.

    Raises:
        KeywordSpecError: If the expression is empty or malformed.
    """
    return _compile(parse_keyword_spec(value), env)


def _compile(spec: KeywordSpec, env: CompileEnvironment) -> PatternFragment:
    if isinstance(spec, Keyword):
        return _compile_keyword(spec, env)
    if isinstance(spec, AnyOf):
        return alt(*(_compile(child, env) for child in spec.children))
    if isinstance(spec, AllOf):
        children = _ordered_children(spec, env)
        return interleave([_compile(child, env) for child in children])
    raise KeywordSpecError(f"Invalid keyword expression node: {spec!r}")


def _compile_keyword(spec: Keyword, env: CompileEnvironment) -> PatternFragment:
    text = env.normalize(FieldName.KEYWORDS, spec.text)
    if not text:
        raise KeywordSpecError(f"Keyword normalizes to an empty string: {spec.text!r}")
    return seq(Anchor.WORD_START, lit(text), Anchor.WORD_END)


def _ordered_children(spec: AllOf, env: CompileEnvironment) -> tuple[KeywordSpec, ...]:
    if not env.sort_keywords:
        return spec.children
    if not all(isinstance(child, Keyword) for child in spec.children):
        return spec.children
    ordered = tuple(sorted(spec.children, key=lambda child: env.keyword_sort_key(child.text)))
    if ordered != spec.children:
        log.debug("Reordered keywords: %s", [child.text for child in ordered])
    return ordered
