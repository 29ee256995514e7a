"""Public entry points for building file name patterns.

Three ways to ask for the same thing:

- `file_name_pattern(...)`  -> pattern fragment, for further composition
- `file_name_regexp(...)`   -> rendered `re` pattern string
- `file_name_form(...)`     -> deferred node to nest inside a larger
                               fragment tree; the renderer expands it

All take the fields `identifier`, `signature`, `title`, `keywords` and
`file_type` (`file-type`). Omitted fields are unconstrained.

Example:
    >>> file_name_regexp(identifier="2024", keywords=["or", "agenda", "todo"])
"""

from __future__ import annotations

import re
from typing import Any, Sequence

from DenoteRx.compiler.assembler import assemble, pairs_to_field_input
from DenoteRx.compiler.environment import CompileEnvironment
from DenoteRx.core.pattern import FileNameForm, PatternFragment
from DenoteRx.renderers.regex import RegexRenderer


def _env(env: CompileEnvironment | None) -> CompileEnvironment:
    return env if env is not None else CompileEnvironment()


def file_name_pattern(env: CompileEnvironment | None = None, /, **fields: Any) -> PatternFragment:
    """Build the pattern fragment for the given field constraints.

    Args:
        env: Compilation environment; defaults to the built-in one.
        **fields: Field values keyed by field name.

    Returns:
        Assembled fragment. With no fields it matches every file name.

    Raises:
        PatternError: On malformed input or unknown file types.
    """
    return assemble(fields, _env(env))


def file_name_regexp(env: CompileEnvironment | None = None, /, **fields: Any) -> str:
    """Build and render the pattern for the given field constraints."""
    env = _env(env)
    return RegexRenderer(env).render(assemble(fields, env))


def compile_regexp(env: CompileEnvironment | None = None, /, **fields: Any) -> re.Pattern[str]:
    """Like `file_name_regexp`, compiled with `re.compile`."""
    return re.compile(file_name_regexp(env, **fields))


def file_name_form(**fields: Any) -> FileNameForm:
    """Return a deferred file name node.

    Nothing is validated until a renderer expands the node with its own
    environment, where it becomes `file_name_pattern(env, **fields)`.
    """
    return FileNameForm(tuple(fields.items()))


def pattern_from_pairs(pairs: Sequence[Any], env: CompileEnvironment | None = None) -> PatternFragment:
    """Build the pattern from a flat `key, value, ...` sequence.

    Raises:
        MalformedInputError: If the sequence cannot be split into pairs.
    """
    return assemble(pairs_to_field_input(pairs), _env(env))
