"""Pattern assembler: combine per-field fragments in component order.

Visit order is the configured component order with `file-type` appended.
Fields the caller did not supply are skipped entirely; the fragments of the
supplied ones are joined with a wildcard between neighbours. With no fields
at all the result is the empty sequence, which matches every file name.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from DenoteRx.compiler.environment import CompileEnvironment
from DenoteRx.compiler.fields import translate_field
from DenoteRx.core.errors import MalformedInputError, UnsupportedFieldError
from DenoteRx.core.fields import FieldName
from DenoteRx.core.pattern import PatternFragment, Seq, interleave
from DenoteRx.utils.log import log

FieldInput = Mapping[FieldName, Any]


def normalize_field_input(fields: Mapping[Any, Any]) -> dict[FieldName, Any]:
    """Resolve field keys and drop unsupplied (None) values.

    Args:
        fields: Raw mapping of field key to value.

    Returns:
        Mapping keyed by `FieldName`.

    Raises:
        UnknownFieldError: If a key names no known field.
        UnsupportedFieldError: If the `directory` field is supplied.
        MalformedInputError: If two keys resolve to the same field.
    """
    out: dict[FieldName, Any] = {}
    for key, value in fields.items():
        name = FieldName.parse(key)
        if value is None:
            continue
        if name is FieldName.DIRECTORY:
            raise UnsupportedFieldError("The directory field is not supported")
        if name in out:
            raise MalformedInputError(f"Field supplied more than once: {name.value}")
        out[name] = value
    return out


def pairs_to_field_input(pairs: Sequence[Any]) -> dict[FieldName, Any]:
    """Build field input from a flat `key, value, key, value, ...` sequence.

    Raises:
        MalformedInputError: If the sequence has an odd length, before any
            key is looked at.
    """
    if isinstance(pairs, (str, bytes)) or len(pairs) % 2:
        raise MalformedInputError(
            f"Field arguments must come in key/value pairs, got {len(pairs)} items"
        )
    items = list(pairs)
    keys = items[0::2]
    values = items[1::2]
    out: dict[FieldName, Any] = {}
    for key, value in zip(keys, values):
        name = FieldName.parse(key)
        if name in out:
            raise MalformedInputError(f"Field supplied more than once: {name.value}")
        out[name] = value
    return normalize_field_input(out)


def visit_order(env: CompileEnvironment) -> tuple[FieldName, ...]:
    """Return the field visit order: component order, then `file-type`."""
    order = tuple(name for name in env.component_order if name is not FieldName.FILE_TYPE)
    return order + (FieldName.FILE_TYPE,)


def assemble(fields: Mapping[Any, Any], env: CompileEnvironment) -> Seq:
    """Assemble the pattern for all supplied fields.

    Args:
        fields: Field input; keys may be `FieldName` or field name strings.
        env: Compilation environment, read once for the whole call.

    Returns:
        `Seq` of present field fragments separated by wildcards. Empty when
        no field is supplied, meaning "no constraints, match every name".

    Raises:
        PatternError: Subclasses describe malformed input or unresolved
            file types. No partial result is returned.
    """
    field_input = normalize_field_input(fields)
    fragments: list[PatternFragment] = []
    for name in visit_order(env):
        if name not in field_input:
            continue
        log.debug("Translating field %s=%r", name.value, field_input[name])
        fragments.append(translate_field(name, field_input[name], env))
    return interleave(fragments)
