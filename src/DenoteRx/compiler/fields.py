"""Per-field translation into pattern fragments.

Segment rules
- identifier -> exactly 15 characters: the given prefix, then `.{15-n}`;
                prefixed with `@@` unless identifier is the first component
- signature  -> `==` + normalized text, or `==` + caller fragment as is
- title      -> `--` + normalized text, or `--` + caller fragment as is
- keywords   -> `__`, wildcard, compiled keyword expression
- file-type  -> alternation of extensions, anchored at end of input
"""

from __future__ import annotations

from typing import Any

from DenoteRx.compiler.environment import CompileEnvironment
from DenoteRx.compiler.keywords import compile_keywords
from DenoteRx.core.errors import MalformedInputError, UnsupportedFieldError
from DenoteRx.core.fields import IDENTIFIER_WIDTH, FieldName
from DenoteRx.core.pattern import (
    Alt,
    Anchor,
    AnyRepeat,
    FileNameForm,
    Lit,
    PatternFragment,
    Seq,
    alt,
    any_chars,
    any_exactly,
    lit,
    seq,
)

IDENTIFIER_PREFIX = "@@"
SIGNATURE_PREFIX = "=="
TITLE_PREFIX = "--"
KEYWORDS_PREFIX = "__"

_FRAGMENT_TYPES = (Lit, AnyRepeat, Seq, Alt, Anchor, FileNameForm)


def translate_field(field: FieldName, value: Any, env: CompileEnvironment) -> PatternFragment:
    """Translate one field value into its file name fragment.

    Args:
        field: Field being translated.
        value: Raw caller value for that field.
        env: Compilation environment.

    Returns:
        Fragment for this segment.

    Raises:
        MalformedInputError: If the value has the wrong type or shape.
        UnsupportedFieldError: For fields without a translation rule.
        UnresolvedFileTypeError: If a file type tag is unknown.
    """
    if field is FieldName.IDENTIFIER:
        return _translate_identifier(value, env)
    if field is FieldName.SIGNATURE:
        return _translate_text(field, SIGNATURE_PREFIX, value, env)
    if field is FieldName.TITLE:
        return _translate_text(field, TITLE_PREFIX, value, env)
    if field is FieldName.KEYWORDS:
        return seq(lit(KEYWORDS_PREFIX), any_chars(), compile_keywords(value, env))
    if field is FieldName.FILE_TYPE:
        return _translate_file_type(value, env)
    raise UnsupportedFieldError(f"Field has no translation rule: {field.value}")


def _translate_identifier(value: Any, env: CompileEnvironment) -> PatternFragment:
    if not isinstance(value, str):
        raise MalformedInputError(f"identifier must be a string, got {type(value).__name__}")
    width = len(value)
    if width > IDENTIFIER_WIDTH:
        raise MalformedInputError(
            f"identifier must be at most {IDENTIFIER_WIDTH} characters long: {value!r}"
        )

    fragment: PatternFragment
    if width == IDENTIFIER_WIDTH:
        fragment = lit(value)
    elif width == 0:
        fragment = any_exactly(IDENTIFIER_WIDTH)
    else:
        fragment = seq(lit(value), any_exactly(IDENTIFIER_WIDTH - width))

    if env.component_order[:1] == (FieldName.IDENTIFIER,):
        return fragment
    return seq(lit(IDENTIFIER_PREFIX), fragment)


def _translate_text(field: FieldName, prefix: str, value: Any, env: CompileEnvironment) -> PatternFragment:
    if isinstance(value, _FRAGMENT_TYPES):
        return seq(lit(prefix), value)
    if not isinstance(value, str):
        raise MalformedInputError(
            f"{field.value} must be a string or a pattern fragment, got {type(value).__name__}"
        )
    text = env.normalize(field, value)
    if not text:
        raise MalformedInputError(f"{field.value} normalizes to an empty string: {value!r}")
    return seq(lit(prefix), lit(text))


def _translate_file_type(value: Any, env: CompileEnvironment) -> PatternFragment:
    tags = [value] if isinstance(value, str) else value
    if not isinstance(tags, (list, tuple)):
        raise MalformedInputError(f"file-type must be a tag or a list of tags: {value!r}")
    if not tags:
        raise MalformedInputError("file-type list must not be empty")
    for tag in tags:
        if not isinstance(tag, str):
            raise MalformedInputError(f"file-type tags must be strings: {tag!r}")
    extensions = [env.file_types.resolve(tag) for tag in tags]
    return seq(alt(*(lit(ext) for ext in extensions)), Anchor.END_OF_INPUT)
