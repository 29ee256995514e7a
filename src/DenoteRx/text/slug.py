"""Default text normalization for file name segments.

Turns free text into the token form used inside file names. Each segment
kind has its own joiner because `-`, `=` and `_` are segment delimiters:

- title:     words joined with `-`     ("Hello, World" -> "hello-world")
- signature: words joined with `=`     ("1 a 2"        -> "1=a=2")
- keyword:   letters and digits only   ("In Progress"  -> "inprogress")

All three are idempotent on their own output.
"""

from __future__ import annotations

import re

from DenoteRx.core.fields import FieldName

_PUNCT_RE = re.compile(r"[^\w\s=-]")
_SEP_RE = re.compile(r"[\s_=-]+")
_KEYWORD_DROP_RE = re.compile(r"[\W_]+")


def sluggify_title(text: str) -> str:
    slug = _PUNCT_RE.sub("", text.lower())
    return _SEP_RE.sub("-", slug).strip("-")


def sluggify_signature(text: str) -> str:
    slug = _PUNCT_RE.sub("", text.lower())
    return _SEP_RE.sub("=", slug).strip("=")


def sluggify_keyword(text: str) -> str:
    return _KEYWORD_DROP_RE.sub("", text.lower())


def sluggify(kind: FieldName, text: str) -> str:
    """Normalize `text` for the given segment kind.

    Args:
        kind: One of SIGNATURE, TITLE or KEYWORDS.
        text: Free-form input.

    Returns:
        File-name-safe token; may be empty when `text` has no word characters.

    Raises:
        ValueError: If `kind` has no normalization rule.
    """
    if kind is FieldName.TITLE:
        return sluggify_title(text)
    if kind is FieldName.SIGNATURE:
        return sluggify_signature(text)
    if kind is FieldName.KEYWORDS:
        return sluggify_keyword(text)
    raise ValueError(f"No normalization rule for field: {kind.value}")
