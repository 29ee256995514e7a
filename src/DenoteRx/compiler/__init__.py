"""Compiler from field constraints to pattern fragments."""

from __future__ import annotations

from DenoteRx.compiler.assembler import assemble, pairs_to_field_input
from DenoteRx.compiler.environment import CompileEnvironment, default_environment
from DenoteRx.compiler.fields import translate_field
from DenoteRx.compiler.keywords import compile_keywords

__all__ = [
    "CompileEnvironment",
    "assemble",
    "compile_keywords",
    "default_environment",
    "pairs_to_field_input",
    "translate_field",
]
