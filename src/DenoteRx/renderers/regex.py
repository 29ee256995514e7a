"""Render pattern fragments as Python `re` syntax.

Mapping
- Lit          -> re.escape(text)
- AnyRepeat    -> `.*` or `.{n}`
- Seq          -> concatenation (empty sequence renders as "")
- Alt          -> `(?:a|b)`; an empty alternation renders as `(?!)`
- WORD_START   -> `(?<![^\\W_])(?=[^\\W_])`
- WORD_END     -> `(?<=[^\\W_])(?![^\\W_])`
- END_OF_INPUT -> `\\Z`

Word anchors treat `_` as a separator rather than a word character, since
keywords in a file name are joined with `_`.

The output is meant for `re.search`: patterns are not anchored at the start
because file names are often matched together with their directory.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from DenoteRx.compiler.assembler import assemble
from DenoteRx.compiler.environment import CompileEnvironment
from DenoteRx.core.pattern import Alt, Anchor, AnyRepeat, FileNameForm, Lit, PatternFragment, Seq

_ANCHORS: dict[Anchor, str] = {
    Anchor.WORD_START: r"(?<![^\W_])(?=[^\W_])",
    Anchor.WORD_END: r"(?<=[^\W_])(?![^\W_])",
    Anchor.END_OF_INPUT: r"\Z",
}


@dataclass(frozen=True, slots=True)
class RegexRenderer:
    """Turn a fragment tree into a pattern string.

    Attributes:
        env: Environment used to expand `FileNameForm` nodes.
    """

    env: CompileEnvironment = field(default_factory=CompileEnvironment)

    def render(self, fragment: PatternFragment) -> str:
        """Render `fragment` and all of its children.

        Raises:
            TypeError: If the tree contains a foreign node.
            PatternError: If a deferred file name form fails to compile.
        """
        if isinstance(fragment, Lit):
            return re.escape(fragment.text)
        if isinstance(fragment, Anchor):
            return _ANCHORS[fragment]
        if isinstance(fragment, AnyRepeat):
            if fragment.count is None:
                return ".*"
            if fragment.count == 0:
                return ""
            return f".{{{fragment.count}}}"
        if isinstance(fragment, Seq):
            return "".join(self.render(part) for part in fragment.parts)
        if isinstance(fragment, Alt):
            if not fragment.options:
                return "(?!)"
            return "(?:" + "|".join(self.render(option) for option in fragment.options) + ")"
        if isinstance(fragment, FileNameForm):
            return self.render(assemble(fragment.as_mapping(), self.env))
        raise TypeError(f"Cannot render pattern node: {fragment!r}")

    def compile(self, fragment: PatternFragment) -> re.Pattern[str]:
        return re.compile(self.render(fragment))


def render_regexp(fragment: PatternFragment, env: CompileEnvironment | None = None) -> str:
    """Render `fragment` with a one-off renderer."""
    return RegexRenderer(env or CompileEnvironment()).render(fragment)
