"""Tests for keyword expression parsing and compilation."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DenoteRx.compiler.environment import KEYWORD_SORT_KEYS, CompileEnvironment
from DenoteRx.compiler.keywords import compile_keywords
from DenoteRx.core.errors import KeywordSpecError
from DenoteRx.core.fields import AllOf, AnyOf, Keyword, parse_keyword_spec
from DenoteRx.core.pattern import Alt, Anchor, AnyRepeat, Lit, Seq


def _kw(text: str) -> Seq:
    return Seq((Anchor.WORD_START, Lit(text), Anchor.WORD_END))


class TestParseKeywordSpec(unittest.TestCase):
    def test_string_is_single_keyword(self) -> None:
        self.assertEqual(parse_keyword_spec("project"), Keyword("project"))

    def test_list_without_head_is_and(self) -> None:
        self.assertEqual(
            parse_keyword_spec(["project", "inprogress"]),
            AllOf((Keyword("project"), Keyword("inprogress"))),
        )

    def test_explicit_heads_nest(self) -> None:
        spec = parse_keyword_spec(["or", "agenda", ["and", "project", "inprogress"]])
        self.assertEqual(
            spec,
            AnyOf((Keyword("agenda"), AllOf((Keyword("project"), Keyword("inprogress"))))),
        )

    def test_head_is_case_insensitive(self) -> None:
        self.assertIsInstance(parse_keyword_spec(["OR", "a", "b"]), AnyOf)

    def test_parsed_spec_passes_through(self) -> None:
        spec = AnyOf((Keyword("a"),))
        self.assertIs(parse_keyword_spec(spec), spec)

    def test_malformed_expressions_are_rejected(self) -> None:
        for value in ([], ["or"], ["and"], "", "   ", [1], 3, AnyOf(()), AllOf(("raw",))):
            with self.subTest(value=value):
                with self.assertRaises(KeywordSpecError):
                    parse_keyword_spec(value)


class TestCompileKeywords(unittest.TestCase):
    def setUp(self) -> None:
        self.env = CompileEnvironment()

    def test_literal_is_word_bounded(self) -> None:
        self.assertEqual(compile_keywords("project", self.env), _kw("project"))

    def test_literal_is_normalized(self) -> None:
        self.assertEqual(compile_keywords("In Progress", self.env), _kw("inprogress"))

    def test_keyword_normalizing_to_empty_is_rejected(self) -> None:
        with self.assertRaises(KeywordSpecError):
            compile_keywords("!!!", self.env)

    def test_or_has_no_separator(self) -> None:
        result = compile_keywords(["or", "a", "b"], self.env)
        self.assertEqual(result, Alt((_kw("a"), _kw("b"))))

    def test_and_sorts_literals_when_enabled(self) -> None:
        result = compile_keywords(["project", "inprogress"], self.env)
        self.assertEqual(result, Seq((_kw("inprogress"), AnyRepeat(), _kw("project"))))

    def test_and_keeps_input_order_when_sorting_disabled(self) -> None:
        env = self.env.with_options(sort_keywords=False)
        result = compile_keywords(["project", "inprogress"], env)
        self.assertEqual(result, Seq((_kw("project"), AnyRepeat(), _kw("inprogress"))))

    def test_and_uses_configured_comparator(self) -> None:
        env = self.env.with_options(keyword_sort_key=KEYWORD_SORT_KEYS["length"])
        result = compile_keywords(["inprogress", "todo", "ab"], env)
        texts = [part.parts[1].text for part in result.parts if isinstance(part, Seq)]
        self.assertEqual(texts, ["ab", "todo", "inprogress"])

    def test_and_with_nested_child_is_not_sorted(self) -> None:
        result = compile_keywords(["zeta", ["or", "a", "b"]], self.env)
        self.assertEqual(result.parts[0], _kw("zeta"))
        self.assertEqual(result.parts[2], Alt((_kw("a"), _kw("b"))))

    def test_and_separator_only_between_children(self) -> None:
        result = compile_keywords(["a", "b", "c"], self.env)
        self.assertEqual(len(result.parts), 5)
        self.assertNotIsInstance(result.parts[0], AnyRepeat)
        self.assertNotIsInstance(result.parts[-1], AnyRepeat)

    def test_nested_or_of_and(self) -> None:
        result = compile_keywords(["or", "agenda", ["project", "inprogress"]], self.env)
        self.assertEqual(
            result,
            Alt((_kw("agenda"), Seq((_kw("inprogress"), AnyRepeat(), _kw("project"))))),
        )


if __name__ == "__main__":
    unittest.main()
