"""Tests for the public entry points."""

import re
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

import DenoteRx
from DenoteRx import (
    CompileEnvironment,
    MalformedInputError,
    PatternError,
    UnknownFieldError,
    UnresolvedFileTypeError,
    compile_regexp,
    file_name_form,
    file_name_pattern,
    file_name_regexp,
    pattern_from_pairs,
)
from DenoteRx.core.pattern import FileNameForm, Lit, Seq, alt, lit
from DenoteRx.renderers.regex import RegexRenderer


class TestEntryPoints(unittest.TestCase):
    def test_string_result_renders_structured_result(self) -> None:
        env = CompileEnvironment()
        fields = {"identifier": "2024", "title": "Notes", "file_type": "org"}
        self.assertEqual(
            file_name_regexp(env, **fields),
            RegexRenderer(env).render(file_name_pattern(env, **fields)),
        )

    def test_default_environment_is_used(self) -> None:
        self.assertEqual(
            file_name_pattern(keywords="a"),
            file_name_pattern(CompileEnvironment(), keywords="a"),
        )

    def test_compile_regexp(self) -> None:
        pattern = compile_regexp(keywords="agenda")
        self.assertIsInstance(pattern, re.Pattern)
        self.assertIsNotNone(pattern.search("20240105T093012--x__agenda.org"))

    def test_pairs_match_keyword_call(self) -> None:
        self.assertEqual(
            pattern_from_pairs(["identifier", "2024", "file-type", ["org", "text"]]),
            file_name_pattern(identifier="2024", file_type=["org", "text"]),
        )

    def test_odd_pairs_are_malformed(self) -> None:
        with self.assertRaises(MalformedInputError):
            pattern_from_pairs(["identifier"])

    def test_signature_fragment_is_kept_by_identity(self) -> None:
        sub = alt(lit("A"), lit("B"))
        result = file_name_pattern(signature=sub)
        self.assertEqual(result, Seq((Seq((Lit("=="), sub)),)))
        self.assertIs(result.parts[0].parts[1], sub)

    def test_form_is_deferred(self) -> None:
        form = file_name_form(colour="red")
        self.assertIsInstance(form, FileNameForm)
        with self.assertRaises(UnknownFieldError):
            RegexRenderer().render(form)

    def test_errors_share_a_base_class(self) -> None:
        for call in (
            lambda: file_name_pattern(colour="red"),
            lambda: file_name_pattern(file_type="docx"),
            lambda: file_name_pattern(keywords=[]),
        ):
            with self.assertRaises(PatternError):
                call()
        with self.assertRaises(UnresolvedFileTypeError):
            file_name_pattern(file_type="docx")

    def test_calls_do_not_share_state(self) -> None:
        first = file_name_pattern(keywords=["b", "a"])
        second = file_name_pattern(keywords=["b", "a"])
        self.assertEqual(first, second)
        self.assertIsNot(first, second)

    def test_package_exports(self) -> None:
        for name in DenoteRx.__all__:
            self.assertTrue(hasattr(DenoteRx, name), name)


if __name__ == "__main__":
    unittest.main()
