"""Tests for the DenoteRx command line interface."""

import re
import sys
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DenoteRx.cli import cli
from DenoteRx.cli.commands import parse_cli_pairs, parse_cli_value
from DenoteRx.core.errors import MalformedInputError

_QUIET_YAML = "log:\n  level: WARNING\n"


class TestParseValues(unittest.TestCase):
    def test_plain_values_stay_strings(self) -> None:
        self.assertEqual(parse_cli_value("2024"), "2024")
        self.assertEqual(parse_cli_value("Meeting notes"), "Meeting notes")

    def test_list_values_are_parsed(self) -> None:
        self.assertEqual(
            parse_cli_value("[or, agenda, [project, 2024]]"),
            ["or", "agenda", ["project", "2024"]],
        )

    def test_invalid_list_is_malformed(self) -> None:
        with self.assertRaises(MalformedInputError):
            parse_cli_value("[unclosed, list")

    def test_list_scalars_stay_as_written(self) -> None:
        self.assertEqual(
            parse_cli_value("[yes, no, on, null, 010, 1e3]"),
            ["yes", "no", "on", "null", "010", "1e3"],
        )

    def test_only_values_are_parsed(self) -> None:
        self.assertEqual(parse_cli_pairs(["keywords", "[a, b]"]), ["keywords", ["a", "b"]])


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "quiet.yml"
        self.config_path.write_text(_QUIET_YAML, encoding="utf-8")
        self.runner = CliRunner()

    def _invoke(self, *args: str):
        return self.runner.invoke(cli, ["--config", str(self.config_path), *args])

    def test_regexp_prints_pattern(self) -> None:
        result = self._invoke("regexp", "identifier", "20240105T093012", "file-type", "org")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), r"20240105T093012.*(?:\.org)\Z")

    def test_regexp_without_fields_matches_everything(self) -> None:
        result = self._invoke("regexp")
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.strip(), "")

    def test_regexp_output_is_usable(self) -> None:
        result = self._invoke("regexp", "keywords", "[or, agenda, todo]")
        self.assertEqual(result.exit_code, 0, result.output)
        pattern = re.compile(result.output.strip())
        self.assertIsNotNone(pattern.search("20240105T093012--x__todo.org"))
        self.assertIsNone(pattern.search("20240105T093012--x__done.org"))

    def test_match_prints_matching_names(self) -> None:
        result = self._invoke(
            "match",
            "--name",
            "20240105T093012--a__agenda.org",
            "--name",
            "20240105T093012--b__other.org",
            "keywords",
            "agenda",
        )
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(result.output.splitlines(), ["20240105T093012--a__agenda.org"])

    def test_yaml_like_keywords_are_matched_literally(self) -> None:
        result = self._invoke("regexp", "keywords", "[yes, project]")
        self.assertEqual(result.exit_code, 0, result.output)
        pattern = re.compile(result.output.strip())
        self.assertIsNotNone(pattern.search("20240105T093012--x__project_yes.org"))
        self.assertIsNone(pattern.search("20240105T093012--x__project_true.org"))

    def test_odd_arguments_are_usage_error(self) -> None:
        result = self._invoke("regexp", "identifier")
        self.assertEqual(result.exit_code, 2)

    def test_unknown_file_type_aborts(self) -> None:
        result = self._invoke("regexp", "file-type", "docx")
        self.assertEqual(result.exit_code, 1)


if __name__ == "__main__":
    unittest.main()
