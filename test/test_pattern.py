"""Tests for the pattern node helpers."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DenoteRx.core.pattern import Alt, AnyRepeat, Lit, Seq, alt, any_chars, any_exactly, interleave, lit, seq


class TestInterleave(unittest.TestCase):
    def test_empty_gives_identity_sequence(self) -> None:
        self.assertEqual(interleave([]), Seq(()))

    def test_single_fragment_has_no_separator(self) -> None:
        self.assertEqual(interleave([lit("a")]), Seq((Lit("a"),)))

    def test_separator_only_between_neighbours(self) -> None:
        result = interleave([lit("a"), lit("b"), lit("c")])
        self.assertEqual(
            result.parts,
            (Lit("a"), AnyRepeat(), Lit("b"), AnyRepeat(), Lit("c")),
        )


class TestBuilders(unittest.TestCase):
    def test_seq_and_alt_keep_children_as_tuples(self) -> None:
        self.assertEqual(seq(lit("a"), lit("b")), Seq((Lit("a"), Lit("b"))))
        self.assertEqual(alt(lit("a"), lit("b")), Alt((Lit("a"), Lit("b"))))

    def test_any_repeat_variants(self) -> None:
        self.assertIsNone(any_chars().count)
        self.assertEqual(any_exactly(3).count, 3)

    def test_negative_repeat_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            any_exactly(-1)

    def test_nodes_are_immutable(self) -> None:
        node = lit("a")
        with self.assertRaises(AttributeError):
            node.text = "b"  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
