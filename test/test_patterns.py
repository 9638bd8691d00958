"""Tests for the pattern registry and token classification."""

import dataclasses
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QuerySieve.core import models
from QuerySieve.core.patterns import (
    AS_OF,
    CLASSIFICATION_ORDER,
    REGISTRY,
    PatternCategory,
    classify,
    combined_pattern,
)


class TestRegistryOrder(unittest.TestCase):
    def test_lexing_priority_order(self) -> None:
        self.assertEqual(
            [c.name for c in REGISTRY],
            [
                "between_dates",
                "greater_or_equal_date",
                "less_or_equal_date",
                "greater_date",
                "less_date",
                "as_of_date",
                "or_pair",
                "word",
                "string",
            ],
        )

    def test_classification_tries_or_pair_first(self) -> None:
        self.assertEqual(CLASSIFICATION_ORDER[0].operator, models.OR)
        self.assertEqual(CLASSIFICATION_ORDER[-1].operator, models.AS_OF_DATE)

    def test_each_category_has_one_capture_group(self) -> None:
        self.assertEqual(combined_pattern().groups, len(REGISTRY))

    def test_category_fields_and_lexeme(self) -> None:
        self.assertEqual(
            [f.name for f in dataclasses.fields(PatternCategory)],
            ["name", "operator", "pattern", "shape"],
        )
        self.assertEqual(AS_OF.lexeme, rf"\s*(?P<as_of_date>{AS_OF.pattern})")

    def test_earlier_category_wins_at_same_position(self) -> None:
        match = combined_pattern().match("01/15/2009")
        self.assertEqual(match.lastgroup, "as_of_date")
        self.assertEqual(match.group(match.lastgroup), "01/15/2009")


class TestClassify(unittest.TestCase):
    def test_bare_dates_in_every_notation(self) -> None:
        for text in ("01/15/2009", "1/5/2009", "2009/01/15", "20090115", "2009-01-15"):
            with self.subTest(text=text):
                self.assertEqual(classify(text), models.AS_OF_DATE)

    def test_comparison_prefixes(self) -> None:
        cases = {
            ">=2009-01-15": models.GREATER_THAN_OR_EQUAL_TO_DATE,
            "<= 01/15/2009": models.LESS_THAN_OR_EQUAL_TO_DATE,
            ">20090115": models.GREATER_THAN_DATE,
            "< 2009/01/15": models.LESS_THAN_DATE,
        }
        for text, operator in cases.items():
            with self.subTest(text=text):
                self.assertEqual(classify(text), operator)

    def test_ranges_use_one_notation(self) -> None:
        self.assertEqual(classify("01/15/2009 TO 02/15/2009"), models.BETWEEN_DATES)
        self.assertEqual(classify("20090115 TO 20090215"), models.BETWEEN_DATES)
        self.assertEqual(classify("2009-01-15 TO 2009-02-15"), models.BETWEEN_DATES)
        self.assertIsNone(classify("01/15/2009 TO 2009-02-15"))

    def test_range_connective_is_case_sensitive(self) -> None:
        self.assertIsNone(classify("2009-01-15 to 2009-02-15"))

    def test_or_pair(self) -> None:
        self.assertEqual(classify("red OR blue"), models.OR)
        self.assertEqual(classify("new york OR boston"), models.OR)
        self.assertIsNone(classify("red or blue"))
        self.assertIsNone(classify("OR blue"))

    def test_plain_words_are_unclassified(self) -> None:
        for text in ("hello", "new york", "2009", "e-mail"):
            with self.subTest(text=text):
                self.assertIsNone(classify(text))

    def test_date_inside_word_is_not_a_date(self) -> None:
        self.assertIsNone(classify("x2009-01-15"))


if __name__ == "__main__":
    unittest.main()
