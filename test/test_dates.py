"""Tests for interpreting date predicate values."""

import sys
import unittest
from datetime import date
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QuerySieve.core.dates import parse_date_text, parse_date_values
from QuerySieve.core.models import PredicateEntry
from QuerySieve.core.parser import parse_query


class TestParseDateText(unittest.TestCase):
    def test_all_notations(self) -> None:
        for text in ("01/15/2009", "1/15/2009", "2009/01/15", "20090115", "2009-01-15"):
            with self.subTest(text=text):
                self.assertEqual(parse_date_text(text), date(2009, 1, 15))

    def test_month_first_for_slash_form(self) -> None:
        self.assertEqual(parse_date_text("02/03/2009"), date(2009, 2, 3))

    def test_invalid_date(self) -> None:
        with self.assertRaises(ValueError):
            parse_date_text("02/30/2009")


class TestParseDateValues(unittest.TestCase):
    def test_range(self) -> None:
        (entry,) = parse_query("01/15/2009 TO 02/15/2009")
        self.assertEqual(parse_date_values(entry), (date(2009, 1, 15), date(2009, 2, 15)))

    def test_comparison_prefix_is_dropped(self) -> None:
        (entry,) = parse_query(">= 2009-01-15")
        self.assertEqual(parse_date_values(entry), (date(2009, 1, 15),))

    def test_as_of(self) -> None:
        entry = PredicateEntry("20090115", "as_of_date")
        self.assertEqual(parse_date_values(entry), (date(2009, 1, 15),))

    def test_non_date_predicate_raises(self) -> None:
        with self.assertRaises(ValueError):
            parse_date_values(PredicateEntry("hello", "like"))


class TestPredicateEntry(unittest.TestCase):
    def test_unknown_operator_rejected(self) -> None:
        with self.assertRaises(ValueError):
            PredicateEntry("x", "equals")

    def test_flags(self) -> None:
        self.assertTrue(PredicateEntry("x", "not").negated)
        self.assertFalse(PredicateEntry("x", "like").negated)
        self.assertTrue(PredicateEntry("2009-01-01", "as_of_date").is_date)
        self.assertFalse(PredicateEntry("a OR b", "or").is_date)


if __name__ == "__main__":
    unittest.main()
