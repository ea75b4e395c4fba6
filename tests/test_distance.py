"""
Unit tests for levgroup.services.similarity.distance.

Covers the metric's edge cases, the classic reference values and the
metric properties (identity, symmetry, triangle inequality).
"""

import itertools
import unittest

from levgroup.services.similarity.distance import is_within_distance, levenshtein_distance

SAMPLES = [
    "",
    "a",
    "ab",
    "abc",
    "kitten",
    "sitting",
    "flaw",
    "lawn",
    "timeout after 3 seconds",
    "timeout after 13 seconds",
    "\u00dcn\u00efc\u00f6d\u00e9",
    "unicode",
]


class TestEdgeCases(unittest.TestCase):
    def test_both_empty(self):
        self.assertEqual(levenshtein_distance("", ""), 0)

    def test_one_empty(self):
        self.assertEqual(levenshtein_distance("", "abc"), 3)
        self.assertEqual(levenshtein_distance("abcd", ""), 4)

    def test_equal_strings(self):
        self.assertEqual(levenshtein_distance("same", "same"), 0)


class TestReferenceValues(unittest.TestCase):
    def test_kitten_sitting(self):
        self.assertEqual(levenshtein_distance("kitten", "sitting"), 3)

    def test_flaw_lawn(self):
        self.assertEqual(levenshtein_distance("flaw", "lawn"), 2)

    def test_single_substitution(self):
        self.assertEqual(levenshtein_distance("a", "b"), 1)

    def test_insertion_and_deletion(self):
        self.assertEqual(levenshtein_distance("abc", "abxc"), 1)
        self.assertEqual(levenshtein_distance("abxc", "abc"), 1)

    def test_case_sensitive(self):
        self.assertEqual(levenshtein_distance("Error", "error"), 1)

    def test_no_unicode_normalization(self):
        # precomposed e-acute vs "e" + combining acute accent
        self.assertEqual(levenshtein_distance("\u00e9", "e\u0301"), 2)

    def test_counts_codepoints(self):
        self.assertEqual(levenshtein_distance("\u00dcn\u00efc\u00f6d\u00e9", "unicode"), 4)


class TestMetricProperties(unittest.TestCase):
    def test_identity(self):
        for s in SAMPLES:
            self.assertEqual(levenshtein_distance(s, s), 0, s)

    def test_symmetry(self):
        for a, b in itertools.product(SAMPLES, repeat=2):
            self.assertEqual(levenshtein_distance(a, b), levenshtein_distance(b, a), (a, b))

    def test_empty_boundary(self):
        for s in SAMPLES:
            self.assertEqual(levenshtein_distance("", s), len(s))
            self.assertEqual(levenshtein_distance(s, ""), len(s))

    def test_triangle_inequality(self):
        for a, b, c in itertools.product(SAMPLES[:8], repeat=3):
            self.assertLessEqual(
                levenshtein_distance(a, c),
                levenshtein_distance(a, b) + levenshtein_distance(b, c),
                (a, b, c),
            )


class TestIsWithinDistance(unittest.TestCase):
    def test_zero_allowance_is_equality(self):
        self.assertTrue(is_within_distance("a", "a", 0))
        self.assertFalse(is_within_distance("a", "b", 0))
        self.assertTrue(is_within_distance("", "", 0))

    def test_within_and_outside(self):
        self.assertTrue(is_within_distance("kitten", "sitting", 3))
        self.assertFalse(is_within_distance("kitten", "sitting", 2))


if __name__ == "__main__":
    unittest.main()
