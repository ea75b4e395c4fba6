"""
Unit tests for key normalization and the distance-tolerance policy.
"""

import unittest
import uuid

from levgroup.models.schemas import DistanceUnit
from levgroup.services.similarity.normalizer import normalize_key, strip_digits, strip_identifiers
from levgroup.services.similarity.tolerance import allowed_distance


class TestStripIdentifiers(unittest.TestCase):
    def test_removes_hyphenated_guid(self):
        text = f"timeout for client {uuid.uuid4()}"
        self.assertEqual(strip_identifiers(text), "timeout for client ")

    def test_case_insensitive_hex(self):
        self.assertEqual(strip_identifiers("id F9168C5E-CEB2-4faa-B6BF-329BF39FA1E4 end"), "id  end")

    def test_hyphens_optional(self):
        self.assertEqual(strip_identifiers("x0123456789abcdef0123456789ABCDEFx"), "xx")

    def test_removes_every_occurrence(self):
        text = f"{uuid.uuid4()} and {uuid.uuid4()}"
        self.assertEqual(strip_identifiers(text), " and ")

    def test_text_without_identifier_unchanged(self):
        for text in ["", "plain message", "deadbeef-1234", "12345678-1234-1234-1234-12345678901"]:
            self.assertEqual(strip_identifiers(text), text)


class TestStripDigits(unittest.TestCase):
    def test_removes_numbers(self):
        self.assertEqual(strip_digits("timeout after 33 seconds"), "timeout after  seconds")

    def test_removes_separators_and_signs(self):
        self.assertEqual(strip_digits("delta 3.000,00 s"), "delta  s")
        self.assertEqual(strip_digits("delta -3,87 s"), "delta  s")

    def test_lone_punctuation_is_stripped_too(self):
        self.assertEqual(strip_digits("a - b."), "a  b")

    def test_no_digits_unchanged(self):
        self.assertEqual(strip_digits("permission denied"), "permission denied")


class TestNormalizeKey(unittest.TestCase):
    def test_no_flags_is_identity(self):
        text = "request 42 for 0123456789abcdef0123456789abcdef"
        self.assertIs(normalize_key(text), text)

    def test_identifiers_before_digits(self):
        guid = "12345678-aaaa-bbbb-cccc-123456789012"
        self.assertEqual(
            normalize_key(f"client {guid} on server 1", strip_digits=True, strip_identifiers=True),
            "client  on server ",
        )

    def test_digits_alone_mangle_identifiers(self):
        guid = "12345678-aaaa-bbbb-cccc-123456789012"
        self.assertEqual(normalize_key(guid, strip_digits=True), "aaaabbbbcccc")


class TestAllowedDistance(unittest.TestCase):
    def test_absolute_ignores_lengths(self):
        self.assertEqual(allowed_distance(DistanceUnit.ABSOLUTE, 3, "a", "abcdefgh"), 3)

    def test_percentage_of_longer_key(self):
        self.assertEqual(allowed_distance(DistanceUnit.PERCENTAGE, 25, "aaaa", "aa"), 1)

    def test_percentage_truncates(self):
        # 3 * 33 / 100 = 0.99
        self.assertEqual(allowed_distance(DistanceUnit.PERCENTAGE, 33, "abc", "abd"), 0)
        # 7 * 50 / 100 = 3.5
        self.assertEqual(allowed_distance(DistanceUnit.PERCENTAGE, 50, "abcdefg", "x"), 3)

    def test_percentage_of_empty_keys(self):
        self.assertEqual(allowed_distance(DistanceUnit.PERCENTAGE, 100, "", ""), 0)


if __name__ == "__main__":
    unittest.main()
